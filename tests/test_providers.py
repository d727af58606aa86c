"""
Unit tests for digest providers.

Every available provider must produce the same raw digest bytes.
"""

import hashlib
from unittest.mock import patch

import pytest
from digestkit.providers.digest_providers import (
    DigestProvider, OpenSSLProvider, HashlibProvider, PureProvider,
    ProviderUnavailableError, get_provider, native_providers, available_providers,
)


SAMPLES = [b"", b"abc", b"a" * 55, b"a" * 56, b"a" * 64, b"xyz" * 50, "naïve ☕".encode("utf-8")]


class TestRegistry:
    """Provider lookup and ordering."""

    def test_get_provider_by_name(self):
        """Each registered name maps to its provider type."""
        assert isinstance(get_provider("openssl"), OpenSSLProvider)
        assert isinstance(get_provider("hashlib"), HashlibProvider)
        assert isinstance(get_provider("pure"), PureProvider)

    def test_unknown_provider_rejected(self):
        """Unknown names raise ProviderUnavailableError."""
        with pytest.raises(ProviderUnavailableError):
            get_provider("md5")

    def test_native_order(self):
        """OpenSSL is preferred over hashlib."""
        assert [p.name for p in native_providers()] == ["openssl", "hashlib"]

    def test_pure_is_always_last_and_available(self):
        """The pure engine is always in the available list, after natives."""
        providers = available_providers()
        assert providers[-1].name == "pure"
        assert all(p.native for p in providers[:-1])

    def test_unavailable_natives_are_skipped(self):
        """Natives reporting unavailable are left out."""
        with patch.object(OpenSSLProvider, "is_available", return_value=False), \
             patch.object(HashlibProvider, "is_available", return_value=False):
            assert [p.name for p in available_providers()] == ["pure"]

    def test_base_compute_not_implemented(self):
        """The base capability has no digest of its own."""
        with pytest.raises(NotImplementedError):
            DigestProvider().compute(b"abc")


class TestProviderEquivalence:
    """Native and pure providers agree on every input."""

    @pytest.mark.parametrize("data", SAMPLES)
    def test_all_available_providers_agree(self, data):
        """Each available provider returns the reference digest."""
        expected = hashlib.sha256(data).digest()
        for provider in available_providers():
            assert provider.compute(data) == expected, provider.name

    def test_pure_flags(self):
        """The pure provider is never considered native."""
        provider = PureProvider()
        assert provider.is_available()
        assert not provider.native

    def test_openssl_returns_32_bytes(self):
        """The OpenSSL provider finalizes a 32-byte digest."""
        provider = OpenSSLProvider()
        if not provider.is_available():
            pytest.skip("OpenSSL SHA-256 not available")
        assert len(provider.compute(b"abc")) == 32
