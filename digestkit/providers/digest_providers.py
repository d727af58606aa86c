"""
Digest Providers

Every way of computing a SHA-256 digest is exposed through the same small
capability:

    name            -- registry key
    is_available()  -- can this provider run in the current environment?
    compute(data)   -- raw 32-byte digest of a byte sequence

Implementations:
- OpenSSLProvider:  native, via the `cryptography` package (OpenSSL backend)
- HashlibProvider:  native, via the interpreter's hashlib
- PureProvider:     the from-scratch compression engine, always available

All three return identical bytes for identical input.
"""

import hashlib
from typing import Dict, List

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend

from ..core_crypto.sha256 import sha256


# Native providers in preference order
NATIVE_PROVIDER_ORDER = ('openssl', 'hashlib')
PURE_PROVIDER_NAME = 'pure'


class ProviderError(RuntimeError):
    """Raised when a digest provider cannot be selected."""
    pass


class ProviderUnavailableError(ProviderError):
    """Raised when a requested provider is unknown or not available here."""
    pass


class DigestProvider:
    """
    Base capability shared by every digest provider.

    Subclasses set `name`, `native` and must override `compute`, which is
    abstract here. `is_available` defaults to True.
    """

    name = ''
    native = False

    def is_available(self) -> bool:
        return True

    def compute(self, data: bytes) -> bytes:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, native={self.native})"


class OpenSSLProvider(DigestProvider):
    """SHA-256 through the `cryptography` OpenSSL backend."""

    name = 'openssl'
    native = True

    def is_available(self) -> bool:
        return default_backend().hash_supported(hashes.SHA256())

    def compute(self, data: bytes) -> bytes:
        hasher = hashes.Hash(hashes.SHA256(), backend=default_backend())
        hasher.update(data)
        return hasher.finalize()


class HashlibProvider(DigestProvider):
    """SHA-256 through hashlib."""

    name = 'hashlib'
    native = True

    def is_available(self) -> bool:
        return 'sha256' in hashlib.algorithms_available

    def compute(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


class PureProvider(DigestProvider):
    """SHA-256 through the pure-Python compression engine."""

    name = PURE_PROVIDER_NAME
    native = False

    def compute(self, data: bytes) -> bytes:
        return sha256(data)


_REGISTRY: Dict[str, DigestProvider] = {
    provider.name: provider
    for provider in (OpenSSLProvider(), HashlibProvider(), PureProvider())
}


def get_provider(name: str) -> DigestProvider:
    """
    Look up a provider by name.

    Args:
        name: One of 'openssl', 'hashlib', 'pure'

    Returns:
        The registered provider instance

    Raises:
        ProviderUnavailableError: If no provider has that name
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise ProviderUnavailableError(
            f"Unknown digest provider {name!r}; expected one of {sorted(_REGISTRY)}"
        ) from None


def native_providers() -> List[DigestProvider]:
    """Native providers in preference order (availability not checked)."""
    return [_REGISTRY[name] for name in NATIVE_PROVIDER_ORDER]


def available_providers() -> List[DigestProvider]:
    """Every provider that can run here, natives first, pure last."""
    ordered = native_providers() + [_REGISTRY[PURE_PROVIDER_NAME]]
    return [provider for provider in ordered if provider.is_available()]
