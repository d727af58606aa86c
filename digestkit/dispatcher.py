"""
Digest Dispatcher

Public entry point: text in, 64-character uppercase SHA-256 hex out.

The message is UTF-8 encoded, then handed to a native digest provider when
one is available, otherwise to the pure-Python compression engine. The
choice never changes the result, only which code computes it.

Provider selection (checked once per call):
    explicit `provider` argument > $DIGESTKIT_PROVIDER > DEFAULT_PROVIDER_MODE

    auto     -- first available native provider, else pure
    native   -- first available native provider, error if none
    <name>   -- that provider ('openssl', 'hashlib', 'pure'), error if unavailable

A provider that fails while computing is not retried and does not fall
back to the pure engine; the exception reaches the caller unmodified.
"""

import asyncio
import logging
import os
from typing import Optional

from .providers.digest_providers import (
    DigestProvider,
    ProviderUnavailableError,
    get_provider,
    native_providers,
    PURE_PROVIDER_NAME,
)


logger = logging.getLogger(__name__)

PROVIDER_ENV_VAR = 'DIGESTKIT_PROVIDER'
DEFAULT_PROVIDER_MODE = 'auto'
MESSAGE_ENCODING = 'utf-8'
HEX_DIGEST_LENGTH = 64


def resolve_mode(mode: Optional[str] = None) -> str:
    """Resolve the provider mode from argument, environment, then default."""
    if mode is None:
        mode = os.environ.get(PROVIDER_ENV_VAR) or DEFAULT_PROVIDER_MODE
    return mode.strip().lower()


def select_provider(mode: Optional[str] = None) -> DigestProvider:
    """
    Pick the provider that will compute the digest.

    Args:
        mode: 'auto', 'native' or a provider name; None reads the environment

    Returns:
        An available DigestProvider

    Raises:
        ProviderUnavailableError: If the requested mode cannot be satisfied
    """
    mode = resolve_mode(mode)

    if mode in ('auto', 'native'):
        for provider in native_providers():
            if provider.is_available():
                return provider
        if mode == 'native':
            raise ProviderUnavailableError("No native SHA-256 provider is available")
        return get_provider(PURE_PROVIDER_NAME)

    provider = get_provider(mode)
    if not provider.is_available():
        raise ProviderUnavailableError(f"Digest provider {mode!r} is not available")
    return provider


def to_hex(raw: bytes) -> str:
    """Render raw digest bytes as uppercase hex, two digits per byte."""
    return bytes(raw).hex().upper()


def _encode(message: str) -> bytes:
    if not isinstance(message, str):
        raise TypeError(f"Expected str, got {type(message).__name__}")
    return message.encode(MESSAGE_ENCODING)


def _finish(provider: DigestProvider, data: bytes, raw: bytes) -> str:
    hex_digest = to_hex(raw)
    logger.debug("SHA-256 via %s: %s... (%d bytes)", provider.name, hex_digest[:16], len(data))
    return hex_digest


async def digest(message: str, provider: Optional[str] = None) -> str:
    """
    Compute the SHA-256 digest of a text message.

    Native providers run in a worker thread and are awaited; the pure
    engine runs inline without suspending.

    Args:
        message: Any text, including the empty string
        provider: Optional mode override (see module docstring)

    Returns:
        64-character uppercase hexadecimal digest

    Raises:
        TypeError: If message is not a str
        UnicodeEncodeError: If message cannot be UTF-8 encoded
        ProviderUnavailableError: If the requested provider cannot be used

    Example:
        >>> asyncio.run(digest("abc"))
        'BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD'
    """
    data = _encode(message)
    chosen = select_provider(provider)

    if chosen.native:
        raw = await asyncio.to_thread(chosen.compute, data)
    else:
        raw = chosen.compute(data)

    return _finish(chosen, data, raw)


def digest_sync(message: str, provider: Optional[str] = None) -> str:
    """
    Synchronous variant of digest() for callers without an event loop.

    Same selection policy and output format.
    """
    data = _encode(message)
    chosen = select_provider(provider)
    return _finish(chosen, data, chosen.compute(data))
