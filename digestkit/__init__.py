"""
digestkit - SHA-256 digests of text as uppercase hex.

Uses a native provider (OpenSSL via cryptography, or hashlib) when one is
available and a from-scratch FIPS 180-4 engine otherwise.
"""

from .dispatcher import digest, digest_sync, select_provider, to_hex
from .providers.digest_providers import ProviderError, ProviderUnavailableError

__version__ = "1.0.0"

__all__ = [
    'digest',
    'digest_sync',
    'select_provider',
    'to_hex',
    'ProviderError',
    'ProviderUnavailableError',
]
