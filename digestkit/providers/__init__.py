# Digest Providers Module
"""
Interchangeable SHA-256 providers:
- OpenSSL (via cryptography)
- hashlib
- Pure-Python compression engine
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import digest_providers
    return getattr(digest_providers, name)

__all__ = [
    'DigestProvider',
    'OpenSSLProvider',
    'HashlibProvider',
    'PureProvider',
    'ProviderError',
    'ProviderUnavailableError',
    'get_provider',
    'native_providers',
    'available_providers',
]
