# Core Cryptography Module
"""
Pure-Python SHA-256 compression engine (FIPS 180-4).
"""

from .sha256 import sha256, sha256_hex, sha256_string, H_INITIAL, K, DIGEST_SIZE

__all__ = [
    'sha256',
    'sha256_hex',
    'sha256_string',
    'H_INITIAL',
    'K',
    'DIGEST_SIZE',
]
