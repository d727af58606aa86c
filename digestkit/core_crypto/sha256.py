"""
SHA-256 Compression Engine (From Scratch)

Pure-Python SHA-256 as defined in FIPS 180-4. This is the fallback used by
the dispatcher whenever no native digest provider is available, so it must
agree bit-for-bit with hashlib / OpenSSL for every input.

Components:
- Padding: 0x80, zeros, 64-bit big-endian bit length (multiple of 64 bytes)
- Message Schedule: expands 16 words to 64 words per block
- Compression: 64 rounds over eight 32-bit working registers
- Output: 256-bit (32-byte) digest, rendered as uppercase hex

Python integers are unbounded, so every addition and rotation is masked
back to 32 bits with MASK_32.
"""

from typing import List, Sequence, Tuple


# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL: Tuple[int, ...] = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K: Tuple[int, ...] = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)

MASK_32 = 0xFFFFFFFF

BLOCK_SIZE = 64     # bytes per block (512 bits)
LENGTH_SIZE = 8     # bytes reserved for the bit-length field
DIGEST_SIZE = 32    # bytes


def _right_rotate(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def _ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def _sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return _right_rotate(x, 7) ^ _right_rotate(x, 18) ^ (x >> 3)


def _sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return _right_rotate(x, 17) ^ _right_rotate(x, 19) ^ (x >> 10)


def _big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return _right_rotate(x, 2) ^ _right_rotate(x, 13) ^ _right_rotate(x, 22)


def _big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return _right_rotate(x, 6) ^ _right_rotate(x, 11) ^ _right_rotate(x, 25)


def _pad_message(data: bytes) -> bytes:
    """
    Pad the message according to SHA-256 specification.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit big-endian integer

    A message whose length is already a multiple of 64 bytes still gets a
    whole extra block of padding.

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)
    """
    original_bit_length = len(data) * 8

    padded = bytearray(data)
    padded.append(0x80)

    # Zeros until length ≡ 56 (mod 64), leaving room for the length field
    padding_length = (BLOCK_SIZE - LENGTH_SIZE - len(padded)) % BLOCK_SIZE
    padded.extend(b'\x00' * padding_length)

    # Length field is mod 2^64 per FIPS 180-4
    padded.extend((original_bit_length & 0xFFFFFFFFFFFFFFFF).to_bytes(LENGTH_SIZE, byteorder='big'))

    return bytes(padded)


def _bytes_to_words(chunk: bytes) -> List[int]:
    """Convert a 64-byte chunk into 16 32-bit words (big-endian)."""
    return [int.from_bytes(chunk[i:i + 4], byteorder='big') for i in range(0, BLOCK_SIZE, 4)]


def _create_message_schedule(words: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    w = list(words)
    for i in range(16, 64):
        s0 = _sigma0(w[i - 15])
        s1 = _sigma1(w[i - 2])
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_32)
    return w


def _compress(state: Sequence[int], w: Sequence[int]) -> List[int]:
    """
    Perform 64 rounds of compression on the state.

    Args:
        state: Current hash state (8 32-bit words)
        w: Message schedule (64 32-bit words)

    Returns:
        Updated hash state
    """
    a, b, c, d, e, f, g, h = state

    for i in range(64):
        t1 = (h + _big_sigma1(e) + _ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (_big_sigma0(a) + _maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    # Add compressed chunk to current hash value
    return [(s + r) & MASK_32 for s, r in zip(state, (a, b, c, d, e, f, g, h))]


def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    padded = _pad_message(bytes(data))

    state = list(H_INITIAL)

    # Process each 512-bit (64-byte) chunk, earliest first
    for i in range(0, len(padded), BLOCK_SIZE):
        words = _bytes_to_words(padded[i:i + BLOCK_SIZE])
        w = _create_message_schedule(words)
        state = _compress(state, w)

    return b''.join(word.to_bytes(4, byteorder='big') for word in state)


def sha256_hex(data: bytes) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character uppercase hexadecimal string
    """
    return sha256(data).hex().upper()


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))
