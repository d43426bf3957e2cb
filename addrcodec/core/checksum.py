"""
Checksum and base32 primitives for address text encoding.

Wire layout of the text form:
- 32 raw address bytes
- 4 checksum bytes (last 4 bytes of SHA-512/256 over the raw bytes)
- base32 (RFC 4648) over the 36 bytes, trailing "=" stripped -> 58 chars
"""

import base64

from Crypto.Hash import SHA512

ADDRESS_LEN = 32
CHECKSUM_LEN = 4
CHECKSUM_ADDRESS_LEN = ADDRESS_LEN + CHECKSUM_LEN
ENCODED_ADDRESS_LEN = 58

_BASE32_BLOCK = 8


def digest(data: bytes) -> bytes:
    """
    Compute SHA-512/256 of data.

    Args:
        data: Bytes to hash

    Returns:
        32-byte digest
    """
    return SHA512.new(data, truncate="256").digest()


def compute_checksum(raw: bytes) -> bytes:
    """Return the 4-byte checksum for raw address bytes."""
    return digest(raw)[-CHECKSUM_LEN:]


def encode_base32_strip_pad(data: bytes) -> str:
    """Base32-encode data and drop trailing padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def decode_base32_unpadded(text: str) -> bytes:
    """
    Decode base32 text with or without trailing padding.

    Args:
        text: Base32 string (uppercase RFC 4648 alphabet)

    Returns:
        Decoded bytes

    Raises:
        ValueError: If text is not valid base32 (binascii.Error is a
            ValueError, as is the error for non-ASCII input)
    """
    padding = "=" * (-len(text) % _BASE32_BLOCK)
    return base64.b32decode(text + padding)

