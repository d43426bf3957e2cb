"""
addrcodec - checksum-protected text encoding for 32-byte ledger addresses.

Example:
    >>> from addrcodec import Address
    >>> addr = Address.parse("Y76M3MSY6DKBRHBL7C3NNDXGS5IIMQVQVUAB6MP4XEMMGVF2QWNPL226CA")
    >>> addr.hex()[:8]
    'c7fccdb2'
"""

from addrcodec.core import (
    Address,
    AddressError,
    ChecksumMismatchError,
    EncodingInvariantViolation,
    InvalidInputError,
    InvalidLengthError,
)
from addrcodec.utils import is_valid_address, validate_address

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AddressError",
    "InvalidLengthError",
    "InvalidInputError",
    "ChecksumMismatchError",
    "EncodingInvariantViolation",
    "validate_address",
    "is_valid_address",
]
