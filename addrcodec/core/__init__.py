"""
Core module - address model and exceptions.

This module contains the fundamental building blocks of the package:
- Address model (Pydantic)
- Custom exceptions
"""

from addrcodec.core.exceptions import (
    AddressError,
    ChecksumMismatchError,
    EncodingInvariantViolation,
    InvalidInputError,
    InvalidLengthError,
)
from addrcodec.core.models import Address

__all__ = [
    # Exceptions
    "AddressError",
    "InvalidLengthError",
    "InvalidInputError",
    "ChecksumMismatchError",
    "EncodingInvariantViolation",
    # Models
    "Address",
]
