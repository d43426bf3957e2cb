"""Utility functions."""

from addrcodec.utils.formatters import format_address_details, shorten_address
from addrcodec.utils.validators import is_valid_address, validate_address

__all__ = [
    "validate_address",
    "is_valid_address",
    "shorten_address",
    "format_address_details",
]
