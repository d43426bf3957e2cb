"""
Address validation for user-supplied input.

Validates that a string is a valid checksum-protected address.
Uses full base32 decoding and checksum verification instead of regex.

Addresses:
- Use the RFC 4648 base32 alphabet (A-Z, 2-7), uppercase
- Are exactly 58 characters long, without padding
- Decode to 32 address bytes followed by a 4-byte checksum
"""

import logging

from addrcodec.core.checksum import ENCODED_ADDRESS_LEN
from addrcodec.core.exceptions import AddressError
from addrcodec.core.models import Address

logger = logging.getLogger(__name__)


def validate_address(address: str) -> tuple[bool, str | None]:
    """
    Validate an address string.

    Runs cheap checks first (empty, whitespace, length), then decodes
    the address and verifies its checksum.

    Args:
        address: String to validate as address

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if address is valid
        - (False, "error description") if invalid

    Examples:
        >>> validate_address("AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ")
        (True, None)

        >>> validate_address("")
        (False, 'Address must not be empty.')
    """
    # Check empty input
    if not address:
        return False, "Address must not be empty."

    if not isinstance(address, str):
        return False, f"Address must be text, got {type(address).__name__}."

    # Check for whitespace
    if address != address.strip():
        return False, "Address contains whitespace."

    # Quick length check
    if len(address) != ENCODED_ADDRESS_LEN:
        return (
            False,
            f"Wrong address length: {len(address)} characters "
            f"(expected {ENCODED_ADDRESS_LEN})",
        )

    try:
        Address.parse(address)
    except AddressError as e:
        logger.debug(f"Invalid address {address!r}: {e.technical_message}")
        return False, e.message

    return True, None


def is_valid_address(address: str) -> bool:
    """
    Simple boolean check for address validity.

    Convenience wrapper around validate_address for
    cases where you only need a boolean result.

    Args:
        address: String to validate

    Returns:
        True if valid address, False otherwise
    """
    valid, _ = validate_address(address)
    return valid
