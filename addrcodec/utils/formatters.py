"""
Output formatters for addresses.

Converts Address values into display strings for logs and terminals.
"""

from addrcodec.config import get_settings
from addrcodec.core.models import Address


def shorten_address(address: Address | str, chars: int | None = None) -> str:
    """
    Format an address for compact display.

    Keeps `chars` characters on each side, e.g. "Y76M3M...L226CA".

    Args:
        address: Address or its encoded string
        chars: Characters kept on each side (default from settings)

    Returns:
        Shortened address, or the full string if shortening would not
        make it shorter
    """
    if chars is None:
        chars = get_settings().display_chars

    text = address.encode_as_string() if isinstance(address, Address) else address

    if len(text) <= chars * 2 + 3:
        return text

    return f"{text[:chars]}...{text[-chars:]}"


def format_address_details(address: Address) -> str:
    """
    Format a multi-line description of an address.

    Shows:
    - Encoded address
    - Raw bytes as hex
    - Checksum as hex

    Args:
        address: Address to describe

    Returns:
        Plain text block
    """
    lines = [
        f"Address:  {address.encode_as_string()}",
        f"Hex:      {address.hex()}",
        f"Checksum: {address.checksum.hex()}",
    ]
    if address.is_zero:
        lines.append("Note:     zero address")

    return "\n".join(lines)
