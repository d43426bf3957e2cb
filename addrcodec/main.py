"""
addrcodec command line entry point.

Validates, encodes and decodes addresses from the terminal.

Run with: python -m addrcodec.main --help
"""

import logging
import sys

import click

from addrcodec.config import get_settings
from addrcodec.core.exceptions import AddressError
from addrcodec.core.models import Address
from addrcodec.utils.formatters import format_address_details
from addrcodec.utils.validators import validate_address

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str) -> None:
    """
    Configure logging for the CLI.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override ADDRCODEC_LOG_LEVEL",
)
def main(log_level: str | None) -> None:
    """Checksum-protected address tool."""
    setup_logging((log_level or get_settings().log_level).upper())


@main.command()
@click.argument("addresses", nargs=-1, required=True)
def check(addresses: tuple[str, ...]) -> None:
    """Validate one or more addresses."""
    failed = 0

    for address in addresses:
        is_valid, error = validate_address(address)
        if is_valid:
            click.echo(f"OK       {address}")
        else:
            failed += 1
            click.echo(f"INVALID  {address}: {error}")

    logger.info(f"Checked {len(addresses)} address(es), {failed} invalid")

    if failed:
        sys.exit(1)


@main.command()
@click.argument("hex_bytes")
def encode(hex_bytes: str) -> None:
    """Encode 32 bytes given as hex into an address."""
    try:
        address = Address.from_hex(hex_bytes)
    except AddressError as e:
        logger.warning(f"{type(e).__name__}: {e.technical_message}")
        raise click.BadParameter(e.message, param_hint="HEX_BYTES") from e

    click.echo(address.encode_as_string())


@main.command()
@click.argument("address")
def decode(address: str) -> None:
    """Decode an address and show its raw bytes."""
    try:
        parsed = Address.parse(address)
    except AddressError as e:
        logger.warning(f"{type(e).__name__}: {e.technical_message}")
        raise click.BadParameter(e.message, param_hint="ADDRESS") from e

    click.echo(format_address_details(parsed))


if __name__ == "__main__":
    main()
