"""
Pytest configuration and fixtures.

Provides reusable test fixtures for:
- Golden address strings and their raw bytes
- Settings isolation
"""

import pytest

from addrcodec.config import get_settings
from addrcodec.core.models import Address

# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and ADDRCODEC_* env vars around every test."""
    for name in ("ADDRCODEC_LOG_LEVEL", "ADDRCODEC_DISPLAY_CHARS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Golden Address Fixtures
# =============================================================================


@pytest.fixture
def zero_address_text() -> str:
    """Encoded form of 32 zero bytes."""
    return "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ"


@pytest.fixture
def fee_sink_text() -> str:
    """Mainnet fee sink address."""
    return "Y76M3MSY6DKBRHBL7C3NNDXGS5IIMQVQVUAB6MP4XEMMGVF2QWNPL226CA"


@pytest.fixture
def fee_sink_hex() -> str:
    """Raw bytes of the mainnet fee sink address."""
    return "c7fccdb258f0d4189c2bf8b6d68ee697508642b0ad001f31fcb918c354ba859a"


@pytest.fixture
def rewards_pool_text() -> str:
    """Mainnet rewards pool address."""
    return "737777777777777777777777777777777777777777777777777UFEJ2CI"


@pytest.fixture
def fee_sink(fee_sink_hex: str) -> Address:
    """Fee sink as an Address."""
    return Address.from_bytes(bytes.fromhex(fee_sink_hex))


@pytest.fixture
def sample_raw() -> bytes:
    """Non-trivial 32-byte buffer."""
    return bytes(range(32))


@pytest.fixture
def invalid_addresses() -> list[str]:
    """List of invalid addresses for testing."""
    return [
        "",  # Empty
        "   ",  # Whitespace
        "abc",  # Too short
        "0x742d35Cc6634C0532925a3b844Bc9e7595f5bEb2",  # Ethereum
        "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",  # Solana
        "Z76M3MSY6DKBRHBL7C3NNDXGS5IIMQVQVUAB6MP4XEMMGVF2QWNPL226CA",  # Bad checksum
        "y76m3msy6dkbrhbl7c3nndxgs5iimqvqvuab6mp4xemmgvf2qwnpl226ca",  # Lowercase
    ]
