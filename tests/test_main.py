"""
Tests for the command line interface.

Uses click's CliRunner to invoke commands in-process.
"""

import pytest
from click.testing import CliRunner

from addrcodec.main import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCheckCommand:
    """Tests for `addrcodec check`."""

    def test_valid_addresses(
        self,
        runner: CliRunner,
        fee_sink_text: str,
        zero_address_text: str,
    ) -> None:
        """All valid addresses exit with 0."""
        result = runner.invoke(main, ["check", fee_sink_text, zero_address_text])
        assert result.exit_code == 0
        assert f"OK       {fee_sink_text}" in result.output
        assert "INVALID" not in result.output

    def test_invalid_address(self, runner: CliRunner, fee_sink_text: str) -> None:
        """Any invalid address exits with 1 and names the problem."""
        result = runner.invoke(main, ["check", fee_sink_text, "Z" + fee_sink_text[1:]])
        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "checksum" in result.output

    def test_requires_argument(self, runner: CliRunner) -> None:
        """At least one address is required."""
        result = runner.invoke(main, ["check"])
        assert result.exit_code == 2


class TestEncodeCommand:
    """Tests for `addrcodec encode`."""

    def test_encode_zero(self, runner: CliRunner, zero_address_text: str) -> None:
        """64 zero hex chars encode to the zero address."""
        result = runner.invoke(main, ["encode", "00" * 32])
        assert result.exit_code == 0
        assert result.output.strip() == zero_address_text

    def test_encode_bad_hex(self, runner: CliRunner) -> None:
        """Bad hex is a usage error."""
        result = runner.invoke(main, ["encode", "abc"])
        assert result.exit_code == 2
        assert "HEX_BYTES" in result.output


class TestDecodeCommand:
    """Tests for `addrcodec decode`."""

    def test_decode(
        self,
        runner: CliRunner,
        fee_sink_text: str,
        fee_sink_hex: str,
    ) -> None:
        """Decoding prints the raw bytes."""
        result = runner.invoke(main, ["--log-level", "debug", "decode", fee_sink_text])
        assert result.exit_code == 0
        assert fee_sink_hex in result.output

    def test_decode_invalid(self, runner: CliRunner) -> None:
        """Invalid addresses are usage errors."""
        result = runner.invoke(main, ["decode", "not-an-address"])
        assert result.exit_code == 2
