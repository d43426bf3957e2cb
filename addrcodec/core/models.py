"""
Address model for addrcodec.

Address is an immutable pydantic model wrapping exactly 32 raw bytes.
It owns both conversions of the wire contract:
- binary -> text: Address.encode_as_string()
- text -> binary: Address.parse()

All operations are pure; instances are safe to share between threads.
"""

import logging
import warnings
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from addrcodec.core.exceptions import (
    ChecksumMismatchError,
    EncodingInvariantViolation,
    InvalidInputError,
    InvalidLengthError,
)
from addrcodec.core.checksum import (
    ADDRESS_LEN,
    CHECKSUM_ADDRESS_LEN,
    ENCODED_ADDRESS_LEN,
    compute_checksum,
    decode_base32_unpadded,
    encode_base32_strip_pad,
)

logger = logging.getLogger(__name__)


class Address(BaseModel):
    """
    A 32-byte ledger account address.

    Equality and hashing are based on the raw bytes only. Build
    instances with from_bytes(), parse() or zero(); the plain
    constructor also works but reports pydantic validation errors
    instead of AddressError subclasses.

    The JSON form of an address is its 58-character text, so
    model_dump_json() and model_validate_json() round-trip.

    Examples:
        >>> addr = Address.zero()
        >>> str(addr)
        'AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ'
        >>> Address.parse(str(addr)) == addr
        True
    """

    raw: bytes = Field(min_length=ADDRESS_LEN, max_length=ADDRESS_LEN)
    """Raw address bytes (always exactly 32)"""

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("raw", mode="before")
    @classmethod
    def _decode_text(cls, value: Any) -> Any:
        """Accept the 58-character text form written by model_dump_json()."""
        if isinstance(value, str):
            return cls.parse(value).raw
        return value

    @field_serializer("raw", when_used="json")
    def _encode_text(self, raw: bytes) -> str:
        return self.encode_as_string()

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def zero(cls) -> "Address":
        """Return the all-zero address."""
        return cls(raw=bytes(ADDRESS_LEN))

    @classmethod
    def from_bytes(cls, raw: Any) -> "Address":
        """
        Create an address from a 32-byte buffer.

        The buffer is copied, so later changes to a bytearray or
        memoryview passed in do not affect the address.

        Args:
            raw: bytes, bytearray or memoryview of length 32.
                None is accepted for backward compatibility and yields
                the zero address; use Address.zero() instead.

        Returns:
            New Address

        Raises:
            InvalidLengthError: If raw is not exactly 32 bytes
            InvalidInputError: If raw is not bytes-like
        """
        if raw is None:
            warnings.warn(
                "Address.from_bytes(None) is deprecated, use Address.zero()",
                DeprecationWarning,
                stacklevel=2,
            )
            return cls.zero()

        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise InvalidInputError(
                technical_message=f"Expected bytes-like input, got {type(raw).__name__}"
            )

        data = bytes(raw)
        if len(data) != ADDRESS_LEN:
            raise InvalidLengthError(
                technical_message=f"Given address length is {len(data)}, expected {ADDRESS_LEN}"
            )

        return cls(raw=data)

    @classmethod
    def from_hex(cls, value: str) -> "Address":
        """
        Create an address from 64 hex characters.

        An optional "0x" prefix is allowed.

        Raises:
            InvalidInputError: If value is not hex
            InvalidLengthError: If value does not decode to 32 bytes
        """
        if not isinstance(value, str) or not value:
            raise InvalidInputError(
                message="Address hex must not be empty.",
                technical_message="Empty or non-string hex input",
            )

        if value[:2].lower() == "0x":
            value = value[2:]

        try:
            data = bytes.fromhex(value)
        except ValueError as e:
            raise InvalidInputError(
                message="Address hex contains invalid characters.",
                technical_message=f"Invalid hex input: {e}",
            ) from e

        return cls.from_bytes(data)

    @classmethod
    def parse(cls, text: Any) -> "Address":
        """
        Decode a checksum-appended base32 address string.

        Accepts the unpadded 58-character form produced by
        encode_as_string(); a padded form is accepted as well.

        Args:
            text: Encoded address

        Returns:
            Address whose bytes match the checksum in text

        Raises:
            InvalidInputError: If text is missing, empty or not base32
            InvalidLengthError: If text does not decode to 36 bytes
            ChecksumMismatchError: If the checksum does not validate
        """
        if not isinstance(text, str) or not text:
            raise InvalidInputError(
                message="Address must not be empty.",
                technical_message=f"Missing address text: {text!r}",
            )

        try:
            checksum_addr = decode_base32_unpadded(text)
        except ValueError as e:
            logger.debug(f"Rejected non-base32 address {text!r}: {e}")
            raise InvalidInputError(
                technical_message=f"Input string is not valid base32: {e}"
            ) from e

        if len(checksum_addr) != CHECKSUM_ADDRESS_LEN:
            logger.debug(f"Rejected address {text!r}: decoded to {len(checksum_addr)} bytes")
            raise InvalidLengthError(
                technical_message=(
                    f"Input string is an invalid address. Decoded length is "
                    f"{len(checksum_addr)}, expected {CHECKSUM_ADDRESS_LEN}"
                )
            )

        raw = checksum_addr[:ADDRESS_LEN]
        supplied = checksum_addr[ADDRESS_LEN:]
        expected = compute_checksum(raw)

        if supplied != expected:
            logger.debug(f"Rejected address {text!r}: checksum mismatch")
            raise ChecksumMismatchError(
                technical_message=(
                    f"Input checksum did not validate: got {supplied.hex()}, "
                    f"expected {expected.hex()}"
                )
            )

        return cls(raw=raw)

    from_string = parse

    def model_copy(
        self,
        *,
        update: Mapping[str, Any] | None = None,
        deep: bool = False,
    ) -> "Address":
        """
        Copy the address, optionally replacing its bytes.

        Replacement bytes go through from_bytes(), so a copy always
        holds exactly 32 bytes.

        Raises:
            InvalidLengthError: If the new raw bytes are not 32 bytes long
            InvalidInputError: If update names a field other than raw
        """
        if not update:
            return super().model_copy(deep=deep)

        unknown = sorted(set(update) - {"raw"})
        if unknown:
            raise InvalidInputError(technical_message=f"Unknown Address fields: {unknown}")

        return type(self).from_bytes(update["raw"])

    def copy(
        self,
        *,
        include: Any = None,
        exclude: Any = None,
        update: Mapping[str, Any] | None = None,
        deep: bool = False,
    ) -> "Address":
        """Same as model_copy(); include/exclude are not supported."""
        if include is not None or exclude is not None:
            raise InvalidInputError(technical_message="Address.copy() does not support include/exclude")
        return self.model_copy(update=update, deep=deep)

    # =========================================================================
    # Read-out
    # =========================================================================

    def get_bytes(self) -> bytes:
        """Return a copy of the 32 raw bytes."""
        return bytes(self.raw)

    def hex(self) -> str:
        """Return the raw bytes as lowercase hex."""
        return self.raw.hex()

    @property
    def checksum(self) -> bytes:
        """The 4 checksum bytes appended in the text form."""
        return compute_checksum(self.raw)

    @property
    def is_zero(self) -> bool:
        """Whether this is the all-zero address."""
        return self.raw == bytes(ADDRESS_LEN)

    def encode_as_string(self) -> str:
        """
        Encode the address as 58 base32 characters.

        Computes SHA-512/256 over the raw bytes, appends the last 4
        digest bytes and base32-encodes the result without padding.

        Returns:
            Human-readable address string

        Raises:
            EncodingInvariantViolation: If the result is not 58 chars.
                Indicates a broken digest or base32 primitive.
        """
        encoded = encode_base32_strip_pad(self.raw + self.checksum)

        if len(encoded) != ENCODED_ADDRESS_LEN:
            logger.critical(
                f"Encoded address has length {len(encoded)}, expected {ENCODED_ADDRESS_LEN}"
            )
            raise EncodingInvariantViolation(f"unexpected address length {len(encoded)}")

        return encoded

    # =========================================================================
    # Dunder methods
    # =========================================================================

    def __bytes__(self) -> bytes:
        return self.get_bytes()

    def __str__(self) -> str:
        return self.encode_as_string()

    def __repr__(self) -> str:
        return f"Address('{self.encode_as_string()}')"
