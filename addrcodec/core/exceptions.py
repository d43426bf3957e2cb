"""
Custom exceptions for addrcodec.

Exception hierarchy:
    AddressError (base)
    ├── InvalidLengthError - Raw or decoded buffer has the wrong size
    ├── InvalidInputError - Missing, empty or non-base32 input
    └── ChecksumMismatchError - Checksum in the text form does not validate

    EncodingInvariantViolation - Internal bug in the encoder (not user error)

Each AddressError carries a user-friendly message that can be shown to users,
and optionally a technical message for logging.
"""


class AddressError(ValueError):
    """
    Base exception for all address decoding/validation errors.

    Subclass of ValueError.

    Attributes:
        message: User-friendly error message (can be shown to users)
        technical_message: Detailed message for logs (optional)
    """

    def __init__(
        self,
        message: str = "Invalid address.",
        technical_message: str | None = None,
    ):
        self.message = message
        self.technical_message = technical_message or message
        super().__init__(self.technical_message)

    def __str__(self) -> str:
        return self.technical_message


class InvalidLengthError(AddressError):
    """
    Raised when a byte buffer has the wrong length.

    Examples:
        - Raw input is not exactly 32 bytes
        - Decoded text is not exactly 36 bytes (address + checksum)
    """

    def __init__(
        self,
        message: str = "Address has the wrong length.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class InvalidInputError(AddressError):
    """
    Raised when input cannot be interpreted at all.

    Examples:
        - None or empty string
        - Characters outside the base32 alphabet
        - Lowercase text
    """

    def __init__(
        self,
        message: str = "Address is not valid base32 text.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class ChecksumMismatchError(AddressError):
    """
    Raised when the appended checksum does not match the address bytes.

    Signals a corrupted, truncated or mistyped address string.
    """

    def __init__(
        self,
        message: str = "Address checksum is invalid. Check for typos.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class EncodingInvariantViolation(AssertionError):
    """
    Raised when an encoded address does not have the expected length.

    This can only happen if the digest or base32 primitive is broken,
    never because of caller input. It is not an AddressError and
    should not be handled as one.
    """
