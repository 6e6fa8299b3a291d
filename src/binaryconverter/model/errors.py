"""Error types raised by the converter."""
from enum import StrEnum

INVALID_DIGIT_MESSAGE = "Please, enter 0 or 1 digit"


class ErrorKind(StrEnum):
    INVALID_DIGIT = "InvalidDigit"


class ValidationError(ValueError):
    """
    Raised when an edit would put a non-binary character into the input.

    The message is user-facing and is shown as-is in the alert dialog.
    """

    def __init__(self, kind: ErrorKind = ErrorKind.INVALID_DIGIT, message: str = INVALID_DIGIT_MESSAGE) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
