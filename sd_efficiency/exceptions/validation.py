"""Validation-related exceptions."""

from enum import Enum

from .base import SdEfficiencyException


class ErrorKind(Enum):
    """Reason a new entry was rejected."""

    NOT_A_NUMBER = "not_a_number"
    INCONSISTENT = "inconsistent"
    NON_POSITIVE_TOTAL = "non_positive_total"


ERROR_MESSAGES = {
    ErrorKind.NOT_A_NUMBER: "Please enter valid numbers for all fields.",
    ErrorKind.INCONSISTENT: "Validation Failed: Total Hours must equal Good + Bad Hours.",
    ErrorKind.NON_POSITIVE_TOTAL: "Total hours must be greater than zero.",
}


class EntryValidationError(SdEfficiencyException):
    """Raised when raw entry input is rejected.

    The message does not name the offending field; callers should keep the
    user's input so it can be corrected in place.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        super().__init__(message or ERROR_MESSAGES[kind])
