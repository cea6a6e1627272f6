"""Custom exceptions for SD Efficiency."""

from .base import SdEfficiencyException
from .storage import StorageError
from .validation import ERROR_MESSAGES, EntryValidationError, ErrorKind

__all__ = [
    "SdEfficiencyException",
    "EntryValidationError",
    "ErrorKind",
    "ERROR_MESSAGES",
    "StorageError",
]
