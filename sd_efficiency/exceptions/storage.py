"""Storage and export exceptions."""

from .base import SdEfficiencyException


class StorageError(SdEfficiencyException):
    """Raised when entry data cannot be written to disk."""

    pass
