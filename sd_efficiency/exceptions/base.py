"""Base exception classes for SD Efficiency."""


class SdEfficiencyException(Exception):
    """Base exception for all SD Efficiency errors.

    All custom exceptions in the sd_efficiency package should inherit
    from this base class for consistent error handling.
    """

    pass
