"""Injectable sources of time and identity for entry construction."""

import time
import uuid
from collections.abc import Callable

# Returns the current time in milliseconds since epoch
Clock = Callable[[], int]

# Returns a fresh, never reused entry identifier
IdFactory = Callable[[], str]


def system_clock() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def uuid_id_factory() -> str:
    """Random identifier that is not reused after deletion."""
    return uuid.uuid4().hex
