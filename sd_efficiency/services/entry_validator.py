"""Validation and construction of new stress-test entries."""

import logging
from decimal import Decimal, InvalidOperation

from sd_efficiency.exceptions import EntryValidationError, ErrorKind
from sd_efficiency.interfaces import Clock, IdFactory, system_clock, uuid_id_factory
from sd_efficiency.models import Entry

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.01
DEFAULT_PRECISION = 2


class EntryValidator:
    """Turn raw user input into a fully formed Entry (stateless service).

    The clock and id factory are the only sources of non-determinism and
    are injected so tests can pin them.
    """

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        precision: int = DEFAULT_PRECISION,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
    ):
        """Initialize the validator.

        Args:
            tolerance: Max allowed |total - (good + bad)| in hours
            precision: Decimal places kept on the derived efficiency
            clock: Returns the current time in epoch milliseconds
            id_factory: Returns a fresh unique entry id
        """
        self._tolerance = Decimal(str(tolerance))
        self.precision = precision
        self._clock = clock or system_clock
        self._id_factory = id_factory or uuid_id_factory

    @property
    def tolerance(self) -> float:
        return float(self._tolerance)

    def validate_and_build(self, raw_total: str, raw_good: str, raw_bad: str) -> Entry:
        """Validate the three hour fields and build a new entry.

        Checks run in a fixed order: all fields numeric, then
        total == good + bad within tolerance, then total > 0.

        Args:
            raw_total: Total hours the test session ran
            raw_good: Hours of valid data captured
            raw_bad: Hours of corrupted or lost data

        Returns:
            A new Entry with a fresh id, the current timestamp and derived efficiency

        Raises:
            EntryValidationError: If the input is rejected; ``kind`` tells why
        """
        total = self._parse(raw_total)
        good = self._parse(raw_good)
        bad = self._parse(raw_bad)

        if total is None or good is None or bad is None:
            raise EntryValidationError(ErrorKind.NOT_A_NUMBER)

        if abs(total - (good + bad)) > self._tolerance:
            logger.debug(f"Rejected inconsistent entry: {total} != {good} + {bad}")
            raise EntryValidationError(ErrorKind.INCONSISTENT)

        if total <= 0:
            raise EntryValidationError(ErrorKind.NON_POSITIVE_TOTAL)

        total_hours = float(total)
        good_hours = float(good)
        entry = Entry(
            id=self._id_factory(),
            timestamp=self._clock(),
            total_hours=total_hours,
            good_hours=good_hours,
            bad_hours=float(bad),
            efficiency=self.compute_efficiency(good_hours, total_hours),
        )
        logger.debug(f"Built entry {entry.id} ({entry.efficiency}%)")
        return entry

    def compute_efficiency(self, good_hours: float, total_hours: float) -> float:
        """Percentage of total time that produced good data, rounded.

        Args:
            good_hours: Hours of valid data
            total_hours: Total hours, must be positive

        Returns:
            good_hours / total_hours * 100 rounded to ``precision`` decimals
        """
        return round(good_hours / total_hours * 100, self.precision)

    @staticmethod
    def _parse(raw: str | None) -> Decimal | None:
        """Parse a user-typed number, or None when it is not a finite number."""
        if raw is None:
            return None
        try:
            value = Decimal(str(raw).strip())
        except InvalidOperation:
            return None
        return value if value.is_finite() else None
