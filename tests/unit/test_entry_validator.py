"""Tests for EntryValidator."""

import pytest

from sd_efficiency.exceptions import EntryValidationError, ErrorKind
from sd_efficiency.services import EntryValidator


def _kind_of(validator, total, good, bad):
    with pytest.raises(EntryValidationError) as exc_info:
        validator.validate_and_build(total, good, bad)
    return exc_info.value.kind


class TestValidEntries:
    """Tests for accepted input."""

    def test_builds_entry_with_derived_efficiency(self, validator):
        entry = validator.validate_and_build("24", "22", "2")

        assert entry.total_hours == 24.0
        assert entry.good_hours == 22.0
        assert entry.bad_hours == 2.0
        assert entry.efficiency == pytest.approx(91.67)

    def test_uses_injected_clock_and_id_factory(self, validator, fixed_clock):
        first = validator.validate_and_build("24", "22", "2")
        second = validator.validate_and_build("24", "19", "5")

        assert first.id == "entry-1"
        assert second.id == "entry-2"
        assert first.timestamp == fixed_clock()
        assert second.timestamp == fixed_clock()

    def test_efficiency_is_rounded_to_two_decimals(self, validator):
        entry = validator.validate_and_build("3", "1", "2")
        assert entry.efficiency == pytest.approx(33.33)

    @pytest.mark.parametrize(
        "total,good,bad,expected",
        [
            ("10", "7", "3", 70.0),
            ("24", "19", "5", 79.17),
            ("24.0", "22.5", "1.5", 93.75),
            ("8", "8", "0", 100.0),
            ("8", "0", "8", 0.0),
        ],
    )
    def test_efficiency_matches_formula(self, validator, total, good, bad, expected):
        entry = validator.validate_and_build(total, good, bad)
        assert entry.efficiency == pytest.approx(expected)
        assert entry.efficiency == round(float(good) / float(total) * 100, 2)

    def test_surrounding_whitespace_is_ignored(self, validator):
        entry = validator.validate_and_build(" 10 ", "7\n", "\t3")
        assert entry.total_hours == 10.0

    def test_fractional_input_within_tolerance(self, validator):
        entry = validator.validate_and_build("0.3", "0.1", "0.2")
        assert entry.efficiency == pytest.approx(33.33)

    def test_negative_component_accepted_when_consistent(self, validator):
        """Only the total must be positive; the components just have to add up."""
        entry = validator.validate_and_build("10", "12", "-2")
        assert entry.efficiency == pytest.approx(120.0)

    def test_default_capabilities_produce_unique_ids(self):
        validator = EntryValidator()
        first = validator.validate_and_build("1", "1", "0")
        second = validator.validate_and_build("1", "1", "0")

        assert first.id != second.id
        assert first.timestamp > 0


class TestToleranceBoundary:
    """Tests for the total == good + bad consistency rule."""

    def test_difference_of_exactly_tolerance_passes(self, validator):
        entry = validator.validate_and_build("10", "7", "2.99")
        assert entry.efficiency == pytest.approx(70.0)

    def test_exact_boundary_with_awkward_binary_values_passes(self, validator):
        validator.validate_and_build("1.01", "1", "0")
        validator.validate_and_build("24.01", "22", "2")

    def test_difference_just_over_tolerance_fails(self, validator):
        assert _kind_of(validator, "10", "7", "2.989") is ErrorKind.INCONSISTENT

    def test_components_exceeding_total_fail(self, validator):
        assert _kind_of(validator, "10", "7", "3.011") is ErrorKind.INCONSISTENT

    def test_clearly_inconsistent_fails(self, validator):
        assert _kind_of(validator, "10", "5", "4") is ErrorKind.INCONSISTENT

    def test_custom_tolerance(self, fixed_clock, id_factory):
        strict = EntryValidator(tolerance=0.0, clock=fixed_clock, id_factory=id_factory)

        assert strict.tolerance == 0.0
        assert _kind_of(strict, "10", "7", "2.99") is ErrorKind.INCONSISTENT
        strict.validate_and_build("10", "7", "3")

    def test_custom_precision(self, fixed_clock, id_factory):
        validator = EntryValidator(precision=0, clock=fixed_clock, id_factory=id_factory)
        entry = validator.validate_and_build("3", "2", "1")
        assert entry.efficiency == 67.0


class TestRejectedInput:
    """Tests for the error kinds and their order."""

    @pytest.mark.parametrize(
        "total,good,bad",
        [
            ("abc", "1", "1"),
            ("10", "", "3"),
            ("10", "7", "three"),
            ("", "", ""),
            ("nan", "1", "1"),
            ("10", "inf", "3"),
            ("1,5", "1", "0.5"),
        ],
    )
    def test_non_numeric_field(self, validator, total, good, bad):
        assert _kind_of(validator, total, good, bad) is ErrorKind.NOT_A_NUMBER

    def test_none_field(self, validator):
        assert _kind_of(validator, None, "1", "1") is ErrorKind.NOT_A_NUMBER

    @pytest.mark.parametrize(
        "total,good,bad",
        [("0", "0", "0"), ("-5", "-3", "-2"), ("-0.005", "0", "0")],
    )
    def test_non_positive_total(self, validator, total, good, bad):
        assert _kind_of(validator, total, good, bad) is ErrorKind.NON_POSITIVE_TOTAL

    def test_not_a_number_checked_before_consistency(self, validator):
        assert _kind_of(validator, "abc", "5", "4") is ErrorKind.NOT_A_NUMBER

    def test_consistency_checked_before_positive_total(self, validator):
        assert _kind_of(validator, "0", "1", "1") is ErrorKind.INCONSISTENT

    def test_error_messages(self, validator):
        with pytest.raises(EntryValidationError, match="valid numbers"):
            validator.validate_and_build("x", "1", "1")
        with pytest.raises(EntryValidationError, match="must equal Good \\+ Bad"):
            validator.validate_and_build("10", "1", "1")
        with pytest.raises(EntryValidationError, match="greater than zero"):
            validator.validate_and_build("0", "0", "0")

    def test_rejection_does_not_consume_ids(self, validator):
        with pytest.raises(EntryValidationError):
            validator.validate_and_build("10", "1", "1")

        entry = validator.validate_and_build("10", "7", "3")
        assert entry.id == "entry-1"


class TestComputeEfficiency:
    def test_full_efficiency(self, validator):
        assert validator.compute_efficiency(5.0, 5.0) == 100.0

    def test_rounds_repeating_fraction(self, validator):
        assert validator.compute_efficiency(2.0, 3.0) == pytest.approx(66.67)
