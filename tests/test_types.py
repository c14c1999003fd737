"""Tests for the shared value objects and argument checks."""

import dataclasses
import unittest

import pytest

from oraregex.exceptions import InvalidArgumentError
from oraregex.types import (
    FlagSet,
    MatchSpan,
    OccurrenceQuery,
    check_group,
    check_occurrence,
    check_position,
    check_return_opt,
)


class TestArgumentChecks(unittest.TestCase):
    """Test suite for the numeric argument validators."""

    def test_valid_values_are_returned(self) -> None:
        """1. Pass-through: In-contract values come back unchanged."""
        assert check_position(1) == 1
        assert check_occurrence(7) == 7
        assert check_group(0) == 0
        assert check_return_opt(1) == 1

    def test_position_must_be_positive(self) -> None:
        """2. Position: Zero and negatives are rejected with the Oracle message."""
        for value in (0, -1):
            with pytest.raises(InvalidArgumentError, match="argument 'position' must be a number greater than 0"):
                check_position(value)

    def test_occurrence_must_be_positive(self) -> None:
        """3. Occurrence: Zero is rejected."""
        with pytest.raises(InvalidArgumentError, match="argument 'occurrence' must be a number greater than 0"):
            check_occurrence(0)

    def test_group_must_not_be_negative(self) -> None:
        """4. Group: Negative indices are rejected."""
        with pytest.raises(InvalidArgumentError, match="argument 'group' must be a positive number"):
            check_group(-1)

    def test_return_opt_must_be_zero_or_one(self) -> None:
        """5. Return Option: Anything outside {0, 1} is rejected."""
        for value in (-1, 2):
            with pytest.raises(InvalidArgumentError, match="argument 'return_opt' must be 0 or 1"):
                check_return_opt(value)

    def test_non_integers_are_rejected(self) -> None:
        """6. Types: Booleans, floats and strings are not silently coerced."""
        for value in (True, 1.0, "1"):
            with pytest.raises(InvalidArgumentError, match="must be an integer"):
                check_position(value)

    def test_invalid_argument_is_a_value_error(self) -> None:
        """7. Hierarchy: InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError, match="position"):
            check_position(0)


class TestFlagSet(unittest.TestCase):
    """Test suite for FlagSet."""

    def test_defaults_are_all_off(self) -> None:
        """1. Defaults: A bare FlagSet has every switch off."""
        flags = FlagSet()
        assert not flags.ignore_case
        assert not flags.boundary
        assert not flags.global_
        assert flags.passthrough == ()

    def test_flag_set_is_immutable(self) -> None:
        """2. Immutability: FlagSet is a frozen dataclass."""
        flags = FlagSet()
        with pytest.raises(dataclasses.FrozenInstanceError):
            flags.ignore_case = True  # type: ignore[misc]

    def test_boundary_excludes_newline_modes(self) -> None:
        """3. Invariant: boundary cannot be combined with dot_all or multiline."""
        with pytest.raises(ValueError, match="boundary default"):
            FlagSet(boundary=True, dot_all=True)
        with pytest.raises(ValueError, match="boundary default"):
            FlagSet(boundary=True, multiline=True)

    def test_str_lists_enabled_letters(self) -> None:
        """4. String Form: Enabled switches render as letters, '-' when empty."""
        assert str(FlagSet()) == "-"
        assert str(FlagSet(ignore_case=True, boundary=True, global_=True, passthrough=("u",))) == "ipgu"
        assert str(FlagSet(dot_all=True, multiline=True, extended=True)) == "nmx"


class TestMatchSpan(unittest.TestCase):
    """Test suite for MatchSpan."""

    def test_end_and_extract(self) -> None:
        """1. End/Extract: end is one past the last character; extract slices 1-based."""
        span = MatchSpan(start=3, length=2)
        assert span.end == 5
        assert span.extract("ababab") == "ab"

    def test_empty_span(self) -> None:
        """2. Empty: A zero-length span extracts the empty string."""
        span = MatchSpan(start=4, length=0)
        assert span.end == 4
        assert span.extract("abc") == ""

    def test_invalid_spans_are_rejected(self) -> None:
        """3. Validation: start must be 1-based and length non-negative."""
        with pytest.raises(ValueError, match="1-based"):
            MatchSpan(start=0, length=1)
        with pytest.raises(ValueError, match="negative"):
            MatchSpan(start=1, length=-1)


class TestOccurrenceQuery(unittest.TestCase):
    """Test suite for OccurrenceQuery."""

    def test_defaults(self) -> None:
        """1. Defaults: position 1, occurrence 1, group 0, empty flags."""
        query = OccurrenceQuery(subject="abc", pattern="b")
        assert (query.position, query.occurrence, query.group) == (1, 1, 0)
        assert query.flags == FlagSet()

    def test_construction_validates(self) -> None:
        """2. Validation: Out-of-contract numbers fail at construction."""
        with pytest.raises(InvalidArgumentError, match="position"):
            OccurrenceQuery(subject="abc", pattern="b", position=0)
        with pytest.raises(InvalidArgumentError, match="occurrence"):
            OccurrenceQuery(subject="abc", pattern="b", occurrence=0)
        with pytest.raises(InvalidArgumentError, match="group"):
            OccurrenceQuery(subject="abc", pattern="b", group=-2)

    def test_null_subject_is_allowed(self) -> None:
        """3. NULL: subject and pattern may be None."""
        query = OccurrenceQuery(subject=None, pattern=None)
        assert query.subject is None
