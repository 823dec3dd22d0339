"""
Tests for core/filters.py - ownership and inclusive date-range filters.

All pure logic, no mocking needed.
"""

from datetime import date

import pytest

from core.errors import InvalidArgumentError, InvalidDateError
from core.filters import filter_by_date_range, filter_by_owner, parse_bound, parse_date


class TestParseDate:

    @pytest.mark.parametrize("value, expected", [
        ("2024-01-10", date(2024, 1, 10)),
        ("2024-01-10T09:00:00", date(2024, 1, 10)),
        ("2024-01-10T23:59:59Z", date(2024, 1, 10)),
        ("2024-01-10T00:30:00+02:00", date(2024, 1, 10)),
        ("2024-01-10T09:00:00.123000+00:00", date(2024, 1, 10)),
        ("  2024-01-10  ", date(2024, 1, 10)),
        ("2024-01-10T09:00:00.12Z", date(2024, 1, 10)),
        ("2024-01-10T09:00:00+0200", date(2024, 1, 10)),
        ("20240110", date(2024, 1, 10)),
    ])
    def test_iso_values(self, value, expected):
        assert parse_date(value) == expected

    @pytest.mark.parametrize("value", ["yesterday", "2024-13-01", "10/01/2024", ""])
    def test_rejects_non_iso(self, value):
        with pytest.raises(ValueError):
            parse_date(value)


class TestParseBound:

    def test_none_and_empty_mean_no_bound(self):
        assert parse_bound("startDate", None) is None
        assert parse_bound("startDate", "") is None

    def test_valid_bound(self):
        assert parse_bound("endDate", "2024-02-29") == date(2024, 2, 29)

    def test_invalid_bound_names_the_argument(self):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_bound("endDate", "2024-02-30")
        assert exc_info.value.argument == "endDate"
        assert "endDate" in str(exc_info.value)

    def test_invalid_date_is_an_argument_error(self):
        assert issubclass(InvalidDateError, InvalidArgumentError)


class TestFilterByOwner:

    def test_keeps_only_matching_owner(self, dataset):
        kept = filter_by_owner(dataset.goals, "U1", "owner")
        assert [g.id for g in kept] == ["G1", "G4"]

    def test_exact_match_only(self, dataset):
        assert filter_by_owner(dataset.goals, "U", "owner") == []
        assert filter_by_owner(dataset.goals, "u1", "owner") == []

    def test_other_fields(self, dataset):
        assert [r.id for r in filter_by_owner(dataset.reviews, "U1", "professional")] == ["R1", "R2"]
        assert [r.id for r in filter_by_owner(dataset.reflections, "U2", "user")] == ["F2"]


class TestFilterByDateRange:

    def test_no_bounds_is_identity(self, dataset):
        assert filter_by_date_range(dataset.goals, None, None, "created") == list(dataset.goals)

    def test_bounds_are_inclusive(self, dataset):
        kept = filter_by_date_range(dataset.goals, "2024-01-10", "2024-01-10", "created")
        assert [g.id for g in kept] == ["G1", "G4"]

    def test_start_only(self, dataset):
        kept = filter_by_date_range(dataset.goals, "2024-01-11", None, "created")
        assert [g.id for g in kept] == ["G2", "G4"]

    def test_end_only(self, dataset):
        kept = filter_by_date_range(dataset.goals, None, "2024-01-14", "created")
        assert [g.id for g in kept] == ["G1", "G4"]

    def test_missing_field_is_never_excluded(self, dataset):
        kept = filter_by_date_range(dataset.goals, "2030-01-01", "2030-12-31", "created")
        assert [g.id for g in kept] == ["G4"]

    def test_inverted_range_keeps_only_undated(self, dataset):
        kept = filter_by_date_range(dataset.goals, "2024-12-31", "2024-01-01", "created")
        assert [g.id for g in kept] == ["G4"]

    def test_timestamp_compared_by_day(self, dataset):
        kept = filter_by_date_range(dataset.reviews, "2024-05-20", "2024-05-20", "date")
        assert [r.id for r in kept] == ["R2"]

    def test_unparseable_record_date_is_kept(self, document):
        from core.dataset import parse_document
        document["goals"][0]["created"] = "sometime in spring"
        dataset = parse_document(document)
        kept = filter_by_date_range(dataset.goals, "2030-01-01", None, "created")
        assert [g.id for g in kept] == ["G1", "G4"]

    def test_invalid_bound_raises(self, dataset):
        with pytest.raises(InvalidDateError):
            filter_by_date_range(dataset.goals, "not-a-date", None, "created")
