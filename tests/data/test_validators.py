"""Tests for lookup input validation."""

import pytest

from train_finder.data.models import Query, SelectionCriterion
from train_finder.data.validators import parse_natural_number, validate_query
from train_finder.errors import (
    BadArrivalInputError,
    BadDepartureInputError,
    EmptyArrivalError,
    EmptyDepartureError,
    QueryValidationError,
    UnsupportedCriteriaError,
)


class TestParseNaturalNumber:
    """Test parse_natural_number function."""

    @pytest.mark.parametrize("text,expected", [
        ("1902", 1902),
        ("1", 1),
        ("+7", 7),
        ("007", 7),
        ("9223372036854775807", 9223372036854775807),
        ("0" * 5000 + "42", 42),
    ])
    def test_accepts(self, text, expected):
        assert parse_natural_number(text) == expected

    @pytest.mark.parametrize("text", [
        "0", "-5", "-0", "+0", "serg", "12a", " 12", "12 ", "1_000", "1.5", "", "+", "١٢",
        "9223372036854775808", "99999999999999999999", "9" * 5000, "-" + "9" * 5000,
    ])
    def test_rejects(self, text):
        assert parse_natural_number(text) is None


class TestValidateQuery:
    """Test validate_query rules and their order."""

    def test_valid_query(self):
        query = validate_query("1902", "1929", "price")
        assert query == Query(
            departure_station_id=1902,
            arrival_station_id=1929,
            criterion=SelectionCriterion.PRICE,
        )

    @pytest.mark.parametrize("criteria,expected", [
        ("price", SelectionCriterion.PRICE),
        ("arrival-time", SelectionCriterion.ARRIVAL_TIME),
        ("departure-time", SelectionCriterion.DEPARTURE_TIME),
    ])
    def test_all_criteria(self, criteria, expected):
        assert validate_query("1", "2", criteria).criterion is expected

    def test_empty_departure(self):
        with pytest.raises(EmptyDepartureError, match="empty departure station"):
            validate_query("", "1929", "price")

    def test_empty_departure_checked_before_arrival(self):
        """Both empty still reports the departure station."""
        with pytest.raises(EmptyDepartureError):
            validate_query("", "", "awef")

    def test_empty_arrival(self):
        with pytest.raises(EmptyArrivalError, match="empty arrival station"):
            validate_query("1902", "", "price")

    def test_emptiness_checked_before_numbers(self):
        """A bad departure does not mask an empty arrival."""
        with pytest.raises(EmptyArrivalError):
            validate_query("serg", "", "price")

    @pytest.mark.parametrize("departure", ["serg", "0", "-1902", "19.02"])
    def test_bad_departure(self, departure):
        with pytest.raises(BadDepartureInputError, match="bad departure station input") as exc_info:
            validate_query(departure, "1929", "price")
        assert exc_info.value.value == departure
        assert exc_info.value.field == "departure_station"

    @pytest.mark.parametrize("departure", ["99999999999999999999", "9" * 5000])
    def test_out_of_range_departure(self, departure):
        """Ids beyond a signed 64-bit integer are bad input, not a crash."""
        with pytest.raises(BadDepartureInputError):
            validate_query(departure, "1929", "price")

    def test_out_of_range_arrival(self):
        with pytest.raises(BadArrivalInputError):
            validate_query("1902", "9" * 5000, "price")

    def test_departure_checked_before_arrival(self):
        with pytest.raises(BadDepartureInputError):
            validate_query("serg", "serg", "price")

    @pytest.mark.parametrize("arrival", ["abc", "0", "-3"])
    def test_bad_arrival(self, arrival):
        with pytest.raises(BadArrivalInputError, match="bad arrival station input"):
            validate_query("1902", arrival, "price")

    def test_stations_checked_before_criteria(self):
        with pytest.raises(BadArrivalInputError):
            validate_query("1902", "x", "awef")

    @pytest.mark.parametrize("criteria", ["awef", "", "Price", "departure", "arrival_time", " price"])
    def test_unsupported_criteria(self, criteria):
        with pytest.raises(UnsupportedCriteriaError, match="unsupported criteria") as exc_info:
            validate_query("1902", "1929", criteria)
        assert exc_info.value.context["supported"] == ["arrival-time", "departure-time", "price"]

    def test_errors_share_base_class(self):
        with pytest.raises(QueryValidationError):
            validate_query("", "1929", "price")
