"""
Lookup input validation.

Raw console text is checked before any data is read. Rules run in a fixed
order and the first failure wins.
"""

import re

from ..errors import (
    BadArrivalInputError,
    BadDepartureInputError,
    EmptyArrivalError,
    EmptyDepartureError,
    UnsupportedCriteriaError,
)
from .models import Query, SelectionCriterion

# Optional sign followed by ASCII digits; no whitespace or underscores
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Station ids are signed 64-bit integers
MAX_STATION_ID = 2**63 - 1
_MAX_DIGITS = len(str(MAX_STATION_ID))


def parse_natural_number(text: str) -> int | None:
    """
    Parse text as an integer strictly greater than zero.

    Values beyond a signed 64-bit integer are rejected like any other
    malformed number.

    Returns:
        The integer, or None if the text is not a natural number
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        return None

    digits = text.lstrip("+-").lstrip("0")
    if text.startswith("-") or not digits or len(digits) > _MAX_DIGITS:
        return None

    value = int(digits)
    if value > MAX_STATION_ID:
        return None

    return value


def validate_query(departure_text: str, arrival_text: str, criterion_text: str) -> Query:
    """
    Validate raw lookup input and build a Query.

    Args:
        departure_text: Departure station as typed by the user
        arrival_text: Arrival station as typed by the user
        criterion_text: Sort criterion as typed by the user

    Returns:
        Validated query

    Raises:
        EmptyDepartureError: Departure text is empty
        EmptyArrivalError: Arrival text is empty
        BadDepartureInputError: Departure text is not a natural number
        BadArrivalInputError: Arrival text is not a natural number
        UnsupportedCriteriaError: Criterion is not a supported value
    """
    if not departure_text:
        raise EmptyDepartureError(value=departure_text)

    if not arrival_text:
        raise EmptyArrivalError(value=arrival_text)

    departure_station_id = parse_natural_number(departure_text)
    if departure_station_id is None:
        raise BadDepartureInputError(value=departure_text)

    arrival_station_id = parse_natural_number(arrival_text)
    if arrival_station_id is None:
        raise BadArrivalInputError(value=arrival_text)

    try:
        criterion = SelectionCriterion(criterion_text)
    except ValueError as e:
        raise UnsupportedCriteriaError(
            value=criterion_text,
            context={"supported": sorted(SelectionCriterion.values())},
        ) from e

    return Query(
        departure_station_id=departure_station_id,
        arrival_station_id=arrival_station_id,
        criterion=criterion,
    )
