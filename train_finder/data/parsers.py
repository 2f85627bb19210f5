"""
Schedule file parsers for converting raw JSON payloads to train records.

This module handles decoding of the schedule payload and of each record's
fields, including the bare ``HH:MM:SS`` time-of-day values.
"""

from datetime import datetime, time
from typing import Any

import orjson

from .models import TIME_LAYOUT, TrainRecord


class ParseError(Exception):
    """Raised when parsing fails due to invalid data format."""
    pass


class MalformedRecordError(ParseError):
    """Raised when a record is missing a field or has a wrongly typed one."""
    pass


class InvalidTimeError(ParseError):
    """Raised when a time-of-day value does not match the layout."""
    pass


# JSON key -> TrainRecord field
_INT_FIELDS = {
    "trainId": "train_id",
    "departureStationId": "departure_station_id",
    "arrivalStationId": "arrival_station_id",
}
_TIME_FIELDS = {
    "arrivalTime": "arrival_time",
    "departureTime": "departure_time",
}


def parse_json_payload(raw_data: bytes | str) -> Any:
    """
    Parse raw JSON into Python objects.

    Args:
        raw_data: Raw JSON document

    Returns:
        Decoded value

    Raises:
        ParseError: If JSON parsing fails
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e


def parse_time_of_day(value: Any, layout: str = TIME_LAYOUT) -> time:
    """
    Parse a bare time of day such as ``"16:36:00"``.

    Only hour, minute and second are kept; there is no date or timezone.

    Raises:
        InvalidTimeError: If the value is not a string in the given layout
    """
    if not isinstance(value, str):
        raise InvalidTimeError(f"Time must be a string, got {type(value).__name__}")

    try:
        return datetime.strptime(value, layout).time()
    except ValueError as e:
        raise InvalidTimeError(f"Invalid time '{value}': {e}") from e


def parse_train_record(record_data: Any, time_layout: str = TIME_LAYOUT) -> TrainRecord:
    """
    Parse a single schedule entry into a TrainRecord.

    Expected format:
    {
        "trainId": 1177,
        "departureStationId": 1902,
        "arrivalStationId": 1929,
        "price": 164.65,
        "arrivalTime": "10:25:00",
        "departureTime": "16:36:00"
    }

    Unknown keys are ignored.

    Raises:
        MalformedRecordError: If a field is missing or has the wrong type
        InvalidTimeError: If a time field does not match the layout
    """
    if not isinstance(record_data, dict):
        raise MalformedRecordError("Record must be an object")

    fields: dict[str, Any] = {}

    for key, field_name in _INT_FIELDS.items():
        value = _require(record_data, key)
        # bool is an int subclass but never a valid identifier
        if not isinstance(value, int) or isinstance(value, bool):
            raise MalformedRecordError(f"'{key}' must be an integer, got {value!r}")
        fields[field_name] = value

    price = _require(record_data, "price")
    if not isinstance(price, (int, float)) or isinstance(price, bool):
        raise MalformedRecordError(f"'price' must be a number, got {price!r}")
    fields["price"] = float(price)

    for key, field_name in _TIME_FIELDS.items():
        fields[field_name] = parse_time_of_day(_require(record_data, key), time_layout)

    return TrainRecord(**fields)


def parse_schedule_payload(payload: Any, time_layout: str = TIME_LAYOUT) -> list[TrainRecord]:
    """
    Parse a decoded schedule document into TrainRecord objects.

    Args:
        payload: Decoded JSON; must be an array of record objects
        time_layout: strptime layout of the time fields

    Returns:
        Records in file order

    Raises:
        ParseError: If the document or any record is invalid
    """
    if not isinstance(payload, list):
        raise ParseError("Schedule must be a JSON array")

    records = []
    for i, record_data in enumerate(payload):
        try:
            records.append(parse_train_record(record_data, time_layout))
        except ParseError as e:
            raise type(e)(f"Invalid record at index {i}: {e}") from e

    return records


def _require(record_data: dict[str, Any], key: str) -> Any:
    if key not in record_data:
        raise MalformedRecordError(f"Missing '{key}' field")
    return record_data[key]
