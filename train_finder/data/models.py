"""
Canonical data models for the train schedule.

This module defines immutable data structures that represent decoded train
records and validated lookup queries.
"""

from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import Any

# Time-of-day layout used in the schedule file and in console output
TIME_LAYOUT = "%H:%M:%S"


class SelectionCriterion(Enum):
    """Supported orderings for matching trains."""
    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"

    @property
    def sort_field(self) -> str:
        """TrainRecord attribute this criterion orders by."""
        return _SORT_FIELDS[self]

    @classmethod
    def values(cls) -> frozenset[str]:
        """All recognized criterion strings."""
        return frozenset(member.value for member in cls)


_SORT_FIELDS = {
    SelectionCriterion.PRICE: "price",
    SelectionCriterion.ARRIVAL_TIME: "arrival_time",
    SelectionCriterion.DEPARTURE_TIME: "departure_time",
}


@dataclass(frozen=True)
class TrainRecord:
    """One scheduled train between two stations."""
    train_id: int
    departure_station_id: int
    arrival_station_id: int
    price: float
    arrival_time: time          # Time of day, no date or timezone
    departure_time: time        # Time of day, no date or timezone

    def to_payload(self) -> dict[str, Any]:
        """Render the record with the schedule file's key names."""
        return {
            "trainId": self.train_id,
            "departureStationId": self.departure_station_id,
            "arrivalStationId": self.arrival_station_id,
            "price": self.price,
            "arrivalTime": self.arrival_time.strftime(TIME_LAYOUT),
            "departureTime": self.departure_time.strftime(TIME_LAYOUT),
        }


@dataclass(frozen=True)
class Query:
    """Validated lookup parameters."""
    departure_station_id: int
    arrival_station_id: int
    criterion: SelectionCriterion
