"""Pytest configuration and shared fixtures."""

import json
from datetime import time
from pathlib import Path
from typing import Any, Dict, List

import pytest

from train_finder.data.models import TrainRecord
from train_finder.data.source import ScheduleSource
from train_finder.engine import TrainFinder
from train_finder.logging.config import configure_logging


def _entry(train_id, dep, arr, price, arrival, departure) -> Dict[str, Any]:
    return {
        "trainId": train_id,
        "departureStationId": dep,
        "arrivalStationId": arr,
        "price": price,
        "arrivalTime": arrival,
        "departureTime": departure,
    }


@pytest.fixture
def sample_schedule() -> List[Dict[str, Any]]:
    """Schedule entries as they appear in the JSON file."""
    return [
        _entry(1177, 1902, 1929, 164.65, "10:25:00", "16:36:00"),
        _entry(978, 1902, 1929, 258.53, "04:15:00", "13:10:00"),
        _entry(1386, 1902, 1929, 220.49, "08:30:00", "13:03:00"),
        _entry(1178, 1902, 1929, 164.65, "10:25:00", "16:36:00"),
        _entry(1316, 1902, 1929, 209.73, "05:55:00", "13:52:00"),
        _entry(1141, 1902, 1929, 176.77, "12:15:00", "16:48:00"),
        _entry(2201, 1902, 1929, 280, "06:15:00", "14:55:00"),
        _entry(1021, 1929, 1902, 150.5, "09:40:00", "07:05:00"),
        _entry(1509, 1902, 1937, 98.1, "11:00:00", "09:30:00"),
        _entry(1610, 1937, 1929, 75, "14:10:00", "12:25:00"),
    ]


@pytest.fixture
def schedule_file(tmp_path: Path, sample_schedule: List[Dict[str, Any]]) -> Path:
    """Sample schedule written to a temporary data file."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_schedule))
    return path


@pytest.fixture
def finder(schedule_file: Path) -> TrainFinder:
    """Finder reading the temporary schedule with default settings."""
    return TrainFinder(
        config={"lookup": {"max_results": 3}},
        source=ScheduleSource(path=schedule_file),
    )


@pytest.fixture
def make_record():
    """Factory for TrainRecord objects with sensible defaults."""
    def _make(train_id: int, price: float = 100.0, arrival: time = time(10, 0),
              departure: time = time(8, 0), dep: int = 1902, arr: int = 1929) -> TrainRecord:
        return TrainRecord(
            train_id=train_id,
            departure_station_id=dep,
            arrival_station_id=arr,
            price=price,
            arrival_time=arrival,
            departure_time=departure,
        )
    return _make


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route diagnostics to stderr at WARNING so stdout only carries results."""
    configure_logging(level="WARNING")
