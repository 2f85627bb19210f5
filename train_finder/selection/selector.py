"""Station-pair filtering of schedule records."""

from collections.abc import Iterable

from ..data.models import TrainRecord


def select_trains(
    records: Iterable[TrainRecord],
    departure_station_id: int,
    arrival_station_id: int,
) -> list[TrainRecord]:
    """
    Keep the records that run between the given stations.

    Both station ids must match exactly. Matches keep their source order and
    an empty list means no train serves the pair.
    """
    return [
        record
        for record in records
        if record.departure_station_id == departure_station_id
        and record.arrival_station_id == arrival_station_id
    ]
