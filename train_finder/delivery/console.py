"""Console rendering of lookup results."""

import sys
from collections.abc import Sequence
from typing import IO, Optional

import orjson
import structlog

from ..data.models import TIME_LAYOUT, TrainRecord
from ..errors import OutputError

logger = structlog.get_logger(__name__)

NO_TRAINS_MESSAGE = "can't find at least one train"

HEADER = "TrainID\tDepartureStationID\tArrivalStationID\tPrice\tArrivalTime\tDepartureTime"


def format_train(train: TrainRecord) -> str:
    """Format one train as a tab-separated row matching ``HEADER``."""
    return "\t".join([
        str(train.train_id),
        str(train.departure_station_id),
        str(train.arrival_station_id),
        f"{train.price:.2f}",
        train.arrival_time.strftime(TIME_LAYOUT),
        train.departure_time.strftime(TIME_LAYOUT),
    ])


def format_train_json(train: TrainRecord) -> str:
    """Format one train as a single-line JSON object."""
    return orjson.dumps(train.to_payload()).decode()


class ConsoleDelivery:
    """Prints lookup results to a text stream."""

    def __init__(self, output_format: str = "table", stream: Optional[IO[str]] = None):
        if output_format not in ("table", "json"):
            raise ValueError(f"Unsupported output format: {output_format}")
        self.output_format = output_format
        self.stream = stream

    def render(self, trains: Sequence[TrainRecord]) -> list[str]:
        """Build the output lines for the given trains."""
        if not trains:
            return [NO_TRAINS_MESSAGE]

        if self.output_format == "json":
            return [format_train_json(train) for train in trains]

        return [HEADER] + [format_train(train) for train in trains]

    def deliver(self, trains: Sequence[TrainRecord]) -> None:
        """
        Print the trains, or the no-trains message if there are none.

        Raises:
            OutputError: If the stream cannot be written
        """
        stream = self.stream or sys.stdout
        lines = self.render(trains)

        try:
            for line in lines:
                print(line, file=stream)
            stream.flush()
        except OSError as e:
            logger.error("Failed to print lookup results", output_format=self.output_format, error=str(e))
            raise OutputError(
                f"can't print trains: {e}",
                output_format=self.output_format,
            ) from e

        logger.debug("Printed lookup results", output_format=self.output_format, train_count=len(trains))
