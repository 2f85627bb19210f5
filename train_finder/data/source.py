"""
Record source backed by a static JSON schedule file.

The file is read in full on every load; records are never cached between
lookups.
"""

from dataclasses import dataclass
from pathlib import Path

import structlog

from ..errors import SourceUnavailableError
from .models import TIME_LAYOUT, TrainRecord
from .parsers import ParseError, parse_json_payload, parse_schedule_payload

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ScheduleSource:
    """Loads train records from a JSON schedule file."""

    path: Path
    time_layout: str = TIME_LAYOUT

    @classmethod
    def from_config(cls, lookup_config: dict) -> "ScheduleSource":
        """Create a source from the ``lookup`` section of the merged config."""
        return cls(
            path=Path(lookup_config.get("data_file", "data.json")),
            time_layout=lookup_config.get("time_format", TIME_LAYOUT),
        )

    def load(self) -> list[TrainRecord]:
        """
        Read and decode every record in the schedule file.

        Returns:
            Records in file order

        Raises:
            SourceUnavailableError: If the file cannot be read or decoded
        """
        try:
            with open(self.path, "rb") as f:
                raw_data = f.read()
        except OSError as e:
            logger.error("Schedule file could not be opened", path=str(self.path), error=str(e))
            raise SourceUnavailableError(
                f"can't open schedule file {self.path}: {e}",
                operation="open",
                target=str(self.path),
            ) from e

        try:
            records = parse_schedule_payload(parse_json_payload(raw_data), self.time_layout)
        except ParseError as e:
            logger.error("Schedule file could not be decoded", path=str(self.path), error=str(e))
            raise SourceUnavailableError(
                f"can't decode schedule file {self.path}: {e}",
                operation="decode",
                target=str(self.path),
            ) from e

        logger.debug("Loaded schedule", path=str(self.path), record_count=len(records))
        return records
