"""
Train lookup engine.

Orchestrates one lookup: input validation, loading the schedule, station
filtering and ranking.
"""

from typing import Any, Optional

import structlog

from .config.loader import ConfigLoader
from .data.models import TrainRecord
from .data.source import ScheduleSource
from .data.validators import validate_query
from .logging.config import get_lookup_logger
from .selection.ranker import MAX_RESULTS, rank_trains
from .selection.selector import select_trains

logger = structlog.get_logger(__name__)


class TrainFinder:
    """
    Coordinator for scheduled train lookups.

    Manages the lookup pipeline:
    Raw input → Validation → Schedule → Selection → Ranking
    """

    def __init__(
        self,
        config: Optional[dict[str, Any]] = None,
        source: Optional[ScheduleSource] = None,
    ) -> None:
        """
        Initialize the finder.

        Args:
            config: Merged configuration; defaults are loaded when omitted
            source: Record source; built from the ``lookup`` config when omitted
        """
        if config is None:
            config = ConfigLoader.create().merge_config()

        lookup_config = config.get("lookup", {})
        self.max_results: int = lookup_config.get("max_results", MAX_RESULTS)
        self.source = source or ScheduleSource.from_config(lookup_config)

        logger.debug(
            "Train finder initialized",
            data_file=str(self.source.path),
            max_results=self.max_results,
        )

    def find_trains(self, departure_station: str, arrival_station: str, criteria: str) -> list[TrainRecord]:
        """
        Find the best trains between two stations.

        Args:
            departure_station: Raw departure station text
            arrival_station: Raw arrival station text
            criteria: Raw criterion text (price, arrival-time, departure-time)

        Returns:
            Up to ``max_results`` trains, possibly empty

        Raises:
            QueryValidationError: If the input is rejected
            SourceUnavailableError: If the schedule cannot be loaded
        """
        query = validate_query(departure_station, arrival_station, criteria)

        lookup_logger = get_lookup_logger(
            __name__,
            departure_station_id=query.departure_station_id,
            arrival_station_id=query.arrival_station_id,
            criterion=query.criterion.value,
        )

        records = self.source.load()
        available = select_trains(records, query.departure_station_id, query.arrival_station_id)

        if not available:
            lookup_logger.info("No trains serve the station pair", record_count=len(records))
            return []

        ranked = rank_trains(available, query.criterion, self.max_results)

        lookup_logger.info(
            "Lookup completed",
            record_count=len(records),
            match_count=len(available),
            result_count=len(ranked),
        )
        return ranked
