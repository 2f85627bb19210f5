"""
Ranking of matching trains.

Sorting is stable, so trains with equal keys keep their source order, and the
sorted list is cut down to the top results.
"""

from collections.abc import Sequence
from operator import attrgetter

from ..data.models import SelectionCriterion, TrainRecord

MAX_RESULTS = 3


def sort_trains(records: Sequence[TrainRecord], criterion: SelectionCriterion) -> list[TrainRecord]:
    """Return a new list ordered ascending by the criterion's field."""
    return sorted(records, key=attrgetter(criterion.sort_field))


def rank_trains(
    records: Sequence[TrainRecord],
    criterion: SelectionCriterion,
    limit: int = MAX_RESULTS,
) -> list[TrainRecord]:
    """
    Sort matching trains and keep the first ``limit`` of them.

    Args:
        records: Matching trains in source order
        criterion: Field to order by
        limit: Maximum number of trains returned

    Returns:
        New list; the input is left untouched
    """
    if len(records) <= 1:
        return list(records)

    return sort_trains(records, criterion)[:limit]
