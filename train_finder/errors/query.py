"""
Query validation error classifications.

Each rule of the lookup validator has its own exception type so callers can
tell which input was rejected without parsing messages.
"""

from typing import Optional, Dict, Any


class QueryValidationError(Exception):
    """Base class for rejected lookup input."""

    default_message = "invalid query"
    field: Optional[str] = None

    def __init__(self, message: Optional[str] = None, value: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message or self.default_message)
        self.value = value
        self.context = context or {}


class EmptyDepartureError(QueryValidationError):
    """Departure station text is empty."""

    default_message = "empty departure station"
    field = "departure_station"


class EmptyArrivalError(QueryValidationError):
    """Arrival station text is empty."""

    default_message = "empty arrival station"
    field = "arrival_station"


class BadDepartureInputError(QueryValidationError):
    """Departure station text is not a natural number."""

    default_message = "bad departure station input"
    field = "departure_station"


class BadArrivalInputError(QueryValidationError):
    """Arrival station text is not a natural number."""

    default_message = "bad arrival station input"
    field = "arrival_station"


class UnsupportedCriteriaError(QueryValidationError):
    """Criterion text is not one of the supported sort criteria."""

    default_message = "unsupported criteria"
    field = "criteria"
