"""
Error classification for the train lookup pipeline.

Query validation errors describe bad user input and are raised before any
data is read. System failures describe problems with the record source or
the console and are surfaced to the user by the command line.
"""

from .query import (
    QueryValidationError,
    EmptyDepartureError,
    EmptyArrivalError,
    BadDepartureInputError,
    BadArrivalInputError,
    UnsupportedCriteriaError,
)
from .system_failures import (
    SystemFailureError,
    SourceUnavailableError,
    InputReadError,
    OutputError,
)

__all__ = [
    # Query Validation Errors
    "QueryValidationError",
    "EmptyDepartureError",
    "EmptyArrivalError",
    "BadDepartureInputError",
    "BadArrivalInputError",
    "UnsupportedCriteriaError",
    # System Failures
    "SystemFailureError",
    "SourceUnavailableError",
    "InputReadError",
    "OutputError",
]
