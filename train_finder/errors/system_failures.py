"""
System failure error classifications.

These exceptions represent failures outside the lookup logic itself: the
schedule file, the console input stream and the output stream.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for failures of the lookup's collaborators."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class SourceUnavailableError(SystemFailureError):
    """The schedule file cannot be opened or decoded."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target


class InputReadError(SystemFailureError):
    """Reading a value from the console failed."""

    def __init__(self, message: str, parameter: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter


class OutputError(SystemFailureError):
    """Writing lookup results failed."""

    def __init__(self, message: str, output_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.output_format = output_format
