"""Default configuration parameters for the train lookup."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LookupParams:
    """Record source and ranking parameters."""
    data_file: str = "data.json"        # Schedule file, relative to the working directory
    max_results: int = 3                # Top-N truncation after sorting
    time_format: str = "%H:%M:%S"       # Time-of-day layout in the schedule file


@dataclass(frozen=True)
class OutputParams:
    """Console output parameters."""
    format: str = "table"               # table, json


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostic logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    lookup: LookupParams
    output: OutputParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        lookup=LookupParams(),
        output=OutputParams(),
        logging=LoggingParams(),
    )
