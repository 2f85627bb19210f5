"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

OUTPUT_FORMATS = frozenset({"table", "json"})
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_lookup_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate lookup parameters."""
        errors = []

        if "data_file" in params:
            value = params["data_file"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="data_file",
                    message="Must be a non-empty path",
                    value=value
                ))

        # bool is an int subclass, reject it explicitly
        if "max_results" in params:
            value = params["max_results"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="max_results",
                    message="Must be a positive integer",
                    value=value
                ))

        if "time_format" in params:
            value = params["time_format"]
            if not isinstance(value, str) or "%" not in value:
                errors.append(ValidationError(
                    field="time_format",
                    message="Must be a strptime format string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "format" in params:
            value = params["format"]
            if value not in OUTPUT_FORMATS:
                errors.append(ValidationError(
                    field="format",
                    message=f"Must be one of {sorted(OUTPUT_FORMATS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {sorted(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "lookup" in config:
            errors.extend(ConfigValidator.validate_lookup_params(config["lookup"]))

        if "output" in config:
            errors.extend(ConfigValidator.validate_output_params(config["output"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
