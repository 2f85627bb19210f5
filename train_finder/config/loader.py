"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, get_default_config

CONFIG_FILE_NAME = "finder.yaml"


class ConfigLoadError(Exception):
    """Raised when the config file cannot be read or has the wrong shape."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """
        Load overrides from the YAML config file, if present.

        Raises:
            ConfigLoadError: If the file is unreadable, is not valid YAML, or
                is not a mapping of sections to mappings
        """
        config_file = self.config_dir / CONFIG_FILE_NAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file) as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"can't read {config_file}: {e}", path=config_file) from e

        if file_config is None:
            return {}

        if not isinstance(file_config, dict):
            raise ConfigLoadError(f"{config_file} must contain a mapping of sections", path=config_file)

        for section, values in file_config.items():
            if not isinstance(values, dict):
                raise ConfigLoadError(
                    f"section '{section}' in {config_file} must be a mapping, got {values!r}",
                    path=config_file,
                )

        return file_config

    def merge_config(self, cli_overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Command-line overrides (highest priority)
        2. Config file overrides
        3. Global defaults (lowest priority)

        Raises:
            ConfigLoadError: If the config file cannot be used
        """
        config = asdict(self.defaults)

        config = self._merge_sections(config, self.load_file_config())

        if cli_overrides:
            config = self._merge_sections(config, cli_overrides)

        return config

    @staticmethod
    def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Overlay section values key by key. None values in the override are skipped."""
        result = {section: dict(values) for section, values in base.items()}

        for section, values in override.items():
            result.setdefault(section, {}).update(
                {key: value for key, value in values.items() if value is not None}
            )

        return result
