"""Configuration loader for SPConverter."""

import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from spconverter.config.default_source import DefaultConfigSource
from spconverter.config.models import ConverterSettings
from spconverter.config.protocols import ConfigSource
from spconverter.config.yaml_source import YAMLConfigSource
from spconverter.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate user-editable batch settings.

    Raw data from a ConfigSource is merged with explicit overrides (usually
    CLI flags) and validated into an immutable ConverterSettings.
    """

    def __init__(self, source: ConfigSource | None = None) -> None:
        """Initialize the configuration loader.

        Args:
            source: Configuration source (uses built-in defaults if None)
        """
        self._source = source or DefaultConfigSource()

    @classmethod
    def from_yaml(cls, config_path: Path) -> "ConfigLoader":
        """Create a loader reading from a YAML file.

        Raises:
            YAMLConfigError: If the file does not exist
        """
        return cls(YAMLConfigSource(config_path))

    @property
    def source_description(self) -> str:
        return self._source.source_description

    def load(self, overrides: Mapping[str, Any] | None = None) -> ConverterSettings:
        """Return validated settings.

        Args:
            overrides: Values that take precedence over the source; entries
                set to None are ignored

        Raises:
            ConfigValidationError: If the merged settings are invalid
        """
        data, _ = self._source.load()
        merged = dict(data)
        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value

        logger.debug("Loading settings from %s: %s", self.source_description, merged)
        try:
            return ConverterSettings(**merged)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid settings in {self.source_description}: {e}", errors=e
            ) from e
