"""Default configuration source for SPConverter."""

from typing import Any

from spconverter.config.protocols import CURRENT_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide built-in default configuration.

    Implements the ConfigSource protocol; every field falls back to the
    defaults declared on ConverterSettings.
    """

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], int]:
        return {}, CURRENT_SCHEMA_VERSION
