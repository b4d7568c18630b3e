"""Configuration package for SPConverter."""

# Re-export enums
from spconverter.config.enums import (
    SampleFormat,
    ContainerKind,
    Classification,
    ConversionStatus,
    BatchState,
)

# Re-export models
from spconverter.config.models import ConversionTarget, ConverterSettings

# Re-export defaults
from spconverter.config.defaults import CANONICAL_TARGET, DEFAULT_SETTINGS

# Re-export loading
from spconverter.config.loader import ConfigLoader
from spconverter.config.resolver import ConfigResolver
from spconverter.config.generator import ConfigGenerator

__all__ = [
    # Enums
    "SampleFormat",
    "ContainerKind",
    "Classification",
    "ConversionStatus",
    "BatchState",
    # Models
    "ConversionTarget",
    "ConverterSettings",
    # Defaults
    "CANONICAL_TARGET",
    "DEFAULT_SETTINGS",
    # Loading
    "ConfigLoader",
    "ConfigResolver",
    "ConfigGenerator",
]
