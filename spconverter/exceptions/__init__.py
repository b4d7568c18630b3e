"""Exception hierarchy for SPConverter."""
from spconverter.exceptions.base import SPConverterError, ConfigError, PathError
from spconverter.exceptions.config import ConfigValidationError, YAMLConfigError
from spconverter.exceptions.audio import (
    ConversionError,
    InputOpenError,
    OutputOpenError,
    OutputWriteError,
    TransformError,
    CopyError,
    DirectoryCreationError,
)

__all__ = [
    "SPConverterError",
    "ConfigError",
    "PathError",
    "ConfigValidationError",
    "YAMLConfigError",
    "ConversionError",
    "InputOpenError",
    "OutputOpenError",
    "OutputWriteError",
    "TransformError",
    "CopyError",
    "DirectoryCreationError",
]
