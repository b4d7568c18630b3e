"""Per-file conversion exceptions for SPConverter."""

from pathlib import Path

from spconverter.exceptions.base import SPConverterError


class ConversionError(SPConverterError):
    """Raised when a single file cannot be converted.

    Conversion errors are recoverable at the batch level: the orchestrator
    records them against the failing task and moves on to the next one.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class InputOpenError(ConversionError):
    """Raised when the input file is unreadable, corrupt or of an unsupported container."""


class OutputOpenError(ConversionError):
    """Raised when the output file cannot be opened for writing."""


class TransformError(ConversionError):
    """Raised when the sample buffer cannot be resampled."""


class CopyError(ConversionError):
    """Raised when the byte-for-byte copy of an already canonical file fails."""


class DirectoryCreationError(ConversionError):
    """Raised when the parent directory of an output file cannot be created."""


class OutputWriteError(ConversionError):
    """Raised when writing samples to an already opened output file fails."""
