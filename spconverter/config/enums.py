"""Configuration enums for SPConverter."""

from enum import Enum, auto


class SampleFormat(str, Enum):
    """Sample encodings reported by libsndfile, independent of the container."""

    PCM_S8 = "PCM_S8"
    PCM_U8 = "PCM_U8"
    PCM_16 = "PCM_16"
    PCM_24 = "PCM_24"
    PCM_32 = "PCM_32"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    VORBIS = "VORBIS"
    OPUS = "OPUS"
    MPEG_LAYER_III = "MPEG_LAYER_III"
    OTHER = "OTHER"

    @classmethod
    def from_subtype(cls, subtype: str) -> "SampleFormat":
        """Map a soundfile subtype string, falling back to OTHER."""
        try:
            return cls(subtype.upper())
        except ValueError:
            return cls.OTHER

    def __str__(self) -> str:  # pragma: no cover - convenience for display
        return self.value


class ContainerKind(str, Enum):
    """Audio containers understood by the converter."""

    WAV = "WAV"
    FLAC = "FLAC"
    OGG = "OGG"
    MP3 = "MP3"
    OTHER = "OTHER"

    @classmethod
    def from_format(cls, major_format: str) -> "ContainerKind":
        """Map a soundfile major format string, falling back to OTHER."""
        try:
            return cls(major_format.upper())
        except ValueError:
            return cls.OTHER

    def __str__(self) -> str:  # pragma: no cover - convenience for display
        return self.value


class Classification(Enum):
    """Outcome of inspecting a stream descriptor."""

    ALREADY_CANONICAL_SUBFORMAT = auto()
    REQUIRES_TRANSFORM = auto()


class ConversionStatus(Enum):
    """Per-file outcome recorded by the batch orchestrator."""

    CONVERTED = auto()
    COPIED = auto()
    FAILED = auto()


class BatchState(Enum):
    """Lifecycle of a single batch run."""

    IDLE = auto()
    ENUMERATING = auto()
    CONVERTING = auto()
    DONE = auto()
