"""Audio stream descriptor retrieval for SPConverter."""

from pathlib import Path

import soundfile as sf
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spconverter.config import SampleFormat, ContainerKind
from spconverter.exceptions import InputOpenError


class AudioStreamDescriptor(BaseModel):
    """Stream parameters of a source file, fixed for one conversion."""

    model_config = ConfigDict(frozen=True)

    sample_rate: int = Field(..., gt=0)
    channels: int = Field(..., ge=1)
    frames: int = Field(..., ge=0)
    sample_format: SampleFormat
    container: ContainerKind

    @classmethod
    def from_soundfile(cls, handle: sf.SoundFile) -> "AudioStreamDescriptor":
        """Build a descriptor from an open SoundFile handle."""
        return cls(
            sample_rate=handle.samplerate,
            channels=handle.channels,
            frames=handle.frames,
            sample_format=SampleFormat.from_subtype(handle.subtype),
            container=ContainerKind.from_format(handle.format),
        )


def open_input(path: Path) -> sf.SoundFile:
    """Open ``path`` for reading.

    Args:
        path: Path to the audio file

    Returns:
        An open SoundFile; the caller owns and closes it

    Raises:
        InputOpenError: If the file is missing, corrupt or of an unsupported container
    """
    try:
        return sf.SoundFile(str(path), "r")
    except (sf.SoundFileError, RuntimeError, OSError) as e:
        raise InputOpenError(f"Error opening the input file {path}: {e}", path=path) from e


def describe(handle: sf.SoundFile, path: Path) -> AudioStreamDescriptor:
    """Build the descriptor of an open input, reporting bogus stream parameters as an open error."""
    try:
        return AudioStreamDescriptor.from_soundfile(handle)
    except ValidationError as e:
        raise InputOpenError(f"Unsupported stream parameters in {path}: {e}", path=path) from e

