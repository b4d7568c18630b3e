"""Pydantic models for SPConverter configuration."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from spconverter.config.enums import SampleFormat, ContainerKind
from spconverter.constants import ALLOWED_EXTENSIONS, CONVERTED_SUFFIX


class ConversionTarget(BaseModel):
    """Descriptor every transformed output file is written with."""

    model_config = ConfigDict(frozen=True)

    sample_rate: int = Field(..., gt=0, description="Output sample rate in Hz")
    channels: int = Field(..., ge=1, description="Output channel count")
    sample_format: SampleFormat
    container: ContainerKind

    @property
    def soundfile_subtype(self) -> str:
        """Return the SoundFile subtype string for the target encoding."""
        return self.sample_format.value

    @property
    def soundfile_format(self) -> str:
        """Return the SoundFile major format string for the target container."""
        return self.container.value


class ConverterSettings(BaseModel):
    """User-editable batch settings.

    Immutable once built; handed to the orchestrator and the file discovery
    at construction time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    extensions: tuple[str, ...] = Field(
        ALLOWED_EXTENSIONS, description="File extensions eligible for conversion (case-sensitive)"
    )
    suffix: str = Field(CONVERTED_SUFFIX, min_length=1, description="Suffix added to converted names")
    recursive: bool = Field(True, description="Descend into subdirectories")
    sort_files: bool = Field(False, description="Sort discovered files by relative path")
    workers: int = Field(1, ge=1, description="Number of files converted concurrently")

    @field_validator("extensions", mode="before")
    @classmethod
    def validate_extensions(cls, value) -> tuple[str, ...]:
        if isinstance(value, str):
            value = [value]
        extensions = []
        for ext in value:
            if not isinstance(ext, str) or not ext.strip():
                raise ValueError(f"Invalid extension: {ext!r}")
            ext = ext.strip()
            extensions.append(ext if ext.startswith(".") else f".{ext}")
        return tuple(extensions)

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError(f"Suffix must not contain path separators: {value!r}")
        return value

    @model_validator(mode="after")
    def validate_non_empty(self) -> Self:
        if not self.extensions:
            raise ValueError("At least one extension must be allowed")
        return self
