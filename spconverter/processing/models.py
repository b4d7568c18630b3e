"""Pydantic models for batch conversion tasks and results."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from spconverter.config import ConversionStatus
from spconverter.exceptions import ConversionError


class FileTask(BaseModel):
    """One input file and the location its converted output is written to."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_path: Path


class TaskResult(BaseModel):
    """Outcome of converting a single FileTask."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    task: FileTask
    status: ConversionStatus
    error: ConversionError | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is not ConversionStatus.FAILED


class BatchResult(BaseModel):
    """Ordered task outcomes of one batch run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    results: list[TaskResult] = Field(default_factory=list, description="Outcomes in task order")
    elapsed_us: int = Field(0, ge=0, description="Wall-clock duration in microseconds")

    def get_by_status(self, status: ConversionStatus) -> list[TaskResult]:
        """Get all results with the given status."""
        return [r for r in self.results if r.status is status]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def converted(self) -> list[TaskResult]:
        return self.get_by_status(ConversionStatus.CONVERTED)

    @property
    def copied(self) -> list[TaskResult]:
        return self.get_by_status(ConversionStatus.COPIED)

    @property
    def failed(self) -> list[TaskResult]:
        return self.get_by_status(ConversionStatus.FAILED)

    @property
    def succeeded(self) -> list[TaskResult]:
        return [r for r in self.results if r.succeeded]

    @property
    def ok(self) -> bool:
        """True when no task failed."""
        return not self.failed
