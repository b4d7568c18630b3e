"""Conversion pipeline package for SPConverter."""

from spconverter.processing.batch import BatchOrchestrator
from spconverter.processing.file_converter import FileConverter
from spconverter.processing.models import BatchResult, FileTask, TaskResult
from spconverter.processing.resampler import SampleBufferTransform

__all__ = [
    "BatchOrchestrator",
    "FileConverter",
    "BatchResult",
    "FileTask",
    "TaskResult",
    "SampleBufferTransform",
]
