"""Single file conversion for SPConverter."""

import logging
import shutil
from pathlib import Path
from typing import Optional

import numpy as np
import soundfile as sf
from rich.console import Console

from spconverter.audio.classifier import classify
from spconverter.audio.info import describe, open_input
from spconverter.config import CANONICAL_TARGET, Classification, ConversionStatus, ConversionTarget
from spconverter.constants import COPY_CHUNK_SIZE
from spconverter.exceptions import (
    CopyError,
    InputOpenError,
    OutputOpenError,
    OutputWriteError,
)
from spconverter.output import ConsoleOutputHandler, OutputHandler
from spconverter.processing.converters import BitDepthConverter, Int16Converter
from spconverter.processing.resampler import SampleBufferTransform

logger = logging.getLogger(__name__)


class FileConverter:
    """Convert one audio file to the canonical target, or copy it when already 16-bit.

    The whole file is decoded into memory, transformed, and written in one
    pass. Every file handle is closed on every exit path, and an output file
    that was opened but not completely written is removed.
    """

    def __init__(
        self,
        target: ConversionTarget = CANONICAL_TARGET,
        *,
        transform: SampleBufferTransform | None = None,
        converter: BitDepthConverter | None = None,
        console: Optional[Console] = None,
        output_handler: OutputHandler | None = None,
    ) -> None:
        """Initialize the file converter.

        Args:
            target: Descriptor every transformed output is written with
            transform: Sample buffer transform (built from ``target`` if None)
            converter: Quantizer matching the target subformat (16-bit if None)
            console: Rich console for output (optional, uses default if None)
            output_handler: Custom output handler (optional, uses console if None)
        """
        self.target = target
        self.transform = transform or SampleBufferTransform(target)
        self.converter = converter or Int16Converter()
        self._output_handler = output_handler or ConsoleOutputHandler(console)

    def convert(self, input_path: Path, output_path: Path) -> ConversionStatus:
        """Convert ``input_path`` and write the result to ``output_path``.

        Args:
            input_path: Source audio file
            output_path: Destination file, created or overwritten

        Returns:
            ConversionStatus.COPIED for the already-16-bit fast path,
            ConversionStatus.CONVERTED otherwise

        Raises:
            InputOpenError: If the input cannot be opened or decoded
            TransformError: If the samples cannot be resampled
            OutputOpenError: If the output cannot be opened for writing
            OutputWriteError: If writing the samples fails
            CopyError: If the byte copy of an already canonical file fails
        """
        with open_input(input_path) as source:
            descriptor = describe(source, input_path)
            classification = classify(descriptor)
            logger.debug("%s: %s -> %s", input_path, descriptor, classification.name)

            if classification is Classification.ALREADY_CANONICAL_SUBFORMAT:
                data = None
            else:
                data = self._read_all(source, input_path)

        if data is None:
            self._output_handler.warning("File is already 16 bit. Copying instead..")
            self.copy(input_path, output_path)
            return ConversionStatus.COPIED

        resampled = self.transform.apply(data, descriptor.sample_rate)
        self._write(output_path, resampled)
        return ConversionStatus.CONVERTED

    def copy(self, input_path: Path, output_path: Path) -> None:
        """Copy ``input_path`` to ``output_path`` byte for byte.

        Raises:
            CopyError: If reading or writing fails
            OutputOpenError: If the destination cannot be opened
        """
        try:
            src = open(input_path, "rb")
        except OSError as e:
            raise CopyError(f"Error copying file {input_path}: {e}", path=input_path) from e

        with src:
            try:
                dst = open(output_path, "wb")
            except OSError as e:
                raise OutputOpenError(f"Failed to open destination file {output_path}: {e}", path=output_path) from e

            completed = False
            try:
                with dst:
                    shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
                completed = True
            except OSError as e:
                raise CopyError(f"Error copying file {input_path}: {e}", path=input_path) from e
            finally:
                if not completed:
                    self._remove_partial(output_path)

    def _read_all(self, source: sf.SoundFile, input_path: Path) -> np.ndarray:
        try:
            return source.read(dtype="float64", always_2d=True)
        except (sf.SoundFileError, RuntimeError, OSError, MemoryError) as e:
            raise InputOpenError(f"Error reading the input file {input_path}: {e}", path=input_path) from e

    def _write(self, output_path: Path, data: np.ndarray) -> None:
        try:
            dest = sf.SoundFile(
                str(output_path), "w",
                samplerate=self.target.sample_rate,
                channels=self.target.channels,
                subtype=self.target.soundfile_subtype,
                format=self.target.soundfile_format,
            )
        except (sf.SoundFileError, RuntimeError, OSError, ValueError, TypeError) as e:
            raise OutputOpenError(f"Error opening the output file {output_path}: {e}", path=output_path) from e

        completed = False
        try:
            with dest:
                dest.write(self.converter.convert(data).astype(self.converter.numpy_dtype, copy=False))
            completed = True
        except (sf.SoundFileError, RuntimeError, OSError) as e:
            raise OutputWriteError(f"Error writing the output file {output_path}: {e}", path=output_path) from e
        finally:
            if not completed:
                self._remove_partial(output_path)

    def _remove_partial(self, output_path: Path) -> None:
        try:
            output_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove partial output %s: %s", output_path, e)
        else:
            logger.debug("Removed partial output %s", output_path)
