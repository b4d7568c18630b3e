"""Batch orchestration for SPConverter."""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from rich.console import Console

from spconverter.audio.discovery import AudioFileDiscovery
from spconverter.config import BatchState, ConversionStatus, ConverterSettings, DEFAULT_SETTINGS
from spconverter.exceptions import ConversionError, DirectoryCreationError, PathError
from spconverter.output import ConsoleOutputHandler, OutputHandler
from spconverter.output.naming import (
    build_mirror_root,
    build_mirrored_output_path,
    build_single_output_path,
)
from spconverter.processing.file_converter import FileConverter
from spconverter.processing.models import BatchResult, FileTask, TaskResult

logger = logging.getLogger(__name__)


def progress_line(path: Path, position: int, total: int) -> str:
    """Return the progress line printed before each conversion."""
    return f"Converting.. [{position}/{total}].. {path}"


def _elapsed_us(start: float) -> int:
    return int((time.perf_counter() - start) * 1_000_000)


class BatchOrchestrator:
    """Walk an input file or directory and drive a FileConverter over every eligible file.

    A single eligible file is converted next to itself with the suffix added
    to its name. A directory is mirrored into a sibling ``<name>-SPC``
    directory holding only the converted eligible files. A failing file is
    reported and recorded; the run always continues with the next file.

    Tasks share no mutable state, so with ``settings.workers > 1`` they are
    dispatched to a bounded thread pool. Results are returned in task order
    either way.
    """

    def __init__(
        self,
        converter: FileConverter,
        settings: ConverterSettings = DEFAULT_SETTINGS,
        *,
        console: Optional[Console] = None,
        output_handler: OutputHandler | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            converter: Converter applied to every task
            settings: Batch settings (extensions, suffix, recursion, ordering, workers)
            console: Rich console for output (optional, uses default if None)
            output_handler: Custom output handler (optional, uses console if None)
        """
        self.converter = converter
        self.settings = settings
        self._output_handler = output_handler or ConsoleOutputHandler(console)
        self.state = BatchState.IDLE

    def plan(self, root: Path) -> list[FileTask]:
        """Build the task list for ``root``.

        Args:
            root: An eligible audio file or a directory

        Returns:
            Tasks in processing order

        Raises:
            PathError: If ``root`` does not exist or is neither an eligible
                file nor a directory
        """
        if not root.exists():
            raise PathError(f"{root} does not exist.", path=root)

        if root.is_dir():
            return self._plan_directory(root)

        if root.is_file() and root.suffix in self.settings.extensions:
            return [FileTask(input_path=root, output_path=build_single_output_path(root, self.settings.suffix))]

        raise PathError(f"{root} is neither a regular file nor a directory.", path=root)

    def _plan_directory(self, root: Path) -> list[FileTask]:
        discovery = AudioFileDiscovery(
            root,
            self.settings.extensions,
            recursive=self.settings.recursive,
            sort_files=self.settings.sort_files,
        )
        output_root = build_mirror_root(root, self.settings.suffix)
        return [
            FileTask(
                input_path=path,
                output_path=build_mirrored_output_path(path, root, output_root, self.settings.suffix),
            )
            for path in discovery.discover_files()
        ]

    def run(self, root: Path) -> BatchResult:
        """Convert every eligible file under ``root``.

        Args:
            root: An eligible audio file or a directory

        Returns:
            BatchResult with one TaskResult per task, in task order

        Raises:
            PathError: If ``root`` cannot be processed at all; the message and
                the elapsed time are reported before it is raised
        """
        start = time.perf_counter()
        self.state = BatchState.ENUMERATING
        try:
            tasks = self.plan(root)
        except PathError as e:
            self.state = BatchState.DONE
            self._output_handler.print(str(e), markup=False)
            self._report_elapsed(start)
            raise

        if root.is_dir():
            self._ensure_mirror_root(root)

        logger.info("Planned %d task(s) under %s", len(tasks), root)
        self.state = BatchState.CONVERTING
        if self.settings.workers > 1 and len(tasks) > 1:
            results = self._run_parallel(tasks)
        else:
            results = self._run_sequential(tasks)
        self.state = BatchState.DONE

        batch = BatchResult(results=results, elapsed_us=_elapsed_us(start))
        self._output_handler.info(
            f"{len(batch.converted)} converted, {len(batch.copied)} copied, {len(batch.failed)} failed"
        )
        self._output_handler.info(f"Execution Time: {batch.elapsed_us} microseconds")
        return batch

    def _run_sequential(self, tasks: list[FileTask]) -> list[TaskResult]:
        results = []
        for position, task in enumerate(tasks, start=1):
            self._output_handler.info(progress_line(task.input_path, position, len(tasks)))
            results.append(self.run_task(task))
        return results

    def _run_parallel(self, tasks: list[FileTask]) -> list[TaskResult]:
        futures: list[Future[TaskResult]] = []
        with ThreadPoolExecutor(max_workers=self.settings.workers, thread_name_prefix="spconverter") as pool:
            for position, task in enumerate(tasks, start=1):
                self._output_handler.info(progress_line(task.input_path, position, len(tasks)))
                futures.append(pool.submit(self.run_task, task))
        return [future.result() for future in futures]

    def run_task(self, task: FileTask) -> TaskResult:
        """Convert a single task, capturing any ConversionError in the result."""
        try:
            self._ensure_parent(task)
            status = self.converter.convert(task.input_path, task.output_path)
        except ConversionError as e:
            if e.path is None:
                e.path = task.input_path
            self._output_handler.error(str(e))
            logger.debug("Conversion of %s failed", task.input_path, exc_info=True)
            return TaskResult(task=task, status=ConversionStatus.FAILED, error=e)
        return TaskResult(task=task, status=status)

    def _ensure_parent(self, task: FileTask) -> None:
        try:
            task.output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"Could not create output directory {task.output_path.parent}: {e}",
                path=task.input_path,
            ) from e

    def _ensure_mirror_root(self, root: Path) -> None:
        output_root = build_mirror_root(root, self.settings.suffix)
        try:
            output_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Each task retries its own parent directory and records the failure
            logger.warning("Could not create output directory %s: %s", output_root, e)

    def _report_elapsed(self, start: float) -> None:
        self._output_handler.info(f"Execution Time: {_elapsed_us(start)} microseconds")
