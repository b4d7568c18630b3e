"""Eligible file discovery for SPConverter."""

import os
from pathlib import Path
from typing import Iterable, Iterator


class AudioFileDiscovery:
    """Discover eligible audio files below a directory.

    A file is eligible when it is a regular file and its extension is in the
    allow-list (exact, case-sensitive match). Files are yielded in
    filesystem enumeration order unless sorting is requested.
    """

    def __init__(
        self,
        input_dir: Path,
        extensions: Iterable[str],
        *,
        recursive: bool = True,
        sort_files: bool = False,
    ) -> None:
        """Initialize the file discovery.

        Args:
            input_dir: Directory to search
            extensions: Allowed extensions including the leading dot
            recursive: Whether to descend into subdirectories
            sort_files: Whether to sort the result by relative path
        """
        self.input_dir = input_dir
        self.extensions = frozenset(extensions)
        self.recursive = recursive
        self.sort_files = sort_files

    def is_eligible(self, path: Path) -> bool:
        """Return True when ``path`` is a regular file with an allowed extension."""
        return path.suffix in self.extensions and path.is_file()

    def discover_files(self) -> list[Path]:
        """Discover eligible files in the input directory.

        Returns:
            List of eligible file paths
        """
        files = [path for path in self._iter_candidates() if self.is_eligible(path)]
        if self.sort_files:
            files.sort(key=self._sort_key)
        return files

    def _iter_candidates(self) -> Iterator[Path]:
        if not self.recursive:
            yield from self.input_dir.iterdir()
            return
        for dirpath, _dirnames, filenames in os.walk(self.input_dir):
            base = Path(dirpath)
            for name in filenames:
                yield base / name

    def _sort_key(self, path: Path) -> tuple[str, ...]:
        return path.relative_to(self.input_dir).parts
