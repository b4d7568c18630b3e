"""Integration test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from spconverter.processing import BatchOrchestrator, FileConverter


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ directory with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def music_tree(tmp_path: Path, write_audio: Callable[..., Path]) -> Path:
    """Create a small input tree with mixed formats.

    Layout::

        X/a.wav            44.1 kHz stereo float
        X/sub/b.flac       96 kHz mono 24-bit
        X/sub/ignore.txt   not audio
    """
    root = tmp_path / "X"
    write_audio(root / "a.wav", sample_rate=44100, channels=2, subtype="FLOAT")
    write_audio(root / "sub" / "b.flac", sample_rate=96000, channels=1, subtype="PCM_24", format="FLAC")
    (root / "sub" / "ignore.txt").write_text("not audio", encoding="utf-8")
    return root


@pytest.fixture
def orchestrator(mock_output_handler) -> BatchOrchestrator:
    """Create an orchestrator backed by a real FileConverter."""
    converter = FileConverter(output_handler=mock_output_handler)
    return BatchOrchestrator(converter, output_handler=mock_output_handler)
