"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or session-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf
from pytest_mock import MockerFixture


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_input_dir(tmp_path: Path) -> Path:
    """Create a temporary input directory for test files.

    Returns:
        Path to a clean temporary directory for input files.
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir(parents=True, exist_ok=True)
    return input_dir


# =============================================================================
# Mock Console Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing.

    Returns:
        Mock object that mimics rich.console.Console interface.
    """
    return mocker.MagicMock(spec_set=["print", "log", "status"])


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    Returns:
        Mock object implementing OutputHandler protocol.
    """
    handler = mocker.MagicMock()
    handler.print = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    return handler


# =============================================================================
# Audio Fixtures
# =============================================================================

def sine_buffer(
    sample_rate: int,
    duration: float,
    frequencies: tuple[float, ...],
    amplitude: float = 0.5,
) -> np.ndarray:
    """Return a ``(frames, channels)`` buffer with one sine per channel."""
    frames = int(round(sample_rate * duration))
    t = np.arange(frames) / sample_rate
    return np.column_stack([amplitude * np.sin(2 * np.pi * f * t) for f in frequencies])


@pytest.fixture
def write_audio() -> Callable[..., Path]:
    """Factory fixture writing real audio files with soundfile.

    Each channel carries its own sine so channel order can be verified after
    conversion. ``format`` defaults to WAV so that files named ``.mp3`` can
    be produced without an MP3 encoder.

    Returns:
        Callable that writes an audio file and returns its path.
    """
    def _write(
        path: Path,
        *,
        sample_rate: int = 44100,
        channels: int = 2,
        subtype: str = "FLOAT",
        format: str | None = "WAV",
        duration: float = 0.1,
        frequencies: tuple[float, ...] | None = None,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        freqs = frequencies or tuple(440.0 * (ch + 1) for ch in range(channels))
        data = sine_buffer(sample_rate, duration, freqs)
        sf.write(str(path), data, sample_rate, subtype=subtype, format=format)
        return path

    return _write


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
