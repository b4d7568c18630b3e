"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from spconverter.config import ConversionStatus
from spconverter.processing.file_converter import FileConverter


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Mock File Creation
# =============================================================================

@pytest.fixture
def create_mock_file(tmp_input_dir: Path):
    """Factory fixture for creating placeholder files below tmp_input_dir.

    Creates files with arbitrary bytes; useful for discovery and path
    handling tests that never decode audio.

    Returns:
        Callable that creates a file at a relative path and returns its path.
    """
    def _create(relative: str, size: int = 16) -> Path:
        file_path = tmp_input_dir / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(b"\x00" * size)
        return file_path

    return _create


@pytest.fixture
def mock_file_converter(mocker: MockerFixture):
    """Create a FileConverter mock whose convert() reports success.

    Returns:
        Mock constrained to the FileConverter interface.
    """
    converter = mocker.MagicMock(spec=FileConverter)
    converter.convert.return_value = ConversionStatus.CONVERTED
    return converter
