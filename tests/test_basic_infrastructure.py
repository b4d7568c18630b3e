"""Basic test to verify test infrastructure is working."""

from __future__ import annotations

from pathlib import Path

import soundfile as sf


class TestBasicInfrastructure:
    """Basic tests to verify pytest setup and fixtures work."""

    def test_tmp_input_dir_fixture(self, tmp_input_dir: Path) -> None:
        """Test that tmp_input_dir fixture creates a directory."""
        assert tmp_input_dir.exists()
        assert tmp_input_dir.is_dir()
        assert tmp_input_dir.name == "input"

    def test_mock_console_fixture(self, mock_console) -> None:
        """Test that mock_console fixture provides expected methods."""
        assert hasattr(mock_console, "print")
        assert hasattr(mock_console, "log")
        assert hasattr(mock_console, "status")

    def test_mock_output_handler_fixture(self, mock_output_handler) -> None:
        """Test that mock_output_handler fixture provides expected methods."""
        assert hasattr(mock_output_handler, "info")
        assert hasattr(mock_output_handler, "warning")
        assert hasattr(mock_output_handler, "error")

    def test_write_audio_fixture(self, write_audio, tmp_input_dir: Path) -> None:
        """Test that write_audio produces a readable file with the requested layout."""
        path = write_audio(tmp_input_dir / "tone.wav", sample_rate=22050, channels=3, subtype="PCM_24")

        info = sf.info(str(path))
        assert info.samplerate == 22050
        assert info.channels == 3
        assert info.subtype == "PCM_24"
        assert info.frames == 2205
