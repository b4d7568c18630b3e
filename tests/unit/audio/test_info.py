"""Unit tests for audio stream descriptor retrieval."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from spconverter.audio.info import AudioStreamDescriptor, describe, open_input
from spconverter.config import ContainerKind, SampleFormat
from spconverter.exceptions import InputOpenError


def read_descriptor(path: Path) -> AudioStreamDescriptor:
    """Open a file and describe it the way FileConverter does."""
    with open_input(path) as handle:
        return describe(handle, path)


class TestReadDescriptor:
    """Tests for describing real files on disk."""

    def test_get_descriptor_wav(self, write_audio, tmp_path: Path) -> None:
        """Test descriptor of a real 24-bit WAV file."""
        path = write_audio(tmp_path / "tone.wav", sample_rate=44100, channels=1, subtype="PCM_24", duration=0.5)

        descriptor = read_descriptor(path)

        assert descriptor == AudioStreamDescriptor(
            sample_rate=44100,
            channels=1,
            frames=22050,
            sample_format=SampleFormat.PCM_24,
            container=ContainerKind.WAV,
        )

    def test_get_descriptor_flac(self, write_audio, tmp_path: Path) -> None:
        """Test descriptor of a real 16-bit FLAC file."""
        path = write_audio(tmp_path / "tone.flac", subtype="PCM_16", format="FLAC")

        descriptor = read_descriptor(path)

        assert descriptor.container is ContainerKind.FLAC
        assert descriptor.sample_format is SampleFormat.PCM_16

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises InputOpenError."""
        missing = tmp_path / "missing.wav"

        with pytest.raises(InputOpenError) as exc_info:
            read_descriptor(missing)

        assert exc_info.value.path == missing
        assert "Error opening the input file" in str(exc_info.value)

    def test_corrupt_file(self, tmp_path: Path) -> None:
        """Test garbage bytes raise InputOpenError."""
        corrupt = tmp_path / "corrupt.wav"
        corrupt.write_bytes(b"definitely not audio" * 10)

        with pytest.raises(InputOpenError):
            read_descriptor(corrupt)


class TestOpenInput:
    """Tests for open_input and describe."""

    def test_open_input_wraps_soundfile_errors(self, mocker: MockerFixture, tmp_path: Path) -> None:
        """Test soundfile runtime errors are converted."""
        mocker.patch("spconverter.audio.info.sf.SoundFile", side_effect=RuntimeError("boom"))

        with pytest.raises(InputOpenError, match="boom"):
            open_input(tmp_path / "x.wav")

    def test_describe_rejects_bogus_parameters(self, mocker: MockerFixture, tmp_path: Path) -> None:
        """Test a zero sample rate is reported as an open error."""
        handle = mocker.MagicMock()
        handle.samplerate = 0
        handle.channels = 2
        handle.frames = 10
        handle.subtype = "PCM_24"
        handle.format = "WAV"

        with pytest.raises(InputOpenError, match="Unsupported stream parameters"):
            describe(handle, tmp_path / "x.wav")

    def test_describe_maps_unknown_values(self, mocker: MockerFixture, tmp_path: Path) -> None:
        """Test unknown subtypes and formats map to OTHER."""
        handle = mocker.MagicMock()
        handle.samplerate = 8000
        handle.channels = 1
        handle.frames = 10
        handle.subtype = "ULAW"
        handle.format = "AU"

        descriptor = describe(handle, tmp_path / "x.au")

        assert descriptor.sample_format is SampleFormat.OTHER
        assert descriptor.container is ContainerKind.OTHER
