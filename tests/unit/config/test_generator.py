"""Unit tests for the configuration generator."""

from __future__ import annotations

from pathlib import Path

import yaml

from spconverter.config import ConfigGenerator, ConfigLoader, ConverterSettings


class TestConfigGenerator:
    """Tests for ConfigGenerator."""

    def test_generate_default(self, tmp_path: Path) -> None:
        """Test the generated file loads back to the default settings."""
        output = tmp_path / "nested" / "spconverter.yaml"

        ConfigGenerator().generate(output)

        assert output.exists()
        assert ConfigLoader.from_yaml(output).load() == ConverterSettings()

    def test_header_included(self, tmp_path: Path) -> None:
        """Test the documentation header is written by default."""
        output = tmp_path / "spconverter.yaml"
        ConfigGenerator().generate(output)

        assert output.read_text(encoding="utf-8").startswith("# SPConverter Configuration File")

    def test_header_omitted(self, tmp_path: Path) -> None:
        """Test the header can be skipped."""
        output = tmp_path / "spconverter.yaml"
        ConfigGenerator().generate(output, include_header=False)

        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert not output.read_text(encoding="utf-8").startswith("#")
        assert data["schema_version"] == 1
        assert data["settings"]["extensions"] == [".wav", ".flac", ".ogg", ".mp3"]

    def test_custom_settings(self, tmp_path: Path) -> None:
        """Test custom settings are serialized."""
        output = tmp_path / "spconverter.yaml"
        custom = ConverterSettings(recursive=False, workers=3)

        ConfigGenerator(custom).generate(output)

        assert ConfigLoader.from_yaml(output).load() == custom
