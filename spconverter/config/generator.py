"""Configuration file generator for SPConverter."""

from pathlib import Path

import yaml

from spconverter.config.defaults import DEFAULT_SETTINGS
from spconverter.config.models import ConverterSettings
from spconverter.config.protocols import CURRENT_SCHEMA_VERSION


# Template header with documentation
CONFIG_HEADER = """\
# SPConverter Configuration File
# ==============================
#
# Every converted file is written as 48 kHz, stereo, 16-bit PCM WAV.
# Files that are already 16-bit PCM are copied unchanged.
#
# SETTINGS SECTION
# ----------------
#   extensions: File extensions eligible for conversion (case-sensitive)
#   suffix:     Appended to converted file stems and to the output directory
#   recursive:  Descend into subdirectories of the input directory
#   sort_files: Process files in relative path order instead of
#               filesystem enumeration order
#   workers:    Number of files converted concurrently (1 = sequential)
#
# Command line flags take precedence over values in this file.

"""


class ConfigGenerator:
    """Generate example YAML configuration files."""

    def __init__(self, settings: ConverterSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Args:
            output_path: Path where the config file will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        settings = self.settings.model_dump()
        settings['extensions'] = list(settings['extensions'])
        config = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            'settings': settings,
        }

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)
