"""Settings file lookup for SPConverter."""

from pathlib import Path


# Names looked up in each search directory, most preferred first
DEFAULT_CONFIG_NAMES = (
    "spconverter.yaml",
    "spconverter.yml",
)


class ConfigResolver:
    """Find the settings file that applies to a conversion run.

    An explicit ``--config`` path always wins. Otherwise the directory being
    converted (or the directory holding the file being converted) is searched
    first, then the current working directory. When nothing is found the
    built-in defaults apply.
    """

    def __init__(self, explicit_path: Path | None = None, *, input_path: Path | None = None) -> None:
        """Initialize the resolver.

        Args:
            explicit_path: Settings file given on the command line
            input_path: File or directory about to be converted, if any
        """
        self.explicit_path = explicit_path
        self.input_path = input_path

    def search_dirs(self) -> list[Path]:
        """Return the directories searched for a settings file, in order."""
        dirs = []
        if self.input_path is not None:
            dirs.append(self.input_path if self.input_path.is_dir() else self.input_path.parent)
        dirs.append(Path.cwd())

        unique = []
        for directory in dirs:
            if directory not in unique:
                unique.append(directory)
        return unique

    def resolve(self) -> Path | None:
        """Return the settings file to load, or None for the built-in defaults.

        Raises:
            FileNotFoundError: If an explicit path was given and does not exist
        """
        if self.explicit_path is not None:
            if not self.explicit_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.explicit_path}")
            return self.explicit_path

        for directory in self.search_dirs():
            for name in DEFAULT_CONFIG_NAMES:
                candidate = directory / name
                if candidate.is_file():
                    return candidate
        return None

    @staticmethod
    def get_default_path() -> Path:
        """Return where ``init-config`` writes a new settings file."""
        return Path.cwd() / DEFAULT_CONFIG_NAMES[0]
