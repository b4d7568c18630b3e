"""CLI utility functions for SPConverter."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from spconverter.config import ConfigLoader, ConfigResolver


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _build_loader(config: Optional[Path], input_path: Optional[Path] = None) -> ConfigLoader:
    """Return a loader for the resolved config file, or the built-in defaults."""

    resolved = ConfigResolver(config, input_path=input_path).resolve()
    if resolved is None:
        return ConfigLoader()
    return ConfigLoader.from_yaml(resolved)


def _collect_overrides(**options: Any) -> dict[str, Any]:
    """Drop options the user did not set so config file values stay in effect."""

    return {key: value for key, value in options.items() if value is not None}
