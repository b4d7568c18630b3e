"""Output path generation for SPConverter."""

from pathlib import Path


def build_converted_name(path: Path, suffix: str) -> str:
    """Return the filename of ``path`` with ``suffix`` inserted before the extension.

    ``song.mp3`` becomes ``song-SPC.mp3`` for the default suffix.
    """
    return f"{path.stem}{suffix}{path.suffix}"


def build_single_output_path(input_path: Path, suffix: str) -> Path:
    """Build the sibling output path for a single input file."""
    return input_path.parent / build_converted_name(input_path, suffix)


def build_mirror_root(input_dir: Path, suffix: str) -> Path:
    """Build the sibling output directory ``<input_dir>-SPC`` for a directory input."""
    if not input_dir.name:
        input_dir = input_dir.resolve()
    return input_dir.parent / f"{input_dir.name}{suffix}"


def build_mirrored_output_path(input_path: Path, input_dir: Path, output_dir: Path, suffix: str) -> Path:
    """Recreate the location of ``input_path`` relative to ``input_dir`` under ``output_dir``.

    Args:
        input_path: File discovered below ``input_dir``
        input_dir: Root of the input tree
        output_dir: Root of the mirror tree
        suffix: Suffix inserted before the file extension

    Returns:
        Output path with the same relative directories and a suffixed filename
    """
    relative = input_path.relative_to(input_dir)
    return output_dir / relative.parent / build_converted_name(relative, suffix)
