"""CLI command implementations for SPConverter."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from spconverter.constants import VERSION
from spconverter.exceptions import ConfigError, PathError
from spconverter.config import CANONICAL_TARGET, ConfigGenerator, ConfigResolver
from spconverter.output import ConsoleOutputHandler
from spconverter.processing import BatchOrchestrator, FileConverter
from spconverter.cli.utils import _sanitize_path, _build_loader, _collect_overrides

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"SPConverter v{VERSION}")
        raise typer.Exit()


def convert(
        input_path: Path = typer.Argument(
            ..., help="Audio file or directory to convert"
        ),
        recursive: bool | None = typer.Option(
            None, "--recursive/--no-recursive",
            help="Descend into subdirectories (default: recursive)"
        ),
        sort_files: bool | None = typer.Option(
            None, "--sort/--no-sort",
            help="Process files in relative path order instead of filesystem order"
        ),
        workers: int | None = typer.Option(
            None, "--workers", "-j", min=1,
            help="Number of files converted concurrently"
        ),
        config: Path | None = typer.Option(
            None, "--config", "-c", dir_okay=False, resolve_path=True,
            help="Settings file (default: ./spconverter.yaml if present)"
        ),
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Convert every eligible audio file to 48 kHz, stereo, 16-bit PCM WAV."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)

    console = Console(highlight=False, soft_wrap=True)
    output_handler = ConsoleOutputHandler(console)
    root = _sanitize_path(input_path)

    try:
        settings = _build_loader(config, root).load(
            _collect_overrides(recursive=recursive, sort_files=sort_files, workers=workers)
        )
    except (FileNotFoundError, ConfigError) as e:
        output_handler.error(str(e))
        raise typer.Exit(code=1)

    converter = FileConverter(CANONICAL_TARGET, output_handler=output_handler)
    orchestrator = BatchOrchestrator(converter, settings, output_handler=output_handler)

    try:
        result = orchestrator.run(root)
    except PathError:
        raise typer.Exit(code=1)

    if not result.ok:
        raise typer.Exit(code=1)


def init_config(
        output_path: Path | None = typer.Argument(
            None, dir_okay=False, resolve_path=True,
            help="Where to write the file (default: ./spconverter.yaml)"
        ),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a documented example settings file."""

    console = Console(highlight=False, soft_wrap=True)
    target = output_path or ConfigResolver.get_default_path()
    if target.exists() and not force:
        console.print(f"[red]Error:[/red] {target} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ConfigGenerator().generate(target)
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not write {target}: {e}")
        raise typer.Exit(code=1)
    console.print(f"Wrote configuration to {target}", markup=False)


def validate_config(
        config_path: Path | None = typer.Argument(
            None, dir_okay=False, resolve_path=True,
            help="Settings file to check (default: ./spconverter.yaml)"
        ),
) -> None:
    """Load a settings file and report whether it is valid."""

    console = Console(highlight=False, soft_wrap=True)
    output_handler = ConsoleOutputHandler(console)
    try:
        loader = _build_loader(config_path)
        settings = loader.load()
    except (FileNotFoundError, ConfigError) as e:
        output_handler.error(str(e))
        raise typer.Exit(code=1)

    output_handler.info(f"Configuration OK ({loader.source_description})")
    for key, value in settings.model_dump().items():
        output_handler.info(f"  {key}: {value}")
