"""CLI application definition for SPConverter."""

import typer

from spconverter.cli.commands import convert, init_config, validate_config

app = typer.Typer(
    add_completion=False,
    help="Audio normalizer - convert files to 48 kHz, stereo, 16-bit PCM WAV.",
    no_args_is_help=True,
)

# Register commands
app.command(name="convert", help="Convert an audio file or a directory tree")(convert)
app.command(name="init-config", help="Generate an example configuration file")(init_config)
app.command(name="validate-config", help="Validate a configuration file")(validate_config)
