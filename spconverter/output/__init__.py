"""Output handling package for SPConverter."""
from spconverter.output.protocols import OutputHandler
from spconverter.output.console import ConsoleOutputHandler

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
]
