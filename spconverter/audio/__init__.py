"""Audio inspection package for SPConverter."""

from spconverter.audio.info import AudioStreamDescriptor, describe, open_input
from spconverter.audio.classifier import classify
from spconverter.audio.discovery import AudioFileDiscovery

__all__ = [
    "AudioStreamDescriptor",
    "describe",
    "open_input",
    "classify",
    "AudioFileDiscovery",
]
