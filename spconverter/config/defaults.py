"""Default target and settings for SPConverter."""

from spconverter.config.enums import SampleFormat, ContainerKind
from spconverter.config.models import ConversionTarget, ConverterSettings

# Canonical descriptor for every transformed file: 48 kHz, stereo, 16-bit PCM WAV
CANONICAL_TARGET = ConversionTarget(
    sample_rate=48000,
    channels=2,
    sample_format=SampleFormat.PCM_16,
    container=ContainerKind.WAV,
)

DEFAULT_SETTINGS = ConverterSettings()
