"""SPConverter: normalize audio files to 48 kHz, stereo, 16-bit PCM WAV."""

from spconverter.constants import VERSION

__version__ = VERSION
