"""Format classification for SPConverter."""

from spconverter.audio.info import AudioStreamDescriptor
from spconverter.config import Classification, SampleFormat


def classify(descriptor: AudioStreamDescriptor) -> Classification:
    """Decide whether a stream needs transforming.

    Only the subformat is evaluated: 16-bit PCM is already canonical
    whatever its sample rate, channel count or container.
    """
    if descriptor.sample_format is SampleFormat.PCM_16:
        return Classification.ALREADY_CANONICAL_SUBFORMAT
    return Classification.REQUIRES_TRANSFORM
