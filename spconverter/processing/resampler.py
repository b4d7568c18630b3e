"""Sample buffer transform for SPConverter."""

import logging
from fractions import Fraction

import numpy as np
from scipy.signal import resample_poly

from spconverter.config import ConversionTarget, CANONICAL_TARGET
from spconverter.exceptions import TransformError

logger = logging.getLogger(__name__)


class SampleBufferTransform:
    """Bring an in-memory sample buffer to the target rate and channel layout.

    Buffers are ``(frames, channels)`` float arrays. Row-major storage keeps
    the samples interleaved by channel, while every operation here works
    along the time axis so each channel is filtered on its own.
    """

    def __init__(self, target: ConversionTarget = CANONICAL_TARGET) -> None:
        """Initialize the transform.

        Args:
            target: Descriptor providing the output sample rate and channel count
        """
        self.target = target

    def apply(self, buffer: np.ndarray, source_rate: int) -> np.ndarray:
        """Remap channels and resample ``buffer`` to the target rate.

        Args:
            buffer: Samples shaped ``(frames, channels)`` or ``(frames,)`` for mono
            source_rate: Sample rate of ``buffer`` in Hz

        Returns:
            float64 array shaped ``(ceil(frames * target_rate / source_rate), target_channels)``

        Raises:
            TransformError: If the buffer is empty or malformed, or the rate is invalid
        """
        data = np.asarray(buffer, dtype=np.float64)
        if data.ndim == 1:
            data = data[:, np.newaxis]
        if data.ndim != 2:
            raise TransformError(f"Expected a 2-D sample buffer, got {data.ndim} dimensions")
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise TransformError(f"Cannot resample an empty buffer (shape {data.shape})")
        if source_rate <= 0:
            raise TransformError(f"Invalid source sample rate: {source_rate}")

        remixed = self.remix(data)
        return self.resample(remixed, source_rate)

    def remix(self, data: np.ndarray) -> np.ndarray:
        """Map ``data`` onto the target channel count.

        Fewer channels are repeated cyclically (mono becomes dual mono). More
        channels are folded down: output channel ``k`` averages every source
        channel whose index is congruent to ``k``, so for stereo output even
        channels feed the left side and odd channels the right.
        """
        source_channels = data.shape[1]
        target_channels = self.target.channels
        if source_channels == target_channels:
            return data
        if source_channels < target_channels:
            return data[:, [k % source_channels for k in range(target_channels)]]
        return np.column_stack(
            [data[:, k::target_channels].mean(axis=1) for k in range(target_channels)]
        )

    def resample(self, data: np.ndarray, source_rate: int) -> np.ndarray:
        """Polyphase resample every channel of ``data`` to the target rate."""
        ratio = Fraction(self.target.sample_rate, source_rate)
        up, down = ratio.numerator, ratio.denominator
        if up == down:
            return data.copy()

        logger.debug("Resampling %d frames %d Hz -> %d Hz (up=%d, down=%d)",
                     data.shape[0], source_rate, self.target.sample_rate, up, down)
        try:
            resampled = resample_poly(data, up, down, axis=0)
        except (ValueError, MemoryError) as e:
            raise TransformError(f"Resampling from {source_rate} Hz failed: {e}") from e
        return np.asarray(resampled, dtype=np.float64)
