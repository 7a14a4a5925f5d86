"""Silence — a zero-amplitude mono sample for gaps and padding.

Example::

    gap = Silence(length=22050)               # half a second at 44.1 kHz
    pad = Silence.from_seconds(1.5)           # same, sized in seconds

    stereo_gap = MultiChannel.dual(gap, gap)
"""

from __future__ import annotations
import numpy as np
from wavemix.constants import SAMPLE_RATE
from wavemix.sample._base import Sample


class Silence(Sample):
    """A single channel of zeros of fixed length.

    Args:
        length:      Number of samples. Must be >= 0.
        sample_rate: Samples per second (default 44100).

    Raises:
        ValueError: If length is negative or sample_rate is not positive.
    """

    def __init__(self, length: int, sample_rate: int = SAMPLE_RATE) -> None:
        if not isinstance(length, (int, np.integer)) or length < 0:
            raise ValueError(f"length must be a non-negative integer, got {length!r}")
        if not isinstance(sample_rate, (int, np.integer)) or sample_rate <= 0:
            raise ValueError(
                f"sample_rate must be a positive integer, got {sample_rate!r}"
            )

        self._length = int(length)
        self._sample_rate = int(sample_rate)

    @classmethod
    def from_seconds(cls, seconds: float, sample_rate: int = SAMPLE_RATE) -> "Silence":
        """Silence lasting ``seconds``, rounded to the nearest sample."""
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        return cls(round(seconds * sample_rate), sample_rate=sample_rate)

    # ── Sample ────────────────────────────────────────────────────────────────

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def length(self) -> int:
        return self._length

    @property
    def channels(self) -> int:
        return 1

    def waveform(self, channel: int) -> np.ndarray | None:
        if channel != 0:
            return None
        return np.zeros(self._length, dtype=np.float32)

    def duplicate(self) -> "Silence":
        return Silence(self._length, sample_rate=self._sample_rate)

    # ── Dunder ────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"Silence(length={self._length}, sample_rate={self._sample_rate})"
