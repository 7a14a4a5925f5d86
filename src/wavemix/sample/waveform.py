"""WaveForm — a stored mono buffer."""

from __future__ import annotations
import numpy as np
from wavemix.constants import SAMPLE_RATE
from wavemix.sample._base import Sample


class WaveForm(Sample):
    """A single channel of already-materialised audio.

    The buffer is copied in at construction and copied out on every
    ``waveform(0)`` call, so neither the caller's array nor the returned
    array ever aliases the stored data.
    """

    def __init__(self, data, sample_rate: int = SAMPLE_RATE) -> None:
        """Store a mono buffer.

        Args:
            data:        Any 1-D sequence of numbers (list, ndarray, …).
            sample_rate: Samples per second (default 44100).

        Raises:
            ValueError: If data is not one-dimensional or sample_rate is not
                        positive.
        """
        buffer = np.array(data, dtype=np.float32)
        if buffer.ndim != 1:
            raise ValueError(
                f"WaveForm expects 1-D data, got an array of shape {buffer.shape}"
            )
        if not isinstance(sample_rate, (int, np.integer)) or sample_rate <= 0:
            raise ValueError(
                f"sample_rate must be a positive integer, got {sample_rate!r}"
            )

        self._data = buffer
        self._sample_rate = int(sample_rate)

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def length(self) -> int:
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        return 1

    def waveform(self, channel: int) -> np.ndarray | None:
        if channel != 0:
            return None
        return self._data.copy()

    def duplicate(self) -> "WaveForm":
        return WaveForm(self._data, sample_rate=self._sample_rate)

    def __repr__(self) -> str:
        return f"WaveForm({self.length} samples @ {self._sample_rate}Hz)"
