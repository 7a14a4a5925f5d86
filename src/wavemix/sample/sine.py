"""SineWave — a mono sinusoid generated on demand."""

from __future__ import annotations
import numpy as np
from wavemix.constants import SAMPLE_RATE
from wavemix.sample._base import Sample


class SineWave(Sample):
    """A pure tone synthesised every time its waveform is requested.

    Nothing is cached: ``waveform(0)`` recomputes

        amplitude * sin(2π * frequency * t / sample_rate)

    for ``t`` in ``[0, length)``. Only channel 0 exists.

    Example::

        a4 = SineWave(frequency=440.0, length=44100, amplitude=0.5)
        silence = SineWave(frequency=440.0, length=44100, amplitude=0.0)
    """

    def __init__(
        self,
        frequency: float,
        length: int,
        amplitude: float = 1.0,
        sample_rate: int = SAMPLE_RATE,
    ) -> None:
        """Create a sine generator.

        Args:
            frequency:   Pitch in Hz.
            length:      Number of samples to generate. Must be >= 0.
            amplitude:   Peak value (1.0 = full scale, 0.0 = silence).
            sample_rate: Samples per second (default 44100).

        Raises:
            ValueError: If length is negative or sample_rate is not positive.
        """
        if not isinstance(length, (int, np.integer)) or length < 0:
            raise ValueError(f"length must be a non-negative integer, got {length!r}")
        if not isinstance(sample_rate, (int, np.integer)) or sample_rate <= 0:
            raise ValueError(
                f"sample_rate must be a positive integer, got {sample_rate!r}"
            )

        self.frequency = frequency
        self.amplitude = amplitude
        self._length = int(length)
        self._sample_rate = int(sample_rate)

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
        t = np.arange(self._length, dtype=np.float64) / self._sample_rate
        audio = self.amplitude * np.sin(2 * np.pi * self.frequency * t)
        return audio.astype(np.float32)

    def duplicate(self) -> "SineWave":
        return SineWave(self.frequency, self._length, self.amplitude, self._sample_rate)

    def __repr__(self) -> str:
        return (
            f"SineWave(frequency={self.frequency}, length={self._length}, "
            f"amplitude={self.amplitude}, sample_rate={self._sample_rate})"
        )
