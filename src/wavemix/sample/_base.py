"""Sample base class — the shared capability every sound source implements."""

from __future__ import annotations
from abc import ABC, abstractmethod
import numpy as np
from wavemix.errors import InvalidChannelError


class Sample(ABC):
    """Abstract base for anything that holds channels of float32 waveform data.

    A Sample is a time-indexed signal with one or more channels.  Every
    channel has exactly ``length`` values and all channels share one
    ``sample_rate``.

    Subclasses must implement:
        sample_rate   (property) -> int
        length        (property) -> int
        channels      (property) -> int
        waveform(channel) -> np.ndarray | None
        duplicate() -> Sample

    Cropping, scaling, render() and export() are provided here and work for
    any subclass without an override.
    """

    # ── Subclass contract ─────────────────────────────────────────────────────

    @property
    @abstractmethod
    def sample_rate(self) -> int:
        """Samples per second. 0 for a container that holds nothing yet."""

    @property
    @abstractmethod
    def length(self) -> int:
        """Number of time steps in every channel."""

    @property
    @abstractmethod
    def channels(self) -> int:
        """Number of independent channels."""

    @abstractmethod
    def waveform(self, channel: int) -> np.ndarray | None:
        """Materialise one channel.

        Args:
            channel: Zero-based channel index.

        Returns:
            A new float32 array of ``length`` values, or None if the sample
            has no such channel. The array is never shared with the sample,
            so callers may modify it freely.
        """

    @abstractmethod
    def duplicate(self) -> "Sample":
        """Return a deep, independently owned copy of this sample."""

    # ── Derived queries ───────────────────────────────────────────────────────

    @property
    def duration_seconds(self) -> float:
        """Length in seconds (0.0 while the sample rate is unset)."""
        if self.sample_rate == 0:
            return 0.0
        return self.length / self.sample_rate

    def render(self) -> np.ndarray:
        """Materialise every channel into one (channels, length) float32 array.

        Raises:
            InvalidChannelError: If any channel in range reports no data.
        """
        rows = []
        for channel in range(self.channels):
            wave = self.waveform(channel)
            if wave is None:
                raise InvalidChannelError(
                    f"{type(self).__name__} is missing channel {channel} "
                    f"of {self.channels}"
                )
            rows.append(wave)
        if not rows:
            return np.zeros((0, self.length), dtype=np.float32)
        return np.vstack(rows).astype(np.float32)

    # ── Cropping ──────────────────────────────────────────────────────────────

    def sub_range(self, start: int, end: int) -> "Sample":
        """Crop every channel to the half-open index window [start, end).

        Args:
            start: First sample index to keep.
            end:   One past the last sample index to keep.

        Returns:
            A MultiChannel of WaveForms at this sample's rate.

        Raises:
            ValueError: If the window is not inside [0, length].
        """
        from wavemix.sample.multichannel import MultiChannel
        from wavemix.sample.waveform import WaveForm

        if not 0 <= start <= end <= self.length:
            raise ValueError(
                f"Crop window [{start} … {end}) falls outside the sample "
                f"(length {self.length})"
            )

        cropped = MultiChannel()
        for wave in self.render():
            cropped.add_channel(WaveForm(wave[start:end], sample_rate=self.sample_rate))
        return cropped

    def sub_range_sec(self, start: float, end: float) -> "Sample":
        """Crop by time. Seconds are rounded to the nearest sample index.

        Args:
            start: Window start in seconds.
            end:   Window end in seconds.
        """
        rate = self.sample_rate
        return self.sub_range(round(start * rate), round(end * rate))

    # ── Transforms / export ───────────────────────────────────────────────────

    def scale(self, gain: float) -> "Sample":
        """Return a same-shape copy with every value multiplied by ``gain``."""
        from wavemix.effect import Gain

        return Gain(gain).apply(self)

    def export(self, path: str) -> None:
        """Write this sample to a 32-bit float WAV file.

        Parent directories are created automatically.

        Args:
            path: Output file path (e.g. ``"renders/mix.wav"``).
        """
        from wavemix.io import export

        export(self, path)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(channels={self.channels}, "
            f"length={self.length} @ {self.sample_rate}Hz)"
        )
