"""MultiChannel — independent mono samples assembled into one sample."""

from __future__ import annotations
from typing import Iterable, List
import numpy as np
from wavemix.errors import ShapeMismatchError
from wavemix.sample._base import Sample


class MultiChannel(Sample):
    """An ordered set of mono samples, one per output channel.

    Channel order is append order: channel 0 is left/first, channel 1 is
    right/second, and so on.  The first channel added fixes the sample rate
    and length; every later channel must match both.

    Each channel is stored as its own duplicate, so changes to the caller's
    objects never leak into the MultiChannel.

    Example::

        tone = SineWave(440.0, 44100, 0.5)
        quiet = SineWave(440.0, 44100, 0.0)

        left_only = MultiChannel.dual(tone, quiet)
        surround = MultiChannel([tone, quiet, quiet, tone])
    """

    def __init__(self, channels: Iterable[Sample] | None = None) -> None:
        """Initialize a MultiChannel, optionally with initial channels.

        Args:
            channels: Optional mono samples to append in order.
                Equivalent to calling add_channel() for each one.

        Raises:
            ShapeMismatchError: If any seed channel is not mono or disagrees
                                with the first on rate or length.
        """
        self._sample_rate = 0
        self._length = 0
        self._channels: List[Sample] = []
        if channels is not None:
            for channel in channels:
                self.add_channel(channel)

    @classmethod
    def dual(cls, left: Sample, right: Sample) -> "MultiChannel":
        """Build a stereo pair.

        Raises:
            ShapeMismatchError: If left and right differ in length or
                                sample rate, or either is not mono.
        """
        if left.length != right.length:
            raise ShapeMismatchError(
                f"Left and right lengths do not match "
                f"({left.length} vs {right.length})"
            )
        if left.sample_rate != right.sample_rate:
            raise ShapeMismatchError(
                f"Left and right sample rates do not match "
                f"({left.sample_rate} vs {right.sample_rate})"
            )
        if left.channels != 1:
            raise ShapeMismatchError(
                f"Left side must be mono, got {left.channels} channels"
            )
        if right.channels != 1:
            raise ShapeMismatchError(
                f"Right side must be mono, got {right.channels} channels"
            )
        return cls([left, right])

    @classmethod
    def from_wav(cls, path: str) -> "MultiChannel":
        """Load a WAV file, one channel per file channel."""
        from wavemix.io import read_wav

        return read_wav(path)

    @classmethod
    def from_mp3(cls, path: str) -> "MultiChannel":
        """Decode an MP3 file, one channel per stream channel."""
        from wavemix.io import read_mp3

        return read_mp3(path)

    # ── Build ────────────────────────────────────────────────────────────────

    def add_channel(self, sample: Sample) -> "MultiChannel":
        """Append a mono sample as the next channel.

        Args:
            sample: A single-channel Sample.

        Returns:
            Self, for chaining.

        Raises:
            ShapeMismatchError: If sample is not mono, or its sample rate or
                                length differs from the channels already held.
        """
        if sample.channels != 1:
            raise ShapeMismatchError(
                f"Only mono samples can be added as a channel, "
                f"got {sample.channels} channels"
            )
        if not self._channels:
            self._sample_rate = sample.sample_rate
            self._length = sample.length
        else:
            if sample.sample_rate != self._sample_rate:
                raise ShapeMismatchError(
                    f"Channels must share one sample rate: expected "
                    f"{self._sample_rate}Hz, got {sample.sample_rate}Hz"
                )
            if sample.length != self._length:
                raise ShapeMismatchError(
                    f"Channels must share one length: expected "
                    f"{self._length}, got {sample.length}"
                )
        self._channels.append(sample.duplicate())
        return self

    # ── Sample ────────────────────────────────────────────────────────────────

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def length(self) -> int:
        return self._length

    @property
    def channels(self) -> int:
        return len(self._channels)

    def waveform(self, channel: int) -> np.ndarray | None:
        if not 0 <= channel < len(self._channels):
            return None
        return self._channels[channel].waveform(0)

    def duplicate(self) -> "MultiChannel":
        copy = MultiChannel()
        copy._sample_rate = self._sample_rate
        copy._length = self._length
        copy._channels = [channel.duplicate() for channel in self._channels]
        return copy

    # ── Dunder ────────────────────────────────────────────────────────────────

    def __repr__(self):
        return (
            f"MultiChannel({len(self._channels)} channels, "
            f"{self._length} samples @ {self._sample_rate}Hz)"
        )
