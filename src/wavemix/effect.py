"""Effects — transforms from one Sample to a new Sample.

Two base classes:

    Effect
        Works on a whole Sample. Subclasses implement apply(sample).

    WaveformEffect
        Works on one channel's buffer. Subclasses implement
        process(waveform, sample_rate); apply() is provided and runs
        process() on every channel, reassembling the results in order.

Effects never modify their input.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import logging
import numpy as np
from wavemix.composition import Composition
from wavemix.errors import InvalidChannelError
from wavemix.sample import MultiChannel, Sample, WaveForm

logger = logging.getLogger(__name__)

# Echo gains at or below this are treated as silent.
_FADE_EPSILON = 1e-9


class Effect(ABC):
    """Abstract base class for whole-sample transforms."""

    @abstractmethod
    def apply(self, sample: Sample) -> Sample:
        """Return a new Sample derived from ``sample``.

        Args:
            sample: Input sample. Left untouched.

        Returns:
            A new Sample.
        """

    def __call__(self, sample: Sample) -> Sample:
        return self.apply(sample)


class WaveformEffect(Effect):
    """Abstract base class for per-channel transforms.

    Subclasses implement process(). apply() lifts it to multi-channel
    samples: channel ``c`` of the output is ``process(input.waveform(c))``.
    """

    @abstractmethod
    def process(self, waveform: np.ndarray, sample_rate: int) -> Sample:
        """Transform one channel.

        Args:
            waveform:    The channel's float32 buffer (a private copy).
            sample_rate: Sample rate of the channel.

        Returns:
            A mono Sample, normally at the same sample rate.
        """

    def apply(self, sample: Sample) -> Sample:
        """Run process() on each channel and collect the results.

        Raises:
            InvalidChannelError: If the input reports no data for a channel
                                 in range.
            ShapeMismatchError:  If process() returns a non-mono sample, or
                                 results disagree on rate or length.
        """
        out = MultiChannel()
        for channel in range(sample.channels):
            wave = sample.waveform(channel)
            if wave is None:
                raise InvalidChannelError(
                    f"{type(sample).__name__} is missing channel {channel} "
                    f"of {sample.channels}"
                )
            out.add_channel(self.process(wave, sample.sample_rate))
        return out


class Gain(WaveformEffect):
    """Multiply every value by a constant factor."""

    def __init__(self, gain: float) -> None:
        self.gain = gain

    def process(self, waveform: np.ndarray, sample_rate: int) -> Sample:
        return WaveForm(waveform * np.float32(self.gain), sample_rate=sample_rate)

    def __repr__(self) -> str:
        return f"Gain({self.gain})"


class LinearFadeEcho(Effect):
    """A train of repeats, each quieter and later than the last.

    Echo ``i`` (counting from 1) is the input scaled by
    ``1 - i * fade_slope`` and starts ``i * delay`` samples in.  Echoes stop
    once that gain reaches zero, so ``fade_slope=0.2`` gives four repeats at
    gains 0.8, 0.6, 0.4 and 0.2.

    The output holds only the repeats unless ``dry=True``, which also places
    the untouched input at offset 0.

    Example::

        voice = MultiChannel.from_wav("voice.wav")
        tail = LinearFadeEcho(delay=11025, fade_slope=0.25).apply(voice)
        both = LinearFadeEcho(delay=11025, fade_slope=0.25, dry=True)(voice)
    """

    def __init__(self, delay: int, fade_slope: float, dry: bool = False) -> None:
        """Configure the echo.

        Args:
            delay:      Samples between consecutive repeats. Must be >= 0.
            fade_slope: Gain lost per repeat, in (0, 1].
            dry:        Also include the unscaled input at offset 0.

        Raises:
            ValueError: If delay or fade_slope is out of range.
        """
        if not isinstance(delay, (int, np.integer)) or delay < 0:
            raise ValueError(f"delay must be a non-negative integer, got {delay!r}")
        if not 0.0 < fade_slope <= 1.0:
            raise ValueError(f"fade_slope must be in (0, 1], got {fade_slope!r}")

        self.delay = int(delay)
        self.fade_slope = fade_slope
        self.dry = dry

    def apply(self, sample: Sample) -> Composition:
        echo = Composition()
        if self.dry:
            echo.add_track(sample, 0)

        repeat = 1
        fade = 1.0 - self.fade_slope
        while fade > _FADE_EPSILON:
            echo.add_track(sample.scale(fade), repeat * self.delay)
            repeat += 1
            fade = 1.0 - repeat * self.fade_slope

        logger.debug(
            "built echo train: %d repeats every %d samples (length %d)",
            repeat - 1,
            self.delay,
            echo.length,
        )
        return echo

    def __repr__(self) -> str:
        return (
            f"LinearFadeEcho(delay={self.delay}, fade_slope={self.fade_slope}, "
            f"dry={self.dry})"
        )
