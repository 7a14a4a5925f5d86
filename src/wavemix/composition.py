"""Composition — the mixer that sums scheduled tracks into one sample.

A track is registered once and can then be scheduled at any number of start
offsets.  Rescheduling refers to the track by id, so the same buffer is
reused for every copy instead of being stored again.

Example::

    left = MultiChannel.dual(tone, quiet)
    right = MultiChannel.dual(quiet, tone)

    comp = Composition()
    l_id = comp.add_track(left, 0)
    r_id = comp.add_track_sec(right, 1.0)
    comp.add_track_id_sec(l_id, 2.0)        # replay left at 2 s
    comp.add_track_id_sec(r_id, 3.0)

    comp.export("switch_lr.wav")
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import List
import numpy as np
from wavemix.errors import InvalidChannelError, ShapeMismatchError, UnknownTrackError
from wavemix.sample import Sample

logger = logging.getLogger(__name__)


@dataclass
class _Track:
    """Internal record of one registered track and every offset it plays at."""

    sample: Sample
    starts: List[int] = field(default_factory=list)  # sample indices


class Composition(Sample):
    """A time-indexed multi-track mix.

    The first track added fixes the sample rate and channel count for the
    whole Composition; later tracks must match.  ``length`` is the latest end
    point over every scheduled copy and only ever grows.

    ``waveform(channel)`` is recomputed on every call: a zero buffer of
    ``length`` samples with each scheduled copy of each track added in at its
    start offset.  Positions no copy reaches stay silent.  Callers that need
    the mix more than once should keep the returned array (or ``render()``).
    """

    def __init__(self) -> None:
        self._sample_rate = 0
        self._channels = 0
        self._length = 0
        self._tracks: List[_Track] = []

    # ── Build ────────────────────────────────────────────────────────────────

    def add_track(self, track: Sample, start: int = 0) -> int:
        """Register a track and schedule it at ``start``.

        Args:
            track: Any Sample. Stored as an independent duplicate.
            start: Sample index at which this copy begins. Must be an int >= 0.

        Returns:
            Track id, usable with add_track_id() to replay the same track.

        Raises:
            ValueError:         If start is not a non-negative integer.
            ShapeMismatchError: If the track's sample rate or channel count
                                differs from the tracks already added.
        """
        self._check_start(start)
        if not self._tracks:
            self._sample_rate = track.sample_rate
            self._channels = track.channels
        else:
            if track.sample_rate != self._sample_rate:
                raise ShapeMismatchError(
                    f"Tracks of one composition must share a sample rate: "
                    f"expected {self._sample_rate}Hz, got {track.sample_rate}Hz"
                )
            if track.channels != self._channels:
                raise ShapeMismatchError(
                    f"Tracks of one composition must share a channel count: "
                    f"expected {self._channels}, got {track.channels}"
                )

        track_id = len(self._tracks)
        self._tracks.append(_Track(track.duplicate()))
        logger.debug("registered track %d: %r", track_id, track)
        self._schedule(track_id, start)
        return track_id

    def add_track_sec(self, track: Sample, start: float) -> int:
        """Like add_track(), with ``start`` in seconds.

        The conversion uses the Composition's sample rate, or the track's
        own rate when this is the first track.
        """
        rate = self._sample_rate if self._tracks else track.sample_rate
        return self.add_track(track, round(start * rate))

    def add_track_id(self, track_id: int, start: int) -> None:
        """Schedule an already registered track at another start offset.

        Raises:
            ValueError:        If start is not a non-negative integer.
            UnknownTrackError: If track_id was never returned by add_track().
        """
        self._lookup(track_id)
        self._check_start(start)
        self._schedule(track_id, start)

    def add_track_id_sec(self, track_id: int, start: float) -> None:
        """Like add_track_id(), with ``start`` in seconds."""
        self.add_track_id(track_id, round(start * self._sample_rate))

    # ── Queries ──────────────────────────────────────────────────────────────

    @property
    def track_count(self) -> int:
        """Number of registered tracks (not schedule entries)."""
        return len(self._tracks)

    def track(self, track_id: int) -> Sample:
        """Return an independent copy of a registered track.

        Raises:
            UnknownTrackError: If track_id is not registered.
        """
        return self._lookup(track_id).sample.duplicate()

    def schedule(self, track_id: int) -> tuple[int, ...]:
        """Start offsets of a registered track, in the order they were added.

        Raises:
            UnknownTrackError: If track_id is not registered.
        """
        return tuple(self._lookup(track_id).starts)

    # ── Sample ────────────────────────────────────────────────────────────────

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def length(self) -> int:
        return self._length

    @property
    def channels(self) -> int:
        return self._channels

    def waveform(self, channel: int) -> np.ndarray | None:
        if not 0 <= channel < self._channels:
            return None

        mix = np.zeros(self._length, dtype=np.float32)
        for track in self._tracks:
            wave = track.sample.waveform(channel)
            if wave is None:
                raise InvalidChannelError(
                    f"{type(track.sample).__name__} track is missing channel "
                    f"{channel} of {self._channels}"
                )
            n = wave.shape[0]
            for start in track.starts:
                mix[start : start + n] += wave
        return mix

    def duplicate(self) -> "Composition":
        copy = Composition()
        copy._sample_rate = self._sample_rate
        copy._channels = self._channels
        copy._length = self._length
        copy._tracks = [
            _Track(track.sample.duplicate(), list(track.starts))
            for track in self._tracks
        ]
        return copy

    # ── Private helpers ─────────────────────────────────────────────────────

    def _lookup(self, track_id: int) -> _Track:
        if not isinstance(track_id, (int, np.integer)) or not (
            0 <= track_id < len(self._tracks)
        ):
            raise UnknownTrackError(
                f"Track {track_id!r} does not exist "
                f"(composition has {len(self._tracks)} tracks)"
            )
        return self._tracks[track_id]

    @staticmethod
    def _check_start(start: int) -> None:
        if not isinstance(start, (int, np.integer)) or start < 0:
            raise ValueError(f"start must be a non-negative sample index, got {start!r}")

    def _schedule(self, track_id: int, start: int) -> None:
        track = self._tracks[track_id]
        track.starts.append(int(start))
        self._length = max(self._length, int(start) + track.sample.length)
        logger.debug(
            "scheduled track %d at %d (composition length %d)",
            track_id,
            start,
            self._length,
        )

    # ── Dunder ────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._tracks)

    def __repr__(self) -> str:
        entries = sum(len(track.starts) for track in self._tracks)
        return (
            f"Composition({len(self._tracks)} tracks, {entries} entries, "
            f"{self._channels} channels, {self._length} samples "
            f"@ {self._sample_rate}Hz)"
        )
