"""Audio file I/O for Samples, backed by soundfile (libsndfile).

Export always writes uncompressed 32-bit float WAV.  Import yields a
MultiChannel with one WaveForm per file channel:

  read_wav(path)  -- any WAV subtype libsndfile reads, as float32
  read_mp3(path)  -- decoded block by block as 16-bit PCM, then normalised
                     to [-1, 1) by from_frames()
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Iterable, Iterator

import numpy as np
import soundfile as sf

from wavemix.constants import EXPORT_FORMAT, EXPORT_SUBTYPE, PCM16_SCALE
from wavemix.errors import ExternalIOError, FormatDriftError
from wavemix.sample import MultiChannel, Sample, WaveForm

logger = logging.getLogger(__name__)

# Samples per channel in one MP3 frame (MPEG-1 Layer III).
MP3_FRAME_SIZE = 1152


@dataclass(frozen=True)
class DecodedFrame:
    """One block of decoded audio.

    Attributes:
        data:        Interleaved 16-bit integer samples
                     ``[c0, c1, …, c0, c1, …]``.
        sample_rate: Sample rate the decoder reported for this block.
        channels:    Channel count the decoder reported for this block.
    """

    data: np.ndarray
    sample_rate: int
    channels: int


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def export(sample: Sample, path: str) -> None:
    """Write a Sample to a 32-bit float WAV file.

    Frames are interleaved in channel order: for each time index, channel 0,
    then channel 1, and so on.  Parent directories are created
    automatically.

    Args:
        sample: Any Sample with at least one channel.
        path:   Output file path.

    Raises:
        InvalidChannelError: If the sample reports no data for a channel.
        ValueError:          If the sample has no channels.
        ExternalIOError:     If the file cannot be created or written.
    """
    audio = sample.render()
    if audio.shape[0] == 0:
        raise ValueError("Cannot export a sample with no channels.")

    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        sf.write(
            path,
            audio.T,
            sample.sample_rate,
            subtype=EXPORT_SUBTYPE,
            format=EXPORT_FORMAT,
        )
    except (sf.SoundFileError, OSError) as exc:
        raise ExternalIOError(f"Could not write audio file '{path}': {exc}") from exc
    logger.debug(
        "wrote %s: %d channels, %d frames @ %dHz",
        path,
        audio.shape[0],
        audio.shape[1],
        sample.sample_rate,
    )


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------


def read_wav(path: str) -> MultiChannel:
    """Read a WAV file into a MultiChannel.

    Raises:
        FileNotFoundError: If the file does not exist.
        ExternalIOError:   If the file cannot be parsed.
    """
    _require_file(path)
    try:
        with sf.SoundFile(path) as f:
            sample_rate = f.samplerate
            data = f.read(dtype="float32", always_2d=True)
    except sf.SoundFileError as exc:
        raise ExternalIOError(f"Could not read audio file '{path}': {exc}") from exc

    # (frames, channels) -> one row per channel
    song = MultiChannel()
    for wave in data.T:
        song.add_channel(WaveForm(wave, sample_rate=sample_rate))
    logger.debug("read %s: %r", path, song)
    return song


def read_mp3(path: str) -> MultiChannel:
    """Decode an MP3 file into a MultiChannel.

    Raises:
        FileNotFoundError: If the file does not exist.
        FormatDriftError:  If the stream changes rate or channel count.
        ExternalIOError:   If the file cannot be decoded.
    """
    _require_file(path)
    try:
        song = from_frames(_mp3_frames(path))
    except sf.SoundFileError as exc:
        raise ExternalIOError(f"Could not decode audio file '{path}': {exc}") from exc
    logger.debug("decoded %s: %r", path, song)
    return song


def from_frames(frames: Iterable[DecodedFrame]) -> MultiChannel:
    """Accumulate decoded 16-bit frames into a MultiChannel.

    Every frame must report the same sample rate and channel count as the
    first.  Integer samples are divided by 32768 so the result lies in
    [-1.0, 1.0).

    Raises:
        FormatDriftError: If the sample rate or channel count changes.
        ExternalIOError:  If there are no frames, or a frame's data does not
                          divide evenly into its channels.
    """
    rate = 0
    n_channels = 0
    chunks: list[np.ndarray] = []

    for index, frame in enumerate(frames):
        if not chunks:
            rate = frame.sample_rate
            n_channels = frame.channels
        elif frame.sample_rate != rate:
            raise FormatDriftError(
                f"Sample rate changed mid-stream at frame {index}: "
                f"{rate}Hz -> {frame.sample_rate}Hz"
            )
        elif frame.channels != n_channels:
            raise FormatDriftError(
                f"Channel count changed mid-stream at frame {index}: "
                f"{n_channels} -> {frame.channels}"
            )

        data = np.array(frame.data).reshape(-1)
        if n_channels <= 0 or data.shape[0] % n_channels:
            raise ExternalIOError(
                f"Frame {index} holds {data.shape[0]} samples, which does not "
                f"split into {n_channels} channels"
            )
        # Deinterleave: [L0, R0, L1, R1, ...] -> [[L0, L1, ...], [R0, R1, ...]]
        chunks.append(data.reshape(-1, n_channels).T)

    if not chunks:
        raise ExternalIOError("Decoder produced no audio frames")

    planar = np.concatenate(chunks, axis=1).astype(np.float32) / PCM16_SCALE
    return MultiChannel(WaveForm(wave, sample_rate=rate) for wave in planar)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _require_file(path: str) -> None:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Audio file not found: {path}")


def _mp3_frames(path: str) -> Iterator[DecodedFrame]:
    """Yield DecodedFrames from an MP3 file, one MPEG frame's worth at a time."""
    with sf.SoundFile(path) as f:
        for block in f.blocks(
            blocksize=MP3_FRAME_SIZE, dtype="int16", always_2d=True
        ):
            # (frames, channels) in C order is already interleaved
            yield DecodedFrame(block.reshape(-1), f.samplerate, f.channels)
