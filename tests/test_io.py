"""Tests for wavemix.io (WAV export/import, MP3 decoding, frame accumulation)."""

import numpy as np
import pytest
import soundfile as sf

from wavemix import (
    Composition,
    ExternalIOError,
    FormatDriftError,
    InvalidChannelError,
    MultiChannel,
    Sample,
    SineWave,
    WaveForm,
    export,
    read_mp3,
    read_wav,
)
from wavemix.io import DecodedFrame, from_frames


def _frame(values, sample_rate=44100, channels=2):
    return DecodedFrame(np.array(values, dtype=np.int16), sample_rate, channels)


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


class TestExport:
    def test_writes_float_wav(self, tmp_path):
        path = tmp_path / "sine.wav"
        SineWave(440.0, 1000, 0.5).export(str(path))
        info = sf.info(str(path))
        assert info.format == "WAV"
        assert info.subtype == "FLOAT"
        assert info.channels == 1
        assert info.samplerate == 44100
        assert info.frames == 1000

    def test_interleaves_channels(self, tmp_path):
        path = tmp_path / "lr.wav"
        stereo = MultiChannel.dual(WaveForm([0.1, 0.2, 0.3]), WaveForm([-0.1, -0.2, -0.3]))
        export(stereo, str(path))
        data, rate = sf.read(str(path), dtype="float32", always_2d=True)
        np.testing.assert_allclose(
            data, [[0.1, -0.1], [0.2, -0.2], [0.3, -0.3]], atol=1e-7
        )

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "a" / "b" / "out.wav"
        WaveForm([0.0, 0.5]).export(str(path))
        assert path.exists()

    def test_no_channels(self, tmp_path):
        with pytest.raises(ValueError, match="no channels"):
            export(Composition(), str(tmp_path / "empty.wav"))

    def test_missing_channel(self, tmp_path):
        class OneShort(Sample):
            sample_rate = 8000
            length = 2
            channels = 2

            def waveform(self, channel):
                return np.zeros(2, dtype=np.float32) if channel == 0 else None

            def duplicate(self):
                return OneShort()

        path = tmp_path / "bad.wav"
        with pytest.raises(InvalidChannelError):
            export(OneShort(), str(path))
        assert not path.exists()

    def test_unwritable_path(self, tmp_path):
        target = tmp_path / "dir.wav"
        target.mkdir()
        with pytest.raises(ExternalIOError):
            export(WaveForm([0.0]), str(target))

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")
        with pytest.raises(ExternalIOError, match="Could not write"):
            export(WaveForm([0.0]), str(blocker / "sub" / "out.wav"))
        assert blocker.is_file()


# ---------------------------------------------------------------------------
# WAV import
# ---------------------------------------------------------------------------


class TestReadWav:
    def test_round_trip_stereo(self, tmp_path):
        length, rate = 2000, 22050
        left = SineWave(440.0, length, 0.5, sample_rate=rate)
        right = WaveForm(np.linspace(-1.0, 1.0, length), sample_rate=rate)
        original = MultiChannel.dual(left, right)
        path = tmp_path / "rt.wav"
        original.export(str(path))

        loaded = read_wav(str(path))
        assert loaded.channels == 2
        assert loaded.length == length
        assert loaded.sample_rate == rate
        for c in range(2):
            np.testing.assert_allclose(loaded.waveform(c), original.waveform(c), atol=1e-6)

    def test_left_sine_right_silence(self, tmp_path):
        tone = SineWave(440.0, 44100, 0.5)
        silence = SineWave(440.0, 44100, 0.0)
        path = tmp_path / "left_sine.wav"
        MultiChannel.dual(tone, silence).export(str(path))

        loaded = MultiChannel.from_wav(str(path))
        assert np.any(loaded.waveform(0))
        assert not np.any(loaded.waveform(1))

    def test_round_trip_composition(self, tmp_path):
        tone = SineWave(440.0, 100, 0.5)
        quiet = SineWave(440.0, 100, 0.0)
        comp = Composition()
        left = comp.add_track(MultiChannel.dual(tone, quiet), 0)
        right = comp.add_track(MultiChannel.dual(quiet, tone), 100)
        comp.add_track_id(left, 200)
        comp.add_track_id(right, 300)
        path = tmp_path / "switch_lr.wav"
        comp.export(str(path))

        loaded = read_wav(str(path))
        np.testing.assert_allclose(loaded.render(), comp.render(), atol=1e-6)

    def test_reads_pcm16(self, tmp_path):
        path = tmp_path / "pcm.wav"
        sf.write(str(path), np.array([[0.5], [-0.5]], dtype=np.float32), 8000, subtype="PCM_16")
        loaded = read_wav(str(path))
        assert loaded.channels == 1
        assert loaded.sample_rate == 8000
        np.testing.assert_allclose(loaded.waveform(0), [0.5, -0.5], atol=1e-4)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_wav(str(tmp_path / "nope.wav"))

    def test_garbage_file(self, tmp_path):
        path = tmp_path / "garbage.wav"
        path.write_bytes(b"this is not a wav file at all")
        with pytest.raises(ExternalIOError):
            read_wav(str(path))


# ---------------------------------------------------------------------------
# Frame accumulation / MP3
# ---------------------------------------------------------------------------


class TestFromFrames:
    def test_deinterleaves_and_normalises(self):
        frames = [_frame([16384, -16384, 0, 32767]), _frame([-32768, 8192])]
        song = from_frames(frames)
        assert song.channels == 2
        assert song.length == 3
        assert song.sample_rate == 44100
        np.testing.assert_allclose(song.waveform(0), [0.5, 0.0, -1.0], atol=1e-6)
        np.testing.assert_allclose(song.waveform(1), [-0.5, 32767 / 32768, 0.25], atol=1e-6)

    def test_values_in_range(self):
        extremes = _frame([-32768, 32767], channels=1)
        wave = from_frames([extremes]).waveform(0)
        assert wave.min() >= -1.0
        assert wave.max() <= 1.0

    def test_rate_drift(self):
        frames = [_frame([0, 0]), _frame([0, 0], sample_rate=48000)]
        with pytest.raises(FormatDriftError, match="Sample rate"):
            from_frames(frames)

    def test_channel_drift(self):
        frames = [_frame([0, 0]), _frame([0, 0, 0], channels=1)]
        with pytest.raises(FormatDriftError, match="Channel count"):
            from_frames(frames)

    def test_no_frames(self):
        with pytest.raises(ExternalIOError):
            from_frames([])

    def test_ragged_frame(self):
        with pytest.raises(ExternalIOError):
            from_frames([_frame([1, 2, 3])])

    def test_accepts_generator(self):
        song = from_frames(_frame([100 * i, -100 * i]) for i in range(4))
        assert song.length == 4


class TestReadMp3:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_mp3(str(tmp_path / "nope.mp3"))

    def test_garbage_file(self, tmp_path):
        path = tmp_path / "garbage.mp3"
        path.write_bytes(b"\x00" * 64)
        with pytest.raises(ExternalIOError):
            read_mp3(str(path))

    def test_decodes_stereo(self, tmp_path):
        if "MP3" not in sf.available_formats():
            pytest.skip("libsndfile built without MP3 support")
        rate = 44100
        t = np.arange(rate) / rate
        left = 0.5 * np.sin(2 * np.pi * 440.0 * t)
        stereo = np.stack([left, np.zeros_like(left)], axis=1).astype(np.float32)
        path = tmp_path / "song.mp3"
        sf.write(str(path), stereo, rate, format="MP3", subtype="MPEG_LAYER_III")

        song = MultiChannel.from_mp3(str(path))
        assert song.channels == 2
        assert song.sample_rate == rate
        assert song.length > 0
        assert np.abs(song.waveform(0)).max() > 0.1
        assert np.abs(song.waveform(1)).max() < 0.05
