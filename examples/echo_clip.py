# examples/echo_clip.py
#
# Cut five seconds out of an audio file and add a fading echo behind it.
#
#   python examples/echo_clip.py song.mp3 10 15

import logging
import sys

from wavemix import Composition, LinearFadeEcho, MultiChannel

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path, start, end = sys.argv[1], float(sys.argv[2]), float(sys.argv[3])
    if path.lower().endswith(".mp3"):
        song = MultiChannel.from_mp3(path)
    else:
        song = MultiChannel.from_wav(path)

    clip = song.sub_range_sec(start, end)
    delay = song.sample_rate // 4  # a quarter second between repeats
    echo = LinearFadeEcho(delay=delay, fade_slope=0.25)

    mix = Composition()
    mix.add_track(clip, 0)
    mix.add_track(echo.apply(clip), 0)

    mix.export("output/echo_clip.wav")
    print(f"Saved {mix.duration_seconds:.2f}s to output/echo_clip.wav")
