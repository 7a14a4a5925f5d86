# examples/switch_lr_sine.py
#
# A one-second tone that hops between the left and right speaker every
# second, built from two stereo tracks replayed at several offsets.

from wavemix import Composition, MultiChannel, SineWave
from wavemix.constants import SAMPLE_RATE

if __name__ == "__main__":
    tone = SineWave(440.0, SAMPLE_RATE, 0.5)
    silence = SineWave(440.0, SAMPLE_RATE, 0.0)

    left = MultiChannel.dual(tone, silence)
    right = MultiChannel.dual(silence, tone)

    comp = Composition()
    left_id = comp.add_track(left, 0)
    right_id = comp.add_track_sec(right, 1.0)
    comp.add_track_id_sec(left_id, 2.0)
    comp.add_track_id_sec(right_id, 3.0)
    comp.add_track_id_sec(left_id, 4.0)

    print(f"Composition: {comp}")
    print(f"Rendering {comp.duration_seconds:.2f}s of audio...")
    comp.export("output/switch_lr_sine.wav")
    print("Saved to output/switch_lr_sine.wav")
