"""Sample submodule — the sound sources every mix is built from.

Concrete types:

    SineWave(frequency, length, amplitude)
        Mono sinusoid, regenerated on every waveform() call.

    WaveForm(data)
        Mono buffer copied in from any 1-D sequence.

    Silence(length)
        Mono zeros, for gaps and padding.

    MultiChannel([left, right, ...])
        Mono samples assembled into one multi-channel sample.

All inherit from Sample (shared cropping, scaling, render() and export()).
"""

from wavemix.sample._base import Sample
from wavemix.sample.sine import SineWave
from wavemix.sample.waveform import WaveForm
from wavemix.sample.silence import Silence
from wavemix.sample.multichannel import MultiChannel

__all__ = ["Sample", "SineWave", "WaveForm", "Silence", "MultiChannel"]
