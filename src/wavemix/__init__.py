import logging

from wavemix.sample import Sample, SineWave, WaveForm, Silence, MultiChannel
from wavemix.composition import Composition
from wavemix.effect import Effect, WaveformEffect, Gain, LinearFadeEcho
from wavemix.io import export, read_wav, read_mp3
from wavemix.errors import (
    WavemixError,
    ShapeMismatchError,
    InvalidChannelError,
    UnknownTrackError,
    ExternalIOError,
    FormatDriftError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Sample",
    "SineWave",
    "WaveForm",
    "Silence",
    "MultiChannel",
    "Composition",
    "Effect",
    "WaveformEffect",
    "Gain",
    "LinearFadeEcho",
    "export",
    "read_wav",
    "read_mp3",
    "WavemixError",
    "ShapeMismatchError",
    "InvalidChannelError",
    "UnknownTrackError",
    "ExternalIOError",
    "FormatDriftError",
]
