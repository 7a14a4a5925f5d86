"""Exceptions raised by wavemix.

Each error also derives from the closest built-in exception, so callers
that only catch ``ValueError`` / ``IndexError`` / ``OSError`` keep working.
"""


class WavemixError(Exception):
    """Base class for every error raised by wavemix."""


class ShapeMismatchError(WavemixError, ValueError):
    """Samples combined together disagree on sample rate, channels or length."""


class InvalidChannelError(WavemixError, IndexError):
    """A channel index the sample does not hold was required."""


class UnknownTrackError(WavemixError, LookupError):
    """A Composition was asked about a track id it never registered."""


class ExternalIOError(WavemixError, OSError):
    """An audio file could not be opened, decoded or written."""


class FormatDriftError(WavemixError, ValueError):
    """A decoded stream changed sample rate or channel count mid-stream."""
