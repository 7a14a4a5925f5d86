"""Defaults shared by synthesis, mixing and file export."""

SAMPLE_RATE = 44100  # Hz, CD quality

# Export is always uncompressed 32-bit float WAV.
EXPORT_FORMAT = "WAV"
EXPORT_SUBTYPE = "FLOAT"

# Decoded 16-bit integer samples are divided by this to land in [-1.0, 1.0).
PCM16_SCALE = 32768.0
