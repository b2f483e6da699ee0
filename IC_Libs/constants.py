"""
Constants and configuration values for Image Combiner.

This module centralizes all constant values, magic numbers, and
default settings used throughout the application.
"""

# Interleaving
DEFAULT_BLOCK_SIZE = 4
DEFAULT_INTERLEAVE_BACKEND = "numpy"
INTERLEAVE_BACKENDS = ("numpy", "python")

# Channel layouts (Pillow mode -> bytes per pixel)
DEFAULT_CHANNEL_MODE = "RGB"
# Modes holding more than 8 bits per sample, scaled down on conversion
HIGH_DEPTH_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I")
CHANNEL_MODES = {
    "RGB": 3,
    "RGBA": 4,
}

# Resampling
DEFAULT_RESAMPLE_FILTER = "bilinear"
RESAMPLE_FILTERS = ("box", "bilinear", "hamming", "bicubic", "lanczos")

# Output
DEFAULT_JPEG_QUALITY = 95
ALPHA_LESS_FORMATS = {"JPEG", "BMP"}
