"""
CombineLib - Core image combine engine

This module provides dimension negotiation, size standardization,
byte-group pixel interleaving and output assembly.
"""

from IC_Libs.CombineLib.exceptions import (
    ImageCombineError,
    FormatMismatchError,
    BufferTooSmallError,
    BufferLengthMismatchError,
    GroupIndexError,
)
from IC_Libs.CombineLib.image_models import (
    Dimensions,
    SourceImage,
    OutputImage,
    ensure_same_format,
)
from IC_Libs.CombineLib.size_ops import (
    get_smallest_dimensions,
    get_resample_filter,
    resize_exact,
    standardize_size,
)
from IC_Libs.CombineLib.pixel_interleaver import (
    get_bytes_per_pixel,
    extract_group,
    interleave_pixels,
    combine_images,
    to_channel_mode,
)
from IC_Libs.CombineLib.output_assembler import OutputImageBuilder, assemble_output

__all__ = [
    "ImageCombineError",
    "FormatMismatchError",
    "BufferTooSmallError",
    "BufferLengthMismatchError",
    "GroupIndexError",
    "Dimensions",
    "SourceImage",
    "OutputImage",
    "ensure_same_format",
    "get_smallest_dimensions",
    "get_resample_filter",
    "resize_exact",
    "standardize_size",
    "get_bytes_per_pixel",
    "extract_group",
    "interleave_pixels",
    "combine_images",
    "to_channel_mode",
    "OutputImageBuilder",
    "assemble_output",
]
