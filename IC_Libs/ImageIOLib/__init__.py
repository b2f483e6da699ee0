"""
ImageIOLib - Image loading and saving

This module decodes source images with their container format and encodes
combined output images back to disk.
"""

from IC_Libs.ImageIOLib.image_import import load_source_image
from IC_Libs.ImageIOLib.image_export import (
    ExportConfig,
    to_pil_image,
    save_output_image,
)

__all__ = [
    "load_source_image",
    "ExportConfig",
    "to_pil_image",
    "save_output_image",
]
