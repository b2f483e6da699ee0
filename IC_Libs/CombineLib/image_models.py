"""
Image data models for Image Combiner.

This module defines the data structures passed between pipeline stages.

Classes:
    SourceImage: A decoded input image together with its container format
    OutputImage: Immutable combined pixel data ready for encoding

Type Aliases:
    Dimensions: A (width, height) tuple
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image

from IC_Libs.CombineLib.exceptions import FormatMismatchError

Dimensions = Tuple[int, int]


@dataclass
class SourceImage:
    path: Path
    image: 'Image.Image'
    container_format: str

    @property
    def size(self) -> Dimensions:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


@dataclass(frozen=True)
class OutputImage:
    """Combined pixel data for a single output image.

    Attributes:
        width: Output width in pixels
        height: Output height in pixels
        name: Output file name or path
        data: Raw pixel bytes in ``channel_mode`` layout
        channel_mode: Pillow mode describing the byte layout ('RGB' or 'RGBA')
        capacity: Number of bytes reserved for this image
    """
    width: int
    height: int
    name: str
    data: bytes
    channel_mode: str
    capacity: int

    @property
    def size(self) -> Dimensions:
        return (self.width, self.height)


def ensure_same_format(source_a: SourceImage, source_b: SourceImage) -> str:
    """
    Check that two source images share a container format.

    Args:
        source_a: First decoded image
        source_b: Second decoded image

    Returns:
        The shared container format tag

    Raises:
        FormatMismatchError: If the format tags differ
    """
    if source_a.container_format != source_b.container_format:
        raise FormatMismatchError(source_a.container_format, source_b.container_format)
    return source_a.container_format
