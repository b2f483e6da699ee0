"""
Byte-group pixel interleaving.

Two equal-length pixel buffers are merged by walking them in fixed-size byte
groups. The group starting at offset ``i`` comes from the first buffer when
``i`` is a multiple of ``2 * block_size`` and from the second buffer
otherwise, always read from the same offset of the chosen source. With the
default block size of 4 this takes groups at offsets 0, 8, 16, ... from the
first image and groups at offsets 4, 12, 20, ... from the second, producing
a striped "venetian blind" mix of the two pictures.

Backends:
    - numpy: Vectorized mask select (default)
    - python: Explicit per-group loop built on ``extract_group``

Example:
    >>> interleave_pixels(bytes([1, 1, 1, 1, 2, 2, 2, 2]),
    ...                   bytes([9, 9, 9, 9, 8, 8, 8, 8]))
    b'\\x01\\x01\\x01\\x01\\x08\\x08\\x08\\x08'
"""

from typing import Any, Optional
import logging

import numpy as np
from PIL import Image

from IC_Libs.CombineLib.exceptions import BufferLengthMismatchError, GroupIndexError
from IC_Libs.constants import (
    CHANNEL_MODES,
    DEFAULT_BLOCK_SIZE,
    DEFAULT_CHANNEL_MODE,
    DEFAULT_INTERLEAVE_BACKEND,
    HIGH_DEPTH_MODES,
    INTERLEAVE_BACKENDS,
)

logger = logging.getLogger(__name__)


def get_bytes_per_pixel(channel_mode: str) -> int:
    """
    Get the number of bytes one pixel occupies in a channel layout.

    Raises:
        ValueError: If the channel mode is not supported
    """
    if channel_mode not in CHANNEL_MODES:
        raise ValueError(
            f"Unsupported channel_mode: {channel_mode}. "
            f"Valid modes: {', '.join(sorted(CHANNEL_MODES))}"
        )
    return CHANNEL_MODES[channel_mode]



def to_channel_mode(image: Any, channel_mode: str = DEFAULT_CHANNEL_MODE) -> Any:
    """
    Convert an image to an 8-bit ``channel_mode`` layout.

    16-bit samples are scaled down by 8 bits rather than clamped, so a
    16-bit value of 20000 becomes 78.

    Args:
        image: PIL Image in any mode
        channel_mode: Target layout ('RGB' or 'RGBA')

    Returns:
        PIL Image in ``channel_mode``
    """
    get_bytes_per_pixel(channel_mode)

    if not hasattr(image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode in HIGH_DEPTH_MODES:
        samples = np.asarray(image).astype(np.int64) >> 8
        image = Image.fromarray(np.clip(samples, 0, 255).astype(np.uint8))

    if image.mode == channel_mode:
        return image
    return image.convert(channel_mode)


def takes_first_source(offset: int, block_size: int = DEFAULT_BLOCK_SIZE) -> bool:
    """Return True if the group starting at ``offset`` comes from the first buffer."""
    return offset % (2 * block_size) == 0


def extract_group(data: bytes, offset: int, size: int) -> bytes:
    """
    Read ``size`` consecutive bytes starting at ``offset``.

    Args:
        data: Source byte buffer
        offset: Absolute start offset of the group
        size: Number of bytes to read

    Returns:
        The bytes ``data[offset:offset + size]``

    Raises:
        GroupIndexError: If any part of the window lies outside ``data``
    """
    if offset < 0 or size < 0 or offset + size > len(data):
        raise GroupIndexError(
            f"Group [{offset}, {offset + size}) is out of range "
            f"for a buffer of {len(data)} bytes"
        )
    return bytes(data[offset:offset + size])


def interleave_pixels(
    data_a: bytes,
    data_b: bytes,
    block_size: int = DEFAULT_BLOCK_SIZE,
    backend: Optional[str] = None,
) -> bytes:
    """
    Interleave two pixel buffers in alternating byte groups.

    Args:
        data_a: Pixel bytes of the first image
        data_b: Pixel bytes of the second image (same length as data_a)
        block_size: Bytes per group (default 4)
        backend: 'numpy' or 'python' (None uses the default backend)

    Returns:
        Combined bytes, same length as ``data_a``. A trailing partial group
        is taken from the source selected by its start offset.

    Raises:
        BufferLengthMismatchError: If the buffers differ in length
        ValueError: If block_size is not positive or backend is unknown
    """
    if len(data_a) != len(data_b):
        raise BufferLengthMismatchError(len(data_a), len(data_b))

    if not isinstance(block_size, int) or block_size <= 0:
        raise ValueError(f"block_size must be a positive integer, got {block_size}")

    use_backend = backend if backend else DEFAULT_INTERLEAVE_BACKEND
    if use_backend not in INTERLEAVE_BACKENDS:
        raise ValueError(
            f"Invalid backend: {use_backend}. Use {', '.join(INTERLEAVE_BACKENDS)}."
        )

    logger.debug(
        f"Interleaving {len(data_a)} bytes in groups of {block_size} "
        f"using {use_backend} backend"
    )

    if use_backend == "numpy":
        return _interleave_numpy(data_a, data_b, block_size)
    return _interleave_python(data_a, data_b, block_size)


def _interleave_python(data_a: bytes, data_b: bytes, block_size: int) -> bytes:
    """Group-by-group interleave using explicit window reads."""
    length = len(data_a)
    combined = bytearray(length)

    for offset in range(0, length, block_size):
        size = min(block_size, length - offset)
        source = data_a if takes_first_source(offset, block_size) else data_b
        combined[offset:offset + size] = extract_group(source, offset, size)

    return bytes(combined)


def _interleave_numpy(data_a: bytes, data_b: bytes, block_size: int) -> bytes:
    """Vectorized interleave: select every byte whose group index is even from A."""
    array_a = np.frombuffer(data_a, dtype=np.uint8)
    array_b = np.frombuffer(data_b, dtype=np.uint8)

    # Group index of each byte; even groups start at multiples of 2 * block_size
    group_index = np.arange(array_a.size) // block_size
    from_first = (group_index % 2) == 0

    combined = np.where(from_first, array_a, array_b)
    return combined.astype(np.uint8).tobytes()


def combine_images(
    image_a: Any,
    image_b: Any,
    channel_mode: str = DEFAULT_CHANNEL_MODE,
    block_size: int = DEFAULT_BLOCK_SIZE,
    backend: Optional[str] = None,
) -> bytes:
    """
    Convert two same-size images to raw bytes and interleave them.

    Args:
        image_a: First PIL Image
        image_b: Second PIL Image, same size as image_a
        channel_mode: Byte layout used for both images ('RGB' or 'RGBA')
        block_size: Bytes per interleave group
        backend: Interleave backend (see ``interleave_pixels``)

    Returns:
        Combined pixel bytes in ``channel_mode`` layout
    """
    data_a = to_channel_mode(image_a, channel_mode).tobytes()
    data_b = to_channel_mode(image_b, channel_mode).tobytes()

    return interleave_pixels(data_a, data_b, block_size=block_size, backend=backend)
