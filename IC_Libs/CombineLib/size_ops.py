"""
Size negotiation and standardization for Image Combiner.

Two inputs are brought to a common size before their pixels are interleaved.
The common size is the one of the two images with fewer pixels, and only the
other image is resampled to it.

Functions:
    get_smallest_dimensions: Pick the (width, height) pair with fewer pixels
    get_resample_filter: Map a filter name to a Pillow resampling filter
    resize_exact: Resample an image to exact dimensions
    standardize_size: Resize one of two images so both share a size
"""

from functools import partial
from typing import Any, Callable, Optional, Tuple
import logging

from PIL import Image

from IC_Libs.CombineLib.image_models import Dimensions
from IC_Libs.constants import DEFAULT_RESAMPLE_FILTER, RESAMPLE_FILTERS

logger = logging.getLogger(__name__)

# Resample capability: (image, (width, height)) -> image
ResampleFunction = Callable[[Any, Dimensions], Any]

_PIL_FILTERS = {
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def get_smallest_dimensions(dim_a: Dimensions, dim_b: Dimensions) -> Dimensions:
    """
    Return the dimension pair with the smaller pixel count.

    Pairs are compared by width * height only. When both counts are equal
    the second pair is returned.

    Args:
        dim_a: First (width, height) pair
        dim_b: Second (width, height) pair

    Returns:
        The pair with strictly fewer pixels, or ``dim_b`` on a tie

    Raises:
        ValueError: If any component is not positive

    Example:
        >>> get_smallest_dimensions((100, 50), (60, 60))
        (60, 60)
    """
    for dim in (dim_a, dim_b):
        if dim[0] <= 0 or dim[1] <= 0:
            raise ValueError(f"Dimensions must be positive, got {dim}")

    pixels_a = dim_a[0] * dim_a[1]
    pixels_b = dim_b[0] * dim_b[1]

    return dim_a if pixels_a < pixels_b else dim_b


def get_resample_filter(name: str) -> Image.Resampling:
    """
    Look up a Pillow resampling filter by name.

    Args:
        name: One of 'box', 'bilinear', 'hamming', 'bicubic', 'lanczos'

    Returns:
        The matching ``Image.Resampling`` member

    Raises:
        ValueError: If the name is unknown
    """
    key = str(name).strip().lower()
    if key not in _PIL_FILTERS:
        raise ValueError(
            f"Unknown resample filter: {name}. "
            f"Valid filters: {', '.join(RESAMPLE_FILTERS)}"
        )
    return _PIL_FILTERS[key]


def resize_exact(
    image: Any,
    size: Dimensions,
    filter_name: str = DEFAULT_RESAMPLE_FILTER,
) -> Any:
    """
    Resample an image to exactly ``size``, ignoring aspect ratio.

    Args:
        image: PIL Image to resize
        size: Target (width, height)
        filter_name: Resampling filter name (default 'bilinear')

    Returns:
        New PIL Image of the requested size
    """
    if not hasattr(image, "resize"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    return image.resize(size, get_resample_filter(filter_name))


def standardize_size(
    image_a: Any,
    image_b: Any,
    resample: Optional[ResampleFunction] = None,
) -> Tuple[Any, Any]:
    """
    Bring two images to the same size.

    The target size is the smaller of the two by pixel count. If ``image_b``
    already has that size, ``image_a`` is resampled and ``image_b`` returned
    as is; otherwise ``image_b`` is resampled and ``image_a`` returned as is.

    Args:
        image_a: First PIL Image
        image_b: Second PIL Image
        resample: Callable ``(image, (width, height)) -> image``.
                  Defaults to a bilinear ``resize_exact``.

    Returns:
        Tuple of (image_a, image_b) sharing the same size

    Raises:
        Exception: Any error raised by the resample callable
    """
    if resample is None:
        resample = partial(resize_exact, filter_name=DEFAULT_RESAMPLE_FILTER)

    width, height = get_smallest_dimensions(image_a.size, image_b.size)
    logger.info(f"width: {width} height: {height}")

    if tuple(image_b.size) == (width, height):
        if tuple(image_a.size) != (width, height):
            logger.debug(f"Resizing first image from {image_a.size} to {(width, height)}")
            image_a = resample(image_a, (width, height))
        return image_a, image_b

    logger.debug(f"Resizing second image from {image_b.size} to {(width, height)}")
    return image_a, resample(image_b, (width, height))
