"""
Image import for Image Combiner.

Loads a source image from the file system and records the container format
Pillow detected while decoding it. The format tag is what the pipeline uses
to decide whether two inputs are compatible and how the output is encoded.

Functions:
    load_source_image: Decode an image file into a SourceImage
"""

from pathlib import Path
from typing import Union
import logging

from PIL import Image, UnidentifiedImageError

from IC_Libs.CombineLib.image_models import SourceImage

logger = logging.getLogger(__name__)


def load_source_image(file_path: Union[str, Path]) -> SourceImage:
    """
    Load an image from disk together with its container format.

    The format is taken from the decoded file contents, not the extension.

    Args:
        file_path: Path to the image file

    Returns:
        SourceImage holding the fully loaded PIL Image and its format tag

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file or the format cannot be determined
        IOError: If the image cannot be decoded
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")

    try:
        with Image.open(path) as img:
            container_format = img.format
            img.load()
            image = img.copy()
    except UnidentifiedImageError as e:
        raise ValueError(f"Unsupported or unrecognized image format: {path}: {str(e)}")
    except OSError as e:
        raise IOError(f"Failed to load image from {path}: {str(e)}")

    if not container_format:
        raise ValueError(f"Could not determine container format of {path}")

    logger.debug(f"Loaded {path} ({container_format}, {image.mode}, {image.size})")

    return SourceImage(path=path, image=image, container_format=container_format)
