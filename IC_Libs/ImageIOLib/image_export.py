"""
Image export for Image Combiner.

Encodes a committed OutputImage with Pillow and writes it to disk in a given
container format.

Classes:
    ExportConfig: Encoder and file-handling options

Functions:
    to_pil_image: Build a PIL Image from an OutputImage
    save_output_image: Encode and write an OutputImage
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from PIL import Image

from IC_Libs.CombineLib.image_models import OutputImage
from IC_Libs.constants import ALPHA_LESS_FORMATS, DEFAULT_JPEG_QUALITY

logger = logging.getLogger(__name__)


@dataclass
class ExportConfig:
    """Configuration for writing the combined image.

    Attributes:
        quality: JPEG quality 1-100 (default: 95, only for JPEG)
        create_directories: Create output directories if they don't exist (default: True)
        overwrite: Overwrite existing files (default: True)
    """
    quality: int = DEFAULT_JPEG_QUALITY
    create_directories: bool = True
    overwrite: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def get_save_kwargs(self, container_format: str) -> Dict[str, Any]:
        """Get PIL Image.save() kwargs for a container format."""
        # PIL uses "JPEG" not "JPG"
        save_format = str(container_format).upper()
        if save_format == "JPG":
            save_format = "JPEG"

        kwargs = {"format": save_format}

        if save_format == "JPEG":
            kwargs["quality"] = max(1, min(100, self.quality))

        return kwargs


def to_pil_image(output: OutputImage) -> Any:
    """
    Build a PIL Image from committed output data.

    Raises:
        ValueError: If the data does not fill the image
    """
    expected = output.capacity
    if len(output.data) != expected:
        raise ValueError(
            f"Output '{output.name}' holds {len(output.data)} bytes, "
            f"expected {expected} for {output.width}x{output.height} {output.channel_mode}"
        )
    return Image.frombytes(output.channel_mode, output.size, output.data)


def save_output_image(
    output: OutputImage,
    container_format: str,
    config: Optional[ExportConfig] = None,
) -> Path:
    """
    Encode an OutputImage and write it to ``output.name``.

    Args:
        output: Committed output image
        container_format: Pillow format tag to encode with (e.g. 'PNG')
        config: Export options (defaults to ExportConfig())

    Returns:
        Path where the image was saved

    Raises:
        ValueError: If the file exists and overwrite=False
        OSError: If the file cannot be written
    """
    config = config or ExportConfig()
    output_file = Path(output.name).resolve()

    if config.create_directories:
        output_file.parent.mkdir(parents=True, exist_ok=True)

    if output_file.exists() and not config.overwrite:
        raise ValueError(
            f"Output file already exists: {output_file}. "
            f"Set overwrite=True to replace."
        )

    image = to_pil_image(output)
    kwargs = config.get_save_kwargs(container_format)

    # Formats without an alpha channel get RGB data
    if image.mode == "RGBA" and kwargs["format"] in ALPHA_LESS_FORMATS:
        image = image.convert("RGB")

    try:
        image.save(output_file, **kwargs)
    except Exception as e:
        raise OSError(f"Failed to save image to {output_file}: {str(e)}")

    logger.debug(f"Saved combined image to {output_file} ({kwargs['format']})")
    return output_file
