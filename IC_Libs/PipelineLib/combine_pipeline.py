"""
End-to-end combine pipeline.

Runs the stages in order: import both images, check that their container
formats match, standardize their size, interleave their pixel bytes,
assemble the output buffer and encode it to disk. Every stage runs to
completion before the next starts and any error ends the run.

Classes:
    CombineConfig: Options for the combine pipeline

Functions:
    combine_source_images: In-memory part of the pipeline
    run_combine_pipeline: Full pipeline from two paths to a saved file
"""

from dataclasses import dataclass, asdict
from functools import partial
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

from IC_Libs.CombineLib.image_models import OutputImage, SourceImage, ensure_same_format
from IC_Libs.CombineLib.output_assembler import OutputImageBuilder
from IC_Libs.CombineLib.pixel_interleaver import (
    combine_images,
    get_bytes_per_pixel,
    to_channel_mode,
)
from IC_Libs.CombineLib.size_ops import (
    ResampleFunction,
    get_resample_filter,
    resize_exact,
    standardize_size,
)
from IC_Libs.ImageIOLib.image_export import ExportConfig, save_output_image
from IC_Libs.ImageIOLib.image_import import load_source_image
from IC_Libs.constants import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_CHANNEL_MODE,
    DEFAULT_INTERLEAVE_BACKEND,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_RESAMPLE_FILTER,
    INTERLEAVE_BACKENDS,
)

logger = logging.getLogger(__name__)


@dataclass
class CombineConfig:
    """Configuration for the combine pipeline.

    Attributes:
        block_size: Bytes per interleave group (default: 4)
        channel_mode: Pixel byte layout, 'RGB' or 'RGBA' (default: RGB)
        resample_filter: Filter used when resizing (default: bilinear)
        interleave_backend: 'numpy' or 'python' (default: numpy)
        quality: JPEG quality when the inputs are JPEG files (default: 95)
    """
    block_size: int = DEFAULT_BLOCK_SIZE
    channel_mode: str = DEFAULT_CHANNEL_MODE
    resample_filter: str = DEFAULT_RESAMPLE_FILTER
    interleave_backend: str = DEFAULT_INTERLEAVE_BACKEND
    quality: int = DEFAULT_JPEG_QUALITY

    def __post_init__(self):
        """Validate configuration values."""
        if not isinstance(self.block_size, int) or self.block_size <= 0:
            raise ValueError(f"block_size must be a positive integer, got {self.block_size}")

        self.channel_mode = str(self.channel_mode).upper()
        get_bytes_per_pixel(self.channel_mode)

        self.resample_filter = str(self.resample_filter).strip().lower()
        get_resample_filter(self.resample_filter)

        if self.interleave_backend not in INTERLEAVE_BACKENDS:
            raise ValueError(
                f"Invalid interleave_backend: {self.interleave_backend}. "
                f"Use {', '.join(INTERLEAVE_BACKENDS)}."
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CombineConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def get_resampler(self) -> ResampleFunction:
        """Get the resample callable for the configured filter."""
        return partial(resize_exact, filter_name=self.resample_filter)


def combine_source_images(
    source_a: SourceImage,
    source_b: SourceImage,
    output_name: str,
    config: Optional[CombineConfig] = None,
    resample: Optional[ResampleFunction] = None,
) -> OutputImage:
    """
    Combine two decoded images into a committed OutputImage.

    Args:
        source_a: First decoded image
        source_b: Second decoded image
        output_name: Name or path the output will be written to
        config: Pipeline options (defaults to CombineConfig())
        resample: Resample callable overriding the configured filter

    Returns:
        OutputImage sized to the smaller input

    Raises:
        FormatMismatchError: If the inputs use different container formats
        BufferTooSmallError: If the combined data exceeds the output capacity
    """
    config = config or CombineConfig()
    resample = resample or config.get_resampler()

    container_format = ensure_same_format(source_a, source_b)
    logger.debug(f"Both inputs are {container_format}")

    # Palette and 16-bit inputs are brought to 8-bit channels before resampling
    image_a = to_channel_mode(source_a.image, config.channel_mode)
    image_b = to_channel_mode(source_b.image, config.channel_mode)

    image_a, image_b = standardize_size(image_a, image_b, resample=resample)

    builder = OutputImageBuilder(
        image_a.width,
        image_a.height,
        output_name,
        channel_mode=config.channel_mode,
    )

    combined = combine_images(
        image_a,
        image_b,
        channel_mode=config.channel_mode,
        block_size=config.block_size,
        backend=config.interleave_backend,
    )

    return builder.commit(combined)


def run_combine_pipeline(
    image_path_a: Union[str, Path],
    image_path_b: Union[str, Path],
    output_name: str,
    config: Optional[CombineConfig] = None,
) -> Path:
    """
    Combine two image files and write the result.

    The output is encoded in the container format of the inputs.

    Args:
        image_path_a: Path to the first image
        image_path_b: Path to the second image
        output_name: Output file name or path
        config: Pipeline options (defaults to CombineConfig())

    Returns:
        Path where the combined image was saved

    Raises:
        FormatMismatchError: If the inputs use different container formats
        BufferTooSmallError: If the combined data exceeds the output capacity
        FileNotFoundError: If an input file does not exist
        ValueError: If an input cannot be identified or the output path is invalid
        OSError: If an input cannot be decoded or the output cannot be written
    """
    config = config or CombineConfig()

    source_a = load_source_image(image_path_a)
    source_b = load_source_image(image_path_b)

    output = combine_source_images(source_a, source_b, output_name, config=config)

    export_config = ExportConfig(quality=config.quality)
    return save_output_image(output, source_a.container_format, export_config)
