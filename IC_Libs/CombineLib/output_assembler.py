"""
Output assembly for combined pixel data.

The output buffer is built in two phases: ``OutputImageBuilder`` reserves a
capacity of width * height * bytes-per-pixel, and ``commit`` checks the
combined data against it and returns an immutable ``OutputImage``.
"""

from typing import Optional
import logging

from IC_Libs.CombineLib.exceptions import BufferTooSmallError
from IC_Libs.CombineLib.image_models import OutputImage
from IC_Libs.CombineLib.pixel_interleaver import get_bytes_per_pixel
from IC_Libs.constants import DEFAULT_CHANNEL_MODE

logger = logging.getLogger(__name__)


class OutputImageBuilder:
    """Reserves an output buffer and commits combined data into it once."""

    def __init__(
        self,
        width: int,
        height: int,
        name: str,
        channel_mode: str = DEFAULT_CHANNEL_MODE,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Output dimensions must be positive, got {(width, height)}")

        self.width = int(width)
        self.height = int(height)
        self.name = str(name)
        self.channel_mode = channel_mode
        self.capacity = self.width * self.height * get_bytes_per_pixel(channel_mode)
        self._result: Optional[OutputImage] = None

    @property
    def committed(self) -> bool:
        return self._result is not None

    def commit(self, data: bytes) -> OutputImage:
        """
        Place combined data into the reserved buffer.

        Args:
            data: Combined pixel bytes

        Returns:
            The populated, immutable OutputImage

        Raises:
            BufferTooSmallError: If data is longer than the reserved capacity
            RuntimeError: If the builder was already committed
        """
        if self.committed:
            raise RuntimeError(f"Output '{self.name}' has already been committed")

        if len(data) > self.capacity:
            raise BufferTooSmallError(len(data), self.capacity)

        self._result = OutputImage(
            width=self.width,
            height=self.height,
            name=self.name,
            data=bytes(data),
            channel_mode=self.channel_mode,
            capacity=self.capacity,
        )
        logger.debug(f"Committed {len(data)} of {self.capacity} bytes for '{self.name}'")
        return self._result


def assemble_output(
    width: int,
    height: int,
    name: str,
    data: bytes,
    channel_mode: str = DEFAULT_CHANNEL_MODE,
) -> OutputImage:
    """Reserve and commit an output image in one call."""
    return OutputImageBuilder(width, height, name, channel_mode).commit(data)
