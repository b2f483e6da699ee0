"""
Error types raised by the image combine engine.

Classes:
    ImageCombineError: Base class for all combine failures
    FormatMismatchError: Input images use different container formats
    BufferTooSmallError: Combined data exceeds the reserved output capacity
    BufferLengthMismatchError: Interleaver sources differ in length
    GroupIndexError: A byte-group read fell outside a source buffer
"""


class ImageCombineError(Exception):
    """Base class for errors raised while combining two images."""


class FormatMismatchError(ImageCombineError, ValueError):
    def __init__(self, format_a: str, format_b: str):
        self.format_a = format_a
        self.format_b = format_b
        super().__init__(
            f"Input images have different container formats: {format_a} vs {format_b}"
        )


class BufferTooSmallError(ImageCombineError):
    def __init__(self, required: int, capacity: int):
        self.required = required
        self.capacity = capacity
        super().__init__(
            f"Combined data needs {required} bytes but the output buffer "
            f"only holds {capacity} bytes"
        )


class BufferLengthMismatchError(ImageCombineError, ValueError):
    def __init__(self, length_a: int, length_b: int):
        self.length_a = length_a
        self.length_b = length_b
        super().__init__(
            f"Pixel buffers must have equal length, got {length_a} and {length_b}"
        )


class GroupIndexError(ImageCombineError, IndexError):
    """Raised when a byte-group window does not fit inside its source buffer."""
