"""
Tests for the output assembler.

Tests cover:
- Capacity reservation per channel layout
- Committing data within capacity
- BufferTooSmall rejection
- Single-commit behavior and immutability of the result
"""

import dataclasses
import unittest

from IC_Libs.CombineLib.exceptions import BufferTooSmallError
from IC_Libs.CombineLib.output_assembler import OutputImageBuilder, assemble_output


class TestOutputImageBuilder(unittest.TestCase):
    """Test OutputImageBuilder reservation and commit."""

    def test_capacity_rgb(self):
        builder = OutputImageBuilder(4, 3, "out.png", channel_mode="RGB")
        self.assertEqual(builder.capacity, 4 * 3 * 3)
        self.assertFalse(builder.committed)

    def test_capacity_rgba(self):
        builder = OutputImageBuilder(4, 3, "out.png", channel_mode="RGBA")
        self.assertEqual(builder.capacity, 4 * 3 * 4)

    def test_commit_within_capacity(self):
        builder = OutputImageBuilder(2, 2, "out.png")
        data = bytes(range(12))

        output = builder.commit(data)

        self.assertTrue(builder.committed)
        self.assertEqual(output.data, data)
        self.assertEqual(output.size, (2, 2))
        self.assertEqual(output.name, "out.png")
        self.assertEqual(output.channel_mode, "RGB")
        self.assertEqual(output.capacity, 12)

    def test_commit_shorter_data(self):
        output = OutputImageBuilder(2, 2, "out.png").commit(bytes(5))
        self.assertEqual(len(output.data), 5)

    def test_commit_over_capacity(self):
        builder = OutputImageBuilder(2, 2, "out.png")

        with self.assertRaises(BufferTooSmallError) as ctx:
            builder.commit(bytes(13))

        self.assertEqual(ctx.exception.required, 13)
        self.assertEqual(ctx.exception.capacity, 12)
        self.assertFalse(builder.committed)

    def test_commit_twice(self):
        builder = OutputImageBuilder(1, 1, "out.png")
        builder.commit(bytes(3))

        with self.assertRaises(RuntimeError):
            builder.commit(bytes(3))

    def test_output_is_immutable(self):
        output = OutputImageBuilder(1, 1, "out.png").commit(bytes(3))

        with self.assertRaises(dataclasses.FrozenInstanceError):
            output.data = bytes(3)

    def test_commit_copies_mutable_data(self):
        data = bytearray(3)
        output = OutputImageBuilder(1, 1, "out.png").commit(data)
        data[0] = 99

        self.assertEqual(output.data, bytes(3))

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            OutputImageBuilder(0, 5, "out.png")

    def test_invalid_channel_mode(self):
        with self.assertRaises(ValueError):
            OutputImageBuilder(2, 2, "out.png", channel_mode="CMYK")


class TestAssembleOutput(unittest.TestCase):
    """Test the one-shot assemble_output helper."""

    def test_assemble_exact_capacity(self):
        data = bytes(range(16))
        output = assemble_output(2, 2, "combined.png", data, channel_mode="RGBA")

        self.assertEqual(output.data, data)
        self.assertEqual(output.capacity, 16)

    def test_assemble_too_large(self):
        with self.assertRaises(BufferTooSmallError):
            assemble_output(2, 2, "combined.png", bytes(17), channel_mode="RGBA")


if __name__ == "__main__":
    unittest.main()
