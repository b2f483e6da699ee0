"""
Unit tests for pixel_interleaver module.

Tests the byte-group alternation rule, both backends, boundary validation
and conversion of images to interleaved bytes.
"""

import random

import pytest
from PIL import Image

from IC_Libs.CombineLib.exceptions import BufferLengthMismatchError, GroupIndexError
from IC_Libs.CombineLib.pixel_interleaver import (
    combine_images,
    extract_group,
    get_bytes_per_pixel,
    interleave_pixels,
    takes_first_source,
    to_channel_mode,
)

BACKENDS = ["numpy", "python"]


@pytest.mark.parametrize("backend", BACKENDS)
class TestInterleavePixels:
    """Tests for interleave_pixels with each backend."""

    def test_reference_vector(self, backend):
        """Group at offset 0 comes from A, group at offset 4 from B."""
        data_a = bytes([1, 1, 1, 1, 2, 2, 2, 2])
        data_b = bytes([9, 9, 9, 9, 8, 8, 8, 8])

        result = interleave_pixels(data_a, data_b, backend=backend)

        assert result == bytes([1, 1, 1, 1, 8, 8, 8, 8])

    def test_reads_groups_from_their_own_offset(self, backend):
        data_a = bytes([1] * 4 + [2] * 4 + [3] * 4 + [4] * 4)
        data_b = bytes([9] * 4 + [8] * 4 + [7] * 4 + [6] * 4)

        result = interleave_pixels(data_a, data_b, backend=backend)

        assert result == bytes([1] * 4 + [8] * 4 + [3] * 4 + [6] * 4)

    def test_output_length_matches_input(self, backend):
        for length in (0, 1, 4, 7, 8, 33, 96):
            data = bytes(length)
            assert len(interleave_pixels(data, data, backend=backend)) == length

    def test_trailing_partial_group(self, backend):
        data_a = bytes(range(10))
        data_b = bytes(range(100, 110))

        result = interleave_pixels(data_a, data_b, backend=backend)

        assert result == bytes([0, 1, 2, 3, 104, 105, 106, 107, 8, 9])

    def test_custom_block_size(self, backend):
        data_a = bytes([1, 1, 1, 1, 1, 1])
        data_b = bytes([2, 2, 2, 2, 2, 2])

        result = interleave_pixels(data_a, data_b, block_size=2, backend=backend)

        assert result == bytes([1, 1, 2, 2, 1, 1])

    def test_length_mismatch_is_rejected(self, backend):
        with pytest.raises(BufferLengthMismatchError) as exc_info:
            interleave_pixels(bytes(8), bytes(12), backend=backend)

        assert exc_info.value.length_a == 8
        assert exc_info.value.length_b == 12
        assert isinstance(exc_info.value, ValueError)

    def test_invalid_block_size(self, backend):
        with pytest.raises(ValueError, match="block_size"):
            interleave_pixels(bytes(8), bytes(8), block_size=0, backend=backend)


class TestBackends:
    """Both backends must agree."""

    def test_backends_match_on_random_data(self):
        rng = random.Random(1234)
        for length, block_size in [(64, 4), (27, 4), (30, 3), (100, 7), (5, 8)]:
            data_a = bytes(rng.randrange(256) for _ in range(length))
            data_b = bytes(rng.randrange(256) for _ in range(length))

            fast = interleave_pixels(data_a, data_b, block_size, backend="numpy")
            slow = interleave_pixels(data_a, data_b, block_size, backend="python")

            assert fast == slow

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Invalid backend"):
            interleave_pixels(bytes(4), bytes(4), backend="cupy")

    def test_default_backend(self):
        assert interleave_pixels(bytes([1] * 8), bytes([2] * 8)) == bytes([1] * 4 + [2] * 4)


class TestExtractGroup:
    """Tests for extract_group and the source selection rule."""

    def test_reads_window_at_offset(self):
        data = bytes(range(12))
        assert extract_group(data, 4, 4) == bytes([4, 5, 6, 7])
        assert extract_group(data, 8, 4) == bytes([8, 9, 10, 11])

    def test_out_of_range_read(self):
        data = bytes(range(6))
        with pytest.raises(GroupIndexError):
            extract_group(data, 4, 4)
        with pytest.raises(IndexError):
            extract_group(data, -1, 2)

    def test_source_selection(self):
        assert [takes_first_source(i) for i in range(0, 24, 4)] == [
            True, False, True, False, True, False,
        ]
        assert takes_first_source(6, block_size=3)
        assert not takes_first_source(3, block_size=3)


class TestCombineImages:
    """Tests for combine_images function."""

    def test_rgb_layout(self):
        red = Image.new("RGB", (2, 1), (255, 0, 0))
        blue = Image.new("RGB", (2, 1), (0, 0, 255))

        result = combine_images(red, blue, channel_mode="RGB")

        assert result == bytes([255, 0, 0, 255, 0, 255])

    def test_rgba_layout_alternates_whole_pixels(self):
        red = Image.new("RGBA", (2, 1), (255, 0, 0, 255))
        blue = Image.new("RGBA", (2, 1), (0, 0, 255, 255))

        result = combine_images(red, blue, channel_mode="RGBA")

        assert result == bytes([255, 0, 0, 255, 0, 0, 255, 255])

    def test_converts_input_modes(self):
        gray = Image.new("L", (4, 4), 128)
        color = Image.new("RGBA", (4, 4), (10, 20, 30, 40))

        result = combine_images(gray, color, channel_mode="RGB")

        assert len(result) == 4 * 4 * 3

    def test_unsupported_channel_mode(self):
        image = Image.new("RGB", (2, 2))
        with pytest.raises(ValueError, match="Unsupported channel_mode"):
            combine_images(image, image, channel_mode="CMYK")

    def test_rejects_non_images(self):
        with pytest.raises(TypeError):
            combine_images(b"abc", b"abc")


class TestToChannelMode:
    """Tests for to_channel_mode function."""

    def test_sixteen_bit_is_scaled_not_clamped(self):
        image = Image.new("I;16", (3, 2), 20000)

        result = to_channel_mode(image, "RGB")

        assert result.mode == "RGB"
        assert result.getpixel((0, 0)) == (78, 78, 78)

    def test_32_bit_integer_mode_is_scaled(self):
        image = Image.new("I", (2, 2), 65535)

        result = to_channel_mode(image, "RGBA")

        assert result.getpixel((1, 1)) == (255, 255, 255, 255)

    def test_palette_image_is_expanded(self):
        image = Image.new("RGB", (2, 1), (255, 255, 255)).convert("P")

        result = to_channel_mode(image, "RGB")

        assert result.mode == "RGB"
        assert result.getpixel((0, 0)) == (255, 255, 255)

    def test_matching_mode_is_returned_as_is(self):
        image = Image.new("RGB", (2, 2))
        assert to_channel_mode(image, "RGB") is image

    def test_sixteen_bit_images_combine_with_scaled_values(self):
        image_a = Image.new("I;16", (2, 2), 20000)
        image_b = Image.new("I;16", (2, 2), 40000)

        result = combine_images(image_a, image_b, channel_mode="RGB")

        assert max(result) < 200
        assert set(result) == {78, 156}


def test_bytes_per_pixel():
    assert get_bytes_per_pixel("RGB") == 3
    assert get_bytes_per_pixel("RGBA") == 4
