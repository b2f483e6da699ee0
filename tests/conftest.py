"""
Pytest configuration and shared fixtures for Image Combiner tests.

This module provides shared test fixtures used across multiple test modules.
"""

import pytest
from PIL import Image


@pytest.fixture
def make_image_file(tmp_path):
    """
    Provide a factory that writes a solid-color image to a temporary file.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Callable (name, size, color, save_format) -> Path
    """
    def _make(name, size=(8, 4), color=(255, 0, 0), save_format="PNG", mode="RGB"):
        path = tmp_path / name
        Image.new(mode, size, color).save(path, format=save_format)
        return path

    return _make


@pytest.fixture
def gradient_image():
    """
    Provide an RGB image whose pixels all differ.

    Returns:
        8x4 RGB PIL Image
    """
    image = Image.new("RGB", (8, 4))
    pixels = image.load()
    for x in range(8):
        for y in range(4):
            pixels[x, y] = (x * 30, y * 60, (x + y) * 10)
    return image
