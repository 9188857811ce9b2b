"""
Pytest configuration and fixtures for imageops tests
"""

import numpy as np
import pytest

from imageops.config import get_settings
from imageops.core.image import Image


def make_gradient(width: int, height: int, alpha: int = 255) -> Image:
    """Gradient RGBA image: red follows x, green follows y, blue constant"""
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, 0] = (xs * 255) // max(width - 1, 1)
    pixels[:, :, 1] = (ys * 255) // max(height - 1, 1)
    pixels[:, :, 2] = 128
    pixels[:, :, 3] = alpha
    return Image(pixels)


@pytest.fixture
def test_image():
    """Create a 64x48 gradient test image"""
    return make_gradient(64, 48)


@pytest.fixture
def wide_image():
    """Create a 100x50 gradient image"""
    return make_gradient(100, 50)


@pytest.fixture
def make_image():
    """Factory for gradient images of arbitrary size"""
    return make_gradient


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides in one test do not leak"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
