"""
Tests for the Image value type
"""

import numpy as np
import pytest

from imageops.core.exceptions import InvalidParameter
from imageops.core.image import Image


class TestImage:
    """Test Image construction and accessors"""

    def test_dimensions(self, test_image):
        """Test width, height and size"""
        assert test_image.width == 64
        assert test_image.height == 48
        assert test_image.size == (64, 48)
        assert test_image.pixels.shape == (48, 64, 4)

    def test_pixels_are_read_only(self, test_image):
        """Test that the buffer cannot be modified in place"""
        with pytest.raises(ValueError):
            test_image.pixels[0, 0] = (1, 2, 3, 4)

    def test_caller_array_stays_writeable(self):
        """Test that wrapping does not freeze the caller's array"""
        array = np.zeros((2, 3, 4), dtype=np.uint8)
        Image(array)
        array[0, 0] = (1, 2, 3, 4)
        assert array.flags.writeable

    def test_later_writes_to_source_array_not_visible(self):
        """Test that the image owns its pixels after construction"""
        array = np.zeros((2, 2, 4), dtype=np.uint8)
        image = Image(array)
        snapshot = Image.blank(2, 2)

        array[0, 0] = 255

        assert image.pixel(0, 0) == (0, 0, 0, 0)
        assert image == snapshot

    def test_copy_is_independent(self, test_image):
        """Test that copy() gives an equal image with its own buffer"""
        duplicate = test_image.copy()

        assert duplicate == test_image
        assert not np.shares_memory(duplicate.pixels, test_image.pixels)

    @pytest.mark.parametrize(
        "array",
        [
            np.zeros((2, 3), dtype=np.uint8),
            np.zeros((2, 3, 3), dtype=np.uint8),
            np.zeros((2, 3, 4), dtype=np.float32),
            np.zeros((0, 3, 4), dtype=np.uint8),
            np.zeros((3, 0, 4), dtype=np.uint8),
        ],
    )
    def test_invalid_buffers(self, array):
        """Test that malformed buffers are rejected"""
        with pytest.raises(InvalidParameter):
            Image(array)

    def test_not_an_array(self):
        """Test that non-array pixels are rejected"""
        with pytest.raises(InvalidParameter):
            Image([[0, 0, 0, 0]])

    def test_pixel_access(self):
        """Test pixel lookup by column and row"""
        image = Image.from_rgba(2, 2, [(1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 16)])

        assert image.pixel(0, 0) == (1, 2, 3, 4)
        assert image.pixel(1, 0) == (5, 6, 7, 8)
        assert image.pixel(0, 1) == (9, 10, 11, 12)
        assert image.pixel(1, 1) == (13, 14, 15, 16)

    def test_pixel_out_of_bounds(self, test_image):
        """Test that pixel lookup checks bounds"""
        with pytest.raises(InvalidParameter):
            test_image.pixel(64, 0)
        with pytest.raises(InvalidParameter):
            test_image.pixel(0, -1)

    def test_from_rgba_round_trip(self):
        """Test flat RGBA list conversion"""
        values = [(10, 20, 30, 255), (40, 50, 60, 0), (70, 80, 90, 128)]
        image = Image.from_rgba(3, 1, values)

        assert image.size == (3, 1)
        assert image.to_rgba() == values

    def test_from_rgba_clamps_channels(self):
        """Test that out-of-range channel values are clamped"""
        image = Image.from_rgba(1, 1, [(300, -5, 128, 255)])
        assert image.pixel(0, 0) == (255, 0, 128, 255)

    def test_from_rgba_wrong_length(self):
        """Test that the buffer length must equal width*height"""
        with pytest.raises(InvalidParameter):
            Image.from_rgba(2, 2, [(0, 0, 0, 0)] * 3)

    def test_blank(self):
        """Test solid color images"""
        image = Image.blank(4, 3, (255, 0, 0, 255))

        assert image.size == (4, 3)
        assert np.all(image.pixels == np.array([255, 0, 0, 255], dtype=np.uint8))

    def test_blank_defaults_to_transparent(self):
        """Test default fill"""
        image = Image.blank(2, 2)
        assert np.all(image.pixels == 0)

    def test_blank_zero_area(self):
        """Test that zero-area blanks are rejected"""
        with pytest.raises(InvalidParameter):
            Image.blank(0, 10)

    def test_equality_and_copy(self, test_image):
        """Test value equality"""
        duplicate = test_image.copy()

        assert duplicate == test_image
        assert duplicate.pixels is not test_image.pixels
        assert duplicate != Image.blank(64, 48)
        assert test_image != "not an image"

    def test_alpha_channel(self, make_image):
        """Test alpha accessor"""
        image = make_image(5, 4, alpha=200)
        assert image.alpha.shape == (4, 5)
        assert np.all(image.alpha == 200)

    def test_invalid_parameter_is_value_error(self):
        """Test that engine errors can be caught as ValueError"""
        with pytest.raises(ValueError):
            Image.blank(-1, 1)
