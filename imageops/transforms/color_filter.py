"""
Color matrix filtering.

Applies a 4x5 ColorMatrix to every RGBA pixel in a single pass.
"""

import logging
from typing import Callable, Dict, Union

import cv2

from imageops.core.color_matrix import ColorMatrix, boost_red, grayscale, invert, sepia
from imageops.core.constants import ErrorMessages
from imageops.core.enums import FilterPreset
from imageops.core.exceptions import InvalidParameter
from imageops.core.image import Image

logger = logging.getLogger(__name__)

PRESET_BUILDERS: Dict[FilterPreset, Callable[[], ColorMatrix]] = {
    FilterPreset.GRAYSCALE: grayscale,
    FilterPreset.SEPIA: sepia,
    FilterPreset.INVERT: invert,
    FilterPreset.BOOST_RED: boost_red,
}


def apply_matrix(image: Image, matrix: ColorMatrix) -> Image:
    """
    Transform every pixel by a color matrix.

    Each output channel is M·in + offset, rounded to the nearest integer
    and clamped to [0, 255].

    Args:
        image: Source image
        matrix: Color matrix to apply

    Returns:
        New image with identical dimensions
    """
    # cv2.transform treats the 5th column as an additive offset and saturates uint8 output
    result = cv2.transform(image.pixels, matrix.values)
    logger.debug(f"Applied color matrix to {image.width}x{image.height} image")
    return Image(result)


def preset_matrix(preset: Union[FilterPreset, str]) -> ColorMatrix:
    """
    Build the matrix for a named preset.

    Args:
        preset: FilterPreset member or its string value

    Returns:
        ColorMatrix for the preset
    """
    try:
        preset = FilterPreset(preset)
    except ValueError:
        raise InvalidParameter(
            ErrorMessages.UNKNOWN_PRESET.format(category="filter", name=preset), "preset", preset
        ) from None
    return PRESET_BUILDERS[preset]()


def apply_filter(image: Image, preset: Union[FilterPreset, str]) -> Image:
    """
    Apply a named color filter preset.

    Args:
        image: Source image
        preset: FilterPreset member or its string value

    Returns:
        Filtered image
    """
    return apply_matrix(image, preset_matrix(preset))
