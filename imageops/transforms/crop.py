"""
Aspect-ratio cropping.

Extracts the largest centered rectangle of a given aspect ratio.
"""

import logging
from typing import Tuple

from imageops.core.constants import ErrorMessages
from imageops.core.exceptions import InvalidParameter
from imageops.core.image import Image

logger = logging.getLogger(__name__)


def crop_box_for_ratio(width: int, height: int, ratio_w: int, ratio_h: int) -> Tuple[int, int, int, int]:
    """
    Compute the centered crop box for an aspect ratio.

    Args:
        width: Source width
        height: Source height
        ratio_w: Target aspect ratio width term
        ratio_h: Target aspect ratio height term

    Returns:
        Tuple of (x, y, crop_width, crop_height)
    """
    if ratio_w <= 0:
        raise InvalidParameter.non_positive("ratio_w", ratio_w)
    if ratio_h <= 0:
        raise InvalidParameter.non_positive("ratio_h", ratio_h)
    if width <= 0 or height <= 0:
        raise InvalidParameter.empty_image(width, height)

    # width/ratio_w < height/ratio_h, without float division
    if width * ratio_h < height * ratio_w:
        new_width = width
        new_height = round(width * ratio_h / ratio_w)
    else:
        new_height = height
        new_width = round(height * ratio_w / ratio_h)

    new_width = min(max(new_width, 1), width)
    new_height = min(max(new_height, 1), height)

    x = (width - new_width) // 2
    y = (height - new_height) // 2
    return x, y, new_width, new_height


def crop_region(image: Image, x: int, y: int, width: int, height: int) -> Image:
    """
    Extract an explicit rectangle.

    Args:
        image: Source image
        x: Left column
        y: Top row
        width: Region width
        height: Region height

    Returns:
        New image of size width x height
    """
    if width <= 0 or height <= 0:
        raise InvalidParameter.empty_image(width, height)
    if x < 0 or y < 0 or x + width > image.width or y + height > image.height:
        raise InvalidParameter(
            ErrorMessages.REGION_OUT_OF_BOUNDS.format(
                region=(x, y, width, height), bounds=f"{image.width}x{image.height}"
            ),
            "region",
            (x, y, width, height),
        )

    return Image(image.pixels[y : y + height, x : x + width].copy())


def crop_to_ratio(image: Image, ratio_w: int, ratio_h: int) -> Image:
    """
    Crop the largest centered rectangle with aspect ratio ratio_w:ratio_h.

    Args:
        image: Source image
        ratio_w: Aspect ratio width term (> 0)
        ratio_h: Aspect ratio height term (> 0)

    Returns:
        Cropped image, never larger than the source
    """
    x, y, width, height = crop_box_for_ratio(image.width, image.height, ratio_w, ratio_h)
    logger.debug(
        f"Crop {image.width}x{image.height} to {ratio_w}:{ratio_h} -> "
        f"{width}x{height} at ({x}, {y})"
    )
    return crop_region(image, x, y, width, height)
