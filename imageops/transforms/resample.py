"""
Resampling operations.

Handles image resizing:
- Scale by factor
- Fixed width, preserving aspect ratio
- Explicit dimensions
"""

import logging
from typing import Union

import cv2

from imageops.core.constants import ErrorMessages
from imageops.core.enums import Interpolation
from imageops.core.exceptions import InvalidParameter
from imageops.core.image import Image

logger = logging.getLogger(__name__)

CV2_INTERPOLATION = {
    Interpolation.NEAREST: cv2.INTER_NEAREST,
    Interpolation.BILINEAR: cv2.INTER_LINEAR,
    Interpolation.BICUBIC: cv2.INTER_CUBIC,
    Interpolation.AREA: cv2.INTER_AREA,
}


def _resolve_interpolation(interpolation: Union[Interpolation, str]) -> int:
    try:
        return CV2_INTERPOLATION[Interpolation(interpolation)]
    except ValueError:
        raise InvalidParameter(
            ErrorMessages.INVALID_PARAMETER.format(param="interpolation", value=interpolation),
            "interpolation",
            interpolation,
        ) from None


def resize(
    image: Image,
    width: int,
    height: int,
    interpolation: Union[Interpolation, str] = Interpolation.BILINEAR,
) -> Image:
    """
    Resize image to explicit dimensions.

    Args:
        image: Source image
        width: Target width (> 0)
        height: Target height (> 0)
        interpolation: Resampling method (default bilinear)

    Returns:
        Resized image
    """
    if width <= 0:
        raise InvalidParameter.non_positive("width", width)
    if height <= 0:
        raise InvalidParameter.non_positive("height", height)

    flag = _resolve_interpolation(interpolation)
    result = cv2.resize(image.pixels, (width, height), interpolation=flag)
    logger.debug(f"Resized {image.width}x{image.height} -> {width}x{height}")
    return Image(result)


def scale(
    image: Image, factor: float, interpolation: Union[Interpolation, str] = Interpolation.BILINEAR
) -> Image:
    """
    Scale image by a factor.

    Args:
        image: Source image
        factor: Scale factor (> 0)
        interpolation: Resampling method (default bilinear)

    Returns:
        Image of size round(width*factor) x round(height*factor)
    """
    if factor <= 0:
        raise InvalidParameter.non_positive("factor", factor)

    width = round(image.width * factor)
    height = round(image.height * factor)
    if width <= 0 or height <= 0:
        raise InvalidParameter(
            ErrorMessages.DEGENERATE_RESULT.format(operation="scale", width=width, height=height),
            "factor",
            factor,
        )

    return resize(image, width, height, interpolation)


def resize_to_width(
    image: Image, target_width: int, interpolation: Union[Interpolation, str] = Interpolation.BILINEAR
) -> Image:
    """
    Resize to a fixed width, keeping the aspect ratio.

    Args:
        image: Source image
        target_width: Target width (> 0)
        interpolation: Resampling method (default bilinear)

    Returns:
        Image of size target_width x round(target_width / aspect_ratio)
    """
    if target_width <= 0:
        raise InvalidParameter.non_positive("target_width", target_width)

    aspect_ratio = image.width / image.height
    target_height = round(target_width / aspect_ratio)
    if target_height <= 0:
        raise InvalidParameter(
            ErrorMessages.DEGENERATE_RESULT.format(
                operation="resize_to_width", width=target_width, height=target_height
            ),
            "target_width",
            target_width,
        )

    return resize(image, target_width, target_height, interpolation)
