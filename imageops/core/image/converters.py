"""
Image format conversion utilities.

Handles in-memory conversions between the engine's Image and:
- NumPy arrays (grayscale, RGB/BGR, RGBA/BGRA)
- PIL Images (any mode)

Nothing here reads or writes files; decoding and encoding stay with the caller.
"""

import logging

import cv2
import numpy as np
from PIL import Image as PILImage

from imageops.core.constants import ErrorMessages
from imageops.core.exceptions import InvalidParameter
from imageops.core.image.model import Image

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def from_numpy(array: np.ndarray, bgr: bool = False) -> Image:
        """
        Convert NumPy array to Image.

        Args:
            array: Grayscale (H, W), 3-channel or 4-channel array.
                Non-uint8 arrays are clipped to [0, 255].
            bgr: If True, treat color arrays as OpenCV BGR/BGRA order

        Returns:
            Image in RGBA format
        """
        if not isinstance(array, np.ndarray):
            raise InvalidParameter(
                ErrorMessages.INVALID_BUFFER.format(reason=f"expected ndarray, got {type(array)}"),
                "array",
            )

        if array.dtype != np.uint8:
            array = np.clip(np.rint(array), 0, 255).astype(np.uint8)

        if array.ndim == 3 and array.shape[2] == 1:
            array = array[:, :, 0]

        if array.ndim == 2:
            rgba = cv2.cvtColor(array, cv2.COLOR_GRAY2RGBA)
        elif array.ndim == 3 and array.shape[2] == 3:
            code = cv2.COLOR_BGR2RGBA if bgr else cv2.COLOR_RGB2RGBA
            rgba = cv2.cvtColor(array, code)
        elif array.ndim == 3 and array.shape[2] == 4:
            rgba = cv2.cvtColor(array, cv2.COLOR_BGRA2RGBA) if bgr else array.copy()
        else:
            raise InvalidParameter(
                ErrorMessages.INVALID_BUFFER.format(reason=f"unsupported shape {array.shape}"),
                "array",
            )

        return Image(rgba)

    @staticmethod
    def to_numpy(image: Image, bgr: bool = False) -> np.ndarray:
        """
        Convert Image to a new NumPy array.

        Args:
            image: Source image
            bgr: If True, return BGRA (OpenCV order), else RGBA

        Returns:
            (H, W, 4) uint8 array owned by the caller
        """
        if bgr:
            return cv2.cvtColor(image.pixels, cv2.COLOR_RGBA2BGRA)
        return image.pixels.copy()

    @staticmethod
    def from_pil(image: PILImage.Image) -> Image:
        """
        Convert PIL Image to Image.

        Args:
            image: PIL Image in any mode

        Returns:
            Image in RGBA format
        """
        if image.mode != "RGBA":
            logger.debug(f"Converting PIL image from mode {image.mode} to RGBA")
            image = image.convert("RGBA")
        return Image(np.array(image, dtype=np.uint8))

    @staticmethod
    def to_pil(image: Image) -> PILImage.Image:
        """
        Convert Image to PIL Image.

        Args:
            image: Source image

        Returns:
            PIL Image in RGBA mode
        """
        return PILImage.fromarray(image.pixels.copy())


from_numpy = ImageConverters.from_numpy
to_numpy = ImageConverters.to_numpy
from_pil = ImageConverters.from_pil
to_pil = ImageConverters.to_pil
