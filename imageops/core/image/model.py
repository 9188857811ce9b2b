"""
Image value type.

An Image owns a (height, width, 4) uint8 numpy array holding one RGBA value
per pixel (non-premultiplied, row-major, top-to-bottom). The array is exposed
read-only, so operations allocate a new Image instead of writing in place.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from imageops.core.constants import ErrorMessages, ImageConstants
from imageops.core.exceptions import InvalidParameter

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True, eq=False)
class Image:
    """Simple data object: RGBA pixels and nothing else."""

    pixels: np.ndarray  # Shape (H, W, 4), dtype uint8, RGBA order.

    def __post_init__(self):
        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise InvalidParameter(
                ErrorMessages.INVALID_BUFFER.format(reason=f"expected ndarray, got {type(pixels)}"),
                "pixels",
            )
        if pixels.ndim != 3 or pixels.shape[2] != ImageConstants.CHANNELS:
            raise InvalidParameter(
                ErrorMessages.INVALID_BUFFER.format(reason=f"expected (H, W, 4), got {pixels.shape}"),
                "pixels",
            )
        if pixels.dtype != np.uint8:
            raise InvalidParameter(
                ErrorMessages.INVALID_BUFFER.format(reason=f"expected uint8, got {pixels.dtype}"),
                "pixels",
            )
        height, width = pixels.shape[:2]
        if width <= 0 or height <= 0:
            raise InvalidParameter.empty_image(width, height)

        # Owned C-contiguous copy; later writes to the caller's array do not reach it
        owned = np.array(pixels, order="C", copy=True)
        owned.flags.writeable = False
        object.__setattr__(self, "pixels", owned)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    @property
    def alpha(self) -> np.ndarray:
        """Alpha channel as a (H, W) array view."""
        return self.pixels[:, :, 3]

    def pixel(self, x: int, y: int) -> RGBA:
        """Get the RGBA value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidParameter(
                ErrorMessages.REGION_OUT_OF_BOUNDS.format(
                    region=(x, y), bounds=f"{self.width}x{self.height}"
                ),
                "pixel",
                (x, y),
            )
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def copy(self) -> "Image":
        return Image(self.pixels)

    def to_rgba(self) -> List[RGBA]:
        """Flatten into a row-major list of RGBA tuples."""
        return [tuple(int(c) for c in px) for px in self.pixels.reshape(-1, 4)]

    @classmethod
    def blank(cls, width: int, height: int, color: Sequence[int] = ImageConstants.TRANSPARENT) -> "Image":
        """
        Create an image filled with a single color.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            color: RGBA fill color

        Returns:
            New Image
        """
        if width <= 0 or height <= 0:
            raise InvalidParameter.empty_image(width, height)
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = np.clip(np.asarray(color, dtype=np.int64), 0, 255)
        return cls(pixels)

    @classmethod
    def from_rgba(cls, width: int, height: int, pixels: Iterable[Sequence[int]]) -> "Image":
        """
        Create an image from a flat, row-major sequence of RGBA values.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            pixels: width*height RGBA tuples

        Returns:
            New Image
        """
        if width <= 0 or height <= 0:
            raise InvalidParameter.empty_image(width, height)
        array = np.asarray(list(pixels), dtype=np.int64)
        if array.shape != (width * height, 4):
            raise InvalidParameter(
                ErrorMessages.INVALID_BUFFER.format(
                    reason=f"expected {width * height} RGBA values, got shape {array.shape}"
                ),
                "pixels",
            )
        array = np.clip(array, 0, 255).astype(np.uint8)
        return cls(array.reshape(height, width, 4))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.pixels, other.pixels)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
