"""
Alpha masking.

Composites a source image against a shape mask: the source pixel is kept
where the mask is opaque and becomes fully transparent elsewhere. Shape
membership is evaluated at pixel centres (x + 0.5, y + 0.5) against a
boundary inset by MaskConstants.EDGE_INSET from the nominal radius, so a
3x3 circle keeps its centre and edge midpoints but drops its corners. With
antialiasing enabled each pixel is supersampled on an n x n grid and its
alpha is scaled by the covered fraction.
"""

import logging
from typing import Callable

import numpy as np

from imageops.core.constants import MaskConstants
from imageops.core.enums import MaskShapeType
from imageops.core.image import Image
from imageops.schemas.mask import MaskShape
from imageops.transforms.crop import crop_region

logger = logging.getLogger(__name__)

DistanceFn = Callable[[np.ndarray, int], np.ndarray]


def _sample_count(antialias: bool, supersampling: int) -> int:
    if not antialias:
        return 1
    samples = max(int(supersampling), MaskConstants.MIN_SUPERSAMPLING)
    return min(samples, MaskConstants.MAX_SUPERSAMPLING)


def _coverage(
    width: int, height: int, radius: float, distance: DistanceFn, samples: int
) -> np.ndarray:
    """
    Fraction of each pixel lying inside the shape.

    The shape is every point whose (distance(x), distance(y)) vector has
    length <= radius - EDGE_INSET (never below 0), so it must be separable
    per axis.
    """
    offsets = (np.arange(samples) + 0.5) / samples
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    edge = max(radius - MaskConstants.EDGE_INSET, 0.0)
    r2 = edge * edge

    inside = np.zeros((height, width), dtype=np.float64)
    for oy in offsets:
        dy2 = distance(ys + oy, height) ** 2
        for ox in offsets:
            dx2 = distance(xs + ox, width) ** 2
            inside += (dy2[:, None] + dx2[None, :]) <= r2

    return inside / (samples * samples)


def _composite(pixels: np.ndarray, coverage: np.ndarray) -> Image:
    """Multiply source alpha by coverage; fully masked pixels become (0, 0, 0, 0)."""
    result = pixels.copy()
    result[:, :, 3] = np.rint(pixels[:, :, 3] * coverage).astype(np.uint8)
    result[coverage == 0] = 0
    return Image(result)


def mask_circle(
    image: Image,
    antialias: bool = False,
    supersampling: int = MaskConstants.DEFAULT_SUPERSAMPLING,
) -> Image:
    """
    Crop a centered square and mask it to the inscribed circle.

    Args:
        image: Source image
        antialias: Soften the edge by supersampling
        supersampling: Samples per pixel side when antialiasing

    Returns:
        size x size image, size = min(width, height)
    """
    size = min(image.width, image.height)
    left = (image.width - size) // 2
    top = (image.height - size) // 2
    square = crop_region(image, left, top, size, size)

    radius = size / 2

    def distance(p: np.ndarray, extent: int) -> np.ndarray:
        return p - radius

    coverage = _coverage(size, size, radius, distance, _sample_count(antialias, supersampling))
    logger.debug(f"Circle mask {image.width}x{image.height} -> {size}x{size} at ({left}, {top})")
    return _composite(square.pixels, coverage)


def mask_rounded_rect(
    image: Image,
    corner_radius: float = MaskConstants.DEFAULT_CORNER_RADIUS,
    antialias: bool = False,
    supersampling: int = MaskConstants.DEFAULT_SUPERSAMPLING,
) -> Image:
    """
    Mask the image to a rounded rectangle inscribed in its bounds.

    Args:
        image: Source image
        corner_radius: Corner radius in pixels, clamped to [0, min(width, height) / 2]
        antialias: Soften the edge by supersampling
        supersampling: Samples per pixel side when antialiasing

    Returns:
        Image with identical dimensions
    """
    max_radius = min(image.width, image.height) / 2
    radius = min(max(float(corner_radius), 0.0), max_radius)
    if radius != corner_radius:
        logger.debug(f"Corner radius {corner_radius} clamped to {radius}")

    def distance(p: np.ndarray, extent: int) -> np.ndarray:
        # Distance outside the inner rectangle [radius, extent - radius] along one axis
        return np.maximum(np.maximum(radius - p, p - (extent - radius)), 0.0)

    samples = _sample_count(antialias, supersampling)
    coverage = _coverage(image.width, image.height, radius, distance, samples)
    return _composite(image.pixels, coverage)


def apply_mask(
    image: Image,
    shape: MaskShape,
    antialias: bool = False,
    supersampling: int = MaskConstants.DEFAULT_SUPERSAMPLING,
) -> Image:
    """
    Apply a mask shape variant.

    Args:
        image: Source image
        shape: CircleMask or RoundedRectMask
        antialias: Soften the edge by supersampling
        supersampling: Samples per pixel side when antialiasing

    Returns:
        Masked image
    """
    if shape.shape == MaskShapeType.CIRCLE:
        return mask_circle(image, antialias=antialias, supersampling=supersampling)
    return mask_rounded_rect(
        image, shape.corner_radius, antialias=antialias, supersampling=supersampling
    )
