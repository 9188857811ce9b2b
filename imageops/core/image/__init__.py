"""
Image data model and conversions.

This package provides:
- model: the Image value type (RGBA8 pixel buffer)
- converters: in-memory conversions (NumPy, PIL)
"""

from imageops.core.image.converters import ImageConverters
from imageops.core.image.model import Image

__all__ = ["Image", "ImageConverters"]
