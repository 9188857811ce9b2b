"""
Core modules for imageops
"""

from .color_matrix import ColorMatrix, compose
from .exceptions import ImageOpsError, InvalidParameter
from .image import Image, ImageConverters

__all__ = [
    "Image",
    "ImageConverters",
    "ColorMatrix",
    "compose",
    "ImageOpsError",
    "InvalidParameter",
]
