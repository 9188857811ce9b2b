"""
Centralized enums for the imageops engine.

String-valued enums so that values round-trip through pydantic schemas
and plain dictionaries unchanged.
"""

from enum import Enum


class FilterPreset(str, Enum):
    """Named color matrix presets."""

    GRAYSCALE = "grayscale"
    SEPIA = "sepia"
    INVERT = "invert"
    BOOST_RED = "boost_red"


class MaskShapeType(str, Enum):
    """Alpha mask geometries."""

    CIRCLE = "circle"
    ROUNDED_RECT = "rounded_rect"


class Interpolation(str, Enum):
    """Resampling methods."""

    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"
    AREA = "area"


class OperationCategory(str, Enum):
    """Editor categories grouping the presets."""

    CROP = "crop"
    FILTER = "filter"
    RESIZE = "resize"
    MASK = "mask"


class OperationType(str, Enum):
    """Discriminator for pipeline operations."""

    CROP = "crop"
    FILTER = "filter"
    MATRIX = "matrix"
    SCALE = "scale"
    RESIZE_TO_WIDTH = "resize_to_width"
    MASK = "mask"
