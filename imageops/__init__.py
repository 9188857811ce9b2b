"""
imageops - in-memory raster image transformation engine.

Pure functions over RGBA8 images: crop, color matrix filtering,
resampling and alpha masking. Every operation returns a new Image.
"""

from imageops.core.color_matrix import (
    ColorMatrix,
    boost_red,
    compose,
    grayscale,
    invert,
    sepia,
)
from imageops.core.enums import FilterPreset, Interpolation, MaskShapeType, OperationCategory
from imageops.core.exceptions import ImageOpsError, InvalidParameter
from imageops.core.image import Image, ImageConverters
from imageops.pipeline import apply_operation, parse_operations, run_pipeline
from imageops.presets import apply_preset, get_preset, list_presets
from imageops.transforms import (
    apply_filter,
    apply_mask,
    apply_matrix,
    crop_box_for_ratio,
    crop_region,
    crop_to_ratio,
    mask_circle,
    mask_rounded_rect,
    preset_matrix,
    resize,
    resize_to_width,
    scale,
)

__version__ = "1.0.0"

__all__ = [
    # Data model
    "Image",
    "ImageConverters",
    "ColorMatrix",
    "compose",
    # Color matrix presets
    "grayscale",
    "sepia",
    "invert",
    "boost_red",
    # Operations
    "crop_to_ratio",
    "crop_region",
    "crop_box_for_ratio",
    "apply_matrix",
    "apply_filter",
    "preset_matrix",
    "scale",
    "resize",
    "resize_to_width",
    "mask_circle",
    "mask_rounded_rect",
    "apply_mask",
    # Pipeline and presets
    "apply_operation",
    "parse_operations",
    "run_pipeline",
    "apply_preset",
    "get_preset",
    "list_presets",
    # Enums
    "FilterPreset",
    "Interpolation",
    "MaskShapeType",
    "OperationCategory",
    # Errors
    "ImageOpsError",
    "InvalidParameter",
]
