"""
Pixel transforms.

- crop: aspect-ratio and region cropping
- color_filter: color matrix filtering and presets
- resample: scale and resize
- mask: circular and rounded-rectangle alpha masks
"""

from .color_filter import apply_filter, apply_matrix, preset_matrix
from .crop import crop_box_for_ratio, crop_region, crop_to_ratio
from .mask import apply_mask, mask_circle, mask_rounded_rect
from .resample import resize, resize_to_width, scale

__all__ = [
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
]
