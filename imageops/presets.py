"""
Named preset catalog.

Groups the editor's ready-made operations by category, in display order.
"""

from typing import Dict, List, Union

from imageops.core.constants import CropConstants, ErrorMessages, MaskConstants, ResampleConstants
from imageops.core.enums import FilterPreset, OperationCategory
from imageops.core.exceptions import InvalidParameter
from imageops.core.image import Image
from imageops.pipeline import apply_operation
from imageops.schemas import (
    CircleMask,
    CropParams,
    FilterParams,
    MaskParams,
    Operation,
    ResizeToWidthParams,
    RoundedRectMask,
    ScaleParams,
)

PRESET_CATALOG: Dict[OperationCategory, Dict[str, Operation]] = {
    OperationCategory.CROP: {
        "Square (1:1)": CropParams(ratio_w=CropConstants.SQUARE[0], ratio_h=CropConstants.SQUARE[1]),
        "Wide (16:9)": CropParams(ratio_w=CropConstants.WIDE[0], ratio_h=CropConstants.WIDE[1]),
        "Portrait (3:4)": CropParams(
            ratio_w=CropConstants.PORTRAIT[0], ratio_h=CropConstants.PORTRAIT[1]
        ),
    },
    OperationCategory.FILTER: {
        "Grayscale": FilterParams(preset=FilterPreset.GRAYSCALE),
        "Sepia": FilterParams(preset=FilterPreset.SEPIA),
        "Invert": FilterParams(preset=FilterPreset.INVERT),
        "Boost Red": FilterParams(preset=FilterPreset.BOOST_RED),
    },
    OperationCategory.RESIZE: {
        "50%": ScaleParams(factor=ResampleConstants.HALF),
        "25%": ScaleParams(factor=ResampleConstants.QUARTER),
        "Fixed (400px)": ResizeToWidthParams(target_width=ResampleConstants.FIXED_WIDTH),
    },
    OperationCategory.MASK: {
        "Circle Mask": MaskParams(mask=CircleMask()),
        "Rounded Corners": MaskParams(
            mask=RoundedRectMask(corner_radius=MaskConstants.DEFAULT_CORNER_RADIUS)
        ),
    },
}


def _category(category: Union[OperationCategory, str]) -> OperationCategory:
    try:
        return OperationCategory(category)
    except ValueError:
        raise InvalidParameter(
            ErrorMessages.INVALID_PARAMETER.format(param="category", value=category),
            "category",
            category,
        ) from None


def list_presets(category: Union[OperationCategory, str]) -> List[str]:
    """Preset labels of a category, in display order."""
    return list(PRESET_CATALOG[_category(category)])


def get_preset(category: Union[OperationCategory, str], label: str) -> Operation:
    """
    Look up a preset operation.

    Args:
        category: Category enum or its value ("crop", "filter", ...)
        label: Preset label, e.g. "Square (1:1)"

    Returns:
        Operation model
    """
    category = _category(category)
    try:
        return PRESET_CATALOG[category][label]
    except KeyError:
        raise InvalidParameter(
            ErrorMessages.UNKNOWN_PRESET.format(category=category.value, name=label),
            "label",
            label,
        ) from None


def apply_preset(image: Image, category: Union[OperationCategory, str], label: str) -> Image:
    """Apply a named preset to an image."""
    return apply_operation(image, get_preset(category, label))
