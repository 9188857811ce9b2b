"""
Operation parameter models.

Each model describes one engine call; `Operation` is the discriminated
union (on the `op` field) accepted by the pipeline.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from imageops.core.constants import ColorMatrixConstants
from imageops.core.enums import FilterPreset, Interpolation

from .base import BaseOperationParams
from .mask import CircleMask, MaskShape


class CropParams(BaseOperationParams):
    """Centered aspect-ratio crop"""

    op: Literal["crop"] = "crop"
    ratio_w: int = Field(..., gt=0, description="Aspect ratio width term")
    ratio_h: int = Field(..., gt=0, description="Aspect ratio height term")


class FilterParams(BaseOperationParams):
    """Named color filter preset"""

    op: Literal["filter"] = "filter"
    preset: FilterPreset = Field(..., description="Filter preset name")


class MatrixParams(BaseOperationParams):
    """Arbitrary 4x5 color matrix, row-major"""

    op: Literal["matrix"] = "matrix"
    matrix: List[float] = Field(
        ...,
        min_length=ColorMatrixConstants.ROWS * ColorMatrixConstants.COLS,
        max_length=ColorMatrixConstants.ROWS * ColorMatrixConstants.COLS,
        description="20 coefficients, 5 per output channel (last is the offset)",
    )


class ScaleParams(BaseOperationParams):
    """Scale by factor"""

    op: Literal["scale"] = "scale"
    factor: float = Field(..., gt=0, description="Scale factor")
    interpolation: Optional[Interpolation] = Field(
        default=None, description="Resampling method (unset: ResampleSettings.interpolation)"
    )


class ResizeToWidthParams(BaseOperationParams):
    """Fixed-width resize keeping aspect ratio"""

    op: Literal["resize_to_width"] = "resize_to_width"
    target_width: int = Field(..., gt=0, description="Target width in pixels")
    interpolation: Optional[Interpolation] = Field(
        default=None, description="Resampling method (unset: ResampleSettings.interpolation)"
    )


class MaskParams(BaseOperationParams):
    """Alpha mask"""

    op: Literal["mask"] = "mask"
    mask: MaskShape = Field(default_factory=CircleMask, description="Mask geometry")
    antialias: Optional[bool] = Field(
        default=None, description="Soften mask edges (unset: MaskSettings.antialias)"
    )


Operation = Annotated[
    Union[CropParams, FilterParams, MatrixParams, ScaleParams, ResizeToWidthParams, MaskParams],
    Field(discriminator="op"),
]
