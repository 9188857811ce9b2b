"""
Mask shape variants.

MaskShape is a discriminated union on the `shape` field:
- {"shape": "circle"}
- {"shape": "rounded_rect", "corner_radius": 100}
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from imageops.core.constants import MaskConstants

from .base import BaseOperationParams


class CircleMask(BaseOperationParams):
    """Centered square crop masked to its inscribed circle"""

    shape: Literal["circle"] = "circle"


class RoundedRectMask(BaseOperationParams):
    """Rounded rectangle inscribed in the full image bounds"""

    shape: Literal["rounded_rect"] = "rounded_rect"
    corner_radius: float = Field(
        default=MaskConstants.DEFAULT_CORNER_RADIUS,
        description="Corner radius in pixels, clamped to half the shorter side",
    )


MaskShape = Annotated[Union[CircleMask, RoundedRectMask], Field(discriminator="shape")]
