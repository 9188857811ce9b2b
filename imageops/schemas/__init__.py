"""
Schemas Package

Pydantic models describing engine operations and their parameters. They are
the validated, serializable form of a call, used by the pipeline and the
preset catalog.
"""

# Re-export enums from centralized location for convenience
from imageops.core.enums import FilterPreset, Interpolation, MaskShapeType, OperationType

from .base import BaseOperationParams
from .mask import CircleMask, MaskShape, RoundedRectMask
from .operations import (
    CropParams,
    FilterParams,
    MaskParams,
    MatrixParams,
    Operation,
    ResizeToWidthParams,
    ScaleParams,
)

__all__ = [
    # Base schemas
    "BaseOperationParams",
    # Mask shapes
    "CircleMask",
    "RoundedRectMask",
    "MaskShape",
    # Operations
    "CropParams",
    "FilterParams",
    "MatrixParams",
    "ScaleParams",
    "ResizeToWidthParams",
    "MaskParams",
    "Operation",
    # Enums (re-exported from core.enums)
    "FilterPreset",
    "Interpolation",
    "MaskShapeType",
    "OperationType",
]
