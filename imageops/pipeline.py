"""
Operation pipeline.

Threads an image through a sequence of validated operations. The engine
keeps no state: the caller holds the original image and "reset" is just
going back to it. Fields an operation leaves unset (interpolation,
antialias) are filled from get_settings() here, never inside the
transforms themselves.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Union

from pydantic import TypeAdapter, ValidationError

from imageops.config import get_settings
from imageops.core.color_matrix import ColorMatrix
from imageops.core.constants import ErrorMessages
from imageops.core.enums import Interpolation, OperationType
from imageops.core.exceptions import InvalidParameter
from imageops.core.image import Image
from imageops.schemas import (
    CropParams,
    FilterParams,
    MaskParams,
    MatrixParams,
    Operation,
    ResizeToWidthParams,
    ScaleParams,
)
from imageops.transforms import (
    apply_filter,
    apply_mask,
    apply_matrix,
    crop_to_ratio,
    resize_to_width,
    scale,
)

logger = logging.getLogger(__name__)

_OPERATIONS_ADAPTER = TypeAdapter(List[Operation])


def _interpolation(op: Union[ScaleParams, ResizeToWidthParams]) -> Interpolation:
    if op.interpolation is None:
        return get_settings().resample.interpolation
    return op.interpolation


def _crop(image: Image, op: CropParams) -> Image:
    return crop_to_ratio(image, op.ratio_w, op.ratio_h)


def _filter(image: Image, op: FilterParams) -> Image:
    return apply_filter(image, op.preset)


def _matrix(image: Image, op: MatrixParams) -> Image:
    return apply_matrix(image, ColorMatrix.from_list(op.matrix))


def _scale(image: Image, op: ScaleParams) -> Image:
    return scale(image, op.factor, _interpolation(op))


def _resize_to_width(image: Image, op: ResizeToWidthParams) -> Image:
    return resize_to_width(image, op.target_width, _interpolation(op))


def _mask(image: Image, op: MaskParams) -> Image:
    settings = get_settings().mask
    antialias = settings.antialias if op.antialias is None else op.antialias
    return apply_mask(image, op.mask, antialias=antialias, supersampling=settings.supersampling)


HANDLERS: Dict[OperationType, Callable[[Image, Any], Image]] = {
    OperationType.CROP: _crop,
    OperationType.FILTER: _filter,
    OperationType.MATRIX: _matrix,
    OperationType.SCALE: _scale,
    OperationType.RESIZE_TO_WIDTH: _resize_to_width,
    OperationType.MASK: _mask,
}


def parse_operations(data: Iterable[Dict[str, Any]]) -> List[Operation]:
    """
    Validate raw dictionaries into operation models.

    Args:
        data: Sequence of dicts, each with an "op" key

    Returns:
        List of operation models

    Example:
        >>> ops = parse_operations([
        ...     {"op": "crop", "ratio_w": 1, "ratio_h": 1},
        ...     {"op": "filter", "preset": "sepia"},
        ... ])
    """
    try:
        return _OPERATIONS_ADAPTER.validate_python(list(data))
    except ValidationError as e:
        raise InvalidParameter(
            ErrorMessages.INVALID_OPERATION.format(error=e), "operations"
        ) from e


def apply_operation(image: Image, op: Operation) -> Image:
    """
    Apply a single operation.

    Args:
        image: Source image
        op: Operation model

    Returns:
        New image
    """
    handler = HANDLERS[OperationType(op.op)]
    return handler(image, op)


def run_pipeline(image: Image, operations: Iterable[Union[Operation, Dict[str, Any]]]) -> Image:
    """
    Apply operations in order, each to the previous result.

    Args:
        image: Source image (left untouched)
        operations: Operation models or raw dicts

    Returns:
        Final image (the source itself when operations is empty)
    """
    operations = list(operations)
    if any(isinstance(op, dict) for op in operations):
        operations = parse_operations(operations)

    current = image
    for index, op in enumerate(operations):
        current = apply_operation(current, op)
        logger.debug(f"Pipeline step {index} ({op.op}) -> {current.width}x{current.height}")
    return current
