"""
Exception hierarchy for the imageops engine.
"""

from typing import Any, Optional

from imageops.core.constants import ErrorMessages


class ImageOpsError(Exception):
    """Base class for all engine errors."""


class InvalidParameter(ImageOpsError, ValueError):
    """Raised when a structural parameter (ratio, factor, dimension) is out of range."""

    def __init__(self, message: str, param: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.param = param
        self.value = value

    @classmethod
    def non_positive(cls, param: str, value: Any) -> "InvalidParameter":
        """Build the error for a parameter that must be > 0."""
        return cls(ErrorMessages.NON_POSITIVE.format(param=param, value=value), param, value)

    @classmethod
    def empty_image(cls, width: int, height: int) -> "InvalidParameter":
        """Build the error for a zero-area image."""
        return cls(
            ErrorMessages.EMPTY_IMAGE.format(width=width, height=height),
            "image",
            (width, height),
        )
