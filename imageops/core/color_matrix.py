"""
Color matrix value type.

A ColorMatrix is a 4x5 transform over (R, G, B, A): the first four columns
are the linear part and the last column is an additive offset, so

    out_i = clamp(sum_j(M[i][j] * in_j) + M[i][4], 0, 255)

Matrices compose with `compose(a, b)`, which yields the single matrix that
applies `a` first and then `b`.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from imageops.core.constants import ColorMatrixConstants, ErrorMessages
from imageops.core.exceptions import InvalidParameter

SHAPE = (ColorMatrixConstants.ROWS, ColorMatrixConstants.COLS)


@dataclass(frozen=True, eq=False)
class ColorMatrix:
    """Immutable 4x5 color transform."""

    values: np.ndarray  # Shape (4, 5), float64

    def __post_init__(self):
        values = np.array(self.values, dtype=np.float64)
        if values.shape != SHAPE:
            raise InvalidParameter(ErrorMessages.INVALID_MATRIX.format(shape=values.shape), "matrix")
        values.flags.writeable = False
        object.__setattr__(self, "values", values)

    @property
    def linear(self) -> np.ndarray:
        """4x4 linear part."""
        return self.values[:, :4]

    @property
    def offset(self) -> np.ndarray:
        """Per-channel additive offset."""
        return self.values[:, 4]

    def to_homogeneous(self) -> np.ndarray:
        """5x5 form with an implicit [0, 0, 0, 0, 1] last row."""
        result = np.eye(5, dtype=np.float64)
        result[:4, :] = self.values
        return result

    def to_list(self) -> List[float]:
        """Row-major list of 20 floats."""
        return [float(v) for v in self.values.ravel()]

    def then(self, other: "ColorMatrix") -> "ColorMatrix":
        """Matrix that applies self first, then other."""
        return compose(self, other)

    @classmethod
    def from_list(cls, values: Sequence[float]) -> "ColorMatrix":
        """Build from 20 row-major floats."""
        array = np.asarray(values, dtype=np.float64)
        if array.size != SHAPE[0] * SHAPE[1]:
            raise InvalidParameter(ErrorMessages.INVALID_MATRIX.format(shape=array.shape), "matrix")
        return cls(array.reshape(SHAPE))

    @classmethod
    def identity(cls) -> "ColorMatrix":
        return cls(np.eye(4, 5, dtype=np.float64))

    @classmethod
    def scale(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> "ColorMatrix":
        """Scale each channel independently."""
        values = np.zeros(SHAPE, dtype=np.float64)
        values[0, 0] = red
        values[1, 1] = green
        values[2, 2] = blue
        values[3, 3] = alpha
        return cls(values)

    @classmethod
    def saturation(cls, sat: float) -> "ColorMatrix":
        """
        Saturation adjustment.

        0 maps every pixel to its luminance, 1 is the identity.
        Alpha is left unchanged.
        """
        inv = 1.0 - sat
        r = ColorMatrixConstants.LUMA_RED * inv
        g = ColorMatrixConstants.LUMA_GREEN * inv
        b = ColorMatrixConstants.LUMA_BLUE * inv
        values = np.array(
            [
                [r + sat, g, b, 0.0, 0.0],
                [r, g + sat, b, 0.0, 0.0],
                [r, g, b + sat, 0.0, 0.0],
                [0.0, 0.0, 0.0, 1.0, 0.0],
            ],
            dtype=np.float64,
        )
        return cls(values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorMatrix):
            return NotImplemented
        return np.array_equal(self.values, other.values)

    def __repr__(self) -> str:
        return f"ColorMatrix({self.to_list()})"


def compose(first: ColorMatrix, second: ColorMatrix) -> ColorMatrix:
    """
    Concatenate two color matrices.

    Args:
        first: Matrix applied first (A)
        second: Matrix applied to A's result (B)

    Returns:
        Matrix C with C(x) == B(A(x)), before clamping
    """
    combined = second.to_homogeneous() @ first.to_homogeneous()
    return ColorMatrix(combined[:4, :])


# === Preset builders ===


def grayscale() -> ColorMatrix:
    """Luminance-preserving desaturation."""
    return ColorMatrix.saturation(0.0)


def sepia() -> ColorMatrix:
    """Grayscale followed by a warm channel scale."""
    return compose(grayscale(), ColorMatrix.scale(*ColorMatrixConstants.SEPIA_SCALE))


def invert() -> ColorMatrix:
    """255 - c for R, G, B; alpha unchanged."""
    offset = ColorMatrixConstants.INVERT_OFFSET
    return ColorMatrix.from_list(
        [
            -1, 0, 0, 0, offset,
            0, -1, 0, 0, offset,
            0, 0, -1, 0, offset,
            0, 0, 0, 1, 0,
        ]
    )  # fmt: skip


def boost_red() -> ColorMatrix:
    """Double the red channel."""
    return ColorMatrix.scale(*ColorMatrixConstants.BOOST_RED_SCALE)
