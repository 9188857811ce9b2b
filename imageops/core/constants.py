"""
Constants and configuration values for the imageops engine.
Centralizes all magic numbers and preset values.
"""


# Image Constants
class ImageConstants:
    """Constants related to the pixel buffer layout."""

    CHANNELS = 4  # R, G, B, A
    CHANNEL_MIN = 0
    CHANNEL_MAX = 255
    DTYPE = "uint8"
    TRANSPARENT = (0, 0, 0, 0)


# Color Matrix Constants
class ColorMatrixConstants:
    """Constants for color matrix filters."""

    ROWS = 4
    COLS = 5  # 4 linear coefficients + additive offset

    # Luminance weights used for desaturation (saturation = 0)
    LUMA_RED = 0.213
    LUMA_GREEN = 0.715
    LUMA_BLUE = 0.072

    SEPIA_SCALE = (1.0, 0.95, 0.82, 1.0)
    BOOST_RED_SCALE = (2.0, 1.0, 1.0, 1.0)
    INVERT_OFFSET = 255.0


# Crop Constants
class CropConstants:
    """Aspect ratios offered by the editor."""

    SQUARE = (1, 1)
    WIDE = (16, 9)
    PORTRAIT = (3, 4)


# Resample Constants
class ResampleConstants:
    """Constants for resizing operations."""

    DEFAULT_INTERPOLATION = "bilinear"
    HALF = 0.5
    QUARTER = 0.25
    FIXED_WIDTH = 400


# Mask Constants
class MaskConstants:
    """Constants for alpha masking."""

    DEFAULT_CORNER_RADIUS = 100
    # Shape boundary sits this many pixels inside the nominal radius
    EDGE_INSET = 0.25
    DEFAULT_SUPERSAMPLING = 4
    MIN_SUPERSAMPLING = 1
    MAX_SUPERSAMPLING = 16


# System Constants
class SystemConstants:
    """Constants for system operations."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ENV_PREFIX = "IMAGEOPS_"
    ENV_NESTED_DELIMITER = "__"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    INVALID_PARAMETER = "Invalid parameter {param}: {value}"
    NON_POSITIVE = "Parameter {param} must be positive, got {value}"
    EMPTY_IMAGE = "Image has zero area: {width}x{height}"
    INVALID_BUFFER = "Invalid pixel buffer: {reason}"
    REGION_OUT_OF_BOUNDS = "Region {region} is out of image bounds {bounds}"
    DEGENERATE_RESULT = "Operation {operation} would produce a degenerate image: {width}x{height}"
    UNKNOWN_PRESET = "Unknown {category} preset: {name}"
    INVALID_MATRIX = "Color matrix must have shape (4, 5), got {shape}"
    INVALID_OPERATION = "Invalid operation payload: {error}"
