"""Name lookups and validation for tool options."""

import cv2

from .errors import InvalidOptionError
from .mattype import CV_8U, CV_16S, CV_16U, CV_32F, CV_64F

# name -> (cv2 constant, description shown in --help)
BORDER_TYPES: dict[str, tuple[int, str]] = {
    "default": (cv2.BORDER_DEFAULT, "reflect101"),
    "constant": (cv2.BORDER_CONSTANT, "iiiiii|abcdefgh|iiiiiii with some specified i"),
    "replicate": (cv2.BORDER_REPLICATE, "aaaaaa|abcdefgh|hhhhhhh"),
    "reflect": (cv2.BORDER_REFLECT, "fedcba|abcdefgh|hgfedcb"),
    "reflect101": (cv2.BORDER_REFLECT_101, "gfedcb|abcdefgh|gfedcba"),
    "transparent": (cv2.BORDER_TRANSPARENT, "uvwxyz|abcdefgh|ijklmno"),
    "isolated": (cv2.BORDER_ISOLATED, "do not look outside of ROI"),
}

IMREAD_MODES: dict[str, int] = {
    "unchanged": cv2.IMREAD_UNCHANGED,
    "grayscale": cv2.IMREAD_GRAYSCALE,
    "color": cv2.IMREAD_COLOR,
    "anydepth": cv2.IMREAD_ANYDEPTH,
    "anycolor": cv2.IMREAD_ANYCOLOR,
    "load_gdal": cv2.IMREAD_LOAD_GDAL,
    "reduced_grayscale_2": cv2.IMREAD_REDUCED_GRAYSCALE_2,
    "reduced_grayscale_4": cv2.IMREAD_REDUCED_GRAYSCALE_4,
    "reduced_grayscale_8": cv2.IMREAD_REDUCED_GRAYSCALE_8,
    "reduced_color_2": cv2.IMREAD_REDUCED_COLOR_2,
    "reduced_color_4": cv2.IMREAD_REDUCED_COLOR_4,
    "reduced_color_8": cv2.IMREAD_REDUCED_COLOR_8,
    "ignore_orientation": cv2.IMREAD_IGNORE_ORIENTATION,
}

# Depths cv2.GaussianBlur accepts
BLUR_SUPPORTED_DEPTHS = frozenset({CV_8U, CV_16U, CV_16S, CV_32F, CV_64F})


def get_border_type(name: str) -> int:
    """Look up a border extrapolation mode by name.

    Raises:
        InvalidOptionError: If the name is not one of BORDER_TYPES.
    """
    try:
        return BORDER_TYPES[name][0]
    except KeyError:
        raise InvalidOptionError("Invalid border type.") from None


def get_imread_mode(name: str) -> int:
    """Look up an imread mode by name.

    Raises:
        InvalidOptionError: If the name is not one of IMREAD_MODES.
    """
    try:
        return IMREAD_MODES[name]
    except KeyError:
        raise InvalidOptionError("Invalid flags.") from None


def validate_kernel_size(width: int, height: int) -> None:
    """Check a Gaussian kernel size: both positive and odd.

    Raises:
        InvalidOptionError: Describing the first violated constraint.
    """
    if width == 0 and height == 0:
        raise InvalidOptionError("Both ksizeW and ksizeH are zeros.")
    if width == 0 or height == 0:
        raise InvalidOptionError("Either ksizeW or ksizeH is zero.")
    if width < 0 or height < 0:
        raise InvalidOptionError("Either ksizeW or ksizeH is negative.")
    if width % 2 == 0 or height % 2 == 0:
        raise InvalidOptionError("Either ksizeW or ksizeH is not odd.")


def format_border_types() -> str:
    """Help text listing the supported border types."""
    width = max(len(name) for name in BORDER_TYPES) + 2
    lines = ["Supported border types:"]
    for name, (_, description) in BORDER_TYPES.items():
        lines.append(f"  {name:<{width}}{description}")
    return "\n".join(lines)


def format_imread_modes() -> str:
    """Help text listing the supported imread flags."""
    lines = ["Possible flags:"]
    lines.extend(f"  {name}" for name in IMREAD_MODES)
    return "\n".join(lines)
