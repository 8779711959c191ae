"""Pixel buffer descriptors and OpenCV type-code classification.

OpenCV packs the element depth and the channel count of a matrix into one
integer. The low ``CV_CN_SHIFT`` bits hold the depth, the remaining bits hold
``channels - 1``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

# Packed type-code layout (owned by OpenCV, see core/hal/interface.h)
CV_CN_SHIFT = 3
CV_DEPTH_MAX = 1 << CV_CN_SHIFT
CV_MAT_DEPTH_MASK = CV_DEPTH_MAX - 1
CV_CN_MAX = 512
CV_MAT_CN_MASK = (CV_CN_MAX - 1) << CV_CN_SHIFT

CV_8U = 0
CV_8S = 1
CV_16U = 2
CV_16S = 3
CV_32S = 4
CV_32F = 5
CV_64F = 6
# Anything else, e.g. CV_16F
CV_USRTYPE1 = 7

USER_LABEL = "User"


class ElementEncoding(Enum):
    """Primitive storage format of a single channel element."""

    UINT8 = "CV_8U"
    INT8 = "CV_8S"
    UINT16 = "CV_16U"
    INT16 = "CV_16S"
    INT32 = "CV_32S"
    FLOAT32 = "CV_32F"
    FLOAT64 = "CV_64F"
    UNRECOGNIZED = USER_LABEL

    @property
    def label(self) -> str:
        return self.value


_DEPTH_ENCODINGS: dict[int, ElementEncoding] = {
    CV_8U: ElementEncoding.UINT8,
    CV_8S: ElementEncoding.INT8,
    CV_16U: ElementEncoding.UINT16,
    CV_16S: ElementEncoding.INT16,
    CV_32S: ElementEncoding.INT32,
    CV_32F: ElementEncoding.FLOAT32,
    CV_64F: ElementEncoding.FLOAT64,
}

_DTYPE_DEPTHS: dict[np.dtype, int] = {
    np.dtype(np.uint8): CV_8U,
    np.dtype(np.int8): CV_8S,
    np.dtype(np.uint16): CV_16U,
    np.dtype(np.int16): CV_16S,
    np.dtype(np.int32): CV_32S,
    np.dtype(np.float32): CV_32F,
    np.dtype(np.float64): CV_64F,
}


def mat_depth(type_code: int) -> int:
    """Extract the depth component of a packed type code."""
    return type_code & CV_MAT_DEPTH_MASK


def mat_channels(type_code: int) -> int:
    """Extract the channel count of a packed type code (``CV_MAT_CN``).

    Always in 1..CV_CN_MAX, also for negative or out-of-range codes.
    """
    return ((type_code & CV_MAT_CN_MASK) >> CV_CN_SHIFT) + 1


def make_type(depth: int, channels: int) -> int:
    """Pack a depth and a channel count into a type code (``CV_MAKETYPE``)."""
    return (depth & CV_MAT_DEPTH_MASK) + ((channels - 1) << CV_CN_SHIFT)


def encoding_for_depth(depth: int) -> ElementEncoding:
    """Map a depth code to its encoding, falling back to UNRECOGNIZED."""
    return _DEPTH_ENCODINGS.get(depth, ElementEncoding.UNRECOGNIZED)


def classify(type_code: int) -> tuple[str, int]:
    """Classify a packed type code.

    Args:
        type_code: OpenCV packed type code (e.g. ``cv2.CV_8UC3``).

    Returns:
        Tuple of (encoding label, channel count), e.g. ``("CV_8U", 3)``.
        Unknown depths yield the label ``"User"``.
    """
    encoding = encoding_for_depth(mat_depth(type_code))
    return encoding.label, mat_channels(type_code)


def type_to_str(type_code: int) -> str:
    """Format a packed type code the way OpenCV names it, e.g. ``CV_32FC3``."""
    label, channels = classify(type_code)
    return f"{label}C{channels}"


def depth_of_dtype(dtype: Any) -> int:
    """Return the OpenCV depth matching a numpy dtype (CV_USRTYPE1 if none)."""
    return _DTYPE_DEPTHS.get(np.dtype(dtype), CV_USRTYPE1)


def type_of_array(array: np.ndarray) -> int:
    """Derive the packed type code OpenCV would assign to an array."""
    channels = array.shape[2] if array.ndim == 3 else 1
    return make_type(depth_of_dtype(array.dtype), max(channels, 1))


@dataclass(frozen=True)
class PixelBufferDescriptor:
    """Snapshot of a pixel buffer's shape and element encoding."""

    rows: int
    cols: int
    element_encoding: ElementEncoding
    channel_count: int
    is_contiguous: bool

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f"Negative dimensions: {self.rows}x{self.cols}")
        if self.channel_count < 1:
            raise ValueError(f"Channel count must be at least 1, got {self.channel_count}")

    @property
    def type_label(self) -> str:
        """Type string including the channel suffix, e.g. ``CV_8UC1``."""
        return f"{self.element_encoding.label}C{self.channel_count}"

    @property
    def empty(self) -> bool:
        return self.rows == 0 or self.cols == 0

    def verbose_lines(self) -> list[str]:
        """Diagnostic lines printed by the tools in verbose mode.

        The ``isContinous`` spelling matches what existing scripts parse.
        """
        return [
            f"rows = {self.rows}",
            f"cols = {self.cols}",
            f"channels = {self.channel_count}",
            f"type = {self.type_label}",
            f"isContinous = {'true' if self.is_contiguous else 'false'}",
        ]

    def format_verbose(self) -> str:
        return "\n".join(self.verbose_lines())


def describe_type(
    type_code: int, rows: int = 0, cols: int = 0, is_contiguous: bool = False
) -> PixelBufferDescriptor:
    """Build a descriptor from a packed type code and explicit dimensions."""
    return PixelBufferDescriptor(
        rows=rows,
        cols=cols,
        element_encoding=encoding_for_depth(mat_depth(type_code)),
        channel_count=mat_channels(type_code),
        is_contiguous=is_contiguous,
    )


def describe(buffer: np.ndarray | None) -> PixelBufferDescriptor:
    """Describe a buffer returned by cv2.

    Args:
        buffer: Image/matrix array, or None for an empty matrix (cv2 returns
            None where C++ OpenCV returns an empty ``cv::Mat``).

    Returns:
        Immutable descriptor. The buffer is not modified.
    """
    if buffer is None:
        return describe_type(CV_8U)

    # 1-D arrays map to a single column, as in cv2
    shape = tuple(buffer.shape) + (1, 1)
    rows, cols = int(shape[0]), int(shape[1])
    # Empty arrays report like an empty cv::Mat, which is never continuous
    is_contiguous = buffer.size > 0 and bool(buffer.flags["C_CONTIGUOUS"])
    return describe_type(
        type_of_array(buffer),
        rows=rows,
        cols=cols,
        is_contiguous=is_contiguous,
    )
