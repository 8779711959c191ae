"""Command-line wrappers around single OpenCV operations."""

from .errors import CvToolsError, InvalidOptionError, StorageError
from .mattype import (
    ElementEncoding,
    PixelBufferDescriptor,
    classify,
    describe,
    describe_type,
    make_type,
    type_to_str,
)

__version__ = "0.1.0"

__all__ = [
    "ElementEncoding",
    "PixelBufferDescriptor",
    "classify",
    "describe",
    "describe_type",
    "make_type",
    "type_to_str",
    "CvToolsError",
    "InvalidOptionError",
    "StorageError",
]
