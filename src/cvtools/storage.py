"""Reading and writing matrices with cv2.FileStorage (XML/YAML/JSON)."""

import logging
from pathlib import Path

import cv2
import numpy as np

from .errors import StorageError

log = logging.getLogger(__name__)

# Node name the tools read and write
DEFAULT_NODE = "mat"


def read_mat(path: str | Path, node: str = DEFAULT_NODE) -> np.ndarray | None:
    """Load a matrix from a FileStorage file.

    Args:
        path: XML, YAML or JSON file written by cv2.FileStorage.
        node: Top-level node holding the matrix.

    Returns:
        The matrix, or None if the node is missing or empty.

    Raises:
        StorageError: If the file cannot be opened.
    """
    try:
        fs = cv2.FileStorage(str(path), cv2.FILE_STORAGE_READ)
    except cv2.error as e:
        raise StorageError("Failed to open the file.") from e
    try:
        if not fs.isOpened():
            raise StorageError("Failed to open the file.")
        file_node = fs.getNode(node)
        if file_node.empty():
            log.debug("Node %r missing in %s", node, path)
            return None
        mat = file_node.mat()
    finally:
        fs.release()

    if mat is None or mat.size == 0:
        return None
    return mat


def write_mat(path: str | Path, mat: np.ndarray | None, node: str = DEFAULT_NODE) -> None:
    """Write a matrix to a FileStorage file (format taken from the extension).

    Raises:
        StorageError: If the matrix is empty or the file cannot be opened.
    """
    if mat is None or mat.size == 0:
        raise StorageError("Cannot write an empty matrix.")

    try:
        fs = cv2.FileStorage(str(path), cv2.FILE_STORAGE_WRITE)
    except cv2.error as e:
        raise StorageError(f"Failed to open {path} for writing.") from e
    try:
        if not fs.isOpened():
            raise StorageError(f"Failed to open {path} for writing.")
        fs.write(node, mat)
    finally:
        fs.release()
    log.debug("Wrote %s matrix to %s", mat.shape, path)
