"""Tests for cvtools.storage module."""

from pathlib import Path

import numpy as np
import pytest

from cvtools.errors import StorageError
from cvtools.storage import read_mat, write_mat


class TestRoundTrip:
    """Tests for writing and reading FileStorage files."""

    @pytest.mark.parametrize("suffix", [".yml", ".xml", ".json"])
    def test_formats(self, tmp_path: Path, suffix: str) -> None:
        """Test that each supported format preserves the matrix."""
        mat = np.arange(24, dtype=np.uint8).reshape(2, 4, 3)
        path = tmp_path / f"data{suffix}"

        write_mat(path, mat)
        loaded = read_mat(path)

        assert loaded is not None
        assert loaded.dtype == np.uint8
        np.testing.assert_array_equal(loaded, mat)

    def test_custom_node(self, tmp_path: Path) -> None:
        """Test reading and writing a node other than 'mat'."""
        mat = np.eye(3, dtype=np.float64)
        path = tmp_path / "data.yml"

        write_mat(path, mat, node="identity")

        np.testing.assert_array_equal(read_mat(path, node="identity"), mat)
        assert read_mat(path) is None


class TestReadMat:
    """Tests for read_mat function."""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that an unopenable file raises StorageError."""
        with pytest.raises(StorageError, match="Failed to open the file"):
            read_mat(tmp_path / "missing.yml")


class TestWriteMat:
    """Tests for write_mat function."""

    def test_refuses_none(self, tmp_path: Path) -> None:
        """Test that None is not written."""
        with pytest.raises(StorageError, match="empty"):
            write_mat(tmp_path / "out.yml", None)

    def test_refuses_empty_array(self, tmp_path: Path) -> None:
        """Test that a zero-size array is not written."""
        with pytest.raises(StorageError):
            write_mat(tmp_path / "out.yml", np.zeros((0, 0), np.uint8))
        assert not (tmp_path / "out.yml").exists()
