"""Tests for cvtools.options module."""

import cv2
import pytest

from cvtools.errors import InvalidOptionError
from cvtools.options import (
    BLUR_SUPPORTED_DEPTHS,
    BORDER_TYPES,
    IMREAD_MODES,
    format_border_types,
    format_imread_modes,
    get_border_type,
    get_imread_mode,
    validate_kernel_size,
)


class TestGetBorderType:
    """Tests for get_border_type function."""

    def test_known_names(self) -> None:
        """Test that border names map to cv2 constants."""
        assert get_border_type("default") == cv2.BORDER_DEFAULT
        assert get_border_type("constant") == cv2.BORDER_CONSTANT
        assert get_border_type("replicate") == cv2.BORDER_REPLICATE
        assert get_border_type("reflect") == cv2.BORDER_REFLECT
        assert get_border_type("reflect101") == cv2.BORDER_REFLECT_101
        assert get_border_type("transparent") == cv2.BORDER_TRANSPARENT
        assert get_border_type("isolated") == cv2.BORDER_ISOLATED

    def test_unknown_name_raises(self) -> None:
        """Test that an unknown name raises InvalidOptionError."""
        with pytest.raises(InvalidOptionError, match="Invalid border type"):
            get_border_type("wrap")

    def test_lookup_is_case_sensitive(self) -> None:
        """Test that names must match exactly."""
        with pytest.raises(InvalidOptionError):
            get_border_type("Default")


class TestGetImreadMode:
    """Tests for get_imread_mode function."""

    def test_known_names(self) -> None:
        """Test that flag names map to cv2 constants."""
        assert get_imread_mode("color") == cv2.IMREAD_COLOR
        assert get_imread_mode("grayscale") == cv2.IMREAD_GRAYSCALE
        assert get_imread_mode("unchanged") == cv2.IMREAD_UNCHANGED
        assert get_imread_mode("reduced_color_4") == cv2.IMREAD_REDUCED_COLOR_4

    def test_all_modes_listed(self) -> None:
        """Test that all thirteen modes are available."""
        assert len(IMREAD_MODES) == 13

    def test_unknown_name_raises(self) -> None:
        """Test that an unknown flag raises InvalidOptionError."""
        with pytest.raises(InvalidOptionError, match="Invalid flags"):
            get_imread_mode("sepia")


class TestValidateKernelSize:
    """Tests for validate_kernel_size function."""

    def test_valid_sizes(self) -> None:
        """Test that positive odd sizes pass."""
        validate_kernel_size(1, 1)
        validate_kernel_size(3, 7)

    def test_both_zero(self) -> None:
        """Test the both-zero message."""
        with pytest.raises(InvalidOptionError, match="Both ksizeW and ksizeH are zeros"):
            validate_kernel_size(0, 0)

    def test_one_zero(self) -> None:
        """Test the single-zero message for either dimension."""
        with pytest.raises(InvalidOptionError, match="is zero"):
            validate_kernel_size(0, 3)
        with pytest.raises(InvalidOptionError, match="is zero"):
            validate_kernel_size(3, 0)

    def test_negative(self) -> None:
        """Test that negative sizes are rejected."""
        with pytest.raises(InvalidOptionError, match="negative"):
            validate_kernel_size(-3, 3)

    def test_even(self) -> None:
        """Test that even sizes are rejected."""
        with pytest.raises(InvalidOptionError, match="not odd"):
            validate_kernel_size(3, 4)


class TestHelpText:
    """Tests for help listings."""

    def test_border_types_listed(self) -> None:
        """Test that every border type appears in the help text."""
        text = format_border_types()
        assert text.startswith("Supported border types:")
        for name in BORDER_TYPES:
            assert name in text

    def test_imread_modes_listed(self) -> None:
        """Test that every imread mode appears in the help text."""
        text = format_imread_modes()
        for name in IMREAD_MODES:
            assert f"  {name}" in text

    def test_blur_depths(self) -> None:
        """Test that signed 8-bit and 32-bit integers are not blurred."""
        assert cv2.CV_8S not in BLUR_SUPPORTED_DEPTHS
        assert cv2.CV_32S not in BLUR_SUPPORTED_DEPTHS
        assert cv2.CV_32F in BLUR_SUPPORTED_DEPTHS
