#!/usr/bin/env python3
"""Blur a FileStorage matrix with a Gaussian filter."""

import sys
from collections.abc import Sequence
from pathlib import Path

import cv2

from ..errors import CvToolsError
from ..mattype import depth_of_dtype
from ..options import (
    BLUR_SUPPORTED_DEPTHS,
    format_border_types,
    get_border_type,
    validate_kernel_size,
)
from ..storage import read_mat
from ..url import resolve_input
from .common import build_parser, parse_args, print_info, report_error, save_mat, show

WINDOW_PREFIX = "gaussian_blur_"


def main(argv: Sequence[str] | None = None) -> int:
    """Run cv2.GaussianBlur on the ``mat`` node of a FileStorage file."""
    parser = build_parser(
        "Blurs an image using a Gaussian filter.",
        epilog=format_border_types(),
    )
    parser.add_argument(
        "--ksize-w", "--ksizeW", dest="ksize_w", type=int, default=0,
        help="Width of Gaussian kernel size",
    )
    parser.add_argument(
        "--ksize-h", "--ksizeH", dest="ksize_h", type=int, default=0,
        help="Height of Gaussian kernel size",
    )
    parser.add_argument(
        "--sigma-x", "--sigmaX", dest="sigma_x", type=float, default=0.0,
        help="Gaussian kernel standard deviation in X direction",
    )
    parser.add_argument(
        "--sigma-y", "--sigmaY", dest="sigma_y", type=float, default=0.0,
        help="Gaussian kernel standard deviation in Y direction (default: 0)",
    )
    parser.add_argument(
        "--border-type", "--borderType", dest="border_type", default="default",
        help="Pixel extrapolation method (default: default)",
    )
    args = parse_args(parser, argv, "gaussian_blur")

    try:
        validate_kernel_size(args.ksize_w, args.ksize_h)
        src = read_mat(resolve_input(args.filename, refresh=args.refresh))
    except (CvToolsError, RuntimeError) as e:
        return report_error(str(e))

    if src is None:
        return report_error("Source data is empty.")
    if depth_of_dtype(src.dtype) not in BLUR_SUPPORTED_DEPTHS:
        return report_error("Source depth is not supported.")

    try:
        border_type = get_border_type(args.border_type)
    except CvToolsError as e:
        return report_error(str(e))

    try:
        dst = cv2.GaussianBlur(
            src,
            (args.ksize_w, args.ksize_h),
            args.sigma_x,
            sigmaY=args.sigma_y,
            borderType=border_type,
        )
    except cv2.error as e:
        return report_error(f"GaussianBlur failed: {e}")

    if args.filestorage:
        try:
            save_mat(args.filestorage, dst)
        except CvToolsError as e:
            return report_error(str(e))

    if args.verbose:
        print_info("Blurred image:", dst)

    if args.imshow:
        show(WINDOW_PREFIX + Path(args.filename).name, dst)

    return 0


if __name__ == "__main__":
    sys.exit(main())
