#!/usr/bin/env python3
"""Load an image from a file with cv2.imread."""

import sys
from collections.abc import Sequence

import cv2

from ..errors import CvToolsError
from ..options import format_imread_modes, get_imread_mode
from ..url import resolve_input
from .common import build_parser, parse_args, print_info, report_error, save_mat, show, warn


def main(argv: Sequence[str] | None = None) -> int:
    """Decode an image and optionally describe, store or display it."""
    parser = build_parser(
        "Loads an image from a file.",
        epilog=format_imread_modes(),
    )
    parser.add_argument("--flags", default="color", help="Mode of imread (default: color)")
    args = parse_args(parser, argv, "imread")

    try:
        mode = get_imread_mode(args.flags)
        filename = resolve_input(args.filename, refresh=args.refresh)
    except (CvToolsError, RuntimeError) as e:
        return report_error(str(e))

    image = cv2.imread(filename, mode)

    if image is None:
        warn("imread returns an empty matrix.")

    if args.filestorage:
        try:
            save_mat(args.filestorage, image)
        except CvToolsError as e:
            return report_error(str(e))

    if args.verbose:
        print_info("Loaded the image:", image)

    if args.imshow:
        show(args.filename, image)

    return 0


if __name__ == "__main__":
    sys.exit(main())
