#!/usr/bin/env python3
"""Load a matrix from an XML/YAML/JSON FileStorage file."""

import sys
from collections.abc import Sequence

from ..errors import CvToolsError
from ..storage import read_mat
from ..url import resolve_input
from .common import build_parser, parse_args, print_info, report_error, show, warn


def main(argv: Sequence[str] | None = None) -> int:
    """Read the ``mat`` node of a FileStorage file."""
    parser = build_parser("Loads data from a file storage.", filestorage=False)
    args = parse_args(parser, argv, "fsread")

    try:
        mat = read_mat(resolve_input(args.filename, refresh=args.refresh))
    except (CvToolsError, RuntimeError) as e:
        return report_error(str(e))

    if mat is None:
        warn("fsread returns an empty matrix.")

    if args.verbose:
        print_info("Loaded the data:", mat)

    if args.imshow:
        show(args.filename, mat)

    return 0


if __name__ == "__main__":
    sys.exit(main())
