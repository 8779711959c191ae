#!/usr/bin/env python3
"""Print the OpenCV version string."""

import argparse
import sys
from collections.abc import Sequence

import cv2


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Get the OpenCV library version string")
    parser.parse_args(argv)

    print(cv2.getVersionString())
    return 0


if __name__ == "__main__":
    sys.exit(main())
