"""Argument parsing and console reporting shared by the tools."""

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

import cv2
import numpy as np
import yaml

from ..config import ToolConfig
from ..mattype import describe
from ..storage import write_mat

LOG_LEVEL_ENV = "CVTOOLS_LOG_LEVEL"


def build_parser(
    description: str,
    epilog: str | None = None,
    filestorage: bool = True,
) -> argparse.ArgumentParser:
    """Create a parser with the options every tool understands."""
    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("filename", help="Name of the file (or http(s) URL) to read from")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose mode")
    parser.add_argument("--imshow", action="store_true", help="Display the result in a window")
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Download URL inputs again even if they are cached",
    )
    if filestorage:
        parser.add_argument(
            "--filestorage",
            metavar="PATH",
            help="Write data to the specified XML/YAML/JSON file",
        )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="YAML file with option defaults",
    )
    return parser


def parse_args(
    parser: argparse.ArgumentParser,
    argv: Sequence[str] | None,
    tool: str,
) -> argparse.Namespace:
    """Parse arguments, taking defaults from ``--config`` when given.

    Options given on the command line override values from the config file.
    """
    setup_logging()

    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path)
    known, _ = pre.parse_known_args(argv)

    if known.config is not None:
        try:
            config = ToolConfig.from_yaml(known.config)
        except FileNotFoundError:
            parser.error(f"config file not found: {known.config}")
        except (OSError, ValueError, yaml.YAMLError) as e:
            parser.error(f"invalid config file {known.config}: {e}")
        defaults = config.defaults_for(tool)
        logging.getLogger(__name__).debug("Defaults for %s from %s: %s", tool, known.config, defaults)
        parser.set_defaults(**defaults)

    return parser.parse_args(argv)


def setup_logging() -> None:
    """Configure logging from the CVTOOLS_LOG_LEVEL environment variable."""
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(level=level, format="%(name)s: %(message)s")


def report_error(message: str) -> int:
    """Print an error and return the failure exit code."""
    print(f"[ERROR] {message}", file=sys.stderr)
    return 1


def warn(message: str) -> None:
    print(f"[WARN] {message}")


def print_info(header: str, mat: np.ndarray | None) -> None:
    """Print the verbose-mode description of a matrix."""
    print(f"[INFO] {header}")
    print(describe(mat).format_verbose())


def save_mat(path: str, mat: np.ndarray | None) -> None:
    """Persist a result for --filestorage; empty results are skipped."""
    if mat is None or mat.size == 0:
        warn(f"Nothing to write to {path}: the matrix is empty.")
        return
    write_mat(path, mat)


def show(window_name: str, mat: np.ndarray | None) -> None:
    """Display a non-empty matrix and wait for a key press."""
    if mat is None or mat.size == 0:
        return
    cv2.imshow(window_name, mat)
    cv2.waitKey()
    cv2.destroyWindow(window_name)
