"""
Command-line entry point.

Usage:
    mirrorlog LOGFILE
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mirrorlog.services.converter import convert_file


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirrorlog",
        description="Convert a Mirrorshades log to elapsed seconds and Euler angles, one record per second",
    )
    parser.add_argument(
        "logfile",
        help="Log file to convert; output is written next to it as <name>_elapsed.log",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        convert_file(Path(args.logfile))
    except ValueError as e:
        logger.error(f"Conversion of {args.logfile} failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not convert {args.logfile}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
