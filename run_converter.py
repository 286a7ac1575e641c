#!/usr/bin/env python3
"""
Launch script for the Mirrorshades log converter.

Usage:
    python run_converter.py LOGFILE

Examples:
    python run_converter.py session.log     # writes session_elapsed.log
"""

import sys

from mirrorlog.cli import main


if __name__ == "__main__":
    sys.exit(main())
