#!/usr/bin/env python3
"""
PDF Shuffler - Configuration Module

This module contains all configuration constants and paths used by the application.
"""

import argparse
import logging
import os
import sys
from typing import Final

from pdfshuffler.utils.i18n import _

# ============================================================================
# Application Constants
# ============================================================================

APP_NAME: Final[str] = "PDF Shuffler"
APP_ID: Final[str] = "io.github.pdfshuffler"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = _("Put double-sided scans back into reading order")
APP_ICON_NAME: Final[str] = "pdfshuffler"


# ============================================================================
# Configuration Directory
# ============================================================================

CONFIG_DIR: Final[str] = os.path.expanduser("~/.config/pdfshuffler")


# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL: int = logging.INFO
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME: Final[str] = "PDFShuffler"


# ============================================================================
# Window Configuration
# ============================================================================

DEFAULT_WINDOW_WIDTH: Final[int] = 400
DEFAULT_WINDOW_HEIGHT: Final[int] = 300
WINDOW_STATE_KEY: Final[str] = "window"


def parse_command_line(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments of the desktop application.

    Returns:
        Parsed command line arguments.
    """
    parser = argparse.ArgumentParser(description=APP_DESCRIPTION)
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help=_("Print version information and exit"),
    )
    parser.add_argument("-d", "--debug", action="store_true", help=_("Enable debug mode"))
    parser.add_argument("files", nargs="*", help=_("PDF files to shuffle on startup"))

    return parser.parse_args(argv)


def setup_environment(argv: list[str] | None = None) -> argparse.Namespace:
    """Configure environment variables and settings.

    Returns:
        Parsed command line arguments.
    """
    global LOG_LEVEL

    args = parse_command_line(argv)

    if args.version:
        print(f"{APP_NAME} {APP_VERSION}")
        sys.exit(0)

    if args.debug:
        LOG_LEVEL = logging.DEBUG
        logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)

    os.makedirs(CONFIG_DIR, exist_ok=True)

    return args
