#!/usr/bin/env python3
"""
PDF Shuffler CLI — reorder one double-sided scan from the terminal.

Usage:
    pdfshuffler-cli [options] INPUT

The input holds every front side followed by every back side. The result is
written next to the input as ``<name>_shuff.pdf`` and its path is printed.

Examples:
    pdfshuffler-cli scan.pdf
    pdfshuffler-cli scan.pdf --sequential-back
    pdfshuffler-cli scan.pdf --suffix _sorted --no-overwrite
"""

import argparse
import logging
import sys
from pathlib import Path

from pdfshuffler.config import APP_VERSION
from pdfshuffler.services.pdf_operations import ShuffleOptions, process_pdf
from pdfshuffler.services.reorder import InterleavePolicy
from pdfshuffler.utils.config_manager import get_config_manager
from pdfshuffler.utils.exceptions import ShufflerError
from pdfshuffler.utils.i18n import _


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    p = argparse.ArgumentParser(
        prog="pdfshuffler-cli",
        description="PDF Shuffler — put double-sided scans back into reading order.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help=_("Verbose logging (DEBUG)"))
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    p.add_argument("input", type=Path, help=_("Scanned PDF (all fronts, then all backs)"))

    order = p.add_mutually_exclusive_group()
    order.add_argument(
        "--reversed-back",
        dest="policy",
        action="store_const",
        const=InterleavePolicy.REVERSED_BACK,
        help=_("Back sides were scanned last sheet first (default)"),
    )
    order.add_argument(
        "--sequential-back",
        dest="policy",
        action="store_const",
        const=InterleavePolicy.SEQUENTIAL_BACK,
        help=_("Back sides were scanned in the same sheet order as the fronts"),
    )

    p.add_argument(
        "--suffix",
        type=str,
        default=None,
        help=_("Suffix added to the output file name. Default: _shuff."),
    )
    p.add_argument(
        "--no-overwrite",
        action="store_true",
        help=_("Pick a new name instead of replacing an existing output file"),
    )
    return p


def _build_options(args: argparse.Namespace) -> ShuffleOptions:
    """Merge saved settings with command line overrides."""
    options = ShuffleOptions.from_config(get_config_manager())
    if args.policy is not None:
        options.policy = args.policy
    if args.suffix is not None:
        options.suffix = args.suffix
    if args.no_overwrite:
        options.overwrite = False
    return options


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )
    logger = logging.getLogger("pdfshuffler.cli")

    if not args.input.exists():
        print(f"Error: {args.input} not found", file=sys.stderr)
        return 1

    if args.suffix is not None and not args.suffix:
        print("Error: --suffix must not be empty", file=sys.stderr)
        return 1

    options = _build_options(args)
    logger.debug(
        "Options: policy=%s, suffix=%s, overwrite=%s",
        options.policy.value,
        options.suffix,
        options.overwrite,
    )

    try:
        output_path = process_pdf(args.input, options)
    except ShufflerError as e:
        logger.debug("Shuffle failed with %s", e.code.name)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
