"""
PDF Shuffler - Python package for reordering double-sided scans

Scanning a double-sided stack on a single-sided scanner yields every front
side followed by every back side. This package interleaves such PDFs back
into reading order, from a GTK4 window or from the command line.
"""

import sys

__version__ = "1.0.0"
__license__ = "GPL-3.0"


def _check_gtk_dependencies() -> bool:
    """Check if GTK dependencies are available.

    Returns:
        True if dependencies are met, False otherwise
    """
    try:
        import gi

        gi.require_version("Gtk", "4.0")
        gi.require_version("Adw", "1")

        from gi.repository import (
            Adw,  # noqa: F401
            Gtk,  # noqa: F401
        )

        return True
    except (ImportError, ValueError) as e:
        # Translations may not be available yet
        print(f"Error: Missing dependencies: {e}", file=sys.stderr)
        print("Please make sure GTK4, libadwaita and PyGObject are installed", file=sys.stderr)
        print("The command line tool 'pdfshuffler-cli' works without them", file=sys.stderr)
        return False


def main() -> int:
    """Main entry point for the desktop application.

    Returns:
        The application exit code.
    """
    from pdfshuffler.config import setup_environment
    from pdfshuffler.utils.logger import logger

    args = setup_environment(sys.argv[1:])

    if not _check_gtk_dependencies():
        return 1

    from pdfshuffler.application import PdfShufflerApp

    try:
        app = PdfShufflerApp()
        if args.files:
            logger.debug(f"Files provided in arguments: {args.files}")
        return app.run([sys.argv[0], *args.files])
    except Exception as e:
        logger.error(f"Critical error starting application: {e}")
        return 1


__all__ = ["main", "__version__", "__license__"]


if __name__ == "__main__":
    sys.exit(main())
