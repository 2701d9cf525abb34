#!/usr/bin/env python3
"""
PDF Shuffler - Entry point for python -m pdfshuffler

This module allows the package to be run as a module:
    python -m pdfshuffler
"""

import sys

from pdfshuffler import main

if __name__ == "__main__":
    sys.exit(main())
