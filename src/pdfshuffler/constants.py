"""
PDF Shuffler - Numeric Constants

Simple constants with ZERO internal imports to avoid circular dependencies.
For application-level constants (strings, paths), use config.py.
"""

from typing import Final

# ============================================================================
# Output Naming
# ============================================================================

DOCUMENT_EXTENSION: Final[str] = ".pdf"
OUTPUT_SUFFIX: Final[str] = "_shuff"

# ============================================================================
# Batch Processing
# ============================================================================

# Seconds a finished batch summary stays visible
SUMMARY_TIMEOUT_SECS: Final[float] = 3.0

# 0 = one thread per file, no cap
DEFAULT_MAX_WORKERS: Final[int] = 0

# ============================================================================
# UI Timing
# ============================================================================

POLL_INTERVAL_MS: Final[int] = 100
