"""
PDF Shuffler - PDF Operations Service

Single-document pipeline: validate the input path, derive the output path,
open the scan with pikepdf, interleave its pages and write the result next
to the input. No GTK dependencies - can be used from CLI, GUI, or scripts.
"""

import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pikepdf

from pdfshuffler.constants import DOCUMENT_EXTENSION, OUTPUT_SUFFIX
from pdfshuffler.services.reorder import DEFAULT_POLICY, InterleavePolicy, reorder
from pdfshuffler.utils.exceptions import (
    InvalidPathError,
    NotADocumentError,
    OpenFailureError,
    SerializeFailureError,
    WriteFailureError,
)
from pdfshuffler.utils.i18n import _
from pdfshuffler.utils.logger import logger


def _friendly_error(e: Exception) -> str:
    """Map common exceptions to user-friendly messages."""
    if isinstance(e, FileNotFoundError):
        return _("Could not find the file. Was it moved or deleted?")
    if isinstance(e, PermissionError):
        return _("Permission denied.")
    if isinstance(e, pikepdf.PasswordError):
        return _("This PDF is password-protected. Remove the password first.")
    if isinstance(e, pikepdf.PdfError):
        return _("The PDF file appears to be damaged or invalid: {error}").format(error=e)
    if isinstance(e, OSError) and e.errno == 28:
        return _("Not enough disk space.")
    return str(e)


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass
class ShuffleOptions:
    """Per-job settings shared by every file of a batch."""

    policy: InterleavePolicy = DEFAULT_POLICY
    suffix: str = OUTPUT_SUFFIX
    overwrite: bool = True

    @classmethod
    def from_config(cls, config: Any) -> "ShuffleOptions":
        """Build options from a ConfigManager, ignoring invalid values."""
        options = cls()

        policy_name = config.get("shuffle.policy", DEFAULT_POLICY.value)
        try:
            options.policy = InterleavePolicy.from_name(str(policy_name))
        except ValueError:
            logger.warning(f"Unknown interleave policy '{policy_name}', using default")

        suffix = config.get("output.suffix", OUTPUT_SUFFIX)
        if isinstance(suffix, str) and suffix:
            options.suffix = suffix

        options.overwrite = bool(config.get("output.overwrite_existing", True))
        return options


# ---------------------------------------------------------------------------
# Output path policy
# ---------------------------------------------------------------------------


def _split_name(path: Path) -> tuple[str, str]:
    """Split a file name into stem and extension, keeping ``.pdf`` whole."""
    name = path.name
    if name.lower().endswith(DOCUMENT_EXTENSION):
        cut = len(name) - len(DOCUMENT_EXTENSION)
        return name[:cut], name[cut:]
    return path.stem, path.suffix


def is_pdf_path(path: str | Path) -> bool:
    """Check whether a path carries the PDF extension (case-insensitive)."""
    return Path(path).name.lower().endswith(DOCUMENT_EXTENSION)


def derive_output_path(input_path: str | Path, suffix: str = OUTPUT_SUFFIX) -> Path:
    """Return ``<stem><suffix><ext>`` in the directory of *input_path*.

    The extension keeps the spelling of the input (``scan.PDF`` gives
    ``scan_shuff.PDF``).

    Raises:
        InvalidPathError: If the path has no file stem (``.pdf``, ``/``).
    """
    path = Path(input_path)
    stem, extension = _split_name(path)
    if not stem or path.name == "..":
        raise InvalidPathError(str(input_path))

    return path.with_name(f"{stem}{suffix}{extension}")


def generate_unique_path(path: str | Path) -> Path:
    """Append ``-1``, ``-2``, ... to the stem until the path does not exist."""
    path = Path(path)
    counter = 1
    new_path = path

    while new_path.exists():
        new_path = path.with_name(f"{path.stem}-{counter}{path.suffix}")
        counter += 1

    if new_path != path:
        logger.info(
            _("Generated unique filename to avoid overwriting: {0}").format(new_path.name)
        )
    return new_path


# ---------------------------------------------------------------------------
# Shuffle
# ---------------------------------------------------------------------------


def _write_output(output_path: Path, data: bytes) -> None:
    """Write the whole serialized document in one call."""
    try:
        output_path.write_bytes(data)
    except OSError as e:
        raise WriteFailureError(str(output_path), _friendly_error(e)) from e


def shuffle_pdf(
    input_path: str | Path,
    output_path: str | Path,
    policy: InterleavePolicy = DEFAULT_POLICY,
) -> int:
    """Write a copy of *input_path* with its pages in reading order.

    Pages are appended to a new document by reference, so resources shared
    between pages (fonts, images) are not duplicated.

    Args:
        input_path: Scanned PDF (all fronts, then all backs).
        output_path: Destination file, overwritten if it exists.
        policy: Ordering of the back-side half.

    Returns:
        Number of pages written.

    Raises:
        OpenFailureError: If the input cannot be opened.
        EmptyDocumentError: If the input has no pages.
        OddPageCountError: If the input has an odd number of pages.
        SerializeFailureError: If the new document cannot be built.
        WriteFailureError: If the output cannot be written.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        src = pikepdf.open(input_path)
    except (OSError, pikepdf.PdfError) as e:
        raise OpenFailureError(str(input_path), _friendly_error(e)) from e

    with src:
        ordered = reorder(src.pages, policy)

        dst = pikepdf.Pdf.new()
        try:
            for page in ordered:
                dst.pages.append(page)

            buffer = io.BytesIO()
            dst.save(buffer)
        except (pikepdf.PdfError, OSError, ValueError) as e:
            raise SerializeFailureError(_friendly_error(e)) from e
        finally:
            dst.close()

    _write_output(output_path, buffer.getvalue())
    return len(ordered)


def process_pdf(input_path: str | Path, options: ShuffleOptions | None = None) -> Path:
    """Run the full single-file pipeline.

    Args:
        input_path: Scanned PDF to reorder.
        options: Shuffle options (defaults: reversed back side, ``_shuff``
            suffix, overwrite existing output).

    Returns:
        Path of the written file.

    Raises:
        NotADocumentError: If the input is not a ``.pdf`` file.
        InvalidPathError: If no output name can be derived.
        ShufflerError: Any error raised by :func:`shuffle_pdf`.
    """
    options = options or ShuffleOptions()
    path = Path(input_path)

    if not is_pdf_path(path):
        raise NotADocumentError(str(input_path))

    output_path = derive_output_path(path, options.suffix)
    if not options.overwrite and output_path.exists():
        output_path = generate_unique_path(output_path)

    page_count = shuffle_pdf(path, output_path, options.policy)

    logger.info(
        _("Shuffled {0}: {1} pages → {2}").format(
            os.path.basename(path), page_count, output_path.name
        )
    )
    return output_path
