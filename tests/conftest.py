"""Pytest configuration for pdfshuffler tests.

Test PDFs are built on the fly with pikepdf. Every page gets a distinct
MediaBox width (``MARKER_BASE + original index``) so the page order of an
output file can be read back without any text extraction.
"""

from pathlib import Path

import pikepdf
import pytest

from pdfshuffler.utils import config_manager
from pdfshuffler.utils.config_manager import ConfigManager

MARKER_BASE = 100


def create_test_pdf(path: str | Path, num_pages: int = 4) -> Path:
    """Create a PDF whose pages are numbered through their MediaBox width."""
    pdf = pikepdf.Pdf.new()
    for i in range(num_pages):
        page = pikepdf.Page(
            pikepdf.Dictionary(
                Type=pikepdf.Name.Page,
                MediaBox=[0, 0, MARKER_BASE + i, 792],
                Contents=pdf.make_stream(f"BT /F1 12 Tf 10 700 Td (Page {i + 1}) Tj ET".encode()),
            )
        )
        pdf.pages.append(page)
    pdf.save(str(path))
    pdf.close()
    return Path(path)


def read_page_markers(path: str | Path) -> list[int]:
    """Return the original 0-based index of every page, in file order."""
    with pikepdf.open(str(path)) as pdf:
        return [int(page.MediaBox[2]) - MARKER_BASE for page in pdf.pages]


@pytest.fixture
def make_pdf(tmp_path):
    """Factory fixture: ``make_pdf("scan.pdf", 6)`` -> Path in tmp_path."""

    def _make(name: str = "scan.pdf", num_pages: int = 4) -> Path:
        return create_test_pdf(tmp_path / name, num_pages)

    return _make


@pytest.fixture
def page_markers():
    return read_page_markers


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from ~/.config/pdfshuffler."""
    manager = ConfigManager(config_path=str(tmp_path / "config" / "settings.json"))
    monkeypatch.setattr(config_manager, "_config_manager", manager)
    return manager
