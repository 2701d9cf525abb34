"""
PDF Shuffler - Services Package

Reorder engine, single-file pipeline and batch coordinator.
"""

from pdfshuffler.services.batch import BatchCoordinator, BatchPhase, BatchState
from pdfshuffler.services.pdf_operations import ShuffleOptions, process_pdf
from pdfshuffler.services.reorder import InterleavePolicy, reorder

__all__ = [
    "BatchCoordinator",
    "BatchPhase",
    "BatchState",
    "InterleavePolicy",
    "ShuffleOptions",
    "process_pdf",
    "reorder",
]
