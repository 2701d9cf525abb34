"""
PDF Shuffler - Custom Exceptions Module

This module defines the exception classes raised while shuffling a document.
Every error is terminal for the job that raised it.
"""

from enum import Enum, auto


class ErrorCode(Enum):
    """Error classification for shuffle operations."""

    NONE = auto()
    NOT_A_DOCUMENT = auto()
    INVALID_PATH = auto()
    OPEN_FAILURE = auto()
    EMPTY_DOCUMENT = auto()
    ODD_PAGE_COUNT = auto()
    SERIALIZE_FAILURE = auto()
    WRITE_FAILURE = auto()


class ShufflerError(Exception):
    """Base exception for all PDF Shuffler errors.

    All custom exceptions should inherit from this class to allow
    catching any shuffler-specific error.
    """

    code: ErrorCode = ErrorCode.NONE

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class NotADocumentError(ShufflerError):
    """Raised when the input does not carry the PDF extension."""

    code = ErrorCode.NOT_A_DOCUMENT

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"File must be a PDF: {file_path}")


class InvalidPathError(ShufflerError):
    """Raised when no file stem can be extracted from the input path."""

    code = ErrorCode.INVALID_PATH

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Invalid input file path: '{file_path}'")


class OpenFailureError(ShufflerError):
    """Raised when the input PDF cannot be opened or parsed."""

    code = ErrorCode.OPEN_FAILURE

    def __init__(self, file_path: str, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            file_path: Path to the PDF that failed to open
            reason: Optional reason reported by the PDF library
        """
        self.file_path = file_path
        self.reason = reason
        msg = f"Could not open PDF: {file_path}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class ReorderRejectedError(ShufflerError):
    """Raised when a page sequence cannot be interleaved."""


class EmptyDocumentError(ReorderRejectedError):
    """Raised when the document has no pages."""

    code = ErrorCode.EMPTY_DOCUMENT

    def __init__(self) -> None:
        super().__init__("PDF has no pages")


class OddPageCountError(ReorderRejectedError):
    """Raised when the document has an odd number of pages."""

    code = ErrorCode.ODD_PAGE_COUNT

    def __init__(self, page_count: int) -> None:
        self.page_count = page_count
        super().__init__(
            f"PDF has an odd number of pages ({page_count}). "
            "This tool only works with an even number of pages."
        )


class SerializeFailureError(ShufflerError):
    """Raised when the reordered document cannot be serialized."""

    code = ErrorCode.SERIALIZE_FAILURE

    def __init__(self, reason: str | None = None) -> None:
        msg = "Could not build the reordered PDF"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class WriteFailureError(ShufflerError):
    """Raised when the output file cannot be written."""

    code = ErrorCode.WRITE_FAILURE

    def __init__(self, output_path: str, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            output_path: The path that could not be written
            reason: Optional reason for the failure
        """
        self.output_path = output_path
        self.reason = reason
        msg = f"Could not write output file: {output_path}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg, details=f"path={output_path}")


# Exception hierarchy summary:
# ShufflerError (base)
# ├── NotADocumentError
# ├── InvalidPathError
# ├── OpenFailureError
# ├── ReorderRejectedError
# │   ├── EmptyDocumentError
# │   └── OddPageCountError
# ├── SerializeFailureError
# └── WriteFailureError
