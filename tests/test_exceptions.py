"""Tests for the exception hierarchy."""

from pdfshuffler.utils.exceptions import (
    EmptyDocumentError,
    ErrorCode,
    InvalidPathError,
    NotADocumentError,
    OddPageCountError,
    OpenFailureError,
    ReorderRejectedError,
    SerializeFailureError,
    ShufflerError,
    WriteFailureError,
)


class TestShufflerError:
    def test_message_only(self):
        assert str(ShufflerError("boom")) == "boom"

    def test_message_with_details(self):
        assert str(ShufflerError("boom", details="x=1")) == "boom (x=1)"

    def test_all_errors_share_base(self):
        errors = [
            NotADocumentError("a.txt"),
            InvalidPathError(""),
            OpenFailureError("a.pdf", "damaged"),
            EmptyDocumentError(),
            OddPageCountError(3),
            SerializeFailureError(),
            WriteFailureError("/ro/a.pdf", "denied"),
        ]
        for error in errors:
            assert isinstance(error, ShufflerError)
            assert error.code is not ErrorCode.NONE

    def test_reorder_rejections(self):
        assert issubclass(EmptyDocumentError, ReorderRejectedError)
        assert issubclass(OddPageCountError, ReorderRejectedError)

    def test_write_failure_message(self):
        error = WriteFailureError("/ro/a.pdf", "Permission denied.")
        assert str(error) == (
            "Could not write output file: /ro/a.pdf - Permission denied. (path=/ro/a.pdf)"
        )

    def test_open_failure_without_reason(self):
        assert str(OpenFailureError("a.pdf")) == "Could not open PDF: a.pdf"
