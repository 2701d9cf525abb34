"""Tests for the command line entry point."""

import pytest

from pdfshuffler.cli import build_parser, main
from pdfshuffler.services.reorder import InterleavePolicy


class TestBuildParser:
    def test_defaults(self):
        args = build_parser().parse_args(["scan.pdf"])
        assert str(args.input) == "scan.pdf"
        assert args.policy is None
        assert args.suffix is None
        assert args.no_overwrite is False
        assert args.verbose is False

    def test_sequential_back_flag(self):
        args = build_parser().parse_args(["scan.pdf", "--sequential-back"])
        assert args.policy is InterleavePolicy.SEQUENTIAL_BACK

    def test_reversed_back_flag(self):
        args = build_parser().parse_args(["--reversed-back", "scan.pdf"])
        assert args.policy is InterleavePolicy.REVERSED_BACK

    def test_policies_mutually_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["scan.pdf", "--reversed-back", "--sequential-back"])

    def test_input_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    def test_success_prints_output_path(self, make_pdf, page_markers, capsys):
        src = make_pdf("scan.pdf", 4)
        assert main([str(src)]) == 0

        out = capsys.readouterr().out.strip()
        expected = src.with_name("scan_shuff.pdf")
        assert out == str(expected)
        assert page_markers(expected) == [0, 3, 1, 2]

    def test_sequential_back(self, make_pdf, page_markers):
        src = make_pdf("scan.pdf", 4)
        assert main([str(src), "--sequential-back"]) == 0
        assert page_markers(src.with_name("scan_shuff.pdf")) == [0, 2, 1, 3]

    def test_policy_from_config(self, make_pdf, page_markers, isolated_config):
        isolated_config.set("shuffle.policy", "sequential-back", save_immediately=False)
        src = make_pdf("scan.pdf", 4)
        assert main([str(src)]) == 0
        assert page_markers(src.with_name("scan_shuff.pdf")) == [0, 2, 1, 3]

    def test_flag_overrides_config(self, make_pdf, page_markers, isolated_config):
        isolated_config.set("shuffle.policy", "sequential-back", save_immediately=False)
        src = make_pdf("scan.pdf", 4)
        assert main([str(src), "--reversed-back"]) == 0
        assert page_markers(src.with_name("scan_shuff.pdf")) == [0, 3, 1, 2]

    def test_custom_suffix(self, make_pdf):
        src = make_pdf("scan.pdf", 2)
        assert main([str(src), "--suffix", "_sorted"]) == 0
        assert src.with_name("scan_sorted.pdf").exists()

    def test_empty_suffix_rejected(self, make_pdf, capsys):
        src = make_pdf("scan.pdf", 2)
        assert main([str(src), "--suffix", ""]) == 1
        assert "--suffix" in capsys.readouterr().err

    def test_no_overwrite(self, make_pdf, capsys):
        src = make_pdf("scan.pdf", 2)
        src.with_name("scan_shuff.pdf").write_bytes(b"keep")
        assert main([str(src), "--no-overwrite"]) == 0
        assert capsys.readouterr().out.strip() == str(src.with_name("scan_shuff-1.pdf"))
        assert src.with_name("scan_shuff.pdf").read_bytes() == b"keep"

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.pdf")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_odd_page_count(self, make_pdf, capsys):
        src = make_pdf("odd.pdf", 3)
        assert main([str(src)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "odd number of pages (3)" in err

    def test_not_a_document(self, tmp_path, capsys):
        notes = tmp_path / "notes.txt"
        notes.write_text("hello")
        assert main([str(notes)]) == 1
        assert "must be a PDF" in capsys.readouterr().err

    def test_corrupt_pdf(self, tmp_path, capsys):
        corrupt = tmp_path / "bad.pdf"
        corrupt.write_bytes(b"garbage")
        assert main([str(corrupt)]) == 1
        assert "Could not open PDF" in capsys.readouterr().err
