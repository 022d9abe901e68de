"""Tests for minigrep.utils.utils module."""

from __future__ import annotations

from pathlib import Path

import pytest

from minigrep.utils.utils import fold_case, highlight_spans, read_document, split_lines


class TestSplitLines:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", []),
            ("\n", [""]),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\n\nb", ["a", "", "b"]),
            ("a\r\nb\r\n", ["a", "b"]),
            ("\nRust:", ["", "Rust:"]),
            ("a\n\n", ["a", ""]),
        ],
    )
    def test_split(self, text, expected):
        assert split_lines(text) == expected


class TestFoldCase:
    def test_ascii(self):
        assert fold_case("Hello WORLD") == "hello world"

    def test_non_ascii(self):
        assert fold_case("ÄÖÜ Straße") == "äöü straße"

    def test_length_preserved(self):
        text = "İstanbul ẞ Σ"
        assert len(fold_case(text)) == len(text)
        assert fold_case(text).startswith("İ")


class TestReadDocument:
    def test_utf8(self, tmp_path: Path):
        path = tmp_path / "doc.txt"
        path.write_text("Hello 世界\n", encoding="utf-8")
        assert read_document(path) == "Hello 世界\n"

    def test_bom_stripped(self, tmp_path: Path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"\xef\xbb\xbfRust")
        assert read_document(path) == "Rust"

    def test_crlf_kept(self, tmp_path: Path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"a\r\nb")
        assert read_document(path) == "a\r\nb"

    def test_invalid_bytes_raise(self, tmp_path: Path):
        path = tmp_path / "doc.bin"
        path.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(UnicodeDecodeError):
            read_document(path)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_document(tmp_path / "missing.txt")


class TestHighlightSpans:
    def test_no_spans(self):
        assert highlight_spans("plain", []) == "plain"

    def test_multiple_spans(self):
        assert highlight_spans("the cat and the hat", [(0, 3), (12, 15)]) == "[the] cat and [the] hat"

    def test_custom_markers(self):
        assert highlight_spans("Hello", [(0, 3)], "[[", "]]") == "[[Hel]]lo"

    def test_overlapping_spans(self):
        assert highlight_spans("aaa", [(0, 2), (1, 3)]) == "[aa][a]"

    def test_out_of_range_clamped(self):
        assert highlight_spans("abc", [(1, 10)]) == "a[bc]"

    def test_unsorted_input(self):
        assert highlight_spans("abcdef", [(4, 5), (0, 1)]) == "[a]bcd[e]f"
