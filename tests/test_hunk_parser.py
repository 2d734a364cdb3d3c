"""Unit tests for hunk header parsing and unified diff segmentation."""

from __future__ import annotations

from patchview.models.diff import LineKind
from patchview.services.diff_generator import DiffGenerator
from patchview.services.hunk_parser import parse_hunk_header, parse_unified_diff


class TestParseHunkHeader:
    def test_full_header(self):
        header = parse_hunk_header("@@ -10,5 +10,5 @@")
        assert header is not None
        assert header.original_start == 10
        assert header.original_length == 5
        assert header.revised_start == 10
        assert header.revised_length == 5

    def test_revised_side_is_read_from_plus_range(self):
        header = parse_hunk_header("@@ -3,2 +7,4 @@")
        assert (header.original_start, header.original_length) == (3, 2)
        assert (header.revised_start, header.revised_length) == (7, 4)

    def test_omitted_lengths_default_to_one(self):
        header = parse_hunk_header("@@ -3 +4 @@")
        assert header.original_length == 1
        assert header.revised_length == 1

    def test_trailing_section_text_is_ignored(self):
        header = parse_hunk_header("@@ -12,7 +12,8 @@ def handler(request):")
        assert header.original_start == 12
        assert header.revised_length == 8

    def test_placeholder_header(self):
        header = parse_hunk_header("@@ -0,0 +0,0 @@")
        assert header.original_start == 0
        assert header.revised_length == 0

    def test_non_header_line_returns_none(self):
        assert parse_hunk_header("not an @@ line") is None

    def test_context_line_returns_none(self):
        assert parse_hunk_header(" line 1") is None

    def test_malformed_header_returns_none(self):
        assert parse_hunk_header("@@ garbage @@") is None
        assert parse_hunk_header("@@ -x,1 +1,1 @@") is None

    def test_empty_line_returns_none(self):
        assert parse_hunk_header("") is None


class TestParseUnifiedDiff:
    def test_labels_and_hunk(self, modify_patch):
        diff = parse_unified_diff(modify_patch)
        assert diff.original_label == "a/file.txt"
        assert diff.revised_label == "b/file.txt"
        assert len(diff.hunks) == 1

        hunk = diff.hunks[0]
        assert [line.kind for line in hunk.lines] == [
            LineKind.CONTEXT,
            LineKind.REMOVED,
            LineKind.ADDED,
            LineKind.CONTEXT,
        ]
        assert hunk.lines[2].text == "line 2 modified"

    def test_segments_at_each_header(self):
        diff = parse_unified_diff([
            "--- Original",
            "+++ Revised",
            "@@ -2,1 +2,1 @@",
            "-b",
            "+B",
            "@@ -5,1 +5,1 @@",
            "-e",
            "+E",
        ])
        assert [hunk.original_start for hunk in diff.hunks] == [2, 5]
        assert diff.difference_count == 2

    def test_blank_line_is_empty_context(self):
        diff = parse_unified_diff(["@@ -1,2 +1,2 @@", "", "-x", "+y"])
        assert diff.hunks[0].lines[0].kind == LineKind.CONTEXT
        assert diff.hunks[0].lines[0].text == ""

    def test_no_newline_marker_is_skipped(self):
        diff = parse_unified_diff(["@@ -1 +1 @@", "-a", "\\ No newline at end of file", "+b"])
        assert [line.text for line in diff.hunks[0].lines] == ["a", "b"]

    def test_no_hunks(self):
        diff = parse_unified_diff(["just", "some", "text"])
        assert diff.hunks == []
        assert diff.original_label == "Original"

    def test_reads_back_generated_diff(self):
        generated = DiffGenerator().generate_unified_diff(
            ["a", "b", "c", "d"], ["a", "B", "c", "d", "e"], "old.txt", "new.txt"
        )
        assert parse_unified_diff(generated.to_lines()).model_dump() == generated.model_dump()
