"""Unit tests for applying unified diffs to a base document."""

from __future__ import annotations

import pytest

from patchview.services.diff_generator import DiffGenerator
from patchview.services.errors import PatchApplyError
from patchview.services.patch_applier import apply_patch

ORIGINAL = ["line 1", "line 2", "line 3"]


class TestApplyPatch:
    def test_replaces_line(self, modify_patch):
        assert apply_patch(ORIGINAL, modify_patch) == ["line 1", "line 2 modified", "line 3"]

    def test_does_not_modify_base(self, modify_patch):
        base = list(ORIGINAL)
        apply_patch(base, modify_patch)
        assert base == ORIGINAL

    def test_insertion_after_line(self):
        patch = ["--- a/f.txt", "+++ b/f.txt", "@@ -2,0 +3,1 @@", "+X"]
        assert apply_patch(["a", "b", "c"], patch) == ["a", "b", "X", "c"]

    def test_insertion_numbered_before_line(self):
        patch = ["--- a/f.txt", "+++ b/f.txt", "@@ -3,0 +3,1 @@", "+X"]
        assert apply_patch(["a", "b", "c"], patch) == ["a", "b", "X", "c"]

    def test_new_file(self):
        patch = ["--- /dev/null", "+++ b/new.txt", "@@ -0,0 +1,2 @@", "+a", "+b"]
        assert apply_patch([], patch) == ["a", "b"]

    def test_multiple_hunks(self):
        patch = [
            "--- a/f.txt",
            "+++ b/f.txt",
            "@@ -2,1 +2,2 @@",
            "-b",
            "+B1",
            "+B2",
            "@@ -5,1 +6,1 @@",
            "-e",
            "+E",
        ]
        assert apply_patch(["a", "b", "c", "d", "e", "f"], patch) == ["a", "B1", "B2", "c", "d", "E", "f"]

    def test_generated_diff_applies(self):
        original = ["a", "b", "c"]
        revised = ["A", "b", "c", "d"]
        diff = DiffGenerator().generate_unified_diff(original, revised)
        assert apply_patch(original, diff.to_lines()) == revised

    def test_mismatched_base_raises(self, modify_patch):
        with pytest.raises(PatchApplyError):
            apply_patch(["line 1", "something else", "line 3"], modify_patch)

    def test_base_too_short_raises(self, modify_patch):
        with pytest.raises(PatchApplyError):
            apply_patch(["line 1"], modify_patch)

    def test_not_a_patch_raises(self):
        with pytest.raises(PatchApplyError):
            apply_patch(ORIGINAL, ["hello", "world"])

    def test_multi_file_patch_raises(self, modify_patch):
        other = ["--- a/other.txt", "+++ b/other.txt", "@@ -1 +1 @@", "-x", "+y"]
        with pytest.raises(PatchApplyError):
            apply_patch(ORIGINAL, modify_patch + other)
