"""Unit tests for binary section truncation in imported patches."""

from __future__ import annotations

from patchview.services.patch_sanitizer import (
    MAX_BINARY_LINES,
    TRUNCATION_MARKER,
    iter_sanitized,
    sanitize_patch,
    was_truncated,
)

TEXT_PATCH = [
    "diff --git a/README.md b/README.md",
    "index 1111111..2222222 100644",
    "--- a/README.md",
    "+++ b/README.md",
    "@@ -1 +1 @@",
    "-old",
    "+new",
]


def _binary_patch(body_lines: int) -> list[str]:
    return [
        "diff --git a/logo.png b/logo.png",
        "index 3333333..4444444 100644",
        "GIT binary patch",
        "literal 123456",
        *[f"zcmV{i:05d}" for i in range(body_lines - 1)],
    ]


class TestSanitizePatch:
    def test_text_patch_passes_through(self):
        assert sanitize_patch(TEXT_PATCH) == TEXT_PATCH

    def test_none_and_empty(self):
        assert sanitize_patch(None) == []
        assert sanitize_patch([]) == []

    def test_large_binary_body_is_capped(self):
        patch = _binary_patch(10_000) + TEXT_PATCH
        result = sanitize_patch(patch)

        marker_index = result.index("GIT binary patch")
        closing_index = result.index("diff --git a/README.md b/README.md")
        body = result[marker_index + 1 : closing_index]

        assert len(body) == MAX_BINARY_LINES + 1
        assert body[-1] == TRUNCATION_MARKER
        assert result[closing_index:] == TEXT_PATCH

    def test_small_binary_body_is_untouched(self):
        patch = _binary_patch(20) + TEXT_PATCH
        assert sanitize_patch(patch) == patch

    def test_header_right_after_cap_follows_marker(self):
        binary = _binary_patch(MAX_BINARY_LINES)
        patch = binary + TEXT_PATCH
        assert sanitize_patch(patch) == binary + [TRUNCATION_MARKER] + TEXT_PATCH

    def test_one_line_over_cap_gets_marker(self):
        patch = _binary_patch(MAX_BINARY_LINES + 1) + TEXT_PATCH
        result = sanitize_patch(patch)
        assert result.count(TRUNCATION_MARKER) == 1
        assert len(result) == len(patch)

    def test_binary_files_differ_line(self):
        patch = [
            "diff --git a/archive.zip b/archive.zip",
            "index 5555555..6666666 100644",
            "Binary files a/archive.zip and b/archive.zip differ",
            *TEXT_PATCH,
        ]
        assert sanitize_patch(patch) == patch

    def test_early_file_header_does_not_close_section(self):
        patch = ["GIT binary patch", "--- early"] + ["x"] * 200
        result = sanitize_patch(patch)
        assert result == ["GIT binary patch", "--- early"] + ["x"] * (MAX_BINARY_LINES - 1) + [TRUNCATION_MARKER]

    def test_file_header_after_minimum_closes_section(self):
        patch = ["GIT binary patch"] + ["x"] * 200 + ["--- a/next.txt", "+++ b/next.txt"]
        result = sanitize_patch(patch)
        assert result == (
            ["GIT binary patch"]
            + ["x"] * MAX_BINARY_LINES
            + [TRUNCATION_MARKER, "--- a/next.txt", "+++ b/next.txt"]
        )

    def test_every_section_is_capped(self):
        patch = _binary_patch(500) + _binary_patch(500) + TEXT_PATCH
        result = sanitize_patch(patch)
        assert result.count(TRUNCATION_MARKER) == 2
        assert result[-len(TEXT_PATCH):] == TEXT_PATCH

    def test_iter_is_lazy(self):
        stream = iter_sanitized(iter(_binary_patch(10)))
        assert next(stream) == "diff --git a/logo.png b/logo.png"


class TestWasTruncated:
    def test_detects_marker(self):
        assert was_truncated(sanitize_patch(_binary_patch(1000)))
        assert not was_truncated(sanitize_patch(TEXT_PATCH))
