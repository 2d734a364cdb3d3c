"""
Context Merger - Splice zero-context hunks back into the full original document
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from patchview.models.diff import DiffLine, Hunk, LineKind, MergedView, UnifiedDiff

T = TypeVar("T")


def extract_range(seq: Sequence[T], start: int, end: int) -> list[T]:
    """Return seq[start..end] inclusive, or [] when the bounds do not fit"""
    if not seq or start > end or start < 0 or end >= len(seq):
        return []
    return list(seq[start : end + 1])


def _unchanged_start(hunk: Hunk) -> int:
    # First original index after the hunk; a leading placeholder has nothing to skip
    return max(hunk.original_start + hunk.original_length - 1, 0)


def merge_context(original: Sequence[str], diff: UnifiedDiff) -> MergedView:
    """Build the annotated whole-document view of `diff` over `original`.

    Every original line lands exactly once, either as context between hunks
    or as a removed line inside one. Hunks must use the generator's
    numbering, where a hunk's original start is the 1-indexed position of
    the first original line it touches (or would be inserted before).
    """
    base = [DiffLine(kind=LineKind.CONTEXT, text=text) for text in original]
    hunks = diff.hunks or [Hunk.placeholder()]
    if hunks[0].original_start > 1:
        # Lines ahead of the first hunk hang off a leading placeholder
        hunks = [Hunk.placeholder(), *hunks]
    merged: list[DiffLine] = []

    for i, hunk in enumerate(hunks):
        merged.append(DiffLine(kind=LineKind.HEADER, text=hunk.header))
        merged.extend(hunk.lines)

        if i + 1 < len(hunks):
            next_hunk = hunks[i + 1]
            merged.extend(extract_range(base, _unchanged_start(hunk), next_hunk.original_start - 2))
        else:
            start = _unchanged_start(hunk)
            if start < len(base):
                merged.extend(extract_range(base, start, len(base) - 1))

    return MergedView(
        original_label=diff.original_label,
        revised_label=diff.revised_label,
        difference_count=diff.difference_count,
        lines=merged,
    )
