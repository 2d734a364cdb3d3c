"""
Diff Generator Service - Generate zero-context unified diffs and merged views
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from patchview.models.diff import (
    DEFAULT_ORIGINAL_LABEL,
    DEFAULT_REVISED_LABEL,
    DiffLine,
    Hunk,
    LineKind,
    MergedView,
    UnifiedDiff,
)

from .context_merger import merge_context
from .documents import read_lines

logger = logging.getLogger(__name__)

# A diff whose third line carries this is anchored at original line 1
FIRST_LINE_ANCHOR = "@@ -1,"


def _shortest_edit(a: Sequence[str], b: Sequence[str]) -> list[str]:
    """Myers shortest edit script, one of " ", "-" or "+" per step"""
    n, m = len(a), len(b)
    v = {1: 0}
    trace = []

    for d in range(n + m + 1):
        trace.append(dict(v))
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k

            # Follow the diagonal of equal lines
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1

            v[k] = x
            if x >= n and y >= m:
                return _backtrack(trace, n, m)

    return []


def _backtrack(trace: list[dict[int, int]], n: int, m: int) -> list[str]:
    x, y = n, m
    ops = []

    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v[k - 1] < v[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v[prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            ops.append(" ")

        if d > 0:
            ops.append("+" if x == prev_x else "-")
            x, y = prev_x, prev_y

    ops.reverse()
    return ops


def changed_regions(original: Sequence[str], revised: Sequence[str]) -> list[tuple[int, int, int, int]]:
    """Changed regions of a minimal edit script as (i1, i2, j1, j2) slices.

    A shared prefix and suffix are always part of some longest common
    subsequence, so they are cut off before running the search.
    """
    n, m = len(original), len(revised)
    prefix = 0
    while prefix < n and prefix < m and original[prefix] == revised[prefix]:
        prefix += 1
    suffix = 0
    while (
        suffix < n - prefix
        and suffix < m - prefix
        and original[n - 1 - suffix] == revised[m - 1 - suffix]
    ):
        suffix += 1

    regions = []
    i = j = prefix
    start = None
    for op in _shortest_edit(original[prefix : n - suffix], revised[prefix : m - suffix]):
        if op == " ":
            if start is not None:
                regions.append((start[0], i, start[1], j))
                start = None
            i += 1
            j += 1
            continue

        if start is None:
            start = (i, j)
        if op == "-":
            i += 1
        else:
            j += 1

    if start is not None:
        regions.append((start[0], i, start[1], j))
    return regions


class DiffGenerator:
    """Generate unified diffs and whole-document views"""

    def generate_unified_diff(
        self,
        original: Sequence[str],
        revised: Sequence[str],
        original_name: str | None = None,
        revised_name: str | None = None,
    ) -> UnifiedDiff:
        """Generate a unified diff with no context lines around the changes"""
        hunks = self._extract_hunks(original, revised)

        if not hunks:
            # No difference: keep a header the viewer can still open
            hunks = [Hunk.placeholder()]
        elif FIRST_LINE_ANCHOR not in hunks[0].header:
            # Leading unchanged lines hang off a placeholder hunk
            hunks.insert(0, Hunk.placeholder())

        return UnifiedDiff(
            original_label=original_name or DEFAULT_ORIGINAL_LABEL,
            revised_label=revised_name or DEFAULT_REVISED_LABEL,
            hunks=hunks,
        )

    def _extract_hunks(
        self,
        original: Sequence[str],
        revised: Sequence[str],
    ) -> list[Hunk]:
        """One hunk per changed region, removed lines before added ones"""
        hunks = []

        for i1, i2, j1, j2 in changed_regions(original, revised):
            lines = [DiffLine(kind=LineKind.REMOVED, text=text) for text in original[i1:i2]]
            lines += [DiffLine(kind=LineKind.ADDED, text=text) for text in revised[j1:j2]]

            hunks.append(
                Hunk(
                    original_start=i1 + 1,  # 1-indexed, also for pure insertions
                    original_length=i2 - i1,
                    revised_start=j1 + 1,
                    revised_length=j2 - j1,
                    lines=lines,
                )
            )

        return hunks

    def diff_string(
        self,
        original: Sequence[str],
        revised: Sequence[str],
        original_name: str | None = None,
        revised_name: str | None = None,
    ) -> MergedView:
        """Compare two documents and return the original with the diff merged in"""
        diff = self.generate_unified_diff(original, revised, original_name, revised_name)
        return merge_context(original, diff)

    def diff_files(self, original_path: str | Path, revised_path: str | Path) -> MergedView:
        """Compare two files on disk, labelled by their file names"""
        original_path = Path(original_path)
        revised_path = Path(revised_path)
        original = read_lines(original_path)
        revised = read_lines(revised_path)
        logger.info(
            "Comparing %s (%d lines) with %s (%d lines)",
            original_path.name,
            len(original),
            revised_path.name,
            len(revised),
        )
        return self.diff_string(original, revised, original_path.name, revised_path.name)
