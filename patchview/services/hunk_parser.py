"""
Hunk header parsing - read `@@ -a,b +c,d @@` lines and whole unified diffs
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from patchview.models.diff import DiffLine, Hunk, HunkHeader, LineKind, UnifiedDiff

HUNK_MARKER = "@@"

# Lengths may be omitted, in which case they default to 1
_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

_LINE_KINDS = {
    " ": LineKind.CONTEXT,
    "+": LineKind.ADDED,
    "-": LineKind.REMOVED,
}


def parse_hunk_header(line: str) -> HunkHeader | None:
    """Parse a hunk header, returning None for anything that is not one.

    Callers probe arbitrary diff lines with this, so a non-header line is
    an ordinary outcome rather than an error.
    """
    if not line.startswith(HUNK_MARKER):
        return None
    match = _HEADER_RE.match(line)
    if match is None:
        return None
    orig_start, orig_len, rev_start, rev_len = match.groups()
    return HunkHeader(
        original_start=int(orig_start),
        original_length=int(orig_len) if orig_len is not None else 1,
        revised_start=int(rev_start),
        revised_length=int(rev_len) if rev_len is not None else 1,
    )


def parse_unified_diff(lines: Iterable[str]) -> UnifiedDiff:
    """Segment unified diff text into hunks at each header line"""
    diff = UnifiedDiff()
    current: Hunk | None = None

    for line in lines:
        header = parse_hunk_header(line)
        if header is not None:
            current = Hunk(**header.model_dump())
            diff.hunks.append(current)
            continue

        if current is None:
            if line.startswith("--- "):
                diff.original_label = line[4:]
            elif line.startswith("+++ "):
                diff.revised_label = line[4:]
            continue

        if line == "":
            # Editors often strip the single space of blank context lines
            current.lines.append(DiffLine(kind=LineKind.CONTEXT, text=""))
            continue

        kind = _LINE_KINDS.get(line[0])
        if kind is not None:
            current.lines.append(DiffLine(kind=kind, text=line[1:]))

    return diff
