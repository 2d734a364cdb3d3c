"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

DEFAULT_ORIGINAL_LABEL = "Original"
DEFAULT_REVISED_LABEL = "Revised"


class LineKind(str, Enum):
    """How a line relates to the original document"""

    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"
    HEADER = "header"


_PREFIXES = {
    LineKind.CONTEXT: " ",
    LineKind.ADDED: "+",
    LineKind.REMOVED: "-",
    LineKind.HEADER: "",
}


class DiffLine(BaseModel):
    """A single annotated line"""

    kind: LineKind
    text: str

    def render(self) -> str:
        return _PREFIXES[self.kind] + self.text


class HunkHeader(BaseModel):
    """Line ranges from an `@@ -a,b +c,d @@` header (1-indexed starts)"""

    original_start: int
    original_length: int
    revised_start: int
    revised_length: int

    @property
    def header(self) -> str:
        return (
            f"@@ -{self.original_start},{self.original_length} "
            f"+{self.revised_start},{self.revised_length} @@"
        )


class Hunk(HunkHeader):
    """A header plus its context/removed/added lines"""

    lines: list[DiffLine] = []

    @property
    def is_placeholder(self) -> bool:
        return (
            not self.lines
            and self.original_start == 0
            and self.original_length == 0
            and self.revised_start == 0
            and self.revised_length == 0
        )

    @classmethod
    def placeholder(cls) -> "Hunk":
        return cls(original_start=0, original_length=0, revised_start=0, revised_length=0)


class UnifiedDiff(BaseModel):
    """Ordered, non-overlapping hunks between two labelled documents"""

    original_label: str = DEFAULT_ORIGINAL_LABEL
    revised_label: str = DEFAULT_REVISED_LABEL
    hunks: list[Hunk] = []

    @property
    def difference_count(self) -> int:
        return sum(1 for hunk in self.hunks if not hunk.is_placeholder)

    def to_lines(self) -> list[str]:
        """Render as unified diff text lines"""
        lines = [f"--- {self.original_label}", f"+++ {self.revised_label}"]
        for hunk in self.hunks:
            lines.append(hunk.header)
            lines.extend(line.render() for line in hunk.lines)
        return lines


class MergedView(BaseModel):
    """The whole original document with every hunk spliced in"""

    original_label: str = DEFAULT_ORIGINAL_LABEL
    revised_label: str = DEFAULT_REVISED_LABEL
    difference_count: int = 0
    lines: list[DiffLine] = []

    def lines_of(self, kind: LineKind) -> list[str]:
        return [line.text for line in self.lines if line.kind == kind]

    def to_lines(self) -> list[str]:
        """Render for the diff viewer; the count rides on the `+++` line"""
        rendered = [
            f"--- {self.original_label}",
            f"+++ {self.revised_label} ( {self.difference_count} different )",
        ]
        rendered.extend(line.render() for line in self.lines)
        return rendered
