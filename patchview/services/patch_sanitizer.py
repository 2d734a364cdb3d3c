"""
Patch Sanitizer - Truncate embedded binary sections of imported patches

A git patch can carry thousands of base85 lines per binary file. Keeping
only the head of each such section bounds what the viewer has to render.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

MAX_BINARY_LINES = 100
BINARY_SECTION_MIN_LINES = 5
BINARY_MARKERS = ("GIT binary patch", "Binary files")
TRUNCATION_MARKER = "... (binary content truncated for performance) ..."


def _is_binary_marker(line: str) -> bool:
    return any(marker in line for marker in BINARY_MARKERS)


def _closes_section(line: str, seen: int) -> bool:
    # A new file always ends the section; a `---` header only once some body was seen
    return line.startswith("diff --git") or (line.startswith("---") and seen > BINARY_SECTION_MIN_LINES)


def iter_sanitized(lines: Iterable[str]) -> Iterator[str]:
    """Yield patch lines with every binary section capped at MAX_BINARY_LINES"""
    in_binary = False
    seen = 0

    for line in lines:
        if not in_binary:
            if _is_binary_marker(line):
                in_binary = True
                seen = 0
            yield line
            continue

        seen += 1
        if seen <= MAX_BINARY_LINES:
            yield line
        elif seen == MAX_BINARY_LINES + 1:
            yield TRUNCATION_MARKER

        if _closes_section(line, seen):
            in_binary = False
            if seen > MAX_BINARY_LINES:
                logger.info("Truncated binary section after %d of %d lines", MAX_BINARY_LINES, seen - 1)
                yield line


def sanitize_patch(lines: Iterable[str] | None) -> list[str]:
    """Return the sanitized patch as a list"""
    if lines is None:
        return []
    return list(iter_sanitized(lines))


def was_truncated(lines: Iterable[str]) -> bool:
    return any(line == TRUNCATION_MARKER for line in lines)
