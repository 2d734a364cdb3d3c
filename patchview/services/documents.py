"""Reading documents and patch text into line lists"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import DocumentReadError

logger = logging.getLogger(__name__)


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a text file as lines; \\r\\n and \\r endings are normalized"""
    path = Path(path)
    try:
        # read_text opens with universal newlines
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", path, e)
        raise DocumentReadError(path, e) from e
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n") if text else []


def split_patch_text(text: str) -> list[str]:
    """Split a pasted patch block into lines, dropping trailing blank lines"""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    while lines and lines[-1] == "":
        lines.pop()
    return lines
