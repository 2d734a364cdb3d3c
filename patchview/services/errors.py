"""Error types raised by the diff and patch services"""

from __future__ import annotations

from pathlib import Path


class PatchViewError(Exception):
    """Base error for patchview operations"""


class DocumentReadError(PatchViewError):
    """A document could not be read or decoded"""

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to read {self.path}: {cause}")


class PatchApplyError(PatchViewError):
    """A patch does not apply to the given base"""


class HtmlWriteError(PatchViewError):
    """The rendered HTML could not be written"""
