"""Patch mode request/response models"""

from __future__ import annotations

from pydantic import BaseModel


class PatchTextRequest(BaseModel):
    """Raw patch or diff text pasted by the user"""

    text: str


class PatchFileRequest(BaseModel):
    """A patch file to import"""

    path: str


class SanitizeResponse(BaseModel):
    """Patch lines with binary sections truncated"""

    lines: list[str]
    truncated: bool = False


class ApplyPatchRequest(BaseModel):
    """Apply a unified diff to a base document"""

    original: list[str]
    patch: str


class ApplyPatchResponse(BaseModel):
    """The patched document"""

    lines: list[str]


class ExportRequest(BaseModel):
    """Write one or more diff blocks to an HTML file"""

    diffs: list[list[str]]
    html_path: str


class StreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "lines", "done", "error"
    lines: list[str] | None = None
    metadata: dict | None = None
    done: bool = False
    error: str | None = None
