"""Compare mode request/response models"""

from __future__ import annotations

from pydantic import BaseModel


class CompareRequest(BaseModel):
    """Two in-memory documents to compare"""

    original: list[str]
    revised: list[str]
    original_name: str | None = None
    revised_name: str | None = None


class CompareFilesRequest(BaseModel):
    """Two documents on disk to compare"""

    original_path: str
    revised_path: str


class CompareResponse(BaseModel):
    """Merged view rendered as unified diff lines"""

    original_label: str
    revised_label: str
    difference_count: int
    lines: list[str]
