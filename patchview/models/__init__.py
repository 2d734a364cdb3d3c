"""Models module - Pydantic data models"""

from .diff import DiffLine, Hunk, HunkHeader, LineKind, MergedView, UnifiedDiff
from .compare import CompareFilesRequest, CompareRequest, CompareResponse
from .patch import (
    ApplyPatchRequest,
    ApplyPatchResponse,
    ExportRequest,
    PatchFileRequest,
    PatchTextRequest,
    SanitizeResponse,
    StreamEvent,
)

__all__ = [
    # Diff models
    "DiffLine",
    "Hunk",
    "HunkHeader",
    "LineKind",
    "MergedView",
    "UnifiedDiff",
    # Compare models
    "CompareRequest",
    "CompareFilesRequest",
    "CompareResponse",
    # Patch models
    "ApplyPatchRequest",
    "ApplyPatchResponse",
    "ExportRequest",
    "PatchFileRequest",
    "PatchTextRequest",
    "SanitizeResponse",
    "StreamEvent",
]
