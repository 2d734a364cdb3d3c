"""Patch mode API endpoints"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from sse_starlette.sse import EventSourceResponse
from starlette.concurrency import run_in_threadpool

from patchview.models.patch import (
    ApplyPatchRequest,
    ApplyPatchResponse,
    ExportRequest,
    PatchFileRequest,
    PatchTextRequest,
    SanitizeResponse,
    StreamEvent,
)
from patchview.services.config_manager import LAST_IMPORT_DIRECTORY, ConfigManager
from patchview.services.documents import read_lines, split_patch_text
from patchview.services.errors import DocumentReadError, HtmlWriteError, PatchApplyError
from patchview.services.html_renderer import DiffAssets, render_html, write_html
from patchview.services.patch_applier import apply_patch
from patchview.services.patch_sanitizer import TRUNCATION_MARKER, iter_sanitized, sanitize_patch, was_truncated

from .dependencies import document_read_error, get_assets, get_config_manager, run_sized

logger = logging.getLogger(__name__)

router = APIRouter()


def _sanitized_page(lines: list[str], assets: DiffAssets) -> str:
    return render_html([sanitize_patch(lines)], assets)


def _chunks(lines: list[str], size: int) -> Iterator[list[str]]:
    chunk: list[str] = []
    for line in iter_sanitized(lines):
        chunk.append(line)
        if len(chunk) >= size:
            yield chunk
            chunk = []
    if chunk:
        yield chunk


@router.post("/sanitize", response_model=SanitizeResponse)
async def sanitize(
    request: PatchTextRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
) -> SanitizeResponse:
    """Truncate binary sections of a pasted patch"""
    lines = split_patch_text(request.text)
    sanitized = await run_sized(
        len(request.text), config_manager.get("largeFileThreshold"), sanitize_patch, lines
    )
    return SanitizeResponse(lines=sanitized, truncated=was_truncated(sanitized))


@router.post("/visualize", response_class=HTMLResponse)
async def visualize(
    request: PatchTextRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
    assets: DiffAssets = Depends(get_assets),
) -> HTMLResponse:
    """Render a pasted patch as a page"""
    if not request.text:
        raise HTTPException(status_code=400, detail="Diff text is required")

    lines = split_patch_text(request.text)
    html = await run_sized(
        len(request.text), config_manager.get("largeFileThreshold"), _sanitized_page, lines, assets
    )
    return HTMLResponse(html)


@router.post("/import", response_class=HTMLResponse)
async def import_patch(
    request: PatchFileRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
    assets: DiffAssets = Depends(get_assets),
) -> HTMLResponse:
    """Render a .diff/.patch file from disk"""
    try:
        lines = await run_in_threadpool(read_lines, request.path)
    except DocumentReadError as e:
        raise document_read_error(e)

    config_manager.remember_directory(LAST_IMPORT_DIRECTORY, request.path)
    html = await run_in_threadpool(_sanitized_page, lines, assets)
    return HTMLResponse(html)


@router.post("/stream")
async def stream_patch(
    request: PatchTextRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
):
    """Stream a sanitized patch in chunks of lines (SSE)"""
    lines = split_patch_text(request.text)
    chunk_size = config_manager.get("streamChunkSize", 500)

    async def event_generator():
        total = 0
        truncated = False

        try:
            for chunk in _chunks(lines, chunk_size):
                total += len(chunk)
                truncated = truncated or TRUNCATION_MARKER in chunk
                event = StreamEvent(type="lines", lines=chunk)
                yield {"event": "message", "data": event.model_dump_json()}

            event = StreamEvent(
                type="done",
                done=True,
                metadata={"lines": total, "truncated": truncated},
            )
            yield {"event": "message", "data": event.model_dump_json()}

        except Exception as e:
            logger.exception("Patch stream failed")
            event = StreamEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())


@router.post("/apply", response_model=ApplyPatchResponse)
async def apply(request: ApplyPatchRequest) -> ApplyPatchResponse:
    """Apply a unified diff to a base document"""
    try:
        lines = apply_patch(request.original, split_patch_text(request.patch))
    except PatchApplyError as e:
        raise HTTPException(status_code=409, detail=f"Failed to apply patch: {e}")
    return ApplyPatchResponse(lines=lines)


@router.post("/export")
async def export_html(
    request: ExportRequest,
    assets: DiffAssets = Depends(get_assets),
) -> dict[str, str]:
    """Write diff blocks to an HTML file"""
    try:
        path = await run_in_threadpool(write_html, request.html_path, request.diffs, assets)
    except HtmlWriteError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "success", "path": str(path)}
