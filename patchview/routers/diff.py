"""Compare mode API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from patchview.models.compare import CompareFilesRequest, CompareRequest, CompareResponse
from patchview.models.diff import MergedView
from patchview.services.config_manager import (
    LAST_ORIGINAL_DIRECTORY,
    LAST_REVISED_DIRECTORY,
    ConfigManager,
)
from patchview.services.diff_generator import DiffGenerator
from patchview.services.errors import DocumentReadError
from patchview.services.html_renderer import DiffAssets, render_html

from .dependencies import document_read_error, get_assets, get_config_manager, run_sized

router = APIRouter()
diff_generator = DiffGenerator()


def to_response(view: MergedView) -> CompareResponse:
    return CompareResponse(
        original_label=view.original_label,
        revised_label=view.revised_label,
        difference_count=view.difference_count,
        lines=view.to_lines(),
    )


async def _compare(request: CompareRequest, config_manager: ConfigManager) -> MergedView:
    size = sum(len(line) + 1 for line in request.original) + sum(len(line) + 1 for line in request.revised)
    return await run_sized(
        size,
        config_manager.get("largeFileThreshold"),
        diff_generator.diff_string,
        request.original,
        request.revised,
        request.original_name,
        request.revised_name,
    )


@router.post("/compare", response_model=CompareResponse)
async def compare(
    request: CompareRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
) -> CompareResponse:
    """Compare two documents and return the merged view"""
    view = await _compare(request, config_manager)
    return to_response(view)


@router.post("/compare-files", response_model=CompareResponse)
async def compare_files(
    request: CompareFilesRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
) -> CompareResponse:
    """Compare two files on disk"""
    try:
        view = await run_in_threadpool(
            diff_generator.diff_files, request.original_path, request.revised_path
        )
    except DocumentReadError as e:
        raise document_read_error(e)

    config_manager.remember_directory(LAST_ORIGINAL_DIRECTORY, request.original_path)
    config_manager.remember_directory(LAST_REVISED_DIRECTORY, request.revised_path)
    return to_response(view)


@router.post("/html", response_class=HTMLResponse)
async def compare_html(
    request: CompareRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
    assets: DiffAssets = Depends(get_assets),
) -> HTMLResponse:
    """Compare two documents and render the merged view as a page"""
    view = await _compare(request, config_manager)
    return HTMLResponse(render_html([view.to_lines()], assets))
