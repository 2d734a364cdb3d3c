"""Shared router dependencies"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import HTTPException, Request
from starlette.concurrency import run_in_threadpool

from patchview.services.config_manager import LARGE_FILE_THRESHOLD, ConfigManager
from patchview.services.errors import DocumentReadError
from patchview.services.html_renderer import DiffAssets, load_assets

T = TypeVar("T")


def get_config_manager(request: Request) -> ConfigManager:
    """The ConfigManager created by the application lifespan"""
    return request.app.state.config_manager


def get_assets(request: Request) -> DiffAssets:
    config_manager = get_config_manager(request)
    return load_assets(config_manager.get("assetsDir"))


async def run_sized(size: int, threshold: int | None, func: Callable[..., T], *args: Any) -> T:
    """Run `func` inline, or in the threadpool once the payload is large"""
    if size > (threshold or LARGE_FILE_THRESHOLD):
        return await run_in_threadpool(func, *args)
    return func(*args)


def document_read_error(e: DocumentReadError) -> HTTPException:
    """HTTP error for a document that could not be read"""
    if isinstance(e.cause, FileNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e.cause, UnicodeDecodeError):
        return HTTPException(status_code=422, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))
