"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from patchview.services.config_manager import DIRECTORY_KEYS, ConfigManager, resolve_language

from .dependencies import get_config_manager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    language: str | None = None
    assetsDir: str | None = None
    largeFileThreshold: int | None = None
    streamChunkSize: int | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    language: str
    assetsDir: str | None = None
    largeFileThreshold: int
    streamChunkSize: int
    directories: dict[str, str | None]


@router.get("", response_model=ConfigResponse)
async def get_config(config_manager: ConfigManager = Depends(get_config_manager)) -> ConfigResponse:
    """Get current configuration"""
    config = config_manager.get_config()

    return ConfigResponse(
        language=resolve_language(config.get("language")),
        assetsDir=config.get("assetsDir"),
        largeFileThreshold=config["largeFileThreshold"],
        streamChunkSize=config["streamChunkSize"],
        directories={
            key: str(path) if (path := config_manager.get_directory(key)) else None
            for key in DIRECTORY_KEYS
        },
    )


@router.put("")
async def update_config(
    request: ConfigUpdateRequest,
    config_manager: ConfigManager = Depends(get_config_manager),
) -> dict[str, Any]:
    """Update configuration"""
    updates = request.model_dump(exclude_none=True)

    for key in ("largeFileThreshold", "streamChunkSize"):
        if key in updates and updates[key] <= 0:
            raise HTTPException(status_code=400, detail=f"{key} must be positive")

    try:
        config_manager.save_config(updates)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
