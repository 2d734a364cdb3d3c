"""
patchview - FastAPI Application Entry Point
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from patchview import __version__
from patchview.routers import config, diff, patch
from patchview.services.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def create_app(config_manager: ConfigManager | None = None) -> FastAPI:
    """Build the application around an explicit ConfigManager"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager - startup and shutdown logic"""
        logger.info("Starting patchview %s...", __version__)
        app.state.config_manager = config_manager or ConfigManager()
        logger.info("Config loaded from %s", app.state.config_manager.config_file)

        yield
        logger.info("Shutting down patchview...")

    app = FastAPI(
        title="patchview",
        description="Whole-document diff views and patch visualization",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
    app.include_router(patch.router, prefix="/api/patch", tags=["patch"])
    app.include_router(config.router, prefix="/api/config", tags=["config"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "patchview"}

    return app


app = create_app()


def run():
    """Console entry point"""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    server = ConfigManager().get("server", {})
    uvicorn.run(
        "patchview.main:app",
        host=server.get("host", "127.0.0.1"),
        port=server.get("port", 8000),
    )


if __name__ == "__main__":
    run()
