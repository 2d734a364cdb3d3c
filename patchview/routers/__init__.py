"""Routers module - FastAPI route handlers"""

from . import config, diff, patch

__all__ = ["config", "diff", "patch"]
