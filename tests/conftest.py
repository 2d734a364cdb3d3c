"""Shared fixtures for the patchview test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from patchview.main import create_app
from patchview.services.config_manager import ConfigManager


@pytest.fixture
def config_manager(tmp_path):
    return ConfigManager(tmp_path / "config")


@pytest.fixture
def client(config_manager):
    with TestClient(create_app(config_manager)) as test_client:
        yield test_client


@pytest.fixture
def modify_patch() -> list[str]:
    return [
        "--- a/file.txt",
        "+++ b/file.txt",
        "@@ -1,3 +1,3 @@",
        " line 1",
        "-line 2",
        "+line 2 modified",
        " line 3",
    ]
