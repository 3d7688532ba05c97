"""Shared fixtures"""

import pytest
from fastapi.testclient import TestClient

from services.config_manager import CONFIG_DIR_ENV, ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config singleton at a fresh directory for every test"""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    monkeypatch.setattr(ConfigManager, "_instance", None)
    yield tmp_path
    ConfigManager._instance = None


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client
