import json
import os
import sys

import pytest

# Ensure the backend directory is importable
_here = os.path.dirname(os.path.dirname(__file__))
_backend = os.path.join(_here, "backend")
if os.path.isdir(_backend) and _backend not in sys.path:
    sys.path.insert(0, _backend)

from services.config_manager import CONFIG_DIR_ENV, ConfigManager  # noqa: E402


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config manager at a fresh directory with uploads under tmp_path."""
    directory = tmp_path / "config"
    directory.mkdir()
    settings = {
        "storage": {
            "upload_dir": str(tmp_path / "uploads"),
            "temp_dir": str(tmp_path / "temp"),
        },
    }
    (directory / "config.json").write_text(json.dumps(settings), encoding="utf-8")

    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    ConfigManager.reset_instance()
    yield directory
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_dir):
    """Test client with the application lifespan running."""
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as test_client:
        yield test_client
