import os
import sys
import tempfile

import pytest

# Keep the app-level store away from the working directory
os.environ["SCAN_LOG_FILE"] = os.path.join(tempfile.mkdtemp(), "logs.json")
os.environ.setdefault("NODE_ENV", "development")

# Make the backend modules importable without installing the project
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "backend"))

from fastapi.testclient import TestClient

from qr_tracker.app_main import app
from qr_tracker.scan_history import ScanStore, get_store


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / "logs.json")


@pytest.fixture
def store(log_path):
    return ScanStore(log_path)


@pytest.fixture
def client(store):
    """Test client wired to a throwaway scan store"""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
