import json
import logging
import os
import subprocess
import sys

from fastapi.testclient import TestClient

import qr_tracker
from qr_tracker import app_config, scan_history
from qr_tracker.app_main import STATIC_DIR, app
from qr_tracker.logging_config import resolve_level, setup_logging


def test_startup_loads_existing_history(tmp_path, monkeypatch):
    path = tmp_path / "history.json"
    path.write_text(json.dumps([
        {"campaign": "poster", "timestamp": "2024-05-01T09:00:00+00:00", "ip": "10.1.1.1", "userAgent": "ua"},
        {"campaign": "flyer", "timestamp": "2024-05-02T09:00:00+00:00", "ip": "10.1.1.2", "userAgent": None},
    ]))
    monkeypatch.setattr(app_config, "SCAN_LOG_FILE", str(path))
    monkeypatch.setattr(scan_history, "_store", None)

    with TestClient(app) as client:
        assert len(scan_history.get_store()) == 2
        data = client.get("/api/scans").json()

    assert [d["campaign"] for d in data] == ["poster", "flyer"]


def test_form_page_ships_inside_package():
    package_dir = os.path.dirname(qr_tracker.__file__)

    assert (STATIC_DIR / "index.html").is_file()
    assert str(STATIC_DIR).startswith(package_dir)


def test_app_imports_outside_source_tree(tmp_path):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.path.dirname(os.path.dirname(qr_tracker.__file__))
    env["SCAN_LOG_FILE"] = str(tmp_path / "logs.json")

    result = subprocess.run(
        [sys.executable, "-c", "from qr_tracker.app_main import app; print(app.title)"],
        cwd=str(tmp_path),
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert "QR Campaign Tracker" in result.stdout


def test_unknown_log_level_falls_back_to_info():
    assert resolve_level("verbose") == logging.INFO
    assert resolve_level("debug") == logging.DEBUG

    logger = setup_logging(level="verbose")
    assert logger.level == logging.INFO
