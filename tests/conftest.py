import os
import tempfile

# keep log files out of the working tree; must run before gallery is imported
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="gallery-logs-")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from gallery import config  # noqa: E402
from gallery.main import app  # noqa: E402


@pytest.fixture
def assets_dir(tmp_path, monkeypatch):
    directory = tmp_path / "assets"
    directory.mkdir()
    monkeypatch.setattr(config, "ASSETS_DIR", str(directory))
    return directory


@pytest.fixture
def public_dir(tmp_path, monkeypatch):
    directory = tmp_path / "public"
    (directory / "css").mkdir(parents=True)
    (directory / "js").mkdir()
    (directory / "index.html").write_text("<!DOCTYPE html><title>Gallery</title>")
    (directory / "css" / "style.css").write_text("body { margin: 0; }")
    (directory / "js" / "script.js").write_text("console.log('hi')")
    monkeypatch.setattr(config, "PUBLIC_DIR", str(directory))
    return directory


@pytest.fixture
def client(assets_dir, public_dir):
    with TestClient(app) as c:
        yield c
