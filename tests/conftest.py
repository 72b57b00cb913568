import io
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.handlers.image_handler import get_image_service
from app.main import app
from app.services.image_service import ImageService
from app.services.storage import LocalStorage


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Web root for the buckets; intentionally not created up front."""
    return tmp_path / "wwwroot"


@pytest.fixture
def storage(storage_root):
    return LocalStorage(storage_root)


@pytest.fixture
def service(storage):
    return ImageService(storage)


@pytest.fixture
def make_image():
    """Return a factory producing encoded image bytes of a given size and format."""

    def _make(size=(200, 100), fmt="JPEG", mode="RGB", color="red"):
        buffer = io.BytesIO()
        Image.new(mode, size, color=color).save(buffer, format=fmt)
        return buffer.getvalue()

    return _make


@pytest.fixture
def client(service):
    app.dependency_overrides[get_image_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
