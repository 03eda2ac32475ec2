"""Shared pytest fixtures: an app bound to a temporary data directory."""

import json

import pytest

from app import create_app
from config import TestingConfig


@pytest.fixture
def app(tmp_path):
    data_dir = tmp_path / "data"
    app = create_app(
        TestingConfig,
        PRODUCTS_FILE=str(data_dir / "products.json"),
        SETTINGS_FILE=str(data_dir / "settings.json"),
        UPLOAD_FOLDER=str(tmp_path / "uploads"),
        GOOGLE_DRIVE_FOLDER_ID=None,
        GOOGLE_SERVICE_ACCOUNT=None,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    response = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return client


@pytest.fixture
def write_products(app):
    """Seed the products file with raw JSON objects."""

    def _write(items):
        with open(app.config["PRODUCTS_FILE"], "w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False)

    return _write


@pytest.fixture
def read_products_file(app):
    def _read():
        with open(app.config["PRODUCTS_FILE"], encoding="utf-8") as f:
            return json.load(f)

    return _read
