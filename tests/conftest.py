"""Shared fixtures: formatter instances, isolated settings and an HTTP client."""

import pytest
from fastapi.testclient import TestClient

from burgerapi.app import create_app
from burgerapi.config import Settings
from burgerapi.jsonapi import FormatterConfig, JSONAPIFormatter

BASE_URL = "https://api.example.com"
REQUEST_URL = "http://testserver/places"


@pytest.fixture
def formatter_config():
    return FormatterConfig(base_url=BASE_URL)


@pytest.fixture
def formatter(formatter_config):
    return JSONAPIFormatter(formatter_config)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'burger.db'}",
        base_url=BASE_URL,
        jsonapi_meta={"api-version": "1"},
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
