"""Fixtures compartidos: settings aislados y cliente httpx con transporte simulado."""

from __future__ import annotations

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings

BASE_URL = "http://api.test"


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    for key in ("COURSEDECK_AUTH_TOKEN", "COURSEDECK_DEFAULT_PAGE_SIZE", "COURSEDECK_DEFAULT_SORT"):
        monkeypatch.delenv(key, raising=False)
    return AppSettings(_env_file=None, api_base_url=BASE_URL, http_timeout_seconds=5)


@pytest.fixture
def make_client(settings: AppSettings):
    """Devuelve una factoría `handler -> httpx.AsyncClient` sobre `MockTransport`."""

    def _make(handler) -> httpx.AsyncClient:
        return build_async_client(settings, transport=httpx.MockTransport(handler))

    return _make
