"""Pytest configuration.

The repository root is not automatically added to ``sys.path`` when
running tests from the ``tests`` directory, so the flat ``config``,
``tools`` and ``utils`` modules are made importable here.
"""

import sys
from pathlib import Path

import httpx
import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from config import Config  # noqa: E402


class FakeOpenWeather:
    """Routes requests by URL path to canned ``httpx.Response`` objects."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "not routed"})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        return route

    def paths(self):
        return [r.url.path for r in self.requests]

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(Config, "TRACK_PERFORMANCE", False)
    monkeypatch.setattr(Config, "FORECAST_SORT_SAMPLES", False)


@pytest.fixture
def fake_api():
    return FakeOpenWeather()
