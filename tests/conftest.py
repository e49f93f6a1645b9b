from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure local .env cannot change the skill set or add latency in tests.
    os.environ["ENVIRONMENT"] = "test"
    os.environ["REQUIRED_SKILLS"] = '["React","TypeScript","Tailwind"]'
    os.environ["SIMULATED_LATENCY_MS"] = "0"


@pytest.fixture()
def client() -> Any:
    from skillmatch.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_client() -> Any:
    """Build a client whose settings are replaced by the given overrides."""
    from skillmatch.config import Settings, get_settings
    from skillmatch.main import create_app

    clients: list[TestClient] = []

    def _make(**overrides: Any) -> TestClient:
        app = create_app()
        custom = Settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: custom
        c = TestClient(app)
        c.__enter__()
        clients.append(c)
        return c

    yield _make

    for c in clients:
        c.__exit__(None, None, None)
