"""Shared test fixtures for the portal client test suite."""

from __future__ import annotations

import pytest

from portal_client.config.settings import PortalSettings
from portal_client.session import InMemoryNavigator, InMemorySessionStore, SessionContext


# ---------------------------------------------------------------------------
# Keep the developer's environment out of settings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_portal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset PORTAL_* variables so settings defaults are deterministic."""
    for key in (
        "PORTAL_API_URL",
        "PORTAL_API_PREFIX",
        "PORTAL_LOGIN_ROUTE",
        "PORTAL_LOG_LEVEL",
        "PORTAL_LOG_JSON",
    ):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> PortalSettings:
    return PortalSettings(api_url="https://api.example.com")


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def session(store: InMemorySessionStore) -> SessionContext:
    return SessionContext(store)


@pytest.fixture
def navigator() -> InMemoryNavigator:
    return InMemoryNavigator(initial="/profile")
