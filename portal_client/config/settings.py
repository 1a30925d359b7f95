"""Pydantic Settings for the portal client.

All environment variables use the PORTAL_ prefix.
Example: PORTAL_API_URL=api.example.com, PORTAL_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import re

from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "http://localhost:3000"

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def resolve_base_url(raw: str | None) -> str:
    """Normalize the configured base address.

    A missing or blank override falls back to the local development server.
    Overrides without a scheme get ``https://`` and trailing slashes are
    stripped so that path segments can be appended directly.
    """
    if raw is None or not raw.strip():
        return DEFAULT_BASE_URL

    url = raw.strip()
    if not _SCHEME_RE.match(url):
        url = f"https://{url}"
    return url.rstrip("/")


class PortalSettings(BaseSettings):
    """Portal client configuration validated from environment variables."""

    # Backend
    api_url: str | None = None  # e.g. "api.example.com" or "https://api.example.com/"
    api_prefix: str = "/api"

    # Navigation
    login_route: str = "/login"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {"env_prefix": "PORTAL_"}

    @property
    def base_url(self) -> str:
        return resolve_base_url(self.api_url)

    @property
    def api_base_url(self) -> str:
        """Base address plus the fixed API segment, e.g. ``https://host/api``."""
        prefix = self.api_prefix.strip().strip("/")
        if not prefix:
            return self.base_url
        return f"{self.base_url}/{prefix}"
