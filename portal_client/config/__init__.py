"""Configuration module: settings and base address resolution."""

from portal_client.config.settings import DEFAULT_BASE_URL, PortalSettings, resolve_base_url

__all__ = [
    "DEFAULT_BASE_URL",
    "PortalSettings",
    "resolve_base_url",
]
