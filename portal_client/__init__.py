"""HTTP request gateway for the user portal."""

from portal_client.config.settings import PortalSettings, resolve_base_url
from portal_client.gateway import RequestGateway
from portal_client.logging_config import configure_logging
from portal_client.main import create_gateway
from portal_client.middleware.error_handler import (
    GatewayError,
    NetworkError,
    NotFoundError,
    RequestFailedError,
    ServerError,
    UnauthorizedError,
)
from portal_client.session import (
    InMemoryNavigator,
    InMemorySessionStore,
    Navigator,
    SessionContext,
    SessionStore,
)

__all__ = [
    "GatewayError",
    "InMemoryNavigator",
    "InMemorySessionStore",
    "Navigator",
    "NetworkError",
    "NotFoundError",
    "PortalSettings",
    "RequestFailedError",
    "RequestGateway",
    "ServerError",
    "SessionContext",
    "SessionStore",
    "UnauthorizedError",
    "configure_logging",
    "create_gateway",
    "resolve_base_url",
]
