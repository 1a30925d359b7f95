"""Application wiring: settings, logging and the shared gateway."""

from __future__ import annotations

import logging

import httpx

from portal_client.config.settings import PortalSettings
from portal_client.gateway import RequestGateway
from portal_client.logging_config import configure_logging
from portal_client.session import InMemoryNavigator, Navigator, SessionContext

logger = logging.getLogger(__name__)


def create_gateway(
    settings: PortalSettings | None = None,
    *,
    session: SessionContext | None = None,
    navigator: Navigator | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RequestGateway:
    """Resolve settings once, configure logging and build the gateway.

    Hosts without a browser get an in-memory session and navigator.
    """
    settings = settings or PortalSettings()
    configure_logging(settings.log_level, json_output=settings.log_json)
    logger.info("Portal API base resolved to %s", settings.api_base_url)

    return RequestGateway(
        settings,
        session=session if session is not None else SessionContext(),
        navigator=navigator if navigator is not None else InMemoryNavigator(),
        transport=transport,
    )
