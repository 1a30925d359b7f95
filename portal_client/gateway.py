"""Request gateway: the single HTTP entry point for every portal screen.

Pipeline for each call:
  1. ``attach_credential`` adds the bearer header from the session context.
  2. httpx sends the request to ``<base>/api/<path>``.
  3. On a 2xx response ``unwrap_envelope`` hands back the envelope's ``data``.
  4. On any other outcome the failure handler classifies the error, ends the
     session on 401 outside the login route and returns a ``GatewayError``,
     which is raised to the caller.

No retries, no caching, no timeout: a hung request hangs its caller.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from portal_client.config.settings import PortalSettings
from portal_client.middleware.auth import attach_credential
from portal_client.middleware.envelope import decode_body, unwrap_envelope
from portal_client.middleware.error_handler import (
    NETWORK_ERROR_TEXT,
    FailedRequest,
    make_failure_handler,
)
from portal_client.models.requests import RequestDescriptor
from portal_client.session import Navigator, SessionContext

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class RequestGateway:
    """Async HTTP client wrapper with bearer auth and envelope handling.

    Parameters
    ----------
    settings:
        Portal settings; read from the environment when omitted.
    session:
        Session context supplying the bearer credential.
    navigator:
        Route query and redirect effect used on session expiry.
    transport:
        Optional httpx transport (e.g. ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        settings: PortalSettings | None = None,
        *,
        session: SessionContext,
        navigator: Navigator,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or PortalSettings()
        self._session = session
        self._navigator = navigator
        self._handle_failure = make_failure_handler(
            session, navigator, login_route=self._settings.login_route
        )
        self._client = httpx.AsyncClient(
            base_url=self._settings.api_base_url,
            headers=_DEFAULT_HEADERS,
            timeout=None,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    @property
    def session(self) -> SessionContext:
        return self._session

    async def __aenter__(self) -> RequestGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # -- public request API ------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the unwrapped payload.

        Raises
        ------
        GatewayError
            For every failure, with a caller-displayable message.
        """
        descriptor = RequestDescriptor(
            method=method, path=path, headers=headers or {}, json=json, params=params
        )
        return await self.dispatch(descriptor)

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def dispatch(self, descriptor: RequestDescriptor) -> Any:
        """Run the interceptor pipeline for a prepared descriptor."""
        prepared = attach_credential(descriptor, self._session.credential)
        logger.debug(
            "Dispatching %s %s",
            prepared.method,
            prepared.path,
            extra={"method": prepared.method, "path": prepared.path},
        )

        try:
            response = await self._client.request(
                prepared.method,
                prepared.path,
                headers=dict(prepared.headers),
                json=prepared.json,
                params=prepared.params,
            )
        except httpx.TransportError as exc:
            logger.warning(
                "No response for %s %s: %s",
                prepared.method,
                prepared.path,
                type(exc).__name__,
                extra={"event": "network_failure", "method": prepared.method, "path": prepared.path},
            )
            failure = FailedRequest(
                transport_message=str(exc) or NETWORK_ERROR_TEXT, network_failure=True
            )
            raise self._handle_failure(failure) from None
        except httpx.RequestError as exc:
            logger.warning(
                "Request %s %s failed: %s",
                prepared.method,
                prepared.path,
                type(exc).__name__,
                extra={"event": "request_error", "method": prepared.method, "path": prepared.path},
            )
            failure = FailedRequest(transport_message=str(exc) or type(exc).__name__)
            raise self._handle_failure(failure) from None

        if not response.is_success:
            logger.warning(
                "%s %s returned status %d",
                prepared.method,
                prepared.path,
                response.status_code,
                extra={
                    "event": "request_failed",
                    "method": prepared.method,
                    "path": prepared.path,
                    "status": response.status_code,
                },
            )
            failure = FailedRequest(
                transport_message=f"Request failed with status code {response.status_code}",
                status=response.status_code,
                body=decode_body(response),
            )
            raise self._handle_failure(failure)

        return unwrap_envelope(decode_body(response))
