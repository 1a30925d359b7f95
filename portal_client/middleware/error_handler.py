"""Error hierarchy and the failure-path interceptor.

Every failed request surfaces to callers as a ``GatewayError`` carrying only
a human-readable message. The raw httpx exception, the response, its status
code and the server envelope stay inside this module.

Classification (first match wins):
  401 -> UnauthorizedError, and session teardown unless already on login
  404 -> NotFoundError
  500 -> ServerError
  no response at all -> NetworkError
  anything else -> RequestFailedError with the server's ``error`` or
  ``message`` field, falling back to the transport message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from portal_client.session import Navigator, SessionContext

logger = logging.getLogger(__name__)

NETWORK_ERROR_TEXT = "Network Error"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class GatewayError(Exception):
    """Base error for every failure raised by the request gateway."""

    message: str = "Error inesperado."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.__class__.message
        super().__init__(self.message)


class UnauthorizedError(GatewayError):
    """The server rejected the credential (HTTP 401)."""

    message = "Credenciales incorrectas. Verifica tu usuario y contraseña."


class NotFoundError(GatewayError):
    """HTTP 404."""

    message = "Usuario no encontrado."


class ServerError(GatewayError):
    """HTTP 500."""

    message = "Error del servidor. Intenta más tarde."


class NetworkError(GatewayError):
    """No response was received."""

    message = "Error de conexión. Verifica tu internet."


class RequestFailedError(GatewayError):
    """Any other failure; the message comes from the server or the transport."""


_STATUS_ERRORS: dict[int, type[GatewayError]] = {
    401: UnauthorizedError,
    404: NotFoundError,
    500: ServerError,
}


# ---------------------------------------------------------------------------
# Failure interceptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FailedRequest:
    """What the transport reported about a failed call.

    ``status`` and ``body`` are ``None`` when no response arrived.
    """

    transport_message: str
    status: int | None = None
    body: Any = None
    network_failure: bool = False


def server_message(body: Any) -> str | None:
    """Pick the server-supplied ``error`` field, else its ``message`` field."""
    if not isinstance(body, dict):
        return None
    for key in ("error", "message"):
        value = body.get(key)
        if value:
            return str(value)
    return None


def normalize_error(failure: FailedRequest) -> GatewayError:
    """Build the caller-facing error for a failed request."""
    error_cls = _STATUS_ERRORS.get(failure.status) if failure.status is not None else None
    if error_cls is not None:
        return error_cls()
    if failure.status is None and failure.network_failure:
        return NetworkError()
    return RequestFailedError(
        server_message(failure.body) or failure.transport_message or NETWORK_ERROR_TEXT
    )


def should_teardown(status: int | None, current_route: str, login_route: str) -> bool:
    return status == 401 and current_route != login_route


def end_session(
    session: SessionContext, navigator: Navigator, login_route: str
) -> None:
    """Clear the session and redirect to login.

    Never raises. Each effect is attempted on its own, so a failing store
    still redirects and a failing navigator still leaves the session
    cleared. Failures are logged at ERROR level.
    """
    try:
        session.clear_session()
    except Exception:
        logger.exception(
            "Failed to clear expired session",
            extra={"event": "session_teardown_failed"},
        )

    try:
        navigator.navigate_to(login_route)
    except Exception:
        logger.exception(
            "Failed to redirect to %s",
            login_route,
            extra={"event": "session_redirect_failed", "route": login_route},
        )
        return

    logger.info(
        "Session expired, redirecting to %s",
        login_route,
        extra={"event": "session_expired", "route": login_route},
    )


def make_failure_handler(
    session: SessionContext,
    navigator: Navigator,
    login_route: str = "/login",
) -> Callable[[FailedRequest], GatewayError]:
    """Return the failure interceptor bound to the given capabilities.

    The handler applies the session side effect, if any, and returns the
    normalized error for the gateway to raise.
    """

    def handle_failure(failure: FailedRequest) -> GatewayError:
        try:
            current_route = navigator.current_route()
        except Exception:
            logger.exception("Could not read current route")
            current_route = None

        if current_route is not None and should_teardown(
            failure.status, current_route, login_route
        ):
            end_session(session, navigator, login_route)

        return normalize_error(failure)

    return handle_failure
