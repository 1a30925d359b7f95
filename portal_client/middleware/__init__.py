"""Middleware package: request/response interceptors and the error hierarchy."""

from portal_client.middleware.auth import attach_credential
from portal_client.middleware.envelope import decode_body, unwrap_envelope
from portal_client.middleware.error_handler import (
    FailedRequest,
    GatewayError,
    NetworkError,
    NotFoundError,
    RequestFailedError,
    ServerError,
    UnauthorizedError,
    make_failure_handler,
    normalize_error,
)

__all__ = [
    "FailedRequest",
    "GatewayError",
    "NetworkError",
    "NotFoundError",
    "RequestFailedError",
    "ServerError",
    "UnauthorizedError",
    "attach_credential",
    "decode_body",
    "make_failure_handler",
    "normalize_error",
    "unwrap_envelope",
]
