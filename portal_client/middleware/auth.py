"""Outbound interceptor: bearer credential injection.

Adds ``Authorization: Bearer <credential>`` when the session holds a
credential. A missing credential is not an error here; the server decides
whether the endpoint needs one.
"""

from __future__ import annotations

from portal_client.models.requests import RequestDescriptor

AUTHORIZATION_HEADER = "Authorization"


def attach_credential(
    descriptor: RequestDescriptor, credential: str | None
) -> RequestDescriptor:
    """Return ``descriptor`` carrying the bearer header, or unchanged."""
    if not credential:
        return descriptor
    return descriptor.with_header(AUTHORIZATION_HEADER, f"Bearer {credential}")
