"""Success-path interceptor: response envelope unwrapping.

The backend wraps payloads as { success: bool, data: T, message?, error? }.
Callers work with ``data`` directly and never see the envelope.
"""

from __future__ import annotations

from typing import Any

import httpx


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body: JSON when possible, text otherwise.

    Empty bodies decode to ``None``.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def unwrap_envelope(body: Any) -> Any:
    """Return the envelope's ``data`` field, or ``body`` when it is no envelope."""
    if isinstance(body, dict) and "success" in body:
        return body.get("data")
    return body
