"""Transport stubs, gateway builder and hypothesis strategies shared by tests."""

from __future__ import annotations

from typing import Callable

import httpx
from hypothesis import strategies as st

from portal_client.config.settings import PortalSettings
from portal_client.gateway import RequestGateway
from portal_client.session import InMemoryNavigator, SessionContext


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_handler(status: int, body: object) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with ``status`` and a JSON body."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body)

    return _handler


def raising_handler(exc: Exception) -> Callable[[httpx.Request], httpx.Response]:
    """Handler raising ``exc`` as if the network dropped the request."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return _handler


def build_gateway(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    settings: PortalSettings | None = None,
    session: SessionContext | None = None,
    navigator: InMemoryNavigator | None = None,
) -> tuple[RequestGateway, RecordingTransport]:
    transport = RecordingTransport(handler)
    gateway = RequestGateway(
        settings or PortalSettings(api_url="https://api.example.com"),
        session=session if session is not None else SessionContext(),
        navigator=navigator if navigator is not None else InMemoryNavigator(initial="/profile"),
        transport=transport,
    )
    return gateway, transport


# ---------------------------------------------------------------------------
# Hypothesis strategies
# ---------------------------------------------------------------------------

json_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=20)
json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=10,
)

tokens = st.text(
    min_size=1,
    max_size=64,
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.",
)

hostnames = st.from_regex(r"[a-z]{3,10}\.[a-z]{2,4}", fullmatch=True)

routes = st.from_regex(r"/[a-z]{1,10}(/[a-z0-9]{1,6})?", fullmatch=True)
