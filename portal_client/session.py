"""Session and navigation capabilities supplied to the request gateway.

The gateway never touches ambient storage or browser globals. It reads the
bearer credential from a ``SessionContext`` and, on session expiry, asks the
context to clear itself and a ``Navigator`` to redirect to the login route.
Hosts plug in their own store and navigator; the in-memory versions here serve
headless hosts and tests.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


@runtime_checkable
class SessionStore(Protocol):
    """Opaque key-value store holding string slots."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


@runtime_checkable
class Navigator(Protocol):
    """Current-route query and redirect effect."""

    def current_route(self) -> str: ...

    def navigate_to(self, path: str) -> None: ...


class InMemorySessionStore:
    """Dict-backed ``SessionStore``."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove(self, key: str) -> None:
        self._slots.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._slots


class InMemoryNavigator:
    """``Navigator`` that tracks the current route and records redirects.

    Parameters
    ----------
    initial:
        Route the host starts on (default ``"/"``).
    """

    def __init__(self, initial: str = "/") -> None:
        self._route = initial
        self.history: list[str] = []

    def current_route(self) -> str:
        return self._route

    def navigate_to(self, path: str) -> None:
        self.history.append(path)
        self._route = path


class SessionContext:
    """Process-wide session state: one bearer credential and a cached identity.

    Both values live in a ``SessionStore`` under the ``token`` and ``user``
    slots. The credential is written at login, read before every outbound
    request and cleared on logout or when the server rejects it.
    """

    def __init__(self, store: SessionStore | None = None) -> None:
        self._store: SessionStore = store if store is not None else InMemorySessionStore()

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def credential(self) -> str | None:
        return self._store.get(TOKEN_KEY)

    @property
    def identity(self) -> str | None:
        return self._store.get(USER_KEY)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.credential)

    def login(self, credential: str, identity: str | None = None) -> None:
        """Start a new session.

        The identity belongs to the credential it was issued with, so logging
        in without one drops any identity cached by an earlier session.
        """
        self._store.set(TOKEN_KEY, credential)
        if identity is not None:
            self._store.set(USER_KEY, identity)
        else:
            self._store.remove(USER_KEY)
        logger.debug("Session credential stored", extra={"event": "session_login"})

    def clear_session(self) -> None:
        """Drop the credential and cached identity."""
        self._store.remove(TOKEN_KEY)
        self._store.remove(USER_KEY)
        logger.debug("Session cleared", extra={"event": "session_cleared"})

    logout = clear_session
