"""Outbound request descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class RequestDescriptor:
    """Method, API-relative path, headers and body of a single call.

    Descriptors are immutable; interceptors derive new ones with
    ``with_header`` instead of editing the caller's copy.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    json: Any = None
    params: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", dict(self.headers))

    def with_header(self, name: str, value: str) -> RequestDescriptor:
        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        headers[name] = value
        return replace(self, headers=headers)
