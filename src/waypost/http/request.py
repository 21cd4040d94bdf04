"""Immutable HTTP request.

Only the metadata the site needs: waypost never reads request bodies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from waypost.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str
    query_string: bytes = b""
    headers: Headers = field(default_factory=Headers)
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def url(self) -> str:
        """Request URL as the client sent it (path + query string)."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    @property
    def is_head(self) -> bool:
        """True for HEAD requests, whose responses carry no body."""
        return self.method == "HEAD"

    @property
    def user_agent(self) -> str:
        return self.headers.get("user-agent", "-") or "-"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
            headers=Headers(tuple(tuple(pair) for pair in scope.get("headers", ()))),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
