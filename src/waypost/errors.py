"""Waypost exception hierarchy.

Shared across the router, responder, app, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class WaypostError(Exception):
    """Base for all waypost-specific errors."""


class ConfigurationError(WaypostError):
    """Raised when site configuration is invalid.

    Typically raised by ``SiteConfig.validate()`` during ``Site._freeze()``.
    """


class ResourceReadError(WaypostError):
    """A template or static file could not be read.

    The underlying ``OSError`` is chained as ``__cause__``.  Callers only
    check that a read failed; "not found" and "permission denied" are
    handled the same way.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if reason else path)


@dataclass(frozen=True, slots=True)
class HTTPError(WaypostError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — the path resolved to no readable resource."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class TemplateRenderError(WaypostError):
    """A template was read but kida could not compile or render it.

    The original kida exception is chained as ``__cause__``.
    """
