"""Waypost — a small ASGI site server.

Answers every request from two fixed tables: exact page routes rendered
with kida, and static assets served byte-for-byte by extension.  Anything
else gets the rendered 404 page.

Basic usage::

    from waypost import Site, SiteConfig

    site = Site(SiteConfig(root_dir="site", port=3000))
    site.run()
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "Request",
    "Resource",
    "ResourceKind",
    "ResourceReadError",
    "Response",
    "Router",
    "Site",
    "SiteConfig",
    "WaypostError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypost`` fast while providing a clean top-level API.
    """
    if name == "Site":
        from waypost.app import Site

        return Site

    if name == "SiteConfig":
        from waypost.config import SiteConfig

        return SiteConfig

    if name == "Request":
        from waypost.http.request import Request

        return Request

    if name == "Response":
        from waypost.http.response import Response

        return Response

    if name in ("Resource", "ResourceKind", "Router"):
        from waypost import routing as _routing

        return getattr(_routing, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "NotFound",
        "ResourceReadError",
        "WaypostError",
    ):
        from waypost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
