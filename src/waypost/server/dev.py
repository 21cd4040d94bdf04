"""Server entry points.

Starts a pounce ASGI server with the live waypost Site object.  Development
mode runs one worker with reload; otherwise the configured worker count is
used without reload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from waypost.app import Site


def run_dev_server(
    app: Site,
    host: str,
    port: int,
    *,
    reload: bool = True,
    reload_include: tuple[str, ...] = (),
    reload_dirs: tuple[str, ...] = (),
    app_path: str | None = None,
) -> None:
    """Start a pounce dev server with the given site.

    Pounce's ``run()`` takes an import string (e.g., ``"mysite:site"``),
    but waypost has a live ``Site`` object, so ``pounce.Server`` is used
    directly with the ASGI callable.

    Args:
        app: ASGI callable (waypost Site instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes (default True).
        reload_include: Extra file extensions to watch when reload is
            active (templates and assets, e.g. ``(".html", ".css")``).
        reload_dirs: Extra directories to watch alongside cwd.
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the site on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=reload_include,
        reload_dirs=reload_dirs,
    )
    server = Server(config, app, app_path=app_path)
    server.run()


def run_server(
    app: Site,
    host: str,
    port: int,
    *,
    workers: int = 1,
    log_level: str = "info",
    log_format: str = "text",
) -> None:
    """Start a pounce server without reload."""
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
        log_format=log_format,
    )
    server = Server(config, app)
    server.run()
