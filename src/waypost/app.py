"""Waypost site application.

Configured at construction, frozen when ``run()`` or ``__call__()`` is
first invoked: the config is validated and the router, kida environment,
and responder are built exactly once.
"""

import sys
import threading

from kida import Environment

from waypost._internal.asgi import Receive, Scope, Send
from waypost.config import SiteConfig
from waypost.routing.router import Router
from waypost.server.handler import handle_request
from waypost.server.responder import Responder
from waypost.templating.integration import create_environment


class Site:
    """The waypost ASGI application.

    Thread safety:
        Freezing uses a Lock + double-check so exactly one thread builds
        the runtime state, even when several workers call ``__call__()``
        on first request.  After that nothing is mutated.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_kida_env",
        "_responder",
        "_router",
        "config",
    )

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._kida_env: Environment | None = None
        self._responder: Responder | None = None

    @property
    def router(self) -> Router:
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server.

        Prints the startup banner, then runs pounce in development mode
        (reload, single worker) when ``config.debug`` is set.
        """
        from waypost.log import configure_logging
        from waypost.server.banner import format_banner

        self._ensure_frozen()
        configure_logging(self.config.log_level)

        _host = host or self.config.host
        _port = port or self.config.port

        print(format_banner(_host, _port, self.router.paths), file=sys.stderr)

        if self.config.debug:
            from waypost.server.dev import run_dev_server

            run_dev_server(
                self,
                _host,
                _port,
                reload=True,
                reload_include=self.config.reload_include,
                reload_dirs=(str(self.config.root_dir),),
            )
        else:
            from waypost.server.dev import run_server

            run_server(
                self,
                _host,
                _port,
                workers=self.config.workers,
                log_level=self.config.log_level,
                log_format=self.config.log_format,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        assert self._router is not None
        assert self._responder is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            responder=self._responder,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol, freezing at startup."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Build the runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self.config.validate()
        self._router = Router(self.config.routes, self.config.static_extensions)
        self._kida_env = create_environment(self.config)
        self._responder = Responder(self.config, self._kida_env)
        self._frozen = True
