"""ASGI handler — translates ASGI scope/messages to waypost types.

The only component that touches raw ASGI directly. Converts the scope to
a Request, resolves it through the router, asks the responder for the
single Response, and sends it back through ASGI ``send()``.
"""

import logging

from waypost._internal.asgi import Receive, Scope, Send
from waypost.http.request import Request
from waypost.http.response import Response
from waypost.routing.router import Router
from waypost.server.responder import Responder
from waypost.server.sender import send_response

logger = logging.getLogger("waypost.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    responder: Responder,
) -> None:
    """Process a single HTTP request.

    Every request is dispatched the same way regardless of method.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    logger.info("%s %s", request.method, request.url)
    logger.debug("user-agent: %s", request.user_agent)

    try:
        resource = router.resolve(request.path)
        response = await responder.respond(resource)
    except Exception:
        logger.exception("500 %s %s", request.method, request.path)
        response = Response(body="Internal Server Error", status=500)

    await send_response(response, send, head=request.is_head)
