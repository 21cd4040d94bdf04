"""Resource responder — turns a resolved ``Resource`` into a ``Response``.

Two branches, each ending in exactly one response:

* template: read text and render (200), or 500 when the read or the
  render fails.
* static: read bytes and send them as-is (200), or fall into the
  not-found flow.
* not found: read the fallback page and render it (404), or 500 with a
  generic message when the fallback is unreadable too.

Reads go through ``anyio.Path`` so the event loop never blocks on disk.
Nothing is cached and nothing is retried.
"""

import logging
from pathlib import Path

import anyio
from kida import Environment

from waypost.config import SiteConfig
from waypost.content_types import HTML_CONTENT_TYPE, content_type_for
from waypost.errors import NotFound, ResourceReadError, TemplateRenderError
from waypost.http.response import Response
from waypost.routing.resource import Resource, ResourceKind
from waypost.templating.integration import render_source

logger = logging.getLogger("waypost.responder")

TEMPLATE_READ_ERROR = "Error: unable to read template - "
TEMPLATE_RENDER_ERROR = "Error: unable to render template - "
NOT_FOUND_PAGE_MISSING = "Server error: 404 page not found"


class Responder:
    """Reads resources under the site root and builds responses.

    Holds only immutable state, so one instance serves every request.
    """

    __slots__ = ("_config", "_content_types", "_env", "_not_found_path", "_root")

    def __init__(self, config: SiteConfig, env: Environment) -> None:
        self._config = config
        self._env = env
        self._root = Path(config.root_dir).resolve()
        self._content_types = config.content_type_table
        self._not_found_path = "/" + config.not_found_template.lstrip("/")

    async def respond(self, resource: Resource) -> Response:
        """Produce the single response for *resource*."""
        if resource.kind is ResourceKind.TEMPLATE:
            return await self.respond_template(resource.template_path)
        try:
            return await self.respond_static(resource)
        except NotFound as exc:
            logger.debug("not found: %s", exc.detail)
            return await self.respond_not_found()

    async def respond_template(self, template_path: str) -> Response:
        """Render a page template, or answer 500 when it cannot be read or rendered."""
        try:
            source = await self._read_text(template_path)
        except ResourceReadError as exc:
            logger.warning("template read failed: %s", exc)
            return self._template_error(TEMPLATE_READ_ERROR, exc.reason)
        try:
            body = render_source(self._env, source)
        except TemplateRenderError as exc:
            logger.error("template render failed: %s: %s", template_path, exc)
            return self._template_error(TEMPLATE_RENDER_ERROR, str(exc))
        return Response(body=body, content_type=HTML_CONTENT_TYPE)

    async def respond_static(self, resource: Resource) -> Response:
        """Send a static file unmodified.

        Raises:
            NotFound: When the resource is empty or its file cannot be read.
        """
        if resource.kind is not ResourceKind.STATIC:
            raise NotFound("no resource")
        try:
            content = await self._read_bytes(resource.static_path)
        except ResourceReadError as exc:
            raise NotFound(str(exc)) from exc

        content_type = content_type_for(
            resource.extension,
            self._content_types,
            self._config.default_content_type,
        )
        return Response(body=content, content_type=content_type)

    async def respond_not_found(self) -> Response:
        """Render the fallback page with 404, or 500 if it is missing too."""
        try:
            source = await self._read_text(self._not_found_path)
            body = render_source(self._env, source)
        except (ResourceReadError, TemplateRenderError) as exc:
            logger.error("fallback page unusable: %s", exc)
            return Response(
                body=NOT_FOUND_PAGE_MISSING,
                status=500,
                content_type=HTML_CONTENT_TYPE,
            )
        return Response(body=body, status=404, content_type=HTML_CONTENT_TYPE)

    def _template_error(self, prefix: str, reason: str) -> Response:
        """500 for a page template; the reason is only shown in debug mode."""
        detail = reason if self._config.debug else "see server log"
        return Response(body=prefix + detail, status=500, content_type=HTML_CONTENT_TYPE)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def locate(self, url_path: str) -> Path:
        """Map a URL path onto the filesystem under the site root.

        Raises:
            ResourceReadError: If the path escapes the site root or cannot
                be a filesystem path at all.
        """
        relative = url_path.lstrip("/")
        try:
            file_path = (self._root / relative).resolve() if relative else self._root
        except (OSError, ValueError) as exc:
            # Embedded NUL bytes surface as ValueError.
            raise ResourceReadError(url_path, str(exc)) from exc
        if not file_path.is_relative_to(self._root):
            raise ResourceReadError(url_path, "outside the site root")
        return file_path

    async def _read_text(self, url_path: str) -> str:
        try:
            file_path = self.locate(url_path)
            return await anyio.Path(file_path).read_text(encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise ResourceReadError(url_path, str(exc)) from exc

    async def _read_bytes(self, url_path: str) -> bytes:
        try:
            file_path = self.locate(url_path)
            return await anyio.Path(file_path).read_bytes()
        except (OSError, ValueError) as exc:
            raise ResourceReadError(url_path, str(exc)) from exc
