"""Exact-match router.

Maps a URL path to a ``Resource``: a template when the path is in the
route table, a static file when it ends in a static extension, and an
empty descriptor otherwise.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from waypost.routing.resource import Resource

_EMPTY = Resource()


class Router:
    """Immutable route table plus static-extension set.

    Built once when the site freezes; ``resolve`` is safe to call from
    any number of concurrent requests.
    """

    __slots__ = ("_routes", "_static_extensions")

    def __init__(
        self,
        routes: Mapping[str, str] | Iterable[tuple[str, str]],
        static_extensions: Iterable[str] = (".css", ".js", ".png"),
    ) -> None:
        table = dict(routes.items() if isinstance(routes, Mapping) else routes)
        # Templates are stored as URL-style paths ("/index.html") so they
        # resolve under the site root the same way static paths do.
        self._routes: Mapping[str, str] = MappingProxyType(
            {path: "/" + template.lstrip("/") for path, template in table.items()}
        )
        self._static_extensions: tuple[str, ...] = tuple(static_extensions)

    @property
    def paths(self) -> tuple[str, ...]:
        """Routable page paths, in registration order."""
        return tuple(self._routes)

    @property
    def routes(self) -> Mapping[str, str]:
        return self._routes

    @property
    def static_extensions(self) -> tuple[str, ...]:
        return self._static_extensions

    def resolve(self, path: str) -> Resource:
        """Resolve *path* to a resource descriptor. Never raises."""
        template = self._routes.get(path)
        if template is not None:
            return Resource(template_path=template)
        if path.endswith(self._static_extensions):
            return Resource(static_path=path)
        return _EMPTY
