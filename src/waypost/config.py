"""Site configuration.

SiteConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.  The route and content-type tables live here so
the whole process shares one read-only copy.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any

from waypost.errors import ConfigurationError

DEFAULT_ROUTES: tuple[tuple[str, str], ...] = (
    ("/", "index.html"),
    ("/calculator", "index2.html"),
)

DEFAULT_CONTENT_TYPES: tuple[tuple[str, str], ...] = (
    (".html", "text/html; charset=utf-8"),
    (".js", "text/javascript; charset=utf-8"),
    (".css", "text/css; charset=utf-8"),
    (".json", "application/json"),
    (".png", "image/png"),
    (".jpg", "image/jpg"),
    (".gif", "image/gif"),
    (".svg", "image/svg+xml"),
    (".ico", "image/x-icon"),
)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(root_dir="public", port=8888, debug=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    workers: int = 1

    # Reload (development mode only)
    reload_include: tuple[str, ...] = (".html", ".css", ".js")

    # Resources
    root_dir: str | Path = "."
    routes: tuple[tuple[str, str], ...] = DEFAULT_ROUTES
    not_found_template: str = "index3.html"
    template_suffix: str = ".html"
    static_extensions: tuple[str, ...] = (".css", ".js", ".png")

    # Content types
    content_types: tuple[tuple[str, str], ...] = DEFAULT_CONTENT_TYPES
    default_content_type: str = "text/plain"

    # Templates
    autoescape: bool = True

    # Logging
    log_level: str = "info"
    log_format: str = "text"

    @property
    def route_table(self) -> Mapping[str, str]:
        """Exact URL path → template file, as a read-only mapping."""
        return MappingProxyType(dict(self.routes))

    @property
    def content_type_table(self) -> Mapping[str, str]:
        """File extension → MIME type, as a read-only mapping."""
        return MappingProxyType(dict(self.content_types))

    def validate(self) -> None:
        """Check the tables for contradictions.

        Raises:
            ConfigurationError: On the first problem found.
        """
        for ext in (self.template_suffix, *self.static_extensions):
            if not ext.startswith("."):
                msg = f"Extension {ext!r} must start with '.'"
                raise ConfigurationError(msg)

        if self.template_suffix in self.static_extensions:
            msg = (
                f"Template suffix {self.template_suffix!r} cannot also be a static "
                "extension; a path would resolve to both a template and a file"
            )
            raise ConfigurationError(msg)

        for path, template in self.routes:
            if not path.startswith("/"):
                msg = f"Route {path!r} must start with '/'"
                raise ConfigurationError(msg)
            if not template.endswith(self.template_suffix):
                msg = f"Route {path!r} points at {template!r}, not a {self.template_suffix} template"
                raise ConfigurationError(msg)

        if not self.not_found_template.endswith(self.template_suffix):
            msg = f"Not-found page {self.not_found_template!r} is not a {self.template_suffix} template"
            raise ConfigurationError(msg)

        if not 0 < self.port < 65536:
            msg = f"Port {self.port} is out of range"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, prefix: str = "WAYPOST_", **overrides: Any) -> SiteConfig:
        """Build a config from ``{prefix}HOST``, ``PORT``, ``DEBUG``, ``ROOT_DIR``, ``LOG_LEVEL``.

        Keyword overrides win over the environment.
        """
        values: dict[str, Any] = {}
        env = os.environ

        if (host := env.get(f"{prefix}HOST")) is not None:
            values["host"] = host
        if (port := env.get(f"{prefix}PORT")) is not None:
            try:
                values["port"] = int(port)
            except ValueError as exc:
                msg = f"{prefix}PORT must be an integer, got {port!r}"
                raise ConfigurationError(msg) from exc
        if (debug := env.get(f"{prefix}DEBUG")) is not None:
            values["debug"] = debug.strip().lower() in _TRUTHY
        if (root := env.get(f"{prefix}ROOT_DIR")) is not None:
            values["root_dir"] = root
        if (level := env.get(f"{prefix}LOG_LEVEL")) is not None:
            values["log_level"] = level.lower()

        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            msg = f"Unknown config field(s): {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)

        values.update(overrides)
        return cls(**values)
