"""``waypost routes`` — list the route table and static-asset rules.

Prints a PATH / RESOURCE table: one row per page route, one row for the
static extensions, and one for the 404 fallback.
"""

import argparse
import sys

from waypost.cli._resolve import site_from_args
from waypost.errors import ConfigurationError


def show_routes(args: argparse.Namespace) -> None:
    """Print the site's resolution rules as a table."""
    try:
        site = site_from_args(args)
        router = site.router
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows: list[tuple[str, str]] = [
        (path, template.lstrip("/")) for path, template in router.routes.items()
    ]
    rows.append((" ".join(f"*{ext}" for ext in router.static_extensions), "static file"))
    rows.append(("*", f"{site.config.not_found_template} (404)"))

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    fmt = f"{{:<{max_path}}}  {{}}"
    print(fmt.format("PATH", "RESOURCE"))
    print("-" * min(max_path + 2 + max(len(r[1]) for r in rows), 80))
    for path, resource in rows:
        print(fmt.format(path, resource))
