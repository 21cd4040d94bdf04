"""``waypost run`` — start the server."""

import argparse
import sys

from waypost.cli._resolve import site_from_args
from waypost.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Resolve the site and start it.

    ``--host`` and ``--port`` override the site config.  Configuration
    and import problems are reported on stderr with exit status 1.
    """
    try:
        site = site_from_args(args)
        site.config.validate()
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    site.run(host=args.host, port=args.port)
