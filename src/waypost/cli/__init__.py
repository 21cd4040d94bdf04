"""Waypost CLI — serve a site directory and inspect its routes.

Entry point registered as ``waypost`` in ``pyproject.toml``::

    [project.scripts]
    waypost = "waypost.cli:main"
"""

import argparse
import sys


def _add_site_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=None,
        help="Site directory holding templates and assets (default: cwd)",
    )
    parser.add_argument(
        "--app",
        default=None,
        help="Import string of an existing Site (e.g. mysite:site); overrides --root",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypost`` command."""
    parser = argparse.ArgumentParser(
        prog="waypost",
        description="Waypost — a small ASGI site server.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypost run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the server")
    _add_site_options(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Development mode: auto-reload and detailed error text",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error", "critical"),
        help="Log level for the waypost logger",
    )

    # -- waypost routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Show the route table")
    _add_site_options(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from waypost.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from waypost.cli._routes import show_routes

        show_routes(args)
