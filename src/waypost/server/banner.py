"""Startup banner listing the bound address and the page routes."""

from collections.abc import Iterable

_W = 65


def format_banner(host: str, port: int, paths: Iterable[str]) -> str:
    """Return the multi-line startup banner.

    Example::

        ── waypost ──────────────────────────────────────────────────

          Server started: http://127.0.0.1:3000

          Routes:
            -> http://127.0.0.1:3000/
            -> http://127.0.0.1:3000/calculator
            -> any other path shows the 404 page

        ─────────────────────────────────────────────────────────────
    """
    base = f"http://{host}:{port}"
    title = "── waypost "
    lines = [
        title + "─" * (_W - len(title)),
        "",
        f"  Server started: {base}",
        "",
        "  Routes:",
    ]
    lines.extend(f"    -> {base}{path}" for path in paths)
    lines.append("    -> any other path shows the 404 page")
    lines.extend(["", "─" * _W])
    return "\n".join(lines)
