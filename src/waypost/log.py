"""Logging setup for the ``waypost`` logger tree.

Modules log through ``logging.getLogger("waypost.<area>")``.  When the
server is started from ``Site.run()`` or the CLI, ``configure_logging``
attaches one stream handler to the ``waypost`` parent logger.
"""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "info", *, stream: object | None = None) -> logging.Logger:
    """Attach a stream handler to the ``waypost`` logger and set its level.

    Idempotent: a second call only updates the level.
    """
    logger = logging.getLogger("waypost")
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        msg = f"Unknown log level {level!r}"
        raise ValueError(msg)
    logger.setLevel(numeric)

    if not any(getattr(h, "_waypost", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)  # type: ignore[arg-type]
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._waypost = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = False
    return logger
