"""Extension → MIME type resolution.

A pure table lookup with one fallback.  Never raises.
"""

from collections.abc import Mapping
from pathlib import PurePosixPath
from types import MappingProxyType

from waypost.config import DEFAULT_CONTENT_TYPES

DEFAULT_TABLE: Mapping[str, str] = MappingProxyType(dict(DEFAULT_CONTENT_TYPES))

# Rendered templates are always sent as HTML regardless of their suffix.
HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def extension_of(path: str) -> str:
    """Return the final suffix of a URL path, or ``""`` when there is none.

    ``"/style.css"`` → ``".css"``, ``"/"`` → ``""``, ``"/a.b/c"`` → ``""``.
    """
    if not path:
        return ""
    return PurePosixPath(path).suffix


def content_type_for(
    extension: str,
    table: Mapping[str, str] = DEFAULT_TABLE,
    default: str = "text/plain",
) -> str:
    """Look up the MIME type for *extension*, falling back to *default*."""
    return table.get(extension, default)
