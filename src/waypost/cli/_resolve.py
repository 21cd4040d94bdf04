"""Site resolution for CLI commands.

Either imports an existing ``Site`` from a ``"module:attribute"`` string,
or builds one from the environment plus command-line overrides.
"""

import argparse
import importlib
from typing import Any

from waypost.app import Site
from waypost.config import SiteConfig


def resolve_site(import_string: str) -> Site:
    """Resolve an import string to a waypost Site instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"site"``.  Factory functions are called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Site or a factory for one.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "site"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Site):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Site):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a waypost.Site instance"
        raise TypeError(msg)

    return obj


def site_from_args(args: argparse.Namespace) -> Site:
    """Build the Site a CLI command should operate on."""
    if args.app:
        return resolve_site(args.app)

    overrides: dict[str, Any] = {}
    if args.root is not None:
        overrides["root_dir"] = args.root
    if getattr(args, "debug", False):
        overrides["debug"] = True
    if getattr(args, "log_level", None):
        overrides["log_level"] = args.log_level
    return Site(SiteConfig.from_env(**overrides))
