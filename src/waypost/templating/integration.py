"""Kida environment setup.

Creates a kida Environment from SiteConfig once, when the site freezes,
and renders template sources read from disk.  No context data is ever
passed: a page renders only its own literal content.
"""

from kida import Environment, FileSystemLoader

from waypost.config import SiteConfig
from waypost.errors import TemplateRenderError


def create_environment(config: SiteConfig) -> Environment:
    """Create a kida Environment from site configuration.

    The loader points at the site root so templates can ``{% include %}``
    or ``{% extends %}`` their siblings.  The returned environment is
    immutable for the lifetime of the site.
    """
    return Environment(
        loader=FileSystemLoader(str(config.root_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )


def is_kida_error(exc: BaseException) -> bool:
    """Check if an exception originates from the kida template engine."""
    module = type(exc).__module__ or ""
    return "kida" in module


def render_source(env: Environment, source: str) -> str:
    """Compile *source* and render it with an empty context.

    Raises:
        TemplateRenderError: If kida rejects the template at compile or
            render time.
    """
    try:
        return env.from_string(source).render()
    except Exception as exc:
        if not is_kida_error(exc):
            raise
        raise TemplateRenderError(str(exc)) from exc
