"""Resource descriptor — what a URL path resolved to."""

from dataclasses import dataclass
from enum import Enum

from waypost.content_types import extension_of


class ResourceKind(Enum):
    TEMPLATE = "template"
    STATIC = "static"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Resource:
    """Per-request resolution result.

    At most one of ``template_path`` and ``static_path`` is set.  An empty
    descriptor (both blank) means the path matched nothing.
    """

    template_path: str = ""
    static_path: str = ""

    def __post_init__(self) -> None:
        if self.template_path and self.static_path:
            msg = "A resource is either a template or a static file, not both"
            raise ValueError(msg)

    @property
    def kind(self) -> ResourceKind:
        if self.template_path:
            return ResourceKind.TEMPLATE
        if self.static_path:
            return ResourceKind.STATIC
        return ResourceKind.NONE

    @property
    def path(self) -> str:
        """Whichever of the two paths is set, or ``""``."""
        return self.template_path or self.static_path

    @property
    def extension(self) -> str:
        return extension_of(self.path)
