"""Routing — fixed page routes and static-asset detection.

The route table is exact-match only: no patterns, no parameters.
"""

from waypost.routing.resource import Resource, ResourceKind
from waypost.routing.router import Router

__all__ = ["Resource", "ResourceKind", "Router"]
