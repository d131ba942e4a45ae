"""
Mirror Resolver — Select the mirror that serves an artifact repository.
"""

from .engine.selector import MirrorSelector, select_mirror
from .models.mirror import AutoRoute, MirrorRule, Repository, ResolvedMirror
from .routing.table import RoutingTable, StaticRoutingTable

__all__ = [
    "select_mirror",
    "MirrorSelector",
    "Repository",
    "MirrorRule",
    "AutoRoute",
    "ResolvedMirror",
    "RoutingTable",
    "StaticRoutingTable",
]
