"""
Routing — Automatic mirror routes used when no settings rule matches.
"""

from .table import RoutingTable, StaticRoutingTable

__all__ = [
    "RoutingTable",
    "StaticRoutingTable",
]
