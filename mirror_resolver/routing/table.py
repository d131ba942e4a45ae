"""
Routing Table — Lookup of automatic mirror routes by repository URL.

The selector depends only on the ``RoutingTable`` protocol: any object with
a ``lookup_by_url(url)`` method can be injected. ``StaticRoutingTable`` is
the in-memory implementation built from the ``routes`` section of a
settings file.

## Concurrency

Writers build a new mapping under a lock and swap the reference in one
assignment. Readers never take the lock; they see either the old or the new
mapping, never a partial one.

## Usage

    from mirror_resolver.routing import StaticRoutingTable

    table = StaticRoutingTable()
    table.register("https://repo1.example.org/maven2", AutoRoute(...))
    route = table.lookup_by_url("https://repo1.example.org/maven2/")
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from ..models.mirror import AutoRoute

logger = logging.getLogger(__name__)


@runtime_checkable
class RoutingTable(Protocol):
    """Anything that can map a repository URL to an automatic route."""

    def lookup_by_url(self, url: str) -> Optional[AutoRoute]:
        ...


class StaticRoutingTable:
    """
    In-memory routing table keyed by repository URL.

    URLs match exactly, or with a single trailing slash added or removed.
    """

    def __init__(self, routes: Optional[Mapping[str, AutoRoute]] = None):
        self._routes: Dict[str, AutoRoute] = dict(routes or {})
        self._lock = threading.Lock()

    def lookup_by_url(self, url: str) -> Optional[AutoRoute]:
        """Find the route for a repository URL, or None."""
        routes = self._routes

        route = routes.get(url)
        if route is not None:
            return route

        if url.endswith("/"):
            return routes.get(url[:-1])
        return routes.get(url + "/")

    def register(self, url: str, route: AutoRoute) -> None:
        """Add or replace the route for a repository URL."""
        with self._lock:
            routes = dict(self._routes)
            routes[url] = route
            self._routes = routes
        logger.debug(f"Registered route {route.id} for {url}")

    def remove(self, url: str) -> bool:
        """
        Drop the route for a repository URL.

        Returns:
            True if a route was removed
        """
        with self._lock:
            if url not in self._routes:
                return False
            routes = dict(self._routes)
            del routes[url]
            self._routes = routes
        logger.debug(f"Removed route for {url}")
        return True

    def __len__(self) -> int:
        return len(self._routes)
