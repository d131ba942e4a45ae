"""
Tests for the static routing table.
"""

import threading

from mirror_resolver.models.mirror import AutoRoute
from mirror_resolver.routing.table import RoutingTable, StaticRoutingTable


URL = "https://repo1.example.org/maven2"
ROUTE = AutoRoute(id="auto-central", route_url="https://mirror.example.net/central")


class TestLookup:
    """Tests for lookup_by_url."""

    def test_exact_url(self):
        """A registered URL returns its route."""
        table = StaticRoutingTable({URL: ROUTE})
        assert table.lookup_by_url(URL) == ROUTE

    def test_trailing_slash_added(self):
        """A lookup with a trailing slash finds the route without one."""
        table = StaticRoutingTable({URL: ROUTE})
        assert table.lookup_by_url(URL + "/") == ROUTE

    def test_trailing_slash_removed(self):
        """A lookup without a trailing slash finds the route with one."""
        table = StaticRoutingTable({URL + "/": ROUTE})
        assert table.lookup_by_url(URL) == ROUTE

    def test_unknown_url(self):
        """Unknown URLs yield None."""
        table = StaticRoutingTable({URL: ROUTE})
        assert table.lookup_by_url("https://other.example.org/repo") is None

    def test_empty_table(self):
        """An empty table yields None for anything."""
        table = StaticRoutingTable()
        assert table.lookup_by_url(URL) is None
        assert len(table) == 0

    def test_satisfies_protocol(self):
        """StaticRoutingTable is a RoutingTable."""
        assert isinstance(StaticRoutingTable(), RoutingTable)


class TestUpdates:
    """Tests for register and remove."""

    def test_register(self):
        """Registered routes are visible to lookups."""
        table = StaticRoutingTable()
        table.register(URL, ROUTE)
        assert table.lookup_by_url(URL) == ROUTE
        assert len(table) == 1

    def test_register_replaces(self):
        """Registering a URL again replaces its route."""
        table = StaticRoutingTable({URL: ROUTE})
        other = AutoRoute(id="other", route_url="https://other")
        table.register(URL, other)
        assert table.lookup_by_url(URL) == other
        assert len(table) == 1

    def test_remove(self):
        """Removed routes are no longer found."""
        table = StaticRoutingTable({URL: ROUTE})
        assert table.remove(URL) is True
        assert table.lookup_by_url(URL) is None
        assert table.remove(URL) is False

    def test_constructor_copies_mapping(self):
        """Changing the source mapping does not affect the table."""
        source = {URL: ROUTE}
        table = StaticRoutingTable(source)
        source.clear()
        assert table.lookup_by_url(URL) == ROUTE

    def test_concurrent_register_and_lookup(self):
        """Lookups during concurrent registration see whole mappings."""
        table = StaticRoutingTable({URL: ROUTE})
        errors = []

        def writer(n: int) -> None:
            for i in range(200):
                table.register(f"https://host-{n}/{i}", ROUTE)

        def reader() -> None:
            for _ in range(500):
                if table.lookup_by_url(URL) != ROUTE:
                    errors.append("missing")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(table) == 801
