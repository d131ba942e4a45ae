"""
Mirror Selection — Pick the mirror that serves a repository.

Resolution runs in three tiers and stops at the first hit:

1. Exact scan: a rule whose mirrorOf is literally the repository id
2. Pattern scan: a rule whose mirrorOf pattern selects the repository
3. Auto-route: the injected routing table, looked up by repository URL

Both scans also require the rule's layout filter to accept the repository
layout, and both take the first qualifying rule in list order. Because the
exact scan runs first, ``mirrorOf: central`` beats ``mirrorOf: "*"`` wherever
the two appear in the list.

Nothing here raises for a missing rule list, a missing routing table or an
unparseable repository URL; the outcome is simply "no mirror", and the
caller contacts the repository directly.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..models.mirror import MirrorRule, Repository, ResolvedMirror
from ..routing.table import RoutingTable
from .patterns import match_pattern, rule_matches_layout

logger = logging.getLogger(__name__)


def find_exact_mirror(
    repository: Repository,
    mirrors: Sequence[MirrorRule],
) -> Optional[MirrorRule]:
    """First rule whose mirrorOf is exactly the repository id."""
    for rule in mirrors:
        if rule.mirror_of == repository.id and rule_matches_layout(repository, rule):
            return rule
    return None


def find_pattern_mirror(
    repository: Repository,
    mirrors: Sequence[MirrorRule],
) -> Optional[MirrorRule]:
    """First rule whose mirrorOf pattern selects the repository."""
    for rule in mirrors:
        if match_pattern(repository, rule.mirror_of) and rule_matches_layout(repository, rule):
            return rule
    return None


def get_settings_mirror(
    repository: Repository,
    mirrors: Optional[Sequence[MirrorRule]],
) -> Optional[MirrorRule]:
    """
    Match a repository against the configured rules.

    Args:
        repository: Repository being resolved
        mirrors: Configured rules in declaration order, may be None

    Returns:
        The selected rule, or None
    """
    if not mirrors:
        return None

    rule = find_exact_mirror(repository, mirrors)
    if rule is not None:
        logger.debug(
            f"Mirror {rule.id} matches {repository.id} exactly",
            extra={"repo_id": repository.id, "mirror_id": rule.id, "resolution": "exact"},
        )
        return rule

    rule = find_pattern_mirror(repository, mirrors)
    if rule is not None:
        logger.debug(
            f"Mirror {rule.id} matches {repository.id} via pattern {rule.mirror_of!r}",
            extra={"repo_id": repository.id, "mirror_id": rule.id, "resolution": "pattern"},
        )
    return rule


def get_auto_mirror(
    repository: Repository,
    routing_table: Optional[RoutingTable],
) -> Optional[ResolvedMirror]:
    """
    Look up an automatic route for a repository.

    An absent routing table means the fallback is unavailable, which is
    not an error.
    """
    if routing_table is None:
        return None

    route = routing_table.lookup_by_url(repository.url)
    if route is None:
        logger.debug(
            f"No auto-mirror found for {repository.url}",
            extra={"repo_id": repository.id, "resolution": "none"},
        )
        return None

    logger.debug(
        f"Auto-mirror {route.id} routes {repository.url} to {route.route_url}",
        extra={"repo_id": repository.id, "mirror_id": route.id, "resolution": "route"},
    )
    return ResolvedMirror.from_route(route, repository)


def select_mirror(
    repository: Repository,
    mirrors: Optional[Sequence[MirrorRule]],
    routing_table: Optional[RoutingTable] = None,
) -> Optional[ResolvedMirror]:
    """
    Resolve the mirror for a repository.

    Args:
        repository: Repository requests are directed at
        mirrors: Configured rules in declaration order, may be None or empty
        routing_table: Fallback route lookup, may be None

    Returns:
        The mirror to use, or None to contact the repository directly
    """
    logger.debug(f"Selecting mirror for {repository.url}", extra={"repo_id": repository.id})

    rule = get_settings_mirror(repository, mirrors)
    if rule is not None:
        return ResolvedMirror.from_rule(rule)

    return get_auto_mirror(repository, routing_table)


class MirrorSelector:
    """
    Mirror selection bound to one routing table.

    Holds no state besides the table reference, so a single instance can
    serve concurrent callers as long as the rule lists they pass are not
    mutated during the call.

    Usage:
        selector = MirrorSelector(routing_table=settings.build_routing_table())
        mirror = selector.get_mirror(repository, settings.mirrors)
    """

    def __init__(self, routing_table: Optional[RoutingTable] = None):
        self.routing_table = routing_table

    def get_mirror(
        self,
        repository: Repository,
        mirrors: Optional[Sequence[MirrorRule]],
    ) -> Optional[ResolvedMirror]:
        """Resolve the mirror for a repository."""
        return select_mirror(repository, mirrors, self.routing_table)
