"""
Pattern Matching — Evaluate mirrorOf and layout patterns.

A pattern is a comma-separated list of tokens, scanned left to right:

- ``*``: matches any value
- ``external:*``: matches any external repository (mirrorOf only)
- ``!value``: excludes ``value``; ends the scan immediately
- ``value``: matches exactly ``value``

Examples:

    *                everything
    external:*       everything not on localhost and not file based
    repo,repo1       repo or repo1
    *,!repo1         everything except repo1

Tokens are compared with plain string equality; whitespace is significant.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..models.mirror import MirrorRule, Repository
from .external import is_external_repo

WILDCARD = "*"
EXTERNAL_WILDCARD = "external:*"


def scan_tokens(
    candidate: Optional[str],
    pattern: str,
    is_external: Optional[Callable[[], bool]] = None,
) -> bool:
    """
    Scan a comma-separated pattern for a candidate value.

    The result accumulates across tokens. A negation naming the candidate
    is a veto: it returns False at once, even after an earlier positive
    token. An exact hit settles the positive outcome, so the remaining
    tokens only matter if they veto it.

    Args:
        candidate: Value under test (repository id or layout), may be None
        pattern: Comma-separated pattern
        is_external: Lazily classifies the repository for ``external:*``;
            None disables that token

    Returns:
        True if the pattern selects the candidate
    """
    result = False

    tokens = pattern.split(",")
    # Trailing empty tokens are dropped; inner ones compare like any other
    while tokens and not tokens[-1]:
        tokens.pop()

    for token in tokens:
        if len(token) > 1 and token.startswith("!"):
            if token[1:] == candidate:
                return False
        elif result:
            continue
        elif token == candidate or token == WILDCARD:
            result = True
        elif token == EXTERNAL_WILDCARD and is_external is not None:
            result = is_external()

    return result


def match_pattern(repository: Repository, pattern: Optional[str]) -> bool:
    """
    Check whether a mirrorOf pattern selects a repository.

    Unlike layouts, an empty pattern selects nothing; rules must say ``*``.
    """
    if not pattern:
        return False

    # Simple checks first
    if pattern == WILDCARD or pattern == repository.id:
        return True

    return scan_tokens(
        repository.id,
        pattern,
        is_external=lambda: is_external_repo(repository),
    )


def matches_layout(repo_layout: Optional[str], mirror_layouts: Optional[str]) -> bool:
    """
    Check whether the layouts a mirror supports include a repository layout.

    Args:
        repo_layout: Layout of the repository, may be None
        mirror_layouts: Layout pattern of the mirror; empty means all

    Returns:
        True if the mirror serves the repository's layout
    """
    if not mirror_layouts or mirror_layouts == WILDCARD:
        return True

    if mirror_layouts == repo_layout:
        return True

    return scan_tokens(repo_layout, mirror_layouts)


def rule_matches_layout(repository: Repository, rule: MirrorRule) -> bool:
    """Apply a rule's layout filter to a repository."""
    return matches_layout(repository.layout, rule.layouts)
