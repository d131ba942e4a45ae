"""
Settings Checks — Find mirror rules that cannot behave as intended.

Checks never raise; they return a list of issues for the caller to log
or print.

## Usage

    from mirror_resolver.config.checks import check_settings, has_errors

    issues = check_settings(settings)
    for issue in issues:
        print(f"{issue.level}: {issue.message}")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..engine.patterns import EXTERNAL_WILDCARD, WILDCARD
from ..models.mirror import MirrorRule
from ..validation import ValidationError, validate_absolute_url
from .settings import MirrorSettings

logger = logging.getLogger(__name__)


@dataclass
class SettingsIssue:
    """A problem found in the settings."""

    level: str  # "error", "warning", "info"
    message: str
    rule_id: Optional[str] = None

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON output."""
        return {
            "level": self.level,
            "rule_id": self.rule_id,
            "message": self.message,
        }


def _is_catch_all(rule: MirrorRule) -> bool:
    return rule.mirror_of == WILDCARD and (not rule.layouts or rule.layouts == WILDCARD)


def _is_plain_id(pattern: str) -> bool:
    # Plain ids are still reachable through the exact scan
    return (
        "," not in pattern
        and pattern not in (WILDCARD, EXTERNAL_WILDCARD)
        and not pattern.startswith("!")
    )


def check_settings(settings: MirrorSettings) -> List[SettingsIssue]:
    """
    Check mirror rules and routes.

    Reports:
    - rules with an empty mirrorOf, which match no named repository
    - duplicate rule ids
    - pattern rules listed after a catch-all rule, which never win
    - mirror and route URLs that are not absolute

    Args:
        settings: Loaded settings

    Returns:
        Issues in rule order, routes last
    """
    issues: List[SettingsIssue] = []
    seen_ids: Dict[str, int] = {}
    catch_all: Optional[MirrorRule] = None

    for index, rule in enumerate(settings.mirrors):
        if rule.id in seen_ids:
            issues.append(SettingsIssue(
                level="warning",
                rule_id=rule.id,
                message=f"Duplicate mirror id {rule.id!r} (first defined at position {seen_ids[rule.id]})",
            ))
        else:
            seen_ids[rule.id] = index

        if not rule.mirror_of:
            issues.append(SettingsIssue(
                level="warning",
                rule_id=rule.id,
                message=f"Mirror {rule.id!r} has an empty mirrorOf and matches no named repository",
            ))
        elif catch_all is not None and not _is_plain_id(rule.mirror_of):
            issues.append(SettingsIssue(
                level="info",
                rule_id=rule.id,
                message=(
                    f"Mirror {rule.id!r} is shadowed: {catch_all.id!r} matches "
                    f"every repository first"
                ),
            ))

        if catch_all is None and _is_catch_all(rule):
            catch_all = rule

        try:
            validate_absolute_url(rule.url, field=f"mirrors[{index}].url")
        except ValidationError as e:
            issues.append(SettingsIssue(level="error", rule_id=rule.id, message=str(e)))

    for index, entry in enumerate(settings.routes):
        for field_name in ("repository_url", "route_url"):
            try:
                validate_absolute_url(getattr(entry, field_name), field=f"routes[{index}].{field_name}")
            except ValidationError as e:
                issues.append(SettingsIssue(level="error", rule_id=entry.id, message=str(e)))

    for issue in issues:
        logger.debug(f"Settings issue ({issue.level}): {issue.message}")

    return issues


def has_errors(issues: List[SettingsIssue]) -> bool:
    """Whether any issue is error-level."""
    return any(issue.level == "error" for issue in issues)
