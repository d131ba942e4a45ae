"""
Mirror Models — Pydantic schemas for repositories, mirror rules and routes.

A settings loader builds these once per session; the selector only reads
them. Every model is frozen so a resolution call can never mutate its inputs.

Field names are snake_case. Settings files written in the Maven camelCase
style (``mirrorOf``, ``mirrorOfLayouts``) are accepted through aliases.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LAYOUT = "default"


class Repository(BaseModel):
    """A remote artifact repository that requests are directed at."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    layout: Optional[str] = None


class MirrorRule(BaseModel):
    """A configured mirror and the repositories it intercepts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    mirror_of: Optional[str] = Field(default=None, alias="mirrorOf")
    url: str
    # Pattern over repository layouts; empty means every layout
    layouts: Optional[str] = Field(default=None, alias="mirrorOfLayouts")
    # Layout of the mirror endpoint itself
    layout: str = DEFAULT_LAYOUT


class AutoRoute(BaseModel):
    """A route yielded by a routing table for a repository URL."""

    model_config = ConfigDict(frozen=True)

    id: str
    route_url: str


class ResolvedMirror(BaseModel):
    """The mirror that should serve requests for a repository."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    layout: str = DEFAULT_LAYOUT
    mirror_of: Optional[str] = None

    @classmethod
    def from_rule(cls, rule: MirrorRule) -> "ResolvedMirror":
        """Describe a settings rule as a resolved mirror."""
        return cls(
            id=rule.id,
            url=rule.url,
            layout=rule.layout,
            mirror_of=rule.mirror_of,
        )

    @classmethod
    def from_route(cls, route: AutoRoute, repository: Repository) -> "ResolvedMirror":
        """
        Synthesize a mirror from an automatic route.

        The layout is always "default" and ``mirror_of`` records the
        repository the route was looked up for.
        """
        return cls(
            id=route.id,
            url=route.route_url,
            layout=DEFAULT_LAYOUT,
            mirror_of=repository.id,
        )
