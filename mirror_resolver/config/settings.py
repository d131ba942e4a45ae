"""
Settings Loader — Read mirror rules and automatic routes from YAML.

The settings file (mirrors.yaml) has two sections:

    mirrors:
      - id: corp
        mirror_of: "*,!snapshots"
        url: https://repo.corp/maven
        layouts: default
    routes:
      - repository_url: https://repo1.example.org/maven2
        id: auto-central
        route_url: https://mirror.example.net/central

Rules keep their declaration order. An empty or missing ``routes`` section
means no automatic fallback is available.

## Locating the file

1. An explicit path (CLI ``--settings``)
2. The MIRROR_SETTINGS environment variable
3. mirrors.yaml in the current directory or any parent
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaError

from ..models.mirror import AutoRoute, MirrorRule
from ..routing.table import StaticRoutingTable
from ..validation import ConfigurationError, ValidationError, validate_file_readable

logger = logging.getLogger(__name__)

SETTINGS_FILE = "mirrors.yaml"
SETTINGS_ENV_VAR = "MIRROR_SETTINGS"


class RouteEntry(BaseModel):
    """One automatic route from the settings file."""

    repository_url: str
    id: str
    route_url: str

    def to_route(self) -> AutoRoute:
        return AutoRoute(id=self.id, route_url=self.route_url)


class MirrorSettings(BaseModel):
    """The mirrors.yaml schema."""

    version: int = 1
    mirrors: List[MirrorRule] = Field(default_factory=list)
    routes: List[RouteEntry] = Field(default_factory=list)

    def build_routing_table(self) -> Optional[StaticRoutingTable]:
        """
        Build the fallback routing table.

        Returns:
            A table with every configured route, or None if there are none
        """
        if not self.routes:
            return None
        return StaticRoutingTable(
            {entry.repository_url: entry.to_route() for entry in self.routes}
        )


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML file and return its contents."""
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_settings(path: Path) -> MirrorSettings:
    """
    Load and validate a settings file.

    Args:
        path: Path to mirrors.yaml

    Returns:
        Parsed MirrorSettings

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    path = Path(path)

    try:
        validate_file_readable(path, "Settings file")
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e

    try:
        data = load_yaml(path)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file must contain a mapping: {path}")

    try:
        settings = MirrorSettings(**data)
    except SchemaError as e:
        raise ConfigurationError(f"Invalid settings in {path}: {e}") from e

    logger.info(
        f"Loaded {len(settings.mirrors)} mirror rule(s) and "
        f"{len(settings.routes)} route(s) from {path}"
    )
    return settings


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """
    Search for mirrors.yaml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to mirrors.yaml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def settings_path_from_env() -> Path | None:
    """Path named by MIRROR_SETTINGS, if set."""
    value = os.environ.get(SETTINGS_ENV_VAR, "").strip()
    return Path(value) if value else None


def resolve_settings_path(explicit: str | None = None) -> Path:
    """
    Decide which settings file to load.

    Raises:
        ConfigurationError: If no settings file can be located
    """
    if explicit:
        return Path(explicit)

    from_env = settings_path_from_env()
    if from_env is not None:
        return from_env

    found = find_settings_file()
    if found is not None:
        return found

    raise ConfigurationError(
        f"No settings file found. Pass --settings, set {SETTINGS_ENV_VAR}, "
        f"or create {SETTINGS_FILE}."
    )
