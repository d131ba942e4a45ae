"""
Shared fixtures for settings and CLI tests.

Provides a sample mirrors.yaml in a temporary directory and keeps the
root logger intact across tests that call setup_logging().
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


SAMPLE_SETTINGS = """
mirrors:
  - id: corp-all
    mirror_of: "*,!snapshots"
    url: https://repo.corp/maven
  - id: corp-central
    mirrorOf: central
    url: https://repo.corp/central
    layouts: default
routes:
  - repository_url: https://snapshots.example.org/repo
    id: auto-snapshots
    route_url: https://mirror.example.net/snapshots
"""


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Path to a sample mirrors.yaml."""
    path = tmp_path / "mirrors.yaml"
    path.write_text(SAMPLE_SETTINGS)
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of settings and logging config."""
    for var in ("MIRROR_SETTINGS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
