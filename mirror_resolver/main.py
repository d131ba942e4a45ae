"""
Mirror Resolver — CLI Entry Point

Usage:
    python -m mirror_resolver.main resolve --id ID --url URL [--layout L] [--json]
    python -m mirror_resolver.main check-settings [--settings PATH]
    python -m mirror_resolver.main is-external URL
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from .cli.resolve import check_settings_cmd, is_external, resolve
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


@click.group()
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR (default: LOG_LEVEL or INFO)")
def cli(log_level: str | None) -> None:
    """Mirror Resolver — pick the mirror that serves a repository."""
    # .env may set LOG_LEVEL, LOG_FORMAT and MIRROR_SETTINGS
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    setup_logging(level=log_level)
    logger.debug(f"Working directory: {Path.cwd()}")


cli.add_command(resolve)
cli.add_command(check_settings_cmd)
cli.add_command(is_external)


if __name__ == "__main__":
    cli()
