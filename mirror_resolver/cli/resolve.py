"""
CLI resolve commands — resolve a repository, check settings, classify URLs.

Usage:
    python -m mirror_resolver.main resolve --id central --url https://repo1.example.org/maven2 [--json]
    python -m mirror_resolver.main check-settings [--settings mirrors.yaml] [--json]
    python -m mirror_resolver.main is-external URL
"""

from __future__ import annotations

import json

import click

from ..config.checks import check_settings, has_errors
from ..config.settings import load_settings, resolve_settings_path
from ..engine.external import is_external_url
from ..engine.selector import MirrorSelector
from ..models.mirror import Repository
from ..validation import ConfigurationError


def _load(settings_file: str | None):
    try:
        return load_settings(resolve_settings_path(settings_file))
    except ConfigurationError as e:
        raise click.ClickException(str(e))


@click.command("resolve")
@click.option("--settings", "settings_file", default=None, help="Path to mirrors.yaml")
@click.option("--id", "repo_id", required=True, help="Repository id")
@click.option("--url", "repo_url", required=True, help="Repository URL")
@click.option("--layout", default="default", show_default=True, help="Repository layout")
@click.option("--no-routes", is_flag=True, help="Ignore automatic routes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def resolve(
    settings_file: str | None,
    repo_id: str,
    repo_url: str,
    layout: str,
    no_routes: bool,
    as_json: bool,
) -> None:
    """Show which mirror serves a repository."""
    settings = _load(settings_file)
    repository = Repository(id=repo_id, url=repo_url, layout=layout or None)

    routing_table = None if no_routes else settings.build_routing_table()
    mirror = MirrorSelector(routing_table=routing_table).get_mirror(repository, settings.mirrors)

    if as_json:
        result = {
            "repository": repository.model_dump(),
            "mirror": mirror.model_dump() if mirror else None,
        }
        click.echo(json.dumps(result, indent=2))
        return

    if mirror is None:
        click.secho(f"No mirror for {repo_id}; contact {repo_url} directly", fg="cyan")
        return

    click.secho(f"✓ {repo_id} → {mirror.id}", fg="green")
    click.echo(f"  URL:        {mirror.url}")
    click.echo(f"  Layout:     {mirror.layout}")
    click.echo(f"  Mirror of:  {mirror.mirror_of}")


@click.command("check-settings")
@click.option("--settings", "settings_file", default=None, help="Path to mirrors.yaml")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def check_settings_cmd(settings_file: str | None, as_json: bool) -> None:
    """Check mirror rules and routes for mistakes."""
    settings = _load(settings_file)
    issues = check_settings(settings)

    if as_json:
        click.echo(json.dumps([issue.to_dict() for issue in issues], indent=2))
    elif not issues:
        click.secho(
            f"✓ {len(settings.mirrors)} mirror(s), {len(settings.routes)} route(s), no issues",
            fg="green",
        )
    else:
        colors = {"error": "red", "warning": "yellow", "info": "cyan"}
        for issue in issues:
            click.secho(f"  {issue.level:8} {issue.message}", fg=colors.get(issue.level))

    if has_errors(issues):
        raise SystemExit(1)


@click.command("is-external")
@click.argument("url")
def is_external(url: str) -> None:
    """Classify a repository URL as external or local."""
    if is_external_url(url):
        click.echo(f"{url}: external")
    else:
        click.echo(f"{url}: not external")
