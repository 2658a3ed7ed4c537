"""CLI commands for the play catalogue."""

from __future__ import annotations

import click

from theater.application.list_plays import ListPlaysHandler
from theater.domain.exceptions import DomainException
from theater.infrastructure.bootstrap import play_repository


@click.command("plays")
def play_list() -> None:
    """List all plays in the catalogue."""
    handler = ListPlaysHandler(play_repo=play_repository())

    try:
        plays = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not plays:
        click.echo("No plays found.")
        return

    click.echo(f"{'ID':<12} {'Name':<24} {'Genre':<10}")
    click.echo("-" * 48)
    for p in plays:
        click.echo(f"{p.play_id:<12} {p.name:<24} {p.genre:<10}")
