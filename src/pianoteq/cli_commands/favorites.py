"""``pianoteq favorites`` — local favourite presets and server-side favourite navigation."""

from __future__ import annotations

import click

from pianoteq.cli_commands._common import favorites_service, run_client
from pianoteq.cli_commands._output import console


@click.group()
def favorites() -> None:
    """Manage favourite presets."""


@favorites.command("list")
@click.pass_context
def list_favorites(ctx: click.Context) -> None:
    """List locally stored favourites."""
    names = favorites_service(ctx).all()
    if not names:
        console.print("[yellow]No favourites yet.[/yellow]")
        return
    for name in names:
        console.print(f"★ {name}")


@favorites.command("add")
@click.argument("name")
@click.pass_context
def add(ctx: click.Context, name: str) -> None:
    """Mark preset NAME as a favourite."""
    favorites_service(ctx).add(name)
    console.print(f"[green]Added[/green] {name}")


@favorites.command("remove")
@click.argument("name")
@click.pass_context
def remove(ctx: click.Context, name: str) -> None:
    """Unmark preset NAME."""
    favorites_service(ctx).remove(name)
    console.print(f"[green]Removed[/green] {name}")


@favorites.command("toggle")
@click.argument("name")
@click.pass_context
def toggle(ctx: click.Context, name: str) -> None:
    """Flip the favourite flag of preset NAME."""
    added = favorites_service(ctx).toggle(name)
    console.print(f"[green]{'Added' if added else 'Removed'}[/green] {name}")


@favorites.command("next")
@click.pass_context
def next_favorite(ctx: click.Context) -> None:
    """Load the next favourite preset known to the server."""
    run_client(ctx, lambda client: client.next_favourite_preset())


@favorites.command("prev")
@click.pass_context
def prev_favorite(ctx: click.Context) -> None:
    """Load the previous favourite preset known to the server."""
    run_client(ctx, lambda client: client.prev_favourite_preset())
