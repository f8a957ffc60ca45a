"""``pianoteq metronome`` — show or change metronome settings."""

from __future__ import annotations

import click

from pianoteq.cli_commands._common import run_client
from pianoteq.cli_commands._output import console, print_metronome, print_models_json


@click.group()
def metronome() -> None:
    """Show or change the metronome."""


@metronome.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Show the metronome state."""
    state = run_client(ctx, lambda client: client.get_metronome())
    if as_json:
        print_models_json(state)
        return
    print_metronome(state)


@metronome.command("set")
@click.option("--on/--off", "enabled", default=None, help="Enable or disable the metronome.")
@click.option("--bpm", type=click.IntRange(1, 1000), default=None)
@click.option("--volume", "volume_db", type=float, default=None, help="Volume in dB.")
@click.option("--timesig", default=None, help="Time signature, e.g. 3/4.")
@click.option("--accentuate/--no-accentuate", default=None)
@click.pass_context
def set_metronome(
    ctx: click.Context,
    enabled: bool | None,
    bpm: int | None,
    volume_db: float | None,
    timesig: str | None,
    accentuate: bool | None,
) -> None:
    """Change only the given metronome settings."""
    if all(v is None for v in (enabled, bpm, volume_db, timesig, accentuate)):
        raise click.UsageError("Nothing to change; pass at least one option.")
    run_client(
        ctx,
        lambda client: client.set_metronome(
            enabled=enabled,
            bpm=bpm,
            volume_db=volume_db,
            timesig=timesig,
            accentuate=accentuate,
        ),
    )
    console.print("[green]Metronome updated.[/green]")
