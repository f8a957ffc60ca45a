"""``pianoteq presets`` — browse, load and manage presets."""

from __future__ import annotations

import click

from pianoteq.cli_commands._common import favorites_service, run_client
from pianoteq.cli_commands._output import console, print_models_json, print_presets_table
from pianoteq.models import PRESET_TYPES

_preset_type = click.option(
    "--type",
    "preset_type",
    type=click.Choice(PRESET_TYPES),
    default="full",
    show_default=True,
    help="Preset type.",
)


@click.group()
def presets() -> None:
    """Browse and manage presets."""


@presets.command("list")
@_preset_type
@click.option("--search", "-s", default=None, help="Only presets whose name contains this text.")
@click.option("--favorites", "favorites_only", is_flag=True, help="Only favourite presets.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_presets(
    ctx: click.Context,
    preset_type: str,
    search: str | None,
    favorites_only: bool,
    as_json: bool,
) -> None:
    """List presets of the given type."""
    items = run_client(ctx, lambda client: client.get_list_of_presets(preset_type))  # type: ignore[arg-type]
    local = set(favorites_service(ctx).all())

    if search:
        needle = search.lower()
        items = [p for p in items if needle in p.name.lower()]
    if favorites_only:
        items = [p for p in items if p.favourite or p.name in local]

    if as_json:
        print_models_json(items)
        return
    if not items:
        console.print("[yellow]No presets found.[/yellow]")
        return
    print_presets_table(items, local)


@presets.command("load")
@click.argument("name")
@click.option("--bank", default=None, help="Bank holding the preset.")
@_preset_type
@click.pass_context
def load(ctx: click.Context, name: str, bank: str | None, preset_type: str) -> None:
    """Load preset NAME."""
    run_client(ctx, lambda client: client.load_preset(name, bank, preset_type))  # type: ignore[arg-type]
    console.print(f"[green]Loaded[/green] {name}")


@presets.command("save")
@click.argument("name")
@click.option("--bank", required=True, help="Bank to save into.")
@_preset_type
@click.pass_context
def save(ctx: click.Context, name: str, bank: str, preset_type: str) -> None:
    """Save the current settings as preset NAME."""
    run_client(ctx, lambda client: client.save_preset(name, bank, preset_type))  # type: ignore[arg-type]
    console.print(f"[green]Saved[/green] {name} in {bank}")


@presets.command("delete")
@click.argument("name")
@click.option("--bank", required=True, help="Bank holding the preset.")
@_preset_type
@click.confirmation_option(prompt="Delete the preset file from disk?")
@click.pass_context
def delete(ctx: click.Context, name: str, bank: str, preset_type: str) -> None:
    """Delete preset NAME."""
    run_client(ctx, lambda client: client.delete_preset(name, bank, preset_type))  # type: ignore[arg-type]
    console.print(f"[green]Deleted[/green] {name}")


@presets.command("reset")
@click.pass_context
def reset(ctx: click.Context) -> None:
    """Revert parameters to the saved preset."""
    run_client(ctx, lambda client: client.reset_preset())


@presets.command("next")
@click.option("--instrument", is_flag=True, help="Step by instrument instead of preset.")
@click.pass_context
def next_preset(ctx: click.Context, instrument: bool) -> None:
    """Load the next preset."""
    run_client(ctx, lambda client: client.next_instrument() if instrument else client.next_preset())


@presets.command("prev")
@click.option("--instrument", is_flag=True, help="Step by instrument instead of preset.")
@click.pass_context
def prev_preset(ctx: click.Context, instrument: bool) -> None:
    """Load the previous preset."""
    run_client(ctx, lambda client: client.prev_instrument() if instrument else client.prev_preset())


@presets.command("ab")
@click.argument("action", type=click.Choice(["switch", "copy"]))
@click.pass_context
def ab(ctx: click.Context, action: str) -> None:
    """Switch between or copy the A/B presets."""
    run_client(ctx, lambda client: client.ab_switch() if action == "switch" else client.ab_copy())
