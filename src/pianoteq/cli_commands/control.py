"""Top-level one-shot commands that do not fit a command group."""

from __future__ import annotations

import click

from pianoteq.cli_commands._common import run_client
from pianoteq.cli_commands._output import console


@click.command()
@click.pass_context
def undo(ctx: click.Context) -> None:
    """Undo the last edit."""
    run_client(ctx, lambda client: client.undo())


@click.command()
@click.pass_context
def redo(ctx: click.Context) -> None:
    """Redo the last undone edit."""
    run_client(ctx, lambda client: client.redo())


@click.command()
@click.pass_context
def panic(ctx: click.Context) -> None:
    """Reset all MIDI state."""
    run_client(ctx, lambda client: client.panic())


@click.command()
@click.pass_context
def mute(ctx: click.Context) -> None:
    """Mute all sound."""
    run_client(ctx, lambda client: client.mute())


@click.command("load-file")
@click.argument("path")
@click.pass_context
def load_file(ctx: click.Context, path: str) -> None:
    """Load any supported file (fxp, mfxp, scl, kbm, ptq, wav...) from PATH on the server host."""
    run_client(ctx, lambda client: client.load_file(path))


@click.command()
@click.option("--serial", default=None, help="Serial number to activate with.")
@click.option("--device-name", default=None, help="Name to register this device under.")
@click.pass_context
def activation(ctx: click.Context, serial: str | None, device_name: str | None) -> None:
    """Show activation status, or activate with --serial and --device-name."""
    if serial is not None or device_name is not None:
        if not (serial and device_name):
            raise click.UsageError("--serial and --device-name must be given together.")
        run_client(ctx, lambda client: client.activate(serial, device_name))

    state = run_client(ctx, lambda client: client.get_activation_info())
    console.print(f"Activated: {state.activated if state.activated is not None else 'unknown'}")
    if state.serial:
        console.print(f"  Serial: {state.serial}")
    if state.device_name:
        console.print(f"  Device: {state.device_name}")


@click.command("quit")
@click.confirmation_option(prompt="Quit Pianoteq?")
@click.pass_context
def quit_cmd(ctx: click.Context) -> None:
    """Quit Pianoteq immediately."""
    run_client(ctx, lambda client: client.quit())
