"""``pianoteq info``, ``pianoteq functions`` and ``pianoteq audio`` — read-only queries."""

from __future__ import annotations

import click

from pianoteq.cli_commands._common import run_client
from pianoteq.cli_commands._output import (
    console,
    print_audio_devices_table,
    print_functions_table,
    print_info,
    print_models_json,
)
from pianoteq.client import PianoteqClient  # noqa: TC001
from pianoteq.models import PerformanceInfo, PianoteqInfo  # noqa: TC001


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def info(ctx: click.Context, as_json: bool) -> None:
    """Show version, current preset and CPU load."""

    async def _fetch(client: PianoteqClient) -> tuple[PianoteqInfo, PerformanceInfo]:
        return await client.get_info(), await client.get_perf_info()

    state, perf = run_client(ctx, _fetch)
    if as_json:
        print_models_json([state, perf])
        return
    print_info(state, perf)


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def functions(ctx: click.Context, as_json: bool) -> None:
    """List the JSON-RPC functions the server exposes."""
    catalogue = run_client(ctx, lambda client: client.list_functions())
    if as_json:
        print_models_json(catalogue)
        return
    print_functions_table(catalogue)


@click.group()
def audio() -> None:
    """Inspect audio devices."""


@audio.command("device")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def audio_device(ctx: click.Context, as_json: bool) -> None:
    """Show the current audio output device."""
    device = run_client(ctx, lambda client: client.get_audio_device_info())
    if as_json:
        print_models_json(device)
        return
    console.print(f"Device: [cyan]{device.name}[/cyan]")
    console.print(f"  Sample rate: {device.sample_rate or '?'} Hz")
    console.print(f"  Buffer size: {device.buffer_size or '?'} samples")
    console.print(f"  Channels: {device.channels or '?'}")


@audio.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def audio_list(ctx: click.Context, as_json: bool) -> None:
    """List available audio devices."""
    devices = run_client(ctx, lambda client: client.get_list_of_audio_devices())
    if as_json:
        print_models_json(devices)
        return
    if not devices:
        console.print("[yellow]No audio devices reported.[/yellow]")
        return
    print_audio_devices_table(devices)
