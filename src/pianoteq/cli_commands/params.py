"""``pianoteq params`` — read and edit engine parameters."""

from __future__ import annotations

import click

from pianoteq.cli_commands._common import run_client
from pianoteq.cli_commands._output import console, print_models_json, print_parameters_table
from pianoteq.models import ParameterInfo


@click.group()
def params() -> None:
    """Read and edit engine parameters."""


@params.command("list")
@click.option("--filter", "-f", "pattern", default=None, help="Only ids or names containing this text.")
@click.option("--group", "-g", default=None, help="Only parameters in this group.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_params(ctx: click.Context, pattern: str | None, group: str | None, as_json: bool) -> None:
    """List parameters with their current values."""
    items = run_client(ctx, lambda client: client.get_parameters())
    if pattern:
        needle = pattern.lower()
        items = [p for p in items if needle in p.id.lower() or needle in p.name.lower()]
    if group:
        items = [p for p in items if (p.group or "").lower() == group.lower()]

    if as_json:
        print_models_json(items)
        return
    print_parameters_table(items)


@params.command("set")
@click.argument("parameter_id")
@click.argument("value")
@click.option("--text", "as_text", is_flag=True, help="Treat VALUE as display text instead of a 0-1 value.")
@click.pass_context
def set_param(ctx: click.Context, parameter_id: str, value: str, as_text: bool) -> None:
    """Set PARAMETER_ID to VALUE (normalized 0.0-1.0 unless --text)."""
    if as_text:
        param = ParameterInfo(id=parameter_id, text=value)
    else:
        try:
            normalized = float(value)
        except ValueError as exc:
            raise click.BadParameter(f"{value!r} is not a number", param_hint="VALUE") from exc
        if not 0.0 <= normalized <= 1.0:
            raise click.BadParameter("normalized values must lie in [0, 1]", param_hint="VALUE")
        param = ParameterInfo(id=parameter_id, normalized_value=normalized)

    run_client(ctx, lambda client: client.set_parameters([param]))
    console.print(f"[green]Set[/green] {parameter_id} = {value}")


@params.command("randomize")
@click.option("--amount", type=click.FloatRange(0.0, 1.0), default=1.0, show_default=True)
@click.pass_context
def randomize(ctx: click.Context, amount: float) -> None:
    """Randomize parameter values."""
    run_client(ctx, lambda client: client.randomize_parameters(amount))
