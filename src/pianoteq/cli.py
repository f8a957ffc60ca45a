"""Pianoteq CLI entrypoint."""

from __future__ import annotations

import logging

import click

from pianoteq import __version__
from pianoteq.cli_commands._common import CliSettings

DEFAULT_URL = "http://127.0.0.1:8081"
DEFAULT_FAVORITES_FILE = "~/.pianoteq/favorites.json"


@click.group()
@click.version_option(version=__version__, prog_name="pianoteq")
@click.option(
    "--url",
    envvar="PIANOTEQ_URL",
    default=DEFAULT_URL,
    show_default=True,
    help="Base URL of the Pianoteq JSON-RPC server.",
)
@click.option(
    "--favorites-file",
    envvar="PIANOTEQ_FAVORITES",
    default=DEFAULT_FAVORITES_FILE,
    show_default=True,
    help="Where local favourite presets are stored.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log JSON-RPC traffic.")
@click.option("--telemetry", is_flag=True, help="Export trace spans to the console.")
@click.pass_context
def main(ctx: click.Context, url: str, favorites_file: str, verbose: bool, telemetry: bool) -> None:
    """Control a running Pianoteq instance over JSON-RPC."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if telemetry:
        from pianoteq.utils.telemetry import configure_telemetry

        configure_telemetry(export_to_console=True)
    ctx.obj = CliSettings(url=url, favorites_file=favorites_file)


# Register subcommands
from pianoteq.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
