"""Shared plumbing for CLI commands: settings object and client runner."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import click

from pianoteq.cli_commands._output import console
from pianoteq.client import PianoteqClient
from pianoteq.errors import PianoteqError, RemoteError, TransportError
from pianoteq.favorites import FavoritesService, JsonFileFavoritesStore

T = TypeVar("T")


@dataclass
class CliSettings:
    """Values resolved by the top-level group and handed to subcommands."""

    url: str
    favorites_file: str


def settings(ctx: click.Context) -> CliSettings:
    obj = ctx.find_object(CliSettings)
    if obj is None:
        msg = "CLI settings missing; invoke through the 'pianoteq' group"
        raise click.UsageError(msg)
    return obj


def run_client(ctx: click.Context, action: Callable[[PianoteqClient], Awaitable[T]]) -> T:
    """Open a client on the configured URL, run *action*, and map failures to exit code 1."""
    url = settings(ctx).url

    async def _run() -> T:
        async with PianoteqClient(url) as client:
            return await action(client)

    try:
        return asyncio.run(_run())
    except RemoteError as exc:
        console.print(f"[red]Pianoteq error {exc.code}:[/red] {exc.message}")
    except TransportError as exc:
        console.print(f"[red]Connection error:[/red] {exc}")
        console.print(f"Make sure Pianoteq is running with JSON-RPC enabled at {url}")
    except PianoteqError as exc:
        console.print(f"[red]Protocol error:[/red] {exc}")
    sys.exit(1)


def favorites_service(ctx: click.Context) -> FavoritesService:
    service = FavoritesService(JsonFileFavoritesStore(settings(ctx).favorites_file))
    service.load()
    return service
