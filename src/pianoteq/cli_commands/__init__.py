"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from pianoteq.cli_commands.control import activation, load_file, mute, panic, quit_cmd, redo, undo
    from pianoteq.cli_commands.favorites import favorites
    from pianoteq.cli_commands.info import audio, functions, info
    from pianoteq.cli_commands.metronome import metronome
    from pianoteq.cli_commands.midi import midi
    from pianoteq.cli_commands.params import params
    from pianoteq.cli_commands.presets import presets

    cli.add_command(info)
    cli.add_command(functions)
    cli.add_command(audio)
    cli.add_command(presets)
    cli.add_command(params)
    cli.add_command(metronome)
    cli.add_command(midi)
    cli.add_command(favorites)
    cli.add_command(undo)
    cli.add_command(redo)
    cli.add_command(panic)
    cli.add_command(mute)
    cli.add_command(load_file)
    cli.add_command(activation)
    cli.add_command(quit_cmd)
