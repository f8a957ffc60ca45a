"""``pianoteq midi`` — sequencer transport and MIDI files."""

from __future__ import annotations

import click

from pianoteq.cli_commands._common import run_client
from pianoteq.cli_commands._output import print_models_json, print_sequencer


@click.group()
def midi() -> None:
    """Drive the MIDI sequencer."""


def _transport_command(name: str, method: str, help_text: str) -> click.Command:
    @click.pass_context
    def _cmd(ctx: click.Context) -> None:
        run_client(ctx, lambda client: getattr(client, method)())

    return click.command(name, help=help_text)(_cmd)


for _name, _method, _help in (
    ("play", "midi_play", "Start playback."),
    ("stop", "midi_stop", "Stop playback."),
    ("pause", "midi_pause", "Pause playback."),
    ("rewind", "midi_rewind", "Rewind to the start."),
    ("record", "midi_record", "Start recording."),
):
    midi.add_command(_transport_command(_name, _method, _help))


@midi.command("seek")
@click.argument("seconds", type=float)
@click.pass_context
def seek(ctx: click.Context, seconds: float) -> None:
    """Move the sequencer to SECONDS."""
    run_client(ctx, lambda client: client.midi_seek(seconds))


@midi.command("status")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show the sequencer state."""
    state = run_client(ctx, lambda client: client.get_sequencer_info())
    if as_json:
        print_models_json(state)
        return
    print_sequencer(state)


@midi.command("load")
@click.argument("path")
@click.pass_context
def load(ctx: click.Context, path: str) -> None:
    """Load a MIDI file, or a folder as a playlist. PATH is on the server host."""
    run_client(ctx, lambda client: client.load_midi_file(path))


@midi.command("save")
@click.argument("path")
@click.pass_context
def save(ctx: click.Context, path: str) -> None:
    """Save the loaded MIDI sequence to PATH on the server host."""
    run_client(ctx, lambda client: client.save_midi_file(path))


@midi.command("send")
@click.argument("messages", nargs=-1, required=True)
@click.pass_context
def send(ctx: click.Context, messages: tuple[str, ...]) -> None:
    """Send raw MIDI MESSAGES, each written as hex (``903c64`` is a note-on)."""
    try:
        data = [bytes.fromhex(m) for m in messages]
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="MESSAGES") from exc
    run_client(ctx, lambda client: client.midi_send(data))
