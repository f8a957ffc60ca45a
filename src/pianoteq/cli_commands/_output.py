"""Shared CLI output formatters."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from pianoteq.models import (  # noqa: TC001
    AudioDeviceInfo,
    FunctionInfo,
    MetronomeInfo,
    ParameterInfo,
    PerformanceInfo,
    PianoteqInfo,
    PresetInfo,
    SequencerInfo,
)

console = Console()


def print_models_json(data: BaseModel | Sequence[BaseModel]) -> None:
    """Print one model or a list of models as JSON, using wire names."""
    if isinstance(data, BaseModel):
        payload: Any = data.model_dump(mode="json", by_alias=True)
    else:
        payload = [item.model_dump(mode="json", by_alias=True) for item in data]
    console.print_json(json.dumps(payload))


def print_info(info: PianoteqInfo, perf: PerformanceInfo) -> None:
    """Pretty-print the ``getInfo`` / ``getPerfInfo`` summary."""
    preset = info.current_preset
    console.print(f"\n[bold]Pianoteq {info.version or '(unknown version)'}[/bold]")
    console.print(f"  Current preset: {preset.name if preset else 'None'}")
    console.print(f"  Bank: {preset.bank if preset and preset.bank else 'N/A'}")
    if preset and preset.instrument:
        console.print(f"  Instrument: {preset.instrument}")
    if perf.cpu_usage is not None:
        console.print(f"  CPU usage: {perf.cpu_usage:.1f}%")
    if perf.voices is not None:
        console.print(f"  Voices: {perf.voices}/{perf.max_voices if perf.max_voices is not None else '?'}")


def print_presets_table(presets: Sequence[PresetInfo], favorites: set[str] | None = None) -> None:
    """Pretty-print presets; a star marks server- or locally-flagged favourites."""
    favorites = favorites or set()
    table = Table(title=f"Presets ({len(presets)})")
    table.add_column("", width=1)
    table.add_column("Name", style="cyan")
    table.add_column("Bank")
    table.add_column("Instrument")
    table.add_column("Tags")

    for preset in presets:
        star = "★" if preset.favourite or preset.name in favorites else ""
        table.add_row(
            star,
            preset.name,
            preset.bank,
            preset.instrument or "-",
            _truncate(", ".join(preset.tags or []), 40),
        )

    console.print(table)


def print_parameters_table(parameters: Sequence[ParameterInfo]) -> None:
    table = Table(title="Parameters")
    table.add_column("Id", style="cyan")
    table.add_column("Name")
    table.add_column("Group")
    table.add_column("Value", justify="right")
    table.add_column("Normalized", justify="right")

    for param in parameters:
        table.add_row(
            param.id,
            param.name,
            param.group or "-",
            param.text or "-",
            f"{param.normalized_value:.3f}",
        )

    console.print(table)


def print_metronome(metronome: MetronomeInfo) -> None:
    console.print("\n[bold]Metronome[/bold]")
    console.print(f"  Enabled: {metronome.enabled}")
    console.print(f"  BPM: {metronome.bpm:g}")
    console.print(f"  Volume: {metronome.volume_db:g} dB")
    console.print(f"  Time signature: {metronome.timesig}")
    console.print(f"  Accentuate: {metronome.accentuate}")


def print_sequencer(sequencer: SequencerInfo) -> None:
    console.print("\n[bold]Sequencer[/bold]")
    console.print(f"  State: {sequencer.state or '(unknown)'}")
    console.print(f"  Position: {sequencer.position:.1f}s / {sequencer.duration:.1f}s")
    if sequencer.file:
        console.print(f"  File: {sequencer.file}")


def print_audio_devices_table(devices: Sequence[AudioDeviceInfo]) -> None:
    table = Table(title="Audio Devices")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Sample rate", justify="right")
    table.add_column("Buffer", justify="right")
    table.add_column("Channels", justify="right")

    for device in devices:
        table.add_row(
            device.name,
            device.device_type or "-",
            device.sample_rate or "-",
            device.buffer_size or "-",
            device.channels or "-",
        )

    console.print(table)


def print_functions_table(functions: Sequence[FunctionInfo]) -> None:
    table = Table(title="JSON-RPC Functions")
    table.add_column("Signature", style="cyan")
    table.add_column("Description")

    for func in functions:
        table.add_row(func.spec or func.name, _truncate(func.doc))

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
