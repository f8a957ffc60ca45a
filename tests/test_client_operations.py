"""Tests for the per-method parameter layout and result shapes of PianoteqClient."""

from __future__ import annotations

import pytest

from pianoteq.client import PianoteqClient
from pianoteq.errors import ProtocolError
from pianoteq.models import (
    ActivationInfo,
    AudioDeviceInfo,
    MetronomeInfo,
    ParameterInfo,
    PerformanceInfo,
    PianoteqInfo,
    SequencerInfo,
)

from conftest import FakePianoteq

COMMANDS_WITHOUT_ARGS = [
    ("reset_preset", "resetPreset"),
    ("next_preset", "nextPreset"),
    ("prev_preset", "prevPreset"),
    ("next_favourite_preset", "nextFavouritePreset"),
    ("prev_favourite_preset", "prevFavouritePreset"),
    ("next_instrument", "nextInstrument"),
    ("prev_instrument", "prevInstrument"),
    ("ab_switch", "abSwitch"),
    ("ab_copy", "abCopy"),
    ("undo", "undo"),
    ("redo", "redo"),
    ("midi_play", "midiPlay"),
    ("midi_stop", "midiStop"),
    ("midi_pause", "midiPause"),
    ("midi_rewind", "midiRewind"),
    ("midi_record", "midiRecord"),
    ("panic", "panic"),
    ("mute", "mute"),
    ("quit", "quit"),
]

SINGLE_QUERIES = [
    ("get_info", "getInfo", PianoteqInfo),
    ("get_perf_info", "getPerfInfo", PerformanceInfo),
    ("get_metronome", "getMetronome", MetronomeInfo),
    ("get_sequencer_info", "getSequencerInfo", SequencerInfo),
    ("get_activation_info", "getActivationInfo", ActivationInfo),
]


class TestCommands:
    @pytest.mark.parametrize(("attr", "method"), COMMANDS_WITHOUT_ARGS)
    async def test_empty_params(
        self, client: PianoteqClient, server: FakePianoteq, attr: str, method: str
    ) -> None:
        server.result = "ignored"
        assert await getattr(client, attr)() is None
        assert server.last["method"] == method
        assert server.last["params"] == []


class TestSingleObjectQueries:
    @pytest.mark.parametrize(("attr", "method", "model"), SINGLE_QUERIES)
    async def test_empty_list_gives_default(
        self, client: PianoteqClient, server: FakePianoteq, attr: str, method: str, model: type
    ) -> None:
        server.result = []
        result = await getattr(client, attr)()
        assert result == model()
        assert server.last == {"jsonrpc": "2.0", "method": method, "params": [], "id": 1}

    async def test_get_info_unwraps(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [
            {
                "version": "8.4.0",
                "current_preset": {"name": "NY Steinway D Classical", "bank": "", "instrument": "Steinway D"},
                "licence_property_1": "Stage",
            }
        ]
        info = await client.get_info()
        assert info.version == "8.4.0"
        assert info.current_preset is not None
        assert info.current_preset.instrument == "Steinway D"
        assert info.licence_property_1 == "Stage"

    async def test_get_perf_info(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [{"cpu_usage": 12.5, "voices": 8, "max_voices": 256, "audio_load": [0.1, 0.2]}]
        perf = await client.get_perf_info()
        assert perf.cpu_usage == 12.5
        assert perf.voices == 8
        assert perf.audio_load == [0.1, 0.2]

    async def test_get_sequencer_info(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [{"state": "playing", "position": 3.5, "duration": 120.0, "file": "song.mid"}]
        seq = await client.get_sequencer_info()
        assert seq.state == "playing"
        assert seq.file == "song.mid"

    async def test_get_activation_info(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [{"serial": "ABC", "device_name": "Studio", "activated": True}]
        info = await client.get_activation_info()
        assert info.activated is True
        assert info.device_name == "Studio"


class TestPresets:
    async def test_list_default_type(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [
            {"name": "Grand", "bank": "Factory", "instr": "Steinway D", "favourite": True},
            {"name": "Upright", "bank": "Factory", "instr": "U4"},
        ]
        presets = await client.get_list_of_presets()
        assert server.last["params"] == ["full"]
        assert [p.name for p in presets] == ["Grand", "Upright"]
        assert presets[0].instrument == "Steinway D"
        assert presets[0].favourite is True

    async def test_list_other_type(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = []
        assert await client.get_list_of_presets("reverb") == []
        assert server.last["params"] == ["reverb"]

    async def test_list_unknown_type_rejected(self, client: PianoteqClient, server: FakePianoteq) -> None:
        with pytest.raises(ValueError, match="Unknown preset type"):
            await client.get_list_of_presets("bogus")  # type: ignore[arg-type]
        assert server.requests == []

    async def test_load_name_only(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.load_preset("Grand")
        assert server.last["method"] == "loadPreset"
        assert server.last["params"] == ["Grand"]

    async def test_load_name_only_ignores_type(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.load_preset("Hall", preset_type="reverb")
        assert server.last["params"] == ["Hall"]

    async def test_load_with_bank(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.load_preset("Grand", "My Bank", "full")
        assert server.last["params"] == ["Grand", "My Bank", "full"]

    async def test_load_with_bank_default_type(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.load_preset("Grand", bank="")
        assert server.last["params"] == ["Grand", "", "full"]

    async def test_save(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.save_preset("Mine", "My Bank")
        assert server.last["method"] == "savePreset"
        assert server.last["params"] == ["Mine", "My Bank", "full"]

    async def test_delete(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.delete_preset("Mine", "My Bank", "equ")
        assert server.last["method"] == "deletePreset"
        assert server.last["params"] == ["Mine", "My Bank", "equ"]


class TestParameters:
    async def test_get(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [
            {"id": "Volume", "name": "Volume", "normalized_value": 0.7, "text": "-3.0 dB"},
            {"id": "Condition", "name": "Condition", "normalized_value": 0.1},
        ]
        params = await client.get_parameters()
        assert [p.id for p in params] == ["Volume", "Condition"]
        assert params[0].text == "-3.0 dB"
        assert params[1].text is None

    async def test_set_wraps_in_list(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.set_parameters([{"id": "Volume", "normalized_value": 0.5}])
        assert server.last["method"] == "setParameters"
        assert server.last["params"] == {"list": [{"id": "Volume", "normalized_value": 0.5}]}

    async def test_set_by_text(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.set_parameters([ParameterInfo(id="Volume", text="-6.0 dB")])
        assert server.last["params"] == {"list": [{"id": "Volume", "text": "-6.0 dB"}]}

    async def test_set_requires_value(self, client: PianoteqClient, server: FakePianoteq) -> None:
        with pytest.raises(ValueError, match="normalized_value or text"):
            await client.set_parameters([{"id": "Volume"}])
        assert server.requests == []

    async def test_set_single(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.set_parameter("Condition", 0.25)
        assert server.last["params"] == {"list": [{"id": "Condition", "normalized_value": 0.25}]}

    async def test_randomize(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.randomize_parameters()
        assert server.last["params"] == [1.0]
        await client.randomize_parameters(0.3)
        assert server.last["params"] == [0.3]


class TestMidi:
    async def test_send_wraps_bytes(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.midi_send([b"\x90\x3c\x64", [0x80, 0x3C, 0x00]])
        assert server.last["method"] == "midiSend"
        assert server.last["params"] == {"bytes": [[144, 60, 100], [128, 60, 0]]}

    async def test_seek(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.midi_seek(12.5)
        assert server.last["method"] == "midiSeek"
        assert server.last["params"] == [12.5]

    async def test_load_and_save_file(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.load_midi_file("/music/song.mid")
        assert server.last["method"] == "loadMidiFile"
        assert server.last["params"] == ["/music/song.mid"]
        await client.save_midi_file("/music/take.mid")
        assert server.last["method"] == "saveMidiFile"
        assert server.last["params"] == ["/music/take.mid"]


class TestMetronome:
    async def test_get(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [{"enabled": True, "bpm": 100, "volume_db": -4.5, "timesig": "6/8", "accentuate": True}]
        metronome = await client.get_metronome()
        assert metronome.enabled is True
        assert metronome.bpm == 100.0
        assert metronome.timesig == "6/8"

    async def test_set_only_bpm(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.set_metronome(bpm=120)
        assert server.last["method"] == "setMetronome"
        assert server.last["params"] == {"bpm": 120}

    async def test_set_all(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.set_metronome(enabled=False, bpm=90, volume_db=-3.0, timesig="3/4", accentuate=False)
        assert server.last["params"] == {
            "enabled": False,
            "bpm": 90,
            "volume_db": -3.0,
            "timesig": "3/4",
            "accentuate": False,
        }

    async def test_set_nothing(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.set_metronome()
        assert server.last["params"] == {}


class TestAudioDevices:
    async def test_current_device_is_bare_object(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = {"audio_output_device_name": "Focusrite", "sample_rate": 48000, "buffer_size": "128"}
        device = await client.get_audio_device_info()
        assert isinstance(device, AudioDeviceInfo)
        assert device.name == "Focusrite"
        assert device.sample_rate == "48000"

    async def test_current_device_list_wrapped_fails(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [{"audio_output_device_name": "Focusrite"}]
        with pytest.raises(ProtocolError, match="Expected an object result"):
            await client.get_audio_device_info()

    async def test_list_devices(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [
            {"audio_output_device_name": "Speakers", "device_type": "ALSA"},
            {"audio_output_device_name": "Headphones", "device_type": "ALSA"},
        ]
        devices = await client.get_list_of_audio_devices()
        assert [d.name for d in devices] == ["Speakers", "Headphones"]
        assert server.last["method"] == "getListOfAudioDevices"


class TestMisc:
    async def test_list_functions(self, client: PianoteqClient, server: FakePianoteq) -> None:
        server.result = [{"name": "getInfo", "spec": "getInfo()", "doc": "Get info"}]
        functions = await client.list_functions()
        assert server.last["method"] == "list"
        assert functions[0].spec == "getInfo()"

    async def test_load_file(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.load_file("/tunings/just.scl")
        assert server.last == {"jsonrpc": "2.0", "method": "loadFile", "params": ["/tunings/just.scl"], "id": 1}

    async def test_activate(self, client: PianoteqClient, server: FakePianoteq) -> None:
        await client.activate("SERIAL-1", "Studio Mac")
        assert server.last["method"] == "activate"
        assert server.last["params"] == ["SERIAL-1", "Studio Mac"]
