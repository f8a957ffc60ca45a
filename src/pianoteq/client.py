"""PianoteqClient — async client for the Pianoteq JSON-RPC API.

Each remote method is exposed as one coroutine performing exactly one
HTTP round trip to ``{base_url}/jsonrpc``. Nothing is retried or cached;
the only state shared between calls is the request id counter and the
HTTP connection pool.
"""

from __future__ import annotations

import itertools
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from pianoteq.errors import ProtocolError, RemoteError, TransportError
from pianoteq.models import (
    PRESET_TYPES,
    ActivationInfo,
    AudioDeviceInfo,
    FunctionInfo,
    JsonRpcRequest,
    JsonRpcResponse,
    MetronomeInfo,
    MetronomeSettings,
    ParameterInfo,
    PerformanceInfo,
    PianoteqInfo,
    PresetInfo,
    PresetType,
    SequencerInfo,
)
from pianoteq.shapes import ResultShape, decode_result
from pianoteq.utils.telemetry import (
    ATTR_BASE_URL,
    ATTR_ERROR_CODE,
    ATTR_HTTP_STATUS,
    ATTR_RPC_ID,
    ATTR_RPC_METHOD,
    ATTR_RPC_SHAPE,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_HEADERS = {"Content-Type": "application/json"}


class PianoteqClient:
    """Async client for a running Pianoteq instance.

    The client either owns its :class:`httpx.AsyncClient` (created on
    ``__aenter__`` and closed on exit) or borrows one supplied by the caller,
    which it then never closes.

    Usage::

        async with PianoteqClient("http://127.0.0.1:8081") as client:
            info = await client.get_info()
            await client.load_preset("NY Steinway D Classical")

    Cancel the awaiting task to abort an in-flight request; the resulting
    ``asyncio.CancelledError`` is never converted into a client error.
    """

    def __init__(self, base_url: str, *, http_client: httpx.AsyncClient | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._endpoint = f"{self._base_url}/jsonrpc"
        self._client = http_client
        self._owns_client = http_client is None
        self._closed = False
        self._ids = itertools.count(1)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> PianoteqClient:
        if self._closed:
            msg = "PianoteqClient is closed"
            raise RuntimeError(msg)
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the HTTP client if owned. Further calls raise ``RuntimeError``."""
        if self._closed:
            return
        self._closed = True
        client, self._client = self._client, None
        if self._owns_client and client is not None:
            await client.aclose()

    def _http(self) -> httpx.AsyncClient:
        if self._closed:
            msg = "PianoteqClient is closed"
            raise RuntimeError(msg)
        if self._client is None:
            msg = "PianoteqClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    # ------------------------------------------------------------------
    # JSON-RPC plumbing
    # ------------------------------------------------------------------

    async def invoke(
        self,
        method: str,
        params: list[Any] | dict[str, Any] | None = None,
        *,
        shape: ResultShape = ResultShape.RAW,
        model: type[BaseModel] | None = None,
    ) -> Any:
        """Call *method* and decode its result according to *shape*.

        Raises :class:`TransportError`, :class:`ProtocolError` or
        :class:`RemoteError`.
        """
        http = self._http()
        request = JsonRpcRequest(
            method=method,
            params=[] if params is None else params,
            id=next(self._ids),
        )

        with _tracer.start_as_current_span("pianoteq.rpc") as span:
            span.set_attribute(ATTR_BASE_URL, self._base_url)
            span.set_attribute(ATTR_RPC_METHOD, method)
            span.set_attribute(ATTR_RPC_ID, request.id)
            span.set_attribute(ATTR_RPC_SHAPE, shape.value)

            try:
                body = await self._post(http, request)
            except TransportError as exc:
                if exc.status_code is not None:
                    span.set_attribute(ATTR_HTTP_STATUS, exc.status_code)
                raise
            try:
                response = self._parse(body, request.id)
            except RemoteError as exc:
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                raise

            if shape is not ResultShape.NONE and not response.has_result:
                msg = f"Response to '{method}' carried no result"
                raise ProtocolError(msg, body)
            return decode_result(shape, model, response.result, body=body)

    async def _post(self, http: httpx.AsyncClient, request: JsonRpcRequest) -> str:
        logger.debug("-> %s id=%d params=%s", request.method, request.id, request.params)
        try:
            response = await http.post(
                self._endpoint,
                content=request.model_dump_json(),
                headers=_HEADERS,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            msg = f"HTTP {status} from {self._endpoint}"
            raise TransportError(msg, status_code=status, url=self._endpoint) from exc
        except httpx.HTTPError as exc:
            msg = str(exc) or type(exc).__name__
            raise TransportError(msg, url=self._endpoint) from exc

        body = response.text
        logger.debug("<- %s id=%d status=%d %d chars", request.method, request.id, response.status_code, len(body))
        return body

    @staticmethod
    def _parse(body: str, request_id: int) -> JsonRpcResponse:
        if not body.strip():
            msg = "Server returned an empty response"
            raise ProtocolError(msg)

        try:
            payload = json.loads(body)
        except ValueError as exc:
            msg = "Failed to parse server response as JSON"
            raise ProtocolError(msg, body) from exc

        try:
            response = JsonRpcResponse.model_validate(payload)
        except ValidationError as exc:
            msg = "Server response is not a JSON-RPC envelope"
            raise ProtocolError(msg, body) from exc

        # A null id is only legal on errors the server could not attribute.
        if response.id is None:
            if response.error is None:
                msg = "Response carried no id"
                raise ProtocolError(msg, body)
        elif str(response.id) != str(request_id):
            msg = f"Response id {response.id!r} does not match request id {request_id}"
            raise ProtocolError(msg, body)

        if response.error is not None:
            err = response.error
            logger.debug("Remote error %d: %s", err.code, err.message)
            raise RemoteError(err.code, err.message, err.data)
        return response

    async def _command(self, method: str, params: list[Any] | dict[str, Any] | None = None) -> None:
        await self.invoke(method, params, shape=ResultShape.NONE)

    # ------------------------------------------------------------------
    # Information
    # ------------------------------------------------------------------

    async def get_info(self) -> PianoteqInfo:
        """Get the current state of Pianoteq (version, loaded preset, licence)."""
        result: PianoteqInfo = await self.invoke("getInfo", shape=ResultShape.SINGLE, model=PianoteqInfo)
        return result

    async def get_perf_info(self) -> PerformanceInfo:
        """Get CPU usage and voice counts."""
        result: PerformanceInfo = await self.invoke(
            "getPerfInfo", shape=ResultShape.SINGLE, model=PerformanceInfo
        )
        return result

    async def list_functions(self) -> list[FunctionInfo]:
        """Get the catalogue of JSON-RPC methods the server exposes."""
        result: list[FunctionInfo] = await self.invoke("list", shape=ResultShape.LIST, model=FunctionInfo)
        return result

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    async def get_list_of_presets(self, preset_type: PresetType = "full") -> list[PresetInfo]:
        """Get the presets of the given type, in server order."""
        _check_preset_type(preset_type)
        result: list[PresetInfo] = await self.invoke(
            "getListOfPresets", [preset_type], shape=ResultShape.LIST, model=PresetInfo
        )
        return result

    async def load_preset(
        self,
        name: str,
        bank: str | None = None,
        preset_type: PresetType = "full",
    ) -> None:
        """Load a preset.

        The server dispatches on argument count: without *bank* only the name
        is sent, with it the full ``[name, bank, preset_type]`` triple.
        """
        _check_preset_type(preset_type)
        params: list[Any] = [name]
        if bank is not None:
            params.extend([bank, preset_type])
        await self._command("loadPreset", params)

    async def save_preset(self, name: str, bank: str, preset_type: PresetType = "full") -> None:
        """Save the current settings as a preset."""
        _check_preset_type(preset_type)
        await self._command("savePreset", [name, bank, preset_type])

    async def delete_preset(self, name: str, bank: str, preset_type: PresetType = "full") -> None:
        """Delete a preset file from disk."""
        _check_preset_type(preset_type)
        await self._command("deletePreset", [name, bank, preset_type])

    async def reset_preset(self) -> None:
        """Revert parameters to the saved preset."""
        await self._command("resetPreset")

    async def next_preset(self) -> None:
        await self._command("nextPreset")

    async def prev_preset(self) -> None:
        await self._command("prevPreset")

    async def next_favourite_preset(self) -> None:
        await self._command("nextFavouritePreset")

    async def prev_favourite_preset(self) -> None:
        await self._command("prevFavouritePreset")

    async def next_instrument(self) -> None:
        await self._command("nextInstrument")

    async def prev_instrument(self) -> None:
        await self._command("prevInstrument")

    # ------------------------------------------------------------------
    # A/B comparison and edit history
    # ------------------------------------------------------------------

    async def ab_switch(self) -> None:
        """Swap the A and B presets."""
        await self._command("abSwitch")

    async def ab_copy(self) -> None:
        """Copy the active side (A or B) onto the other."""
        await self._command("abCopy")

    async def undo(self) -> None:
        await self._command("undo")

    async def redo(self) -> None:
        await self._command("redo")

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    async def get_parameters(self) -> list[ParameterInfo]:
        """Get every parameter with its current value."""
        result: list[ParameterInfo] = await self.invoke(
            "getParameters", shape=ResultShape.LIST, model=ParameterInfo
        )
        return result

    async def set_parameters(self, parameters: Sequence[ParameterInfo | Mapping[str, Any]]) -> None:
        """Set several parameters at once.

        Each entry needs an ``id`` and either ``normalized_value`` or ``text``.
        Only explicitly set fields are sent, wrapped as ``{"list": [...]}``.
        """
        items: list[dict[str, Any]] = []
        for param in parameters:
            if not isinstance(param, ParameterInfo):
                param = ParameterInfo.model_validate(param)
            wire = param.to_wire()
            if "normalized_value" not in wire and "text" not in wire:
                msg = f"Parameter '{param.id}' needs a normalized_value or text"
                raise ValueError(msg)
            items.append(wire)
        await self._command("setParameters", {"list": items})

    async def set_parameter(self, parameter_id: str, normalized_value: float) -> None:
        """Set a single parameter by normalized value."""
        await self.set_parameters([ParameterInfo(id=parameter_id, normalized_value=normalized_value)])

    async def randomize_parameters(self, amount: float = 1.0) -> None:
        """Randomize parameter values; *amount* ranges from 0.0 to 1.0."""
        await self._command("randomizeParameters", [amount])

    # ------------------------------------------------------------------
    # MIDI
    # ------------------------------------------------------------------

    async def load_midi_file(self, path: str) -> None:
        """Load a MIDI file, or a folder as a playlist."""
        await self._command("loadMidiFile", [path])

    async def save_midi_file(self, path: str) -> None:
        await self._command("saveMidiFile", [path])

    async def midi_send(self, messages: Sequence[bytes | Sequence[int]]) -> None:
        """Send raw MIDI messages, e.g. ``[b"\\x90\\x3c\\x64"]`` for a note-on."""
        data = [[int(b) for b in message] for message in messages]
        await self._command("midiSend", {"bytes": data})

    async def midi_play(self) -> None:
        await self._command("midiPlay")

    async def midi_stop(self) -> None:
        await self._command("midiStop")

    async def midi_pause(self) -> None:
        await self._command("midiPause")

    async def midi_rewind(self) -> None:
        await self._command("midiRewind")

    async def midi_record(self) -> None:
        await self._command("midiRecord")

    async def midi_seek(self, seconds: float) -> None:
        """Move the sequencer to *seconds*."""
        await self._command("midiSeek", [seconds])

    async def panic(self) -> None:
        """Reset all MIDI state."""
        await self._command("panic")

    async def mute(self) -> None:
        await self._command("mute")

    async def get_sequencer_info(self) -> SequencerInfo:
        """Get the MIDI sequencer state."""
        result: SequencerInfo = await self.invoke(
            "getSequencerInfo", shape=ResultShape.SINGLE, model=SequencerInfo
        )
        return result

    # ------------------------------------------------------------------
    # Metronome
    # ------------------------------------------------------------------

    async def get_metronome(self) -> MetronomeInfo:
        result: MetronomeInfo = await self.invoke("getMetronome", shape=ResultShape.SINGLE, model=MetronomeInfo)
        return result

    async def set_metronome(
        self,
        *,
        enabled: bool | None = None,
        bpm: int | None = None,
        volume_db: float | None = None,
        timesig: str | None = None,
        accentuate: bool | None = None,
    ) -> None:
        """Update metronome settings; only the supplied fields are sent."""
        settings = MetronomeSettings(
            enabled=enabled,
            bpm=bpm,
            volume_db=volume_db,
            timesig=timesig,
            accentuate=accentuate,
        )
        await self._command("setMetronome", settings.to_wire())

    # ------------------------------------------------------------------
    # Files, audio devices, activation
    # ------------------------------------------------------------------

    async def load_file(self, path: str) -> None:
        """Load any supported file (fxp, mfxp, scl, kbm, ptq, wav...)."""
        await self._command("loadFile", [path])

    async def get_audio_device_info(self) -> AudioDeviceInfo:
        """Get the current audio device; unlike the other queries this is a bare object."""
        result: AudioDeviceInfo = await self.invoke(
            "getAudioDeviceInfo", shape=ResultShape.OBJECT, model=AudioDeviceInfo
        )
        return result

    async def get_list_of_audio_devices(self) -> list[AudioDeviceInfo]:
        result: list[AudioDeviceInfo] = await self.invoke(
            "getListOfAudioDevices", shape=ResultShape.LIST, model=AudioDeviceInfo
        )
        return result

    async def activate(self, serial: str, device_name: str) -> None:
        """Activate Pianoteq with a serial number."""
        await self._command("activate", [serial, device_name])

    async def get_activation_info(self) -> ActivationInfo:
        result: ActivationInfo = await self.invoke(
            "getActivationInfo", shape=ResultShape.SINGLE, model=ActivationInfo
        )
        return result

    async def quit(self) -> None:
        """Quit Pianoteq immediately."""
        await self._command("quit")


def _check_preset_type(preset_type: str) -> None:
    if preset_type not in PRESET_TYPES:
        msg = f"Unknown preset type {preset_type!r}; expected one of {', '.join(PRESET_TYPES)}"
        raise ValueError(msg)
