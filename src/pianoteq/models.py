"""Pydantic models for the Pianoteq JSON-RPC wire format.

Everything decoded from the server derives from :class:`WireModel`, which
matches incoming keys case-insensitively and ignores keys it does not know.
Outgoing payloads are always dumped under their exact wire names.
"""

from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

PresetType = Literal[
    "full",
    "equ",
    "vel",
    "mic",
    "reverb",
    "tuning",
    "effect_rack",
    "effect1",
    "effect2",
    "effect3",
]

PRESET_TYPES: tuple[str, ...] = get_args(PresetType)


class WireModel(BaseModel):
    """Base for models decoded from server payloads."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k.lower() if isinstance(k, str) else k: v for k, v in data.items()}
        return data

    def to_wire(self) -> dict[str, Any]:
        """Dump the explicitly populated fields under their wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message.

    ``params`` is never ``None``: the server requires the field and expects
    an array unless the method takes keyed arguments.
    """

    jsonrpc: str = "2.0"
    method: str
    params: list[Any] | dict[str, Any] = Field(default_factory=list)
    id: int


class JsonRpcError(WireModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str = ""
    data: Any = None


class JsonRpcResponse(WireModel):
    """A JSON-RPC 2.0 response message."""

    jsonrpc: str = "2.0"
    result: Any = None
    error: JsonRpcError | None = None
    id: int | str | None = None

    @property
    def has_result(self) -> bool:
        """``True`` when the envelope carried a ``result`` key, even a null one."""
        return "result" in self.model_fields_set


# ---------------------------------------------------------------------------
# Server state snapshots
# ---------------------------------------------------------------------------


class PresetInfo(WireModel):
    """A stored preset.

    Single-preset queries report the instrument as ``instrument`` while
    ``getListOfPresets`` uses ``instr``; both land in :attr:`instrument`.
    """

    name: str = ""
    bank: str = ""
    instrument: str | None = Field(
        default=None,
        validation_alias=AliasChoices("instrument", "instr"),
    )
    author: str | None = None
    comment: str | None = None
    preset_class: str | None = Field(default=None, alias="class")
    collection: str | None = None
    license: str | None = None
    license_status: str | None = None
    file: str | None = None
    tags: list[str] | None = None
    favourite: bool | None = None


class PianoteqInfo(WireModel):
    """Result of ``getInfo``."""

    version: str | None = None
    current_preset: PresetInfo | None = None
    licence_property_1: str | None = None
    licence_property_2: str | None = None


class PerformanceInfo(WireModel):
    """Result of ``getPerfInfo``."""

    cpu_usage: float | None = None
    voices: int | None = None
    max_voices: int | None = None
    audio_buffer: list[int] | None = None
    audio_load: list[float] | None = None


class FunctionInfo(WireModel):
    """One entry of the ``list`` method catalogue."""

    name: str = ""
    spec: str = ""
    doc: str = ""


class ParameterInfo(WireModel):
    """An engine parameter.

    When sent to ``setParameters`` only the fields that were explicitly set
    go on the wire, so ``ParameterInfo(id="Volume", normalized_value=0.5)``
    encodes as ``{"id": "Volume", "normalized_value": 0.5}``.
    """

    id: str
    name: str = ""
    group: str | None = None
    index: int | None = None
    normalized_value: float = 0.0
    text: str | None = None
    value: float | None = None
    range_min: float | None = None
    range_max: float | None = None
    discrete_values: list[str] | None = None

    @property
    def display(self) -> str:
        return self.text if self.text is not None else f"{self.normalized_value:.2f}"


class MetronomeInfo(WireModel):
    """Result of ``getMetronome``."""

    enabled: bool = False
    bpm: float = 0.0
    volume_db: float = 0.0
    timesig: str = "4/4"
    accentuate: bool = False


class MetronomeSettings(BaseModel):
    """Sparse ``setMetronome`` payload; fields left as ``None`` are omitted."""

    enabled: bool | None = None
    bpm: int | None = None
    volume_db: float | None = None
    timesig: str | None = None
    accentuate: bool | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SequencerInfo(WireModel):
    """Result of ``getSequencerInfo``."""

    state: str = ""
    position: float = 0.0
    duration: float = 0.0
    file: str | None = None


class AudioDeviceInfo(WireModel):
    """An audio device; the server reports most values as loose scalars."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(alias="audio_output_device_name")
    sample_rate: str | None = None
    buffer_size: str | None = None
    channels: str | None = None
    device_type: str | None = None


class ActivationInfo(WireModel):
    """Result of ``getActivationInfo``."""

    serial: str | None = None
    device_name: str | None = None
    activated: bool | None = None
