"""Pianoteq client — typed async access to the Pianoteq JSON-RPC API."""

from __future__ import annotations

from pianoteq.client import PianoteqClient
from pianoteq.errors import PianoteqError, ProtocolError, RemoteError, TransportError
from pianoteq.favorites import FavoritesService, FavoritesStore, InMemoryFavoritesStore, JsonFileFavoritesStore
from pianoteq.models import (
    ActivationInfo,
    AudioDeviceInfo,
    FunctionInfo,
    MetronomeInfo,
    ParameterInfo,
    PerformanceInfo,
    PianoteqInfo,
    PresetInfo,
    SequencerInfo,
)
from pianoteq.shapes import ResultShape

__version__ = "0.1.0"

__all__ = [
    "ActivationInfo",
    "AudioDeviceInfo",
    "FavoritesService",
    "FavoritesStore",
    "FunctionInfo",
    "InMemoryFavoritesStore",
    "JsonFileFavoritesStore",
    "MetronomeInfo",
    "ParameterInfo",
    "PerformanceInfo",
    "PianoteqClient",
    "PianoteqError",
    "PianoteqInfo",
    "PresetInfo",
    "ProtocolError",
    "RemoteError",
    "ResultShape",
    "SequencerInfo",
    "TransportError",
    "__version__",
]
