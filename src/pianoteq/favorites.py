"""Favourite presets kept on the client side.

:class:`FavoritesStore` is the minimal key-value persistence protocol;
:class:`FavoritesService` keeps an ordered set of preset names on top of it
and persists after every change.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

FAVORITES_KEY = "pianoteq_favorites"


@runtime_checkable
class FavoritesStore(Protocol):
    """Persistence for lists of strings, keyed by name."""

    def get(self, key: str) -> list[str] | None:
        """Return the list stored under *key*, or ``None`` if absent."""
        ...

    def set(self, key: str, values: list[str]) -> None:
        """Store *values* under *key* (upsert semantics)."""
        ...


class InMemoryFavoritesStore:
    """Dict-backed :class:`FavoritesStore`; returns copies so callers cannot alias it."""

    def __init__(self) -> None:
        self._data: dict[str, list[str]] = {}

    def get(self, key: str) -> list[str] | None:
        values = self._data.get(key)
        return list(values) if values is not None else None

    def set(self, key: str, values: list[str]) -> None:
        self._data[key] = list(values)


class JsonFileFavoritesStore:
    """:class:`FavoritesStore` backed by a single JSON object on disk.

    A missing file reads as empty. Parent directories are created on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> list[str] | None:
        values = self._read().get(key)
        if values is None:
            return None
        if not isinstance(values, list):
            msg = f"Expected a list under {key!r} in {self._path}"
            raise ValueError(msg)
        return [str(v) for v in values]

    def set(self, key: str, values: list[str]) -> None:
        data = self._read()
        data[key] = list(values)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def _read(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        if not isinstance(data, dict):
            msg = f"Favorites file {self._path} must contain a JSON object"
            raise ValueError(msg)
        return data


class FavoritesService:
    """Ordered, duplicate-free set of favourite preset names."""

    def __init__(self, store: FavoritesStore, key: str = FAVORITES_KEY) -> None:
        self._store = store
        self._key = key
        self._favorites: dict[str, None] = {}

    def load(self) -> None:
        """Replace the in-memory set with what the store holds."""
        stored = self._store.get(self._key)
        self._favorites = dict.fromkeys(stored or [])
        logger.debug("Loaded %d favourite preset(s)", len(self._favorites))

    def is_favorite(self, preset_name: str) -> bool:
        return preset_name in self._favorites

    def toggle(self, preset_name: str) -> bool:
        """Flip membership of *preset_name*; return ``True`` if it is now a favourite."""
        if preset_name in self._favorites:
            del self._favorites[preset_name]
            added = False
        else:
            self._favorites[preset_name] = None
            added = True
        self._save()
        return added

    def add(self, preset_name: str) -> None:
        self._favorites[preset_name] = None
        self._save()

    def remove(self, preset_name: str) -> None:
        self._favorites.pop(preset_name, None)
        self._save()

    def all(self) -> list[str]:
        return list(self._favorites)

    def __len__(self) -> int:
        return len(self._favorites)

    def _save(self) -> None:
        self._store.set(self._key, list(self._favorites))
