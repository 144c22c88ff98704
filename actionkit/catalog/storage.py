"""Key/value persistence port for catalog preferences"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from loguru import logger

HIDDEN_GROUPS_KEY = "workflow-action-grid-hidden-groups"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """String slots kept in a single JSON object file"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self.path}: not a JSON object")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)


def _decode_categories(raw: str | None) -> set[str]:
    if raw is None:
        return set()
    try:
        value = json.loads(raw)
    except ValueError:
        logger.warning("Hidden categories slot is not valid JSON, treating as empty")
        return set()
    if not isinstance(value, list):
        return set()
    return {item for item in value if isinstance(item, str)}


class HiddenCategories:
    """Persisted set of category names the user has hidden.

    Names of categories that no longer exist are kept and ignored.
    """

    def __init__(self, store: KeyValueStore, key: str = HIDDEN_GROUPS_KEY):
        self.store = store
        self.key = key
        self._names = _decode_categories(store.get(key))

    def toggle(self, category: str) -> bool:
        """Flip a category's hidden state and persist it; returns the new state"""

        # Re-read so concurrent views don't drop each other's changes
        names = _decode_categories(self.store.get(self.key))
        if category in names:
            names.discard(category)
            hidden = False
        else:
            names.add(category)
            hidden = True

        self.store.set(self.key, json.dumps(sorted(names)))
        self._names = names
        logger.debug(f"Category '{category}' hidden={hidden}")
        return hidden

    def reload(self) -> None:
        self._names = _decode_categories(self.store.get(self.key))

    def __contains__(self, category: object) -> bool:
        return category in self._names

    def __len__(self) -> int:
        return len(self._names)

    def names(self) -> frozenset[str]:
        return frozenset(self._names)
