"""Bounded, most-recent-first history of creations."""

import json
import threading
from pathlib import Path

from training_generator.creations.exceptions import CreationError, CreationImportError
from training_generator.creations.models import Creation
from training_generator.logging.logger import Log

DEFAULT_MAX_ENTRIES = 50


class CreationHistory:
    """Keeps at most max_entries creations, newest first.

    When a path is given, the list is written as a JSON array after every
    mutation. Mutations are serialized with a lock.
    """

    def __init__(self, path: Path | None = None, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._path = path
        self._max_entries = max_entries
        self._items: list[Creation] = []
        self._lock = threading.Lock()

    def add(self, creation: Creation) -> bool:
        """Prepend a creation; returns False when its id is already present."""
        with self._lock:
            if any(item.id == creation.id for item in self._items):
                Log.debug(f"Creation {creation.id} already in history, skipping")
                return False
            self._items.insert(0, creation)
            evicted = self._items[self._max_entries:]
            del self._items[self._max_entries:]
            if evicted:
                Log.info(f"History full, evicted {len(evicted)} oldest creation(s)")
            self._persist()
        return True

    def replace(self, creation: Creation) -> bool:
        """Swap the entry with the same id in place; returns False if absent."""
        with self._lock:
            for index, item in enumerate(self._items):
                if item.id == creation.id:
                    self._items[index] = creation
                    self._persist()
                    return True
        return False

    def get(self, creation_id: str) -> Creation | None:
        with self._lock:
            return next((item for item in self._items if item.id == creation_id), None)

    def items(self) -> list[Creation]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def load(self) -> None:
        """Read persisted history; an unreadable file leaves the history empty.

        Malformed entries are skipped and the rest are kept.
        """
        if self._path is None or not self._path.exists():
            return
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise CreationError("history file must contain a JSON array")
        except (OSError, json.JSONDecodeError, CreationError) as exc:
            Log.warning(f"Ignoring unreadable history file {self._path}: {exc}")
            raw = []

        loaded: list[Creation] = []
        for index, entry in enumerate(raw):
            try:
                loaded.append(Creation.from_dict(entry))
            except CreationImportError as exc:
                Log.warning(f"Skipping history entry {index} in {self._path}: {exc}")

        with self._lock:
            self._items = loaded[: self._max_entries]
        Log.info(f"Loaded {len(self._items)} creation(s) from history")

    def save(self) -> None:
        with self._lock:
            self._persist()

    def _persist(self) -> None:
        if self._path is None:
            return
        payload = json.dumps([item.to_dict() for item in self._items], indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            Log.warning(f"Failed to save history to {self._path}: {exc}")
