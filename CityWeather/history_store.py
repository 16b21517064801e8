"""Search history and theme preference, persisted in key/value storage."""
import json
import logging
from typing import List
from storage import KeyValueStorage

HISTORY_KEY = "wc_cities"
THEME_KEY = "theme"
MAX_HISTORY = 12


class HistoryStore:
    """
    Bounded, case-insensitively deduplicated list of place labels.

    Stored oldest first; the most recent search is the last entry.
    """

    def __init__(self, storage: KeyValueStorage, key: str = HISTORY_KEY, capacity: int = MAX_HISTORY):
        self.storage = storage
        self.key = key
        self.capacity = capacity

    def load(self) -> List[str]:
        """Read the history. A missing or malformed payload reads as empty."""
        raw = self.storage.get(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logging.warning(f"Ignoring malformed history payload under {self.key!r}")
            return []
        if not isinstance(data, list) or not all(isinstance(x, str) for x in data):
            logging.warning(f"Ignoring malformed history payload under {self.key!r}")
            return []
        return data[-self.capacity:]

    def push(self, label: str) -> List[str]:
        """Move ``label`` to the end, dropping the oldest entries past capacity."""
        folded = label.casefold()
        entries = [x for x in self.load() if x.casefold() != folded]
        entries.append(label)
        entries = entries[-self.capacity:]
        self.storage.set(self.key, json.dumps(entries))
        logging.debug(f"History updated: {len(entries)} entries")
        return entries

    def clear(self) -> None:
        self.storage.remove(self.key)
        logging.info("History cleared")


class ThemeStore:
    """Light/dark preference, ``"light"`` unless ``"dark"`` was saved."""

    LIGHT = "light"
    DARK = "dark"

    def __init__(self, storage: KeyValueStorage, key: str = THEME_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> str:
        return self.DARK if self.storage.get(self.key) == self.DARK else self.LIGHT

    def save(self, theme: str) -> str:
        if theme not in (self.LIGHT, self.DARK):
            raise ValueError(f"Unknown theme: {theme}")
        self.storage.set(self.key, theme)
        return theme

    def toggle(self) -> str:
        return self.save(self.LIGHT if self.load() == self.DARK else self.DARK)
