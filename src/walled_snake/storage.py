# storage.py
"""High-score persistence on top of a tiny string key/value store."""
from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Protocol
import json
import logging

from .config import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store; used by tests and as the fallback when no file is wanted."""

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    Keeps all keys in one JSON object on disk.
    The file is read on every get() and rewritten on every set(); it only ever
    holds a handful of keys.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except ValueError:
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp.replace(self.path)


class HighScoreStore:
    """
    load()/save() for the single high-score integer.
    Store failures are logged and absorbed: a broken store means the high
    score starts at 0 for this session and is simply not written back.
    """

    def __init__(self, store: KeyValueStore, key: str = HIGH_SCORE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> int:
        try:
            raw = self.store.get(self.key)
        except (OSError, ValueError) as e:
            logger.warning("High score unavailable, starting from 0: %s", e)
            return 0
        if not raw:
            return 0
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring corrupt high score %r", raw)
            return 0
        return max(value, 0)

    def save(self, score: int) -> bool:
        """Persist score; returns False if the store refused the write."""
        try:
            self.store.set(self.key, str(int(score)))
        except OSError as e:
            logger.warning("Could not persist high score %d: %s", score, e)
            return False
        return True
