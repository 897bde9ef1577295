"""Small JSON-file key-value store for scores and preferences."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the store file exists but is not a JSON object."""


class JsonStore:
    """Key-value pairs kept in a single JSON object on disk.

    The file is read on every access and rewritten on every change, so
    several stores pointing at the same path see each other's writes.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Corrupt store file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Store file {self.path} does not hold a JSON object")
        return data

    def _save(self, data: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    def get(self, key: str, default=None):
        return self._load().get(key, default)

    def set(self, key: str, value):
        data = self._load()
        data[key] = value
        self._save(data)
        logger.debug("store %s: set %s=%r", self.path, key, value)

    def remove(self, key: str):
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
            logger.debug("store %s: removed %s", self.path, key)
