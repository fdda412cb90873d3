"""Per-user key-value settings store (JSON file backed)."""

import json
import logging
import os
from pathlib import Path

from svnsimple.config import get_settings

logger = logging.getLogger(__name__)


class EditorPrefs:
    """String key-value store shared by every project of the current user.

    Every write goes straight to disk, so values survive a crash of the host.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or get_settings().editor_prefs_path
        self._values: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._values is not None:
            return self._values

        self._values = {}
        if not self.path.exists():
            return self._values

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable editor prefs file {self.path}: {e}")
            return self._values

        if not isinstance(data, dict):
            logger.warning(f"Ignoring editor prefs file {self.path}: root is not an object")
            return self._values

        self._values = {str(k): str(v) for k, v in data.items()}
        return self._values

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(self._load(), indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self.path)

    def get_string(self, key: str, default: str = "") -> str:
        return self._load().get(key, default)

    def _reload(self) -> dict[str, str]:
        # Other processes write to the same file; merge into what is on disk now.
        self._values = None
        return self._load()

    def set_string(self, key: str, value: str) -> None:
        self._reload()[key] = value
        self._flush()

    def has_key(self, key: str) -> bool:
        return key in self._load()

    def delete_key(self, key: str) -> None:
        values = self._reload()
        if key in values:
            del values[key]
            self._flush()
