# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULTS = {
    "dictionary_path": "Dictionary.txt",
    "autoload": True,
    "max_suggestions": 10,
    "log_path": os.path.join("logs", "trie_dictionary.log"),
    "log_level": "INFO",
    "show_timings": False,
    # empty = keep operation timings in memory only
    "metrics_path": "",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _check(key: str, val: Any) -> Any:
    """Range checks for options where the type alone is not enough."""
    if key == "max_suggestions" and val < 1:
        raise ValueError(f"{key}: must be at least 1, got {val}")
    return val


class Config:
    """
    Settings loaded from a JSON file on top of DEFAULTS.
    path=None keeps everything in memory (tests, --no-config runs).
    An unreadable file or bad value falls back to the default; the reason
    is kept in `errors` for the host to report.
    """

    def __init__(self, path: Optional[str] = "config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self.errors = []
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            self._reject(f"{self.path}: {e}")
            return
        if not isinstance(stored, dict):
            self._reject(f"{self.path}: expected a JSON object")
            return
        for k, v in stored.items():
            if k not in DEFAULTS:
                continue
            try:
                self.data[k] = self._coerce(k, v)
            except (TypeError, ValueError) as e:
                self._reject(f"{self.path}: {e}")

    def _reject(self, msg: str):
        logger.warning("config ignored: %s", msg)
        self.errors.append(msg)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    @staticmethod
    def _coerce(key: str, val: Any) -> Any:
        kind = type(DEFAULTS[key])
        if kind is bool:
            if isinstance(val, bool):
                return val
            low = str(val).strip().lower()
            if low not in _TRUE | _FALSE:
                raise ValueError(f"{key}: expected a boolean, got {val!r}")
            return low in _TRUE
        if kind is int and isinstance(val, bool):
            raise ValueError(f"{key}: expected an integer, got {val!r}")
        return _check(key, kind(val))

    def set(self, key: str, val: Any) -> Any:
        """Coerce `val` to the type of the default and persist. Unknown keys raise KeyError."""
        if key not in DEFAULTS:
            raise KeyError(key)
        val = self._coerce(key, val)
        self.data[key] = val
        self.save()
        return val

    def items(self):
        return self.data.items()
