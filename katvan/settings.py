"""Persistent application settings stored as a flat JSON key/value map."""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any


class Settings:
    """Hierarchical key/value settings, with keys separated by ``/``.

    With a ``path`` every change is written to that file right away.
    With no path the settings live only in memory.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._values: dict[str, Any] = {}
        if self._path is not None and self._path.exists():
            self._values = self._load(self._path)

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    @property
    def path(self) -> Path | None:
        return self._path

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        if key in self._values:
            return copy.deepcopy(self._values[key])
        return default

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = copy.deepcopy(value)
        self.sync()

    def contains(self, key: str) -> bool:
        return key in self._values

    def remove(self, key: str) -> None:
        """Remove ``key`` and every key nested below it."""
        prefix = key.rstrip("/") + "/"
        doomed = [k for k in self._values if k == key or k.startswith(prefix)]
        for k in doomed:
            del self._values[k]
        if doomed:
            self.sync()

    def keys(self) -> list[str]:
        return sorted(self._values)

    def sync(self) -> None:
        """Write the current values to the backing file, if there is one."""
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=".settings-", suffix=".json", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._values, fh, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise