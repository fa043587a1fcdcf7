"""Most-recently-used file list, persisted in settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from katvan.settings import Settings
from katvan.utils import format_file_path

MAX_RECENT_FILES = 10
SETTING_RECENT_FILES = "recentFiles"


@dataclass(frozen=True)
class MenuEntry:
    """One line of the recent files menu."""

    label: str
    file_path: str | None = None
    enabled: bool = True
    separator: bool = False


class RecentFiles:
    """Keeps up to ten recently opened files, newest first."""

    def __init__(
        self,
        settings: Settings,
        on_file_selected: Callable[[str], None] | None = None,
    ) -> None:
        self._settings = settings
        self._on_file_selected = on_file_selected
        self._files: list[str] = []
        self.right_to_left = False

    @property
    def files(self) -> list[str]:
        return list(self._files)

    def restore_recents(self) -> None:
        if self._settings.contains(SETTING_RECENT_FILES):
            self._files = [str(p) for p in self._settings.value(SETTING_RECENT_FILES, [])]

    def _save(self) -> None:
        self._settings.set_value(SETTING_RECENT_FILES, self._files)

    def add_recent(self, file_path: str) -> None:
        if file_path in self._files:
            self._files.remove(file_path)
        self._files.insert(0, file_path)
        del self._files[MAX_RECENT_FILES:]
        self._save()

    def remove_file(self, file_path: str) -> None:
        if file_path in self._files:
            self._files = [p for p in self._files if p != file_path]
            self._save()

    def clear(self) -> None:
        self._files.clear()
        self._save()

    def menu_entries(self) -> list[MenuEntry]:
        """Describe the menu: one entry per file, a separator, then "Clear"."""
        entries = [
            MenuEntry(format_file_path(path, self.right_to_left), path)
            for path in self._files
        ]
        if self._files:
            entries.append(MenuEntry("", separator=True))
        entries.append(MenuEntry("Clear", enabled=bool(self._files)))
        return entries

    def select(self, file_path: str) -> None:
        if self._on_file_selected is not None:
            self._on_file_selected(file_path)