"""Periodic backup of unsaved editor content to a hidden temporary file."""

from __future__ import annotations

import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Callable

from katvan.settings import Settings

log = logging.getLogger(__name__)

SETTING_PREFIX_TEMP_FILES = "compilertmp/"
BACKUP_PREFIX = ".katvan_"
BACKUP_SUFFIX = ".typ"


def settings_key_for_file(file_name: str) -> str:
    """Settings key recording the backup file of ``file_name``."""
    return SETTING_PREFIX_TEMP_FILES + file_name.replace(os.sep, "_")


def backup_directory(source_file: str, sandboxed: bool = False) -> str:
    """Directory where backups of ``source_file`` are created.

    In a sandbox the system temporary directory is used, since the source
    file's own directory may not be writable.
    """
    if sandboxed:
        return tempfile.gettempdir()
    return str(Path(os.path.abspath(source_file)).parent)


class BackupHandler:
    """Writes the editor text to a backup file at most once per interval.

    The name of the backup file is recorded in the settings while a source
    file is open, so that a crash leaves a trace that can be recovered from
    the next time the file is opened.
    """

    def __init__(
        self,
        text_source: Callable[[], str],
        settings: Settings,
        clock: Callable[[], float] = time.time,
        sandboxed: bool = False,
    ) -> None:
        self._text_source = text_source
        self._settings = settings
        self._clock = clock
        self._sandboxed = sandboxed
        self._interval = 0
        self._source_file = ""
        self._backup_file: str | None = None
        self._last_save = 0
        self.pending_save_at: int | None = None

    @property
    def backup_file(self) -> str | None:
        return self._backup_file

    @property
    def source_file(self) -> str:
        return self._source_file

    def _now(self) -> int:
        return int(self._clock())

    def set_backup_interval(self, interval_secs: int) -> None:
        self._interval = interval_secs

    def _discard_backup_file(self) -> None:
        if self._backup_file is not None:
            try:
                os.unlink(self._backup_file)
            except FileNotFoundError:
                pass
            self._backup_file = None
        self.pending_save_at = None

    def reset_source_file(self, source_file_name: str) -> str:
        """Switch to a new source file.

        Returns the backup file left over for the new file by a previous
        session that did not end cleanly, or an empty string.
        """
        if self._source_file:
            self._settings.remove(settings_key_for_file(self._source_file))

        self._discard_backup_file()

        self._source_file = source_file_name
        if not source_file_name:
            return ""

        self._last_save = self._now()
        leftover = self._settings.value(settings_key_for_file(source_file_name), "")
        return str(leftover) if leftover else ""

    def editor_content_changed(self) -> None:
        """Save now if the interval has passed, otherwise schedule a save."""
        if not self._source_file or self._interval == 0:
            return

        now = self._now()
        due = self._last_save + self._interval
        if now < due:
            if self.pending_save_at is None:
                self.pending_save_at = due
            return

        self.pending_save_at = None
        self.save_content()

    def run_pending(self) -> bool:
        """Perform a scheduled save whose time has come. Returns whether it ran."""
        if self.pending_save_at is None or self._now() < self.pending_save_at:
            return False
        self.pending_save_at = None
        self.save_content()
        return True

    def save_content(self) -> None:
        if self._backup_file is None:
            directory = backup_directory(self._source_file, self._sandboxed)
            try:
                fd, name = tempfile.mkstemp(
                    prefix=BACKUP_PREFIX, suffix=BACKUP_SUFFIX, dir=directory
                )
            except OSError as exc:
                log.warning("Failed to open temporary file in %s: %s", directory, exc)
                return
            os.close(fd)
            self._backup_file = name
            self._settings.set_value(settings_key_for_file(self._source_file), name)

        with open(self._backup_file, "w", encoding="utf-8", newline="") as fh:
            fh.write(self._text_source())

        self._last_save = self._now()

    def close(self) -> None:
        """Forget the current source file and delete its backup."""
        if self._source_file:
            self._settings.remove(settings_key_for_file(self._source_file))
        self._discard_backup_file()
        self._source_file = ""

    def __enter__(self) -> BackupHandler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()