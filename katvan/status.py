"""Status bar presentation: compilation state, cursor position, zoom, spelling."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable, Mapping

from katvan.settings import Settings

SETTING_SPELLING_DICT = "spelling/dict"
NO_DICTIONARY_LABEL = "None"


class CompilationStatus(enum.Enum):
    INITIALIZED = "initialized"
    PROCESSING = "processing"
    SUCCESS = "success"
    SUCCESS_WITH_WARNINGS = "success-with-warnings"
    FAILED = "failed"


class CursorMoveStyle(enum.Enum):
    LOGICAL = "logical"
    VISUAL = "visual"


@dataclass(frozen=True)
class StatusDisplay:
    """How the compilation status button looks for a given status."""

    text: str
    icon: str | None
    spinning: bool = False
    show_compiler_output: bool = False


@dataclass(frozen=True)
class DictionaryChoice:
    name: str
    label: str


@dataclass(frozen=True)
class RestoredDictionary:
    name: str
    path: str
    button_text: str


def compilation_status_display(status: CompilationStatus) -> StatusDisplay:
    """Text and icon for the compilation status button."""
    if status is CompilationStatus.PROCESSING:
        return StatusDisplay("Compiling...", None, spinning=True)
    if status is CompilationStatus.SUCCESS:
        return StatusDisplay("No Errors", ":/icons/data-success.svg")
    if status is CompilationStatus.SUCCESS_WITH_WARNINGS:
        return StatusDisplay("Warnings", ":/icons/data-warning.svg")
    if status is CompilationStatus.FAILED:
        return StatusDisplay("Errors", ":/icons/data-error.svg", show_compiler_output=True)
    return StatusDisplay("", None)


def cursor_position_text(line: int, column: int) -> str:
    """Label for a zero-based line and column; lines are shown one-based."""
    return f"Line {line + 1}, Col {column}"


def _round(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def zoom_factor_text(factor: float) -> str | None:
    """Percentage label for the font zoom, or None at 100% (button hidden)."""
    percentage = _round(factor * 100)
    if percentage == 100:
        return None
    return f"{percentage}%"


def toggle_cursor_move_style(style: CursorMoveStyle) -> tuple[CursorMoveStyle, str]:
    """Switch between logical and visual cursor movement; return the new style and label."""
    if style is CursorMoveStyle.LOGICAL:
        return CursorMoveStyle.VISUAL, "Visual"
    return CursorMoveStyle.LOGICAL, "Logical"


def dictionary_choices(
    dictionaries: Mapping[str, str],
    display_name: Callable[[str], str],
) -> list[DictionaryChoice]:
    """Choices for the spelling dictionary picker: "None" first, then by name."""
    choices = [DictionaryChoice("", NO_DICTIONARY_LABEL)]
    choices.extend(
        DictionaryChoice(name, f"{name} - {display_name(name)}") for name in sorted(dictionaries)
    )
    return choices


def restore_dictionary(settings: Settings, dictionaries: Mapping[str, str]) -> RestoredDictionary:
    """Pick the saved spelling dictionary if it is still available."""
    name = str(settings.value(SETTING_SPELLING_DICT, "") or "")
    path = ""
    if name:
        if name in dictionaries:
            path = dictionaries[name]
        else:
            name = ""
    return RestoredDictionary(name, path, name if name else NO_DICTIONARY_LABEL)