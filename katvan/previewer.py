"""Zoom and display state of the document preview pane."""

from __future__ import annotations

import enum
import math
from typing import Any

from katvan.settings import Settings

FIT_TO_PAGE = "fit-page"
FIT_TO_WIDTH = "fit-width"

SETTING_PREVIEW_ZOOM = "preview/zoom"
SETTING_PREVIEW_INVERT_COLORS = "preview/invert-colors"
SETTING_PREVIEW_FOLLOW_CURSOR = "preview/follow-cursor"

# Entries of the zoom selector: (label, data); None marks the separator.
ZOOM_OPTIONS: list[tuple[str, str] | None] = [
    ("Fit Page", FIT_TO_PAGE),
    ("Fit Width", FIT_TO_WIDTH),
    None,
    ("50%", "0.5"),
    ("75%", "0.75"),
    ("100%", "1.0"),
    ("125%", "1.25"),
    ("150%", "1.5"),
    ("200%", "2.0"),
]


class ZoomMode(enum.Enum):
    CUSTOM = "custom"
    FIT_TO_PAGE = FIT_TO_PAGE
    FIT_TO_WIDTH = FIT_TO_WIDTH


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def round_factor(factor: float) -> float:
    """Round a zoom factor to the nearest multiple of 5%."""
    return _round(factor * 20) / 20.0


def zoom_text(factor: float) -> str:
    return f"{_round(factor * 100)}%"


def page_label_text(label: str, count: int) -> str:
    return f"Page {label} of {count}"


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class PreviewState:
    """Zoom mode, zoom selector text and toggles of the preview pane."""

    def __init__(self) -> None:
        self.zoom_mode = ZoomMode.FIT_TO_WIDTH
        self.zoom_factor = 1.0
        self.zoom_edit_text = ""
        self.current_index: int | None = 0
        self.invert_colors = False
        self.follow_cursor = False

    def set_zoom(self, value: Any) -> None:
        """Apply a numeric factor or one of the fit modes."""
        factor = _as_float(value)
        if factor is not None:
            self.set_custom_zoom(factor)
        elif value == FIT_TO_PAGE:
            self.zoom_mode = ZoomMode.FIT_TO_PAGE
        elif value == FIT_TO_WIDTH:
            self.zoom_mode = ZoomMode.FIT_TO_WIDTH

    def set_custom_zoom(self, factor: float) -> None:
        self.zoom_mode = ZoomMode.CUSTOM
        self.zoom_factor = factor
        self.zoom_edit_text = zoom_text(factor)

    def zoom_in(self, effective_zoom: float) -> None:
        self.set_custom_zoom(round_factor(effective_zoom) + 0.05)

    def zoom_out(self, effective_zoom: float) -> None:
        self.set_custom_zoom(round_factor(effective_zoom) - 0.05)

    def select_option(self, index: int) -> None:
        """Apply the zoom selector entry at ``index``."""
        if index < 0 or index >= len(ZOOM_OPTIONS):
            return
        option = ZOOM_OPTIONS[index]
        if option is None:
            return
        self.current_index = index
        self.set_zoom(option[1])

    def manual_zoom_entered(self, text: str) -> bool:
        """Apply a percentage typed into the selector; ignore anything else."""
        try:
            percent = int(text.strip())
        except ValueError:
            return False
        self.current_index = None
        self.set_custom_zoom(percent / 100.0)
        return True

    def restore_settings(self, settings: Settings) -> None:
        zoom_value = settings.value(SETTING_PREVIEW_ZOOM, FIT_TO_WIDTH)
        self.set_zoom(zoom_value)

        index = next(
            (i for i, opt in enumerate(ZOOM_OPTIONS) if opt is not None and opt[1] == zoom_value),
            None,
        )
        if index is not None:
            self.current_index = index

        self.invert_colors = bool(settings.value(SETTING_PREVIEW_INVERT_COLORS, False))
        self.follow_cursor = bool(settings.value(SETTING_PREVIEW_FOLLOW_CURSOR, False))

    def save_settings(self, settings: Settings) -> None:
        if self.zoom_mode is ZoomMode.CUSTOM:
            zoom_value: Any = self.zoom_factor
        elif self.zoom_mode is ZoomMode.FIT_TO_PAGE:
            zoom_value = FIT_TO_PAGE
        else:
            zoom_value = FIT_TO_WIDTH

        settings.set_value(SETTING_PREVIEW_ZOOM, zoom_value)
        settings.set_value(SETTING_PREVIEW_INVERT_COLORS, self.invert_colors)
        settings.set_value(SETTING_PREVIEW_FOLLOW_CURSOR, self.follow_cursor)