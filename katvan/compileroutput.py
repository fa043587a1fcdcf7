"""Column layout of the compiler output (diagnostics) list."""

from __future__ import annotations

import math
from dataclasses import dataclass

SEVERITY_COLUMN_WIDTH = 22


@dataclass(frozen=True)
class ColumnWidths:
    """Widths of the fixed-size columns; the message column takes the rest."""

    severity: int
    location: int


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def column_widths(viewport_width: int, message_hint: int, location_hint: int) -> ColumnWidths:
    """Work out column widths for a viewport of the given width.

    The location column gets all the width it wants when that fits next to
    the severity icon and the message. Otherwise it gets up to a quarter of
    the viewport.
    """
    available_for_location = viewport_width - SEVERITY_COLUMN_WIDTH - message_hint
    if location_hint <= available_for_location:
        location = location_hint
    else:
        location = min(_round(viewport_width / 4.0), location_hint)
    return ColumnWidths(severity=SEVERITY_COLUMN_WIDTH, location=location)