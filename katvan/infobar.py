"""A dismissable notification strip shown above the editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class _Button:
    label: str
    callback: Callable[[], None]


class InfoBar:
    """A warning message with a row of action buttons.

    The bar starts hidden. Showing a message makes it visible; clearing it
    drops every button and hides it again.
    """

    WARNING_ICON = "warning"

    def __init__(self) -> None:
        self.visible = False
        self.message = ""
        self.icon: str | None = None
        self._buttons: list[_Button] = []

    @property
    def buttons(self) -> list[str]:
        """Labels of the current buttons, in the order they were added."""
        return [button.label for button in self._buttons]

    def add_button(self, label: str, callback: Callable[[], None]) -> None:
        self._buttons.append(_Button(label, callback))

    def press(self, label: str) -> None:
        """Invoke the callback of the first button carrying ``label``."""
        for button in self._buttons:
            if button.label == label:
                button.callback()
                return
        raise KeyError(label)

    def show_message(self, message: str) -> None:
        self.message = message
        self.icon = self.WARNING_ICON
        self.visible = True

    def clear(self) -> None:
        """Remove all buttons and hide the bar."""
        self._buttons.clear()
        self.hide()

    def hide(self) -> None:
        self.visible = False