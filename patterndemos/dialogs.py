"""Factory method example: dialogs that create their own buttons."""

from __future__ import annotations

import enum
import sys
from typing import TextIO


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _say(out: TextIO, text: str) -> None:
    out.write(text + "\n")


class Button:
    """A button placed at an origin; renders and reacts to clicks."""

    def __init__(self, x: int, y: int, out: TextIO | None = None) -> None:
        self.x = x
        self.y = y
        self._out = _stream(out)

    def on_click(self) -> None:
        _say(self._out, "Button clicked without an action")

    def render(self) -> None:
        _say(self._out, "default button is rendered")


class WindowButton(Button):
    """Button in the style of a desktop window."""

    def on_click(self) -> None:
        _say(self._out, "window button click action is defined")

    def render(self) -> None:
        _say(self._out, "window button got rendered")


class HTMLButton(Button):
    """Button rendered as HTML."""

    def on_click(self) -> None:
        _say(self._out, "html button click action is defined")

    def render(self) -> None:
        _say(self._out, "html button got rendered")


class Dialog:
    """A dialog whose button is made by the overridable `create_button`."""

    def __init__(self, x: int, y: int, out: TextIO | None = None) -> None:
        self.x = x
        self.y = y
        self._out = _stream(out)
        self.ok_button: Button | None = None

    def create_button(self) -> Button | None:
        """Factory method; the base dialog creates no button."""
        _say(self._out, "default button is created.")
        return None

    def render(self) -> None:
        """Create the button, click and render it, then render the dialog."""
        button = self.create_button()
        if button is None:
            raise RuntimeError("dialog did not create a button")
        self.ok_button = button
        button.on_click()
        button.render()
        _say(self._out, "dialog got rendered")


class WindowDialog(Dialog):
    """Dialog that creates window buttons."""

    def create_button(self) -> Button:
        _say(self._out, "window button is created.")
        return WindowButton(self.x + 10, self.y + 10, self._out)


class HTMLDialog(Dialog):
    """Dialog that creates HTML buttons."""

    def create_button(self) -> Button:
        _say(self._out, "html button is created")
        return HTMLButton(self.x + 10, self.y + 10, self._out)


class DialogType(enum.Enum):
    """Kinds of dialog a client can be built with."""

    WINDOW = 0
    HTML = 1
    END = 2


class DialogClient:
    """Client that works with whatever dialog it was given."""

    def __init__(self, dialog: Dialog, out: TextIO | None = None) -> None:
        self.dialog = dialog
        self._out = _stream(out)

    def action(self) -> None:
        self._out.write("\nClient Action\n")
        self.dialog.render()


_DIALOGS = {
    DialogType.WINDOW: WindowDialog,
    DialogType.HTML: HTMLDialog,
}


def create_dialog_client(kind: DialogType, out: TextIO | None = None) -> DialogClient:
    """Build a client with the dialog of the given kind.

    Raises ValueError for a kind that has no dialog.
    """
    try:
        dialog_cls = _DIALOGS[kind]
    except (KeyError, TypeError):
        raise ValueError("beep beep wrong dialog choice") from None
    stream = _stream(out)
    return DialogClient(dialog_cls(0, 0, stream), stream)