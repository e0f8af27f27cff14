"""Screen for editing the environment variables document."""

from __future__ import annotations

from typing import Callable

import urwid

from gostman.formatting import BACK

ENVIRONMENT_FOOTER = "Ctrl+c to quit, F2 for help"


class EnvironmentScreen(urwid.WidgetWrap):
    """A multi-line editor holding the variables; Esc returns, Ctrl+C quits."""

    def __init__(
        self,
        variables: str,
        on_back: Callable[[], None],
        on_quit: Callable[[], None],
    ) -> None:
        self._on_back = on_back
        self._on_quit = on_quit
        self._edit = urwid.Edit(edit_text=variables, multiline=True)
        body = urwid.LineBox(urwid.Filler(self._edit, valign="top"))
        frame = urwid.Frame(
            body,
            footer=urwid.Text(("error_header_text", ENVIRONMENT_FOOTER)),
        )
        super().__init__(frame)

    def text(self) -> str:
        """Return the current contents of the editor."""
        return self._edit.edit_text

    def keypress(self, size, key):
        if key == "ctrl c":
            self._on_quit()
            return None
        if BACK.matches(key):
            self._on_back()
            return None
        return super().keypress(size, key)