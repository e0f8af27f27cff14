"""Help screen listing the editor's key commands."""

from __future__ import annotations

from typing import Callable

import urwid

from gostman.formatting import BACK

COMMANDS_CONTENT = "\n".join(
    [
        "tab = Move Around",
        "enter = Send Request",
        "ctrl + s = Save Request",
        "ctrl + Arrow Keys = Change Tabs (Body/Param/Header)",
        "ctrl + d = Open dashboard",
        "ctrl + c = Quit",
    ]
)

HELP_TITLE = "gostman Help Page"
HELP_FOOTER = "<ESC> to go back"


def command_rows(content: str = COMMANDS_CONTENT) -> list[tuple[str, str]]:
    """Split "command = description" lines into (command, description) pairs."""
    rows: list[tuple[str, str]] = []
    for line in content.split("\n"):
        columns = line.split(" = ")
        if len(columns) < 2:
            raise ValueError(f"command line has no ' = ' separator: {line!r}")
        rows.append((columns[0], columns[1]))
    return rows


def _table_row(command: str, description: str, attr: str | None = None) -> urwid.Widget:
    row = urwid.Columns(
        [("weight", 2, urwid.Text(command)), ("weight", 3, urwid.Text(description))],
        dividechars=1,
    )
    return urwid.AttrMap(row, attr) if attr else row


class HelpScreen(urwid.WidgetWrap):
    """Read-only table of commands; Esc returns, Ctrl+C quits."""

    def __init__(self, on_back: Callable[[], None], on_quit: Callable[[], None]) -> None:
        self._on_back = on_back
        self._on_quit = on_quit
        self.rows = command_rows()
        table = [_table_row("Command", "Description", "table_header")]
        table.extend(_table_row(command, description) for command, description in self.rows)
        body = urwid.LineBox(
            urwid.Filler(urwid.Pile([urwid.Divider(), *table, urwid.Divider()]), valign="top")
        )
        frame = urwid.Frame(
            body,
            header=urwid.Text(("header_text", "+-- " + HELP_TITLE)),
            footer=urwid.Text(("header_text", "+-- " + HELP_FOOTER)),
        )
        super().__init__(frame)

    def keypress(self, size, key):
        if BACK.matches(key):
            self._on_back()
        elif key == "ctrl c":
            self._on_quit()
        return None