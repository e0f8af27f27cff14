"""Colour palette and text placement helpers for the terminal screens."""

from __future__ import annotations

import unicodedata
from itertools import cycle

MAX_WIDTH = 80

_PALETTE = [
    ("base", "default", "default", "", "default", "default"),
    ("header_text", "light green,bold", "default", "bold", "#0b8,bold", "default"),
    ("header_decoration", "light blue", "default", "", "#76f", "default"),
    ("status", "default", "default", "", "default", "default"),
    ("status_header", "light green,bold", "default", "bold", "#0b8,bold", "default"),
    ("highlight", "light magenta", "default", "", "h212", "default"),
    ("error_header_text", "light red,bold", "default", "bold", "#f68,bold", "default"),
    ("help", "dark gray", "default", "", "h240", "default"),
    ("border", "dark blue", "default", "", "h62", "default"),
    ("focused_border", "light magenta", "default", "", "h205", "default"),
    ("title", "white", "dark blue", "standout", "h230", "h62"),
    ("heading", "black", "yellow", "standout", "h0", "h11"),
    ("cursor", "light magenta", "default", "", "h212", "default"),
    ("cursor_line", "white", "dark blue", "standout", "h230", "h57"),
    ("placeholder", "dark gray", "default", "", "h238", "default"),
    ("focused_placeholder", "light blue", "default", "", "h99", "default"),
    ("end_of_buffer", "dark gray", "default", "", "h235", "default"),
    ("tab_active", "light green,bold", "default", "bold", "#0b8,bold", "default"),
    ("tab_inactive", "default", "default", "", "default", "default"),
    ("table_header", "white,bold", "dark blue", "bold", "h230,bold", "h62"),
    ("spinner", "light red", "default", "", "#e33", "default"),
    ("whitespace", "light blue", "default", "", "#76f", "default"),
]


def palette() -> list[tuple[str, str, str, str, str, str]]:
    """Return the palette of named display attributes."""
    return list(_PALETTE)


def _char_width(char: str) -> int:
    if unicodedata.combining(char) or unicodedata.category(char) in ("Cc", "Mn", "Me"):
        return 0
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


def _display_width(text: str) -> int:
    return sum(_char_width(char) for char in text)


def _filler(width: int, fill: str) -> str:
    pieces: list[str] = []
    used = 0
    for char in cycle(fill):
        char_width = _char_width(char) or 1
        if used + char_width > width:
            break
        pieces.append(char)
        used += char_width
    return "".join(pieces) + " " * (width - used)


def place_horizontal(text: str, width: int, fill: str = " ") -> str:
    """Left-align text in a field of the given width, padding every line with fill."""
    if not fill:
        raise ValueError("fill must not be empty")
    lines = text.split("\n")
    if max(_display_width(line) for line in lines) >= width:
        return text
    return "\n".join(line + _filler(width - _display_width(line), fill) for line in lines)


def boundary_view(text: str, width: int) -> str:
    """Return a header line marked with a leading '+-- '."""
    return place_horizontal("+-- " + text, width)


def boundary_message(text: str, width: int) -> str:
    """Return a status message line padded to the given width."""
    return place_horizontal(text, width)