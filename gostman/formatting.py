"""JSON pretty-printing, default request headers and key bindings."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

_DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate, br",
    "Connection": "keep-alive",
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def format_json(text: str) -> str:
    """Indent a JSON document by two spaces; return the input unchanged if it is not JSON."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return text
    return json.dumps(data, indent=2, ensure_ascii=False)


def default_headers() -> str:
    """Return the headers a new request starts with, as indented JSON."""
    return json.dumps(_DEFAULT_HEADERS, indent=2, sort_keys=True)


@dataclass(frozen=True)
class KeyBinding:
    """A set of keys bound to one action, with its help label."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str
    enabled: bool = True

    def matches(self, key: str) -> bool:
        return self.enabled and key in self.keys

    def help_text(self) -> str:
        return f"{self.help_key} {self.help_desc}"


CREATE = KeyBinding(("n",), "n", "create")
DELETE = KeyBinding(("d",), "d", "delete")
BACK = KeyBinding(("esc",), "esc", "back")
QUIT = KeyBinding(("ctrl c", "q"), "ctrl+c/q", "quit")