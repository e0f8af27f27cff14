"""Dashboard listing saved requests, with open, create and delete actions."""

from __future__ import annotations

from typing import Callable

import urwid

from gostman.formatting import BACK, CREATE, DELETE
from gostman.store import Request, RequestNotFoundError, RequestStore

DASHBOARD_TITLE = "List of Requests "
DEFAULT_FOOTER = "Ctrl+c to quit, F2 for help"
CONFIRM_FOOTER = "Delete selected item? : (Y/N)"


class _RequestItem(urwid.WidgetWrap):
    """One list entry: the request's name above its method."""

    def __init__(self, request: Request) -> None:
        self.request = request
        pile = urwid.Pile([urwid.Text(request.name), urwid.Text(("help", request.method))])
        super().__init__(urwid.AttrMap(pile, None, focus_map="highlight"))

    def selectable(self) -> bool:
        return True

    def keypress(self, size, key):
        return key


class Dashboard(urwid.WidgetWrap):
    """Browse saved requests; Enter opens, n creates, d then y deletes."""

    def __init__(
        self,
        store: RequestStore,
        on_open: Callable[[Request], None],
        on_new: Callable[[], None],
        on_back: Callable[[], None],
        on_quit: Callable[[], None],
    ) -> None:
        self._store = store
        self._on_open = on_open
        self._on_new = on_new
        self._on_back = on_back
        self._on_quit = on_quit
        self._confirming = False

        self._walker = urwid.SimpleFocusListWalker(
            [_RequestItem(request) for request in store.requests()]
        )
        self._message = urwid.Text(("error_header_text", DEFAULT_FOOTER))
        help_line = "  ".join(binding.help_text() for binding in (CREATE, DELETE, BACK))
        frame = urwid.Frame(
            urwid.LineBox(urwid.ListBox(self._walker)),
            header=urwid.Text(("title", DASHBOARD_TITLE)),
            footer=urwid.Pile([urwid.Text(("help", help_line)), self._message]),
        )
        super().__init__(frame)

    def requests(self) -> list[Request]:
        """Return the requests currently listed, in display order."""
        return [item.request for item in self._walker]

    def selected_request(self) -> Request | None:
        """Return the focused request, or None when the list is empty."""
        if not self._walker:
            return None
        return self._walker[self._walker.focus].request

    def confirming_delete(self) -> bool:
        return self._confirming

    def _set_confirming(self, value: bool) -> None:
        self._confirming = value
        self._message.set_text(("error_header_text", CONFIRM_FOOTER if value else DEFAULT_FOOTER))

    def _delete_selected(self) -> None:
        selected = self.selected_request()
        if selected is None:
            self._set_confirming(False)
            return
        try:
            self._store.delete(selected.id)
        except (OSError, ValueError, RequestNotFoundError):
            self._set_confirming(False)
            self._on_back()
            return
        del self._walker[self._walker.focus]
        self._set_confirming(False)

    def keypress(self, size, key):
        if key == "ctrl c":
            self._on_quit()
            return None
        if BACK.matches(key):
            self._on_back()
            return None
        if key == "enter":
            selected = self.selected_request()
            if selected is not None:
                self._on_open(selected)
            return None
        if CREATE.matches(key) and not self._confirming:
            self._on_new()
            return None
        if DELETE.matches(key) and not self._confirming:
            self._set_confirming(True)
            return None
        if self._confirming:
            if key == "y":
                self._delete_selected()
                return None
            if key == "n":
                self._set_confirming(False)
                return None
        return super().keypress(size, key)