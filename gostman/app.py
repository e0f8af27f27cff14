"""The request editor screen and the application that switches between screens."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

import urwid

from gostman.dashboard import Dashboard
from gostman.environment import EnvironmentScreen
from gostman.formatting import default_headers, format_json
from gostman.help import HelpScreen
from gostman.http_client import send
from gostman.store import Request, RequestStore
from gostman.style import palette

TABS = ("Body", "Params", "Headers")
FIELDS = ("nameField", "methodField", "urlField", "tabContent")
TAB_CONTENT_FIELD = 3
NAME_LIMIT = 22
METHOD_LIMIT = 6
DEFAULT_NAME = "New Request"
HINT = "Ctrl+c to quit, F2 for help"
SENDING_MESSAGE = "Sending Request...."
SENT_MESSAGE = "Request Sent!"
SAVING_MESSAGE = "Saving Request...."
SAVED_MESSAGE = "Request Saved Successfully!"
SAVE_FAILED_MESSAGE = "failed to add the request"
SPINNER_FRAME = "⣾ "

_SCROLL_STEPS = {"up": -1, "down": 1, "page up": -10, "page down": 10}
_WHEEL_STEPS = {4: -1, 5: 1}

Sender = Callable[..., Sequence[str]]


class _LimitedEdit(urwid.Edit):
    """A single-line edit that holds at most ``limit`` characters."""

    def __init__(self, limit: int, **kwargs) -> None:
        self._limit = limit
        super().__init__(**kwargs)

    def set_edit_text(self, text):
        super().set_edit_text(text[: self._limit])

    def insert_text(self, text):
        room = self._limit - len(self.edit_text)
        if room <= 0:
            return
        super().insert_text(text[:room])


class RequestEditor(urwid.WidgetWrap):
    """Fields of one request, its body/params/headers tabs and the response pane."""

    def __init__(self) -> None:
        self.request_id = ""
        self._focused = 0
        self._active = 0
        self._message = ""
        self._message_attr = "header_text"
        self._loading = False
        self.response = ""
        self.status = ""

        self._name = _LimitedEdit(NAME_LIMIT, edit_text=DEFAULT_NAME)
        self._method = _LimitedEdit(METHOD_LIMIT)
        self._url = urwid.Edit()
        self._tabs = [urwid.Edit(multiline=True) for _ in TABS]
        self._tabs[2].set_edit_text(default_headers())

        self._name_box = urwid.AttrMap(urwid.LineBox(self._name, title="Name"), "border")
        self._method_box = urwid.AttrMap(urwid.LineBox(self._method, title="Method"), "border")
        self._url_box = urwid.AttrMap(urwid.LineBox(self._url, title="URL"), "border")
        self._top_row = urwid.Columns(
            [(NAME_LIMIT + 5, self._name_box), (METHOD_LIMIT + 11, self._method_box), self._url_box]
        )

        self._tab_labels = [urwid.Text("") for _ in TABS]
        self._tab_holder = urwid.WidgetPlaceholder(urwid.Filler(self._tabs[0], valign="top"))
        self._request_panel = urwid.AttrMap(
            urwid.LineBox(
                urwid.Pile([("pack", urwid.Columns(self._tab_labels)), self._tab_holder])
            ),
            "border",
        )

        self._status_text = urwid.Text("")
        self._response_walker = urwid.SimpleFocusListWalker([])
        response_panel = urwid.AttrMap(
            urwid.LineBox(
                urwid.Pile([("pack", self._status_text), urwid.ListBox(self._response_walker)])
            ),
            "border",
        )
        self._main = urwid.Columns([self._request_panel, response_panel])
        self._body = urwid.Pile([("pack", self._top_row), self._main])
        self._footer = urwid.Text("")

        super().__init__(urwid.Frame(self._body, footer=self._footer))
        self._render_tabs()
        self._render_status()
        self.show_hint()
        self._sync_focus()

    # -- state ---------------------------------------------------------------

    @property
    def focused(self) -> int:
        """Index into FIELDS of the field that receives typed keys."""
        return self._focused

    @property
    def message(self) -> str:
        return self._message

    @property
    def loading(self) -> bool:
        return self._loading

    @loading.setter
    def loading(self, value: bool) -> None:
        self._loading = value
        self._render_footer()

    def load(self, request: Request) -> None:
        """Fill every field from a saved request."""
        self.request_id = request.id
        for edit, text in (
            (self._name, request.name),
            (self._url, request.url),
            (self._method, request.method),
            (self._tabs[0], request.body),
            (self._tabs[1], request.query_params),
            (self._tabs[2], request.headers),
        ):
            edit.set_edit_text(text)
            edit.set_edit_pos(len(edit.edit_text))
        self.show_response(request.response, self.status)

    def to_request(self) -> Request:
        """Return the request described by the current field contents."""
        return Request(
            id=self.request_id,
            name=self._name.edit_text,
            url=self._url.edit_text,
            method=self._method.edit_text,
            body=self._tabs[0].edit_text,
            query_params=self._tabs[1].edit_text,
            headers=self._tabs[2].edit_text,
            response=self.response,
        )

    def focus_next(self) -> int:
        """Move input focus to the next field, wrapping around; return its index."""
        self._focused = (self._focused + 1) % len(FIELDS)
        self._sync_focus()
        return self._focused

    def next_tab(self) -> int:
        self._select_tab(min(self._active + 1, len(TABS) - 1))
        return self._active

    def previous_tab(self) -> int:
        self._select_tab(max(self._active - 1, 0))
        return self._active

    def active_tab(self) -> int:
        """Index into TABS of the tab being shown."""
        return self._active

    def show_response(self, response: str, status: str) -> None:
        """Display a response body and status line, scrolled to the top."""
        self.response = response
        self.status = status
        self._response_walker[:] = [urwid.Text(line) for line in response.split("\n")]
        if self._response_walker:
            self._response_walker.set_focus(0)
        self._render_status()

    def set_message(self, text: str) -> None:
        """Show a status message in the footer."""
        self._message = text
        self._message_attr = "error_header_text"
        self._render_footer()

    def show_hint(self) -> None:
        """Show the default key hint in the footer."""
        self._message = "+-- " + HINT
        self._message_attr = "header_text"
        self._render_footer()

    # -- input ---------------------------------------------------------------

    def keypress(self, size, key):
        maxcol = size[0]
        if self._focused == TAB_CONTENT_FIELD:
            self._tabs[self._active].keypress((max(maxcol // 2 - 2, 1),), key)
            return None
        if key in _SCROLL_STEPS:
            self._scroll(_SCROLL_STEPS[key])
            return None
        widgets = (
            (self._name, NAME_LIMIT + 3),
            (self._method, METHOD_LIMIT + 9),
            (self._url, max(maxcol - 46, 1)),
        )
        widget, width = widgets[self._focused]
        return widget.keypress((width,), key)

    def mouse_event(self, size, event, button, col, row, focus):
        if "press" in event and button in _WHEEL_STEPS and self._focused != TAB_CONTENT_FIELD:
            self._scroll(_WHEEL_STEPS[button])
            return True
        return False

    # -- rendering helpers ---------------------------------------------------

    def _scroll(self, step: int) -> None:
        if not self._response_walker:
            return
        position = self._response_walker.focus + step
        self._response_walker.set_focus(min(max(position, 0), len(self._response_walker) - 1))

    def _select_tab(self, index: int) -> None:
        self._active = index
        self._tab_holder.original_widget = urwid.Filler(self._tabs[index], valign="top")
        self._render_tabs()

    def _render_tabs(self) -> None:
        for index, (label, name) in enumerate(zip(self._tab_labels, TABS)):
            if index == self._active:
                label.set_text(("tab_active", f" [{name}] "))
            else:
                label.set_text(("tab_inactive", f"  {name}  "))

    def _render_status(self) -> None:
        markup = [("title", " Response: ")]
        if self.status:
            markup += ["  ", ("heading", self.status)]
        self._status_text.set_text(markup)

    def _render_footer(self) -> None:
        markup = [(self._message_attr, self._message)]
        if self._loading:
            markup.insert(0, ("spinner", SPINNER_FRAME))
        self._footer.set_text(markup)

    def _sync_focus(self) -> None:
        boxes = (self._name_box, self._method_box, self._url_box, self._request_panel)
        for index, box in enumerate(boxes):
            box.set_attr_map({None: "focused_border" if index == self._focused else "border"})
        if self._focused == TAB_CONTENT_FIELD:
            self._body.focus_position = 1
            self._main.focus_position = 0
        else:
            self._body.focus_position = 0
            self._top_row.focus_position = self._focused


class _Root(urwid.WidgetPlaceholder):
    """Top-level widget that hands every key to the application."""

    def __init__(self, app: "App", widget: urwid.Widget) -> None:
        self._app = app
        super().__init__(widget)

    def keypress(self, size, key):
        self._app._size = size
        return self._app.handle_key(key)


class App:
    """Switches between the editor, dashboard, help and environment screens."""

    def __init__(self, store: Optional[RequestStore] = None, sender: Optional[Sender] = None) -> None:
        self.store = store if store is not None else RequestStore()
        self._sender = sender if sender is not None else send
        self.editor = RequestEditor()
        self.loop: Optional[urwid.MainLoop] = None
        self.finished = False
        self._size: tuple[int, ...] = (80, 24)
        self._root = _Root(self, self.editor)

    @property
    def screen(self) -> urwid.Widget:
        """The screen currently shown."""
        return self._root.original_widget

    def _show(self, widget: urwid.Widget) -> None:
        self._root.original_widget = widget

    def _back_to_editor(self) -> None:
        self._show(self.editor)

    def _quit(self) -> None:
        self.finished = True
        if self.loop is not None:
            raise urwid.ExitMainLoop()

    def send_current(self):
        """Send the request in the editor and show the formatted reply."""
        editor = self.editor
        editor.loading = True
        editor.set_message(SENDING_MESSAGE)
        request = editor.to_request()
        text, status = self._sender(
            method=request.method,
            url=request.url,
            headers_json=request.headers,
            params_json=request.query_params,
            body=request.body,
        )
        editor.show_response(format_json(text), status)
        editor.loading = False
        editor.set_message(SENT_MESSAGE)
        return text, status

    def save_current(self) -> Optional[Request]:
        """Store the request in the editor; return it as stored, or None on failure."""
        editor = self.editor
        editor.loading = True
        editor.set_message(SAVING_MESSAGE)
        try:
            stored = self.store.save_request(editor.to_request())
        except OSError:
            editor.loading = False
            editor.set_message(SAVE_FAILED_MESSAGE)
            return None
        editor.request_id = stored.id
        editor.loading = False
        editor.set_message(SAVED_MESSAGE)
        return stored

    def show_editor(self, request: Optional[Request] = None) -> RequestEditor:
        """Show a fresh editor, filled from ``request`` when one is given."""
        editor = RequestEditor()
        if request is not None:
            editor.load(request)
        self.editor = editor
        self._show(editor)
        return editor

    def show_dashboard(self) -> Dashboard:
        dashboard = Dashboard(
            self.store,
            on_open=self.show_editor,
            on_new=self.show_editor,
            on_back=self._back_to_editor,
            on_quit=self._quit,
        )
        self._show(dashboard)
        return dashboard

    def show_help(self) -> HelpScreen:
        help_screen = HelpScreen(on_back=self._back_to_editor, on_quit=self._quit)
        self._show(help_screen)
        return help_screen

    def show_environment(self) -> EnvironmentScreen:
        screen = EnvironmentScreen(
            format_json(self.store.variables()),
            on_back=self._back_to_editor,
            on_quit=self._quit,
        )
        self._show(screen)
        return screen

    def _deferred(self, message: str, action: Callable[[], object]) -> None:
        if self.loop is None:
            action()
            return
        self.editor.loading = True
        self.editor.set_message(message)
        self.loop.set_alarm_in(0.05, lambda _loop, _data: action())

    def handle_key(self, key: str):
        """Process one key press for whichever screen is shown."""
        screen = self.screen
        if screen is not self.editor:
            return screen.keypress(self._size, key)

        editor = self.editor
        if key == "ctrl c":
            self._quit()
        elif key == "f2":
            self.show_help()
        elif key == "ctrl right":
            editor.next_tab()
        elif key == "ctrl left":
            editor.previous_tab()
        elif key == "f4":
            self.show_environment()
        elif key == "enter" and editor.focused != TAB_CONTENT_FIELD:
            self._deferred(SENDING_MESSAGE, self.send_current)
        elif key == "ctrl d":
            self.show_dashboard()
        elif key == "ctrl s":
            self._deferred(SAVING_MESSAGE, self.save_current)
        elif key == "tab":
            editor.focus_next()
            editor.show_hint()
        else:
            return editor.keypress(self._size, key)
        return None

    def run(self) -> None:
        """Run the terminal interface until the user quits."""
        self.loop = urwid.MainLoop(self._root, palette(), handle_mouse=True)
        try:
            self.loop.screen.set_terminal_properties(colors=256)
        except (AttributeError, TypeError):
            pass
        try:
            self.loop.run()
        finally:
            self.loop = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="gostman", description="Terminal HTTP client.")
    parser.add_argument("--store", help="path of the JSON file holding saved requests")
    args = parser.parse_args(argv)
    App(RequestStore(args.store)).run()
    return 0