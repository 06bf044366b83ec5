import os
from typing import Optional

from textual.app import App, ComposeResult
from textual import events

from .debug import get_logger
from .keymap import picker_bindings
from .navigation import Event, NavigationController
from .version import __version__
from .widgets import EntryList, HelpPanel


class PathPickerApp(App[Optional[str]]):
    """Full-screen directory picker.

    - Up/Down move the cursor, scrolling one row at a time.
    - Right enters the directory under the cursor; Left goes to the parent.
    - Enter exits returning the current directory; q exits returning None.
    """

    TITLE = "dirpick"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen { layout: vertical; }
    """

    BINDINGS = picker_bindings()

    def __init__(self, start_path: Optional[str] = None, sort: bool = False) -> None:
        super().__init__()
        self.logr = get_logger("app")
        self._debug_keys = bool(os.environ.get("DIRPICK_DEBUG_KEYS"))
        self.start_path = os.path.abspath(start_path or os.getcwd())
        self.sort = sort
        self.controller: Optional[NavigationController] = None

    def compose(self) -> ComposeResult:
        self.help_panel = HelpPanel(id="help")
        self.entry_list = EntryList(id="entries")
        yield self.help_panel
        yield self.entry_list

    def on_mount(self) -> None:
        height = self.size.height
        self.controller = NavigationController.at(self.start_path, height, sort=self.sort)
        self.logr.debug(
            "mounted: path=%s height=%s viewport=%s",
            self.controller.current_path,
            height,
            self.controller.viewport_height,
        )
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        if self.controller is None:
            return
        self._apply(Event.RESIZE, height=event.size.height)

    def on_key(self, event: events.Key) -> None:
        if self._debug_keys:
            self.logr.debug("app.on_key: key=%s char=%s", getattr(event, "key", None), getattr(event, "character", None))

    def _apply(self, event: Event, height: Optional[int] = None) -> None:
        if self.controller is None:
            return
        self.controller.dispatch(event, height=height)
        if self.controller.finished:
            self.exit(self.controller.result())
            return
        self._refresh_view()

    def _refresh_view(self) -> None:
        if self.controller is None:
            return
        view = self.controller.view()
        self.help_panel.set_view(view)
        self.entry_list.set_view(view)

    def action_move_down(self) -> None:
        self._apply(Event.MOVE_DOWN)

    def action_move_up(self) -> None:
        self._apply(Event.MOVE_UP)

    def action_descend(self) -> None:
        self._apply(Event.DESCEND)

    def action_ascend(self) -> None:
        self._apply(Event.ASCEND)

    def action_confirm(self) -> None:
        self._apply(Event.CONFIRM)

    def action_quit(self) -> None:  # type: ignore[override]
        """Leave without reporting a path."""
        if self.controller is None:
            self.exit(None)
            return
        self._apply(Event.QUIT)
