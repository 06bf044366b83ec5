"""Cursor, scroll and directory state for the picker.

``NavigationController`` owns a :class:`DirectoryModel` and the viewport over
its entries. Every operation leaves the selected row inside the visible window:
``scroll_offset <= selected_index <= scroll_offset + viewport_height - 1``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .debug import get_logger
from .models import DirectoryEntry, DirectoryModel

# help panel (4 lines + border) and the list border
CHROME_ROWS = 8


def viewport_for_height(terminal_height: int) -> int:
    return max(1, int(terminal_height) - CHROME_ROWS)


class Event(enum.Enum):
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    DESCEND = "descend"
    ASCEND = "ascend"
    CONFIRM = "confirm"
    RESIZE = "resize"
    QUIT = "quit"


@dataclass(frozen=True)
class NavigationView:
    """Read-only snapshot handed to the renderer after each event."""

    current_path: str
    entries: Tuple[DirectoryEntry, ...]
    selected_index: int
    scroll_offset: int
    viewport_height: int

    def visible_rows(self) -> range:
        end = min(len(self.entries), self.scroll_offset + self.viewport_height)
        return range(self.scroll_offset, end)


class NavigationController:
    def __init__(self, model: DirectoryModel, terminal_height: int) -> None:
        self.logr = get_logger("nav")
        self.model = model
        self.selected_index = 0
        self.scroll_offset = 0
        self.viewport_height = viewport_for_height(terminal_height)
        self.accepted = False
        self.finished = False

    @classmethod
    def at(cls, path: str, terminal_height: int, sort: bool = False) -> "NavigationController":
        return cls(DirectoryModel.open(path, sort=sort), terminal_height)

    @property
    def entries(self) -> Tuple[DirectoryEntry, ...]:
        return self.model.entries

    @property
    def current_path(self) -> str:
        return self.model.current_path

    def view(self) -> NavigationView:
        return NavigationView(
            current_path=self.model.current_path,
            entries=self.model.entries,
            selected_index=self.selected_index,
            scroll_offset=self.scroll_offset,
            viewport_height=self.viewport_height,
        )

    def result(self) -> Optional[str]:
        """Path to report to the caller, or None when the user quit."""
        if self.accepted:
            return self.model.current_path
        return None

    def dispatch(self, event: Event, height: Optional[int] = None) -> bool:
        """Apply one event. Returns True when the event changed anything."""
        if self.finished:
            self.logr.debug("dispatch after finish ignored: %s", event.value)
            return False
        if event is Event.RESIZE:
            if height is None:
                raise ValueError("RESIZE requires a terminal height")
            return self.resize(height)
        handler = {
            Event.MOVE_DOWN: self.move_down,
            Event.MOVE_UP: self.move_up,
            Event.DESCEND: self.descend,
            Event.ASCEND: self.ascend,
            Event.CONFIRM: self.confirm,
            Event.QUIT: self.quit,
        }[event]
        return handler()

    def move_down(self) -> bool:
        if not self.entries or self.selected_index >= len(self.entries) - 1:
            return False
        self.selected_index += 1
        if self.selected_index - self.scroll_offset + 1 > self.viewport_height:
            self.scroll_offset += 1
        return True

    def move_up(self) -> bool:
        if self.selected_index == 0:
            return False
        self.selected_index -= 1
        if self.selected_index < self.scroll_offset:
            self.scroll_offset -= 1
        return True

    def descend(self) -> bool:
        new_path, ok = self.model.descend(self.selected_index)
        if not ok:
            self.logr.debug("descend refused: index=%s path=%s", self.selected_index, self.model.current_path)
            return False
        self.model = self.model.reload(new_path)
        self._reset_cursor()
        self.logr.debug("descend: path=%s entries=%s", self.model.current_path, len(self.model.entries))
        return True

    def ascend(self) -> bool:
        # reload even at the root so the listing stays authoritative
        self.model = self.model.reload(self.model.ascend())
        self._reset_cursor()
        self.logr.debug("ascend: path=%s entries=%s", self.model.current_path, len(self.model.entries))
        return True

    def confirm(self) -> bool:
        self.accepted = True
        self.finished = True
        self.logr.debug("confirm: path=%s", self.model.current_path)
        return True

    def quit(self) -> bool:
        self.finished = True
        self.logr.debug("quit")
        return True

    def resize(self, terminal_height: int) -> bool:
        self.viewport_height = viewport_for_height(terminal_height)
        bottom = self.scroll_offset + self.viewport_height - 1
        if self.selected_index > bottom:
            self.selected_index = bottom
        self.logr.debug(
            "resize: height=%s viewport=%s selected=%s offset=%s",
            terminal_height,
            self.viewport_height,
            self.selected_index,
            self.scroll_offset,
        )
        return True

    def _reset_cursor(self) -> None:
        self.selected_index = 0
        self.scroll_offset = 0
