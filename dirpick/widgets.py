from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from .icons import icon_for
from .navigation import NavigationView
from .tips import picker_help_lines

SELECTED_STYLE = Style(bgcolor="bright_black")
HIGHLIGHT_SYMBOL = "▶ "

# one entry is one screen row, so control characters in names are shown escaped
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7f)}
_CONTROL_ESCAPES.update({ord("\n"): "\\n", ord("\r"): "\\r", ord("\t"): "\\t"})


def display_name(name: str) -> str:
    return name.translate(_CONTROL_ESCAPES)


class HelpPanel(Static):
    """Bordered header with the current path and the key summary."""

    DEFAULT_CSS = """
    HelpPanel {
        height: 6;
        border: thick rgb(82,165,163);
        color: rgb(82,165,163);
        padding: 0;
    }
    """

    def on_mount(self) -> None:
        self.border_title = " Explorer "

    def set_view(self, view: NavigationView) -> None:
        self.update(Text("\n".join(picker_help_lines(display_name(view.current_path))), no_wrap=True, overflow="ellipsis"))


class EntryList(Static):
    """Entry rows inside the current scroll window.

    Rows are cut to ``viewport_height`` so the widget never scrolls on its
    own; the controller decides what is visible.
    """

    DEFAULT_CSS = """
    EntryList {
        height: 1fr;
        border: solid $secondary;
        padding: 0;
        overflow: hidden;
    }
    """

    def set_view(self, view: NavigationView) -> None:
        self.update(render_rows(view))


def render_rows(view: NavigationView) -> Text:
    out = Text(no_wrap=True, overflow="ellipsis")
    rows = view.visible_rows()
    for row in rows:
        entry = view.entries[row]
        label = f"{icon_for(entry)} {display_name(entry.name)}"
        if row == view.selected_index:
            out.append(HIGHLIGHT_SYMBOL + label, style=SELECTED_STYLE)
        else:
            out.append(" " * len(HIGHLIGHT_SYMBOL) + label)
        if row != rows[-1]:
            out.append("\n")
    return out
