from textual.binding import Binding


# Centralized default key bindings for the picker.
# Each action maps onto one navigation event.


def picker_bindings() -> list[Binding]:
    return [
        Binding("down", "move_down", "Down", show=False),
        Binding("up", "move_up", "Up", show=False),
        Binding("right", "descend", "Forward", show=False),
        Binding("left", "ascend", "Back", show=False),
        Binding("enter", "confirm", "Open", show=False),
        Binding("q", "quit", "Exit", show=False),
    ]
