from typing import List


def picker_help_lines(current_path: str) -> List[str]:
    """Lines shown in the help panel above the entry list."""
    return [
        f"current path: {current_path}",
        "Quick help:",
        "           <ENTER>:open  <RIGHT>:forward   <LEFT>:back    <UP>:up   <DOWN>:down",
        "               <Q>:exit",
    ]
