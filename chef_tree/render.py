import logging

from typing import Dict, List, Optional

import attr
from rich.console import Console
from rich.text import Text

log = logging.getLogger(__name__)

# the ansi colors, black is left out as it vanishes on dark terminals
PALETTE = [
    "bright_black",
    "red", "bright_red",
    "green", "bright_green",
    "yellow", "bright_yellow",
    "blue", "bright_blue",
    "magenta", "bright_magenta",
    "cyan", "bright_cyan",
    "white", "bright_white",
    "default",
]

INDENT = "    "


@attr.s(slots=True, auto_attribs=True)
class ColorMap:
    palette: List[str] = attr.ib(factory=lambda: list(PALETTE))
    colors: Dict[str, str] = attr.ib(factory=dict)

    def __getitem__(self, cookbook: str) -> str:
        if cookbook not in self.colors:
            color = self.palette[len(self.colors) % len(self.palette)]
            log.debug("Setting color for cookbook %s to %s", cookbook, color)
            self.colors[cookbook] = color
        return self.colors[cookbook]

    def __len__(self):
        return len(self.colors)


def format_line(depth: int, name: str, version: Optional[str], label: Optional[str]) -> str:
    """a single tree line

    A None label hides the version information altogether, otherwise
    the cookbook version and the label are shown in parentheses.

        >>> format_line(1, "b::setup", "2.1.0", "~> 2.0")
        '    b::setup (2.1.0 ~> 2.0)'
    """
    line = f"{INDENT * depth}{name}"
    if label is None:
        return line
    info = " ".join(item for item in (version, label) if item)
    return f"{line} ({info})"


class Printer:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def __call__(self, line) -> None:
        self.console.print(Text(line.text, style=line.color), soft_wrap=True)
