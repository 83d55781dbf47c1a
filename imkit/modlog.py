"""A configurable logger whose levels carry their own prefix and colours."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Sequence

from imkit.textio import _cformat

RESET = "\033[0m"

BOLD = "\033[1m"
DIM = "\033[2m"
ITALIC = "\033[3m"
UNDERLINE = "\033[4m"
BLINK = "\033[5m"
INVERSE = "\033[7m"
HIDDEN = "\033[8m"
STRIKETHROUGH = "\033[9m"

FG_DEFAULT = "\033[39m"
FG_BLACK = "\033[30m"
FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_WHITE = "\033[37m"
FG_BRIGHT_BLACK = "\033[90m"
FG_BRIGHT_RED = "\033[91m"
FG_BRIGHT_GREEN = "\033[92m"
FG_BRIGHT_YELLOW = "\033[93m"
FG_BRIGHT_BLUE = "\033[94m"
FG_BRIGHT_MAGENTA = "\033[95m"
FG_BRIGHT_CYAN = "\033[96m"
FG_BRIGHT_WHITE = "\033[97m"

BG_DEFAULT = "\033[49m"
BG_BLACK = "\033[40m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"
BG_BRIGHT_BLACK = "\033[100m"
BG_BRIGHT_RED = "\033[101m"
BG_BRIGHT_GREEN = "\033[102m"
BG_BRIGHT_YELLOW = "\033[103m"
BG_BRIGHT_BLUE = "\033[104m"
BG_BRIGHT_MAGENTA = "\033[105m"
BG_BRIGHT_CYAN = "\033[106m"
BG_BRIGHT_WHITE = "\033[107m"

MAX_LEVELS = 8


@dataclass(frozen=True)
class ModLogLevel:
    """How one priority is rendered: prefix and its colours, then text colours."""

    priority: int
    prefix: str
    pre_bg: str = ""
    pre_fg: str = ""
    txt_bg: str = ""
    txt_fg: str = ""


@dataclass
class ModLog:
    """A logger with a priority mask and up to eight rendered levels."""

    mask: int
    levels: Sequence[ModLogLevel] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.levels = tuple(self.levels)
        if len(self.levels) > MAX_LEVELS:
            raise ValueError(f"a ModLog holds at most {MAX_LEVELS} levels")

    def format(self, priority: int, fmt: str, *args: Any) -> str | None:
        """Render a message, or return ``None`` if it would not be logged."""
        if priority < 0 or not self.mask & (1 << priority):
            return None
        level = next((lv for lv in self.levels if lv.priority == priority), None)
        if level is None:
            return None
        text, _ = _cformat(fmt, args)
        return (
            f"{level.pre_bg}{level.pre_fg}{level.prefix}{RESET} "
            f"{level.txt_bg}{level.txt_fg}{text}{RESET}"
        )

    def log(self, priority: int, fmt: str, *args: Any) -> None:
        """Write a message to standard output if its priority is enabled."""
        text = self.format(priority, fmt, *args)
        if text is not None:
            sys.stdout.write(text)