"""Shared logging utilities for the singleton Logger.

Defines the ordered severity levels and the exact entry format written
to the output stream:

    <counter>\\t[<LEVEL>]\\n\\t<message>\\n
"""

from enum import IntEnum


class Level(IntEnum):
    """Message severity. A logger's threshold drops anything below it."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


DEFAULT_LEVEL = Level.DEBUG


def level_label(level: Level) -> str:
    """Return the bracketed label used in output, e.g. ``[INFO]``."""
    return f"[{Level(level).name}]"


def parse_level(value: Level | int | str) -> Level:
    """Convert a Level, an int or a level name (any case) into a Level.

    Raises:
        ValueError: if the value names no known level.
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, int):
        return Level(value)
    name = str(value).strip().upper()
    try:
        return Level[name]
    except KeyError:
        valid = ", ".join(lvl.name for lvl in Level)
        raise ValueError(f"Unknown log level '{value}' (expected one of {valid})") from None


class LogMessage:
    """A single message handed to the logger. Never stored."""

    def __init__(self, text: str, level: Level | str = DEFAULT_LEVEL):
        self.text = text
        self.level = parse_level(level)

    def format(self, counter: int) -> str:
        """Render this message as an output entry with the given counter."""
        return f"{counter}\t{level_label(self.level)}\n\t{self.text}\n"

    def __repr__(self) -> str:
        return f"LogMessage({self.text!r}, {self.level.name})"
