"""Terminal styling and prompt-prefixed log lines."""

from __future__ import annotations

import sys
from enum import Enum, IntEnum
from typing import TextIO


class Style(IntEnum):
    """ANSI SGR codes for text attributes and foreground colours."""

    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    CROSS = 9
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    PURPLE = 35
    CYAN = 36


class Level(Enum):
    """Severity of a log line."""

    PLAIN = "plain"
    SUCCESS = "success"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def style(self) -> Style | None:
        """Colour used for this level, or None for plain output."""
        return _LEVEL_STYLES.get(self)

    @property
    def to_stderr(self) -> bool:
        """Whether lines of this level go to standard error."""
        return self in (Level.WARN, Level.ERROR)


_LEVEL_STYLES = {
    Level.SUCCESS: Style.GREEN,
    Level.INFO: Style.BLUE,
    Level.WARN: Style.YELLOW,
    Level.ERROR: Style.RED,
}


def styled(style: Style, text: str, color: bool = True) -> str:
    """Wrap ``text`` in the escape sequence for ``style`` when colour is on."""
    if not color:
        return text
    return f"\x1b[{int(style)}m{text}\x1b[0m"


def format_log(level: Level, prompt: str, content: str, color: bool = True) -> str:
    """Build a ``prompt: content`` line, colouring the content by level."""
    style = level.style
    if style is None:
        return f"{prompt}: {content}"
    return f"{prompt}: {styled(style, content, color)}"


def log(level: Level, prompt: str, content: str, color: bool = True) -> None:
    """Print a ``prompt: content`` line to stdout, or stderr for warnings and errors."""
    stream = sys.stderr if level.to_stderr else sys.stdout
    print(format_log(level, prompt, content, color), file=stream)


def format_bracket(
    level: Level, prompt1: str, prompt2: str, content: str, color: bool = True
) -> str:
    """Build a ``[prompt1 prompt2] content`` line, coloured by level."""
    style = level.style
    if style is None:
        return f"[{prompt1} {prompt2}] {content}"
    head = styled(style, prompt1, color)
    tag = styled(Style.BOLD, styled(style, prompt2, color), color)
    return f"[{head} {tag}] {styled(style, content, color)}"


def log_bracket(
    level: Level, prompt1: str, prompt2: str, content: str, color: bool = True
) -> None:
    """Print a bracketed log line to stdout, or stderr for warnings and errors."""
    stream = sys.stderr if level.to_stderr else sys.stdout
    print(format_bracket(level, prompt1, prompt2, content, color), file=stream)


def log_bracket_to(prompt: str, content: str, stream: TextIO) -> None:
    """Write an unstyled ``[prompt] content`` line to ``stream``."""
    stream.write(f"[{prompt}] {content}\n")