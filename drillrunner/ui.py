"""Terminal styling and status messages."""

from __future__ import annotations

import os

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def no_emoji() -> bool:
    """Return True when the user asked for output without emoji."""
    return "NO_EMOJI" in os.environ


def _style(text: object, code: str) -> str:
    if "NO_COLOR" in os.environ:
        return str(text)
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Render text in bold."""
    return _style(text, _BOLD)


def blue(text: object) -> str:
    """Render text in blue."""
    return _style(text, _BLUE)


def _red(text: object) -> str:
    return _style(text, _RED)


def _green(text: object) -> str:
    return _style(text, _GREEN)


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{_red(marker)} {_red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{_green(marker)} {_green(message)}")