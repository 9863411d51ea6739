"""Coloured, emoji-decorated status messages for the terminal."""

from __future__ import annotations

import os

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_COLORS = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}


def colored(text: object, color: str) -> str:
    """Wrap ``text`` in the ANSI escape codes for ``color``."""
    try:
        code = _COLORS[color]
    except KeyError:
        raise ValueError(f"unknown color: {color!r}") from None
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Wrap ``text`` in the ANSI escape codes for bold output."""
    return f"{_BOLD}{text}{_RESET}"


def no_emoji() -> bool:
    """Whether the user asked for plain symbols instead of emoji."""
    return "NO_EMOJI" in os.environ


def _announce(message: str, color: str, emoji: str, fallback: str) -> str:
    symbol = fallback if no_emoji() else emoji
    line = f"{colored(symbol, color)} {colored(message, color)}"
    print(line)
    return line


def warn(message: str) -> str:
    """Print a red warning line and return it."""
    return _announce(message, "red", "⚠️ ", "!")


def success(message: str) -> str:
    """Print a green success line and return it."""
    return _announce(message, "green", "✅", "✓")