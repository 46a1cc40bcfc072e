# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status lines and Rich consoles used by the ``progopts`` CLI."""

from __future__ import annotations

import logging
import sys
from typing import Final

from rich.console import Console
from rich.text import Text

# level -> (emoji prefix, style)
_TONES: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}


def detect_tty() -> bool:
    """Return ``True`` when stdout is a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class ConsoleManager:
    """Hand out one Rich :class:`Console` per colour/emoji combination."""

    def __init__(self) -> None:
        self._consoles: dict[tuple[bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console for the requested output preferences.

        Args:
            color: Emit ANSI styling.
            emoji: Let Rich expand ``:name:`` emoji codes.

        Returns:
            Console: Console shared by every caller asking for the same pair.
        """

        key = (color, emoji)
        console = self._consoles.get(key)
        if console is None:
            console = Console(no_color=not color, highlight=False, emoji=emoji, soft_wrap=True)
            self._consoles[key] = console
        return console


_MANAGER = ConsoleManager()


def get_console_manager() -> ConsoleManager:
    return _MANAGER


def _announce(tone: str, msg: str, *, use_emoji: bool, use_color: bool) -> None:
    prefix, style = _TONES[tone]
    text = Text(f"{prefix}{msg}" if use_emoji else msg)
    if use_color:
        text.stylize(style)
    _MANAGER.get(color=use_color, emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool) -> None:
    _announce("info", msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool) -> None:
    _announce("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool) -> None:
    _announce("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool) -> None:
    _announce("fail", msg, use_emoji=use_emoji, use_color=use_color)


def enable_debug_logging() -> None:
    """Send ``progopts`` debug records to stderr; repeated calls add no handlers."""

    logger = logging.getLogger("progopts")
    if any(getattr(handler, "name", None) == "progopts-verbose" for handler in logger.handlers):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.set_name("progopts-verbose")
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


__all__ = [
    "ConsoleManager",
    "detect_tty",
    "enable_debug_logging",
    "fail",
    "get_console_manager",
    "info",
    "ok",
    "warn",
]
