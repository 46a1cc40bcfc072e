# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Two-variant key type used to address declared options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ShortKey:
    """Single-character option key introduced by one dash (``-f``)."""

    char: str

    def __str__(self) -> str:
        return f"-{self.char}"


@dataclass(frozen=True, slots=True)
class LongKey:
    """Named option key introduced by two dashes (``--file``)."""

    name: str

    def __str__(self) -> str:
        return f"--{self.name}"


OptionKey: TypeAlias = ShortKey | LongKey
KeyLike: TypeAlias = OptionKey | str


def option_key(value: KeyLike) -> OptionKey:
    """Return ``value`` as an :data:`OptionKey`.

    One-character strings address the short form and longer strings the long
    form. Long options whose name is a single character must be addressed
    with an explicit :class:`LongKey`.

    Args:
        value: Key instance or bare option name without leading dashes.

    Returns:
        OptionKey: Normalised key.

    Raises:
        ValueError: If ``value`` is an empty string.
    """

    if isinstance(value, (ShortKey, LongKey)):
        return value
    if not value:
        raise ValueError("option key must not be empty")
    if len(value) == 1:
        return ShortKey(value)
    return LongKey(value)


__all__ = ["KeyLike", "LongKey", "OptionKey", "ShortKey", "option_key"]
