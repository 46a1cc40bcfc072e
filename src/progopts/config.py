# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model controlling processor behaviour."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_groups(groups: str | Iterable[str]) -> tuple[str, ...]:
    """Return group names in first-seen order without repeats.

    A bare string names a single group; it is never split into characters.

    Args:
        groups: One group name or an iterable of group names.

    Returns:
        tuple[str, ...]: Deduplicated group names.
    """

    if isinstance(groups, str):
        return (groups,)
    return tuple(dict.fromkeys(groups))


class ParserSettings(BaseModel):
    """Behavioural switches for :class:`progopts.processor.OptionsProcessor`.

    Attributes:
        accumulate_results: Keep ledger records from earlier parses instead of
            starting every parse with an empty ledger.
        enforce_max_occurs: Report occurrences beyond an option's declared
            ``max_occurs`` as illegal.
        default_groups: Groups admitted when a parse is given no explicit set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    accumulate_results: bool = False
    enforce_max_occurs: bool = False
    default_groups: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("default_groups", mode="before")
    @classmethod
    def _coerce_groups(cls, value: object) -> object:
        """Accept one name or any iterable of names."""
        if isinstance(value, (str, Iterable)):
            return normalize_groups(value)
        return value


__all__ = ["ParserSettings", "normalize_groups"]
