# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option declarations and the fluent builder used to create them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import OptionDeclarationError
from .keys import LongKey, OptionKey, ShortKey


class OptionSpec(BaseModel):
    """Immutable declaration of a single command-line option."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    short: str | None = None
    long: str | None = None
    arity: int = 0
    max_occurs: int = 1
    group: str | None = None

    @model_validator(mode="after")
    def _check_declaration(self) -> OptionSpec:
        """Reject declarations that could never be matched on a command line."""
        if self.short is None and (self.long is None or not self.long.strip()):
            raise OptionDeclarationError("Must specify either short or long option.")
        if self.short is not None:
            if len(self.short) != 1:
                raise OptionDeclarationError(f"Short option must be a single character, got {self.short!r}.")
            if self.short in ("-", "="):
                raise OptionDeclarationError(f"Short option cannot be {self.short!r}.")
        if self.long is not None:
            if not self.long.strip():
                raise OptionDeclarationError("Long option must not be blank.")
            if self.long.startswith("-") or "=" in self.long:
                raise OptionDeclarationError(f"Long option {self.long!r} cannot start with '-' or contain '='.")
        if self.max_occurs < 1:
            raise OptionDeclarationError("MaxOccurs must be at least 1.")
        if self.arity < 0:
            raise OptionDeclarationError("NumberOfParams cannot be negative.")
        return self

    @property
    def keys(self) -> tuple[OptionKey, ...]:
        """Return every key under which the option can be addressed."""

        keys: list[OptionKey] = []
        if self.short is not None:
            keys.append(ShortKey(self.short))
        if self.long is not None:
            keys.append(LongKey(self.long))
        return tuple(keys)

    @property
    def label(self) -> str:
        """Return a display label such as ``-f/--file``."""

        return "/".join(str(key) for key in self.keys)

    def admissible(self, allowed_groups: frozenset[str]) -> bool:
        """Return ``True`` when the option may be used given ``allowed_groups``.

        Args:
            allowed_groups: Group names admitted for the current parse.

        Returns:
            bool: ``True`` for ungrouped options or options whose group is admitted.
        """

        return self.group is None or self.group in allowed_groups


class OptionBuilder:
    """Fluent builder producing validated :class:`OptionSpec` instances."""

    def __init__(self) -> None:
        self._short: str | None = None
        self._long: str | None = None
        self._max_occurs = 1
        self._arity = 0
        self._group: str | None = None

    def with_short(self, char: str) -> OptionBuilder:
        """Set the single-character short key."""

        self._short = char
        return self

    def with_long(self, name: str) -> OptionBuilder:
        """Set the long key, given without leading dashes."""

        self._long = name
        return self

    def with_max_occurs(self, maximum: int) -> OptionBuilder:
        """Set how many occurrences the option may have; must be at least one."""

        self._max_occurs = maximum
        return self

    def with_arity(self, count: int) -> OptionBuilder:
        """Set how many parameters each occurrence consumes."""

        self._arity = count
        return self

    def with_group(self, group: str) -> OptionBuilder:
        """Restrict the option to parses that admit ``group``."""

        self._group = group
        return self

    def build(self) -> OptionSpec:
        """Return the declaration described by the builder.

        Raises:
            OptionDeclarationError: If neither key is set, ``max_occurs`` is below
                one, ``arity`` is negative, or a key is malformed.
        """

        return OptionSpec(
            short=self._short,
            long=self._long,
            arity=self._arity,
            max_occurs=self._max_occurs,
            group=self._group,
        )

    def reset(self) -> OptionBuilder:
        """Restore the builder defaults so it can declare another option."""

        self._short = None
        self._long = None
        self._max_occurs = 1
        self._arity = 0
        self._group = None
        return self


__all__ = ["OptionBuilder", "OptionSpec"]
