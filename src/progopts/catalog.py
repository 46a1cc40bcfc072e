# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validated index of declared options keyed by short and long form."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .declarations import OptionSpec
from .errors import DuplicateOptionError
from .keys import LongKey, OptionKey, ShortKey

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptionCatalog:
    """Declared options indexed by short character and long name.

    Lookups return a *slot*, the position of the declaration in :attr:`specs`.
    Short and long lookups of the same option yield the same slot, which is
    the identity the result ledger records occurrences under.
    """

    specs: tuple[OptionSpec, ...]
    _by_short: Mapping[str, int]
    _by_long: Mapping[str, int]

    @classmethod
    def build(cls, specs: Iterable[OptionSpec]) -> OptionCatalog:
        """Return a catalog for ``specs`` after checking key uniqueness.

        Args:
            specs: Option declarations in slot order.

        Returns:
            OptionCatalog: Catalog indexing every declared key.

        Raises:
            DuplicateOptionError: If any short key or any long key is declared
                more than once. Every duplicate is listed.
        """

        ordered = tuple(specs)
        short_counts = Counter(spec.short for spec in ordered if spec.short is not None)
        long_counts = Counter(spec.long for spec in ordered if spec.long is not None)
        duplicates = tuple(
            [str(ShortKey(char)) for char, count in short_counts.items() if count > 1]
            + [str(LongKey(name)) for name, count in long_counts.items() if count > 1],
        )
        if duplicates:
            raise DuplicateOptionError(duplicates)

        by_short = {spec.short: slot for slot, spec in enumerate(ordered) if spec.short is not None}
        by_long = {spec.long: slot for slot, spec in enumerate(ordered) if spec.long is not None}
        LOGGER.debug("built option catalog with %d declarations", len(ordered))
        return cls(ordered, MappingProxyType(by_short), MappingProxyType(by_long))

    def lookup_short(self, char: str) -> int | None:
        """Return the slot declaring short key ``char``.

        Args:
            char: Option character without the leading dash.

        Returns:
            int | None: Slot index, or ``None`` when no declaration uses ``char``.
        """

        return self._by_short.get(char)

    def lookup_long(self, name: str) -> int | None:
        """Return the slot declaring long key ``name``, or ``None`` when undeclared."""

        return self._by_long.get(name)

    def lookup(self, key: OptionKey) -> int | None:
        """Return the slot addressed by ``key`` or ``None`` when undeclared."""

        match key:
            case ShortKey(char=char):
                return self.lookup_short(char)
            case LongKey(name=name):
                return self.lookup_long(name)

    def spec_at(self, slot: int) -> OptionSpec:
        """Return the declaration stored in ``slot``.

        Raises:
            IndexError: If ``slot`` is not a valid slot.
        """

        return self.specs[slot]

    def resolve(self, key: OptionKey) -> tuple[int, OptionSpec] | None:
        """Return the slot and declaration addressed by ``key``."""

        slot = self.lookup(key)
        if slot is None:
            return None
        return slot, self.specs[slot]

    def __len__(self) -> int:
        return len(self.specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.specs)


__all__ = ["OptionCatalog"]
