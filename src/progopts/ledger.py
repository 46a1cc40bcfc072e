# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Append-only ledger of parse outcomes and the queries answered from it."""

from __future__ import annotations

from collections import defaultdict

from .models import IllegalOption, MultiParams, NonOption, NoParams, ParsedOption, SingleParam


class ResultLedger:
    """Accumulate parsed options, illegal options and positional tokens.

    Parsed options are grouped by catalog slot so occurrence queries do not
    need to scan the whole ledger. Records are never modified or removed
    except by :meth:`reset`.
    """

    def __init__(self) -> None:
        self._parsed: list[ParsedOption] = []
        self._by_slot: defaultdict[int, list[ParsedOption]] = defaultdict(list)
        self._illegal: list[IllegalOption] = []
        self._non_options: list[NonOption] = []

    # Recording ---------------------------------------------------------------

    def record_option(self, option: ParsedOption) -> None:
        """Append a recognised occurrence and index it under its slot."""

        self._parsed.append(option)
        self._by_slot[option.slot].append(option)

    def record_illegal(self, illegal: IllegalOption) -> None:
        """Append an illegal option."""

        self._illegal.append(illegal)

    def record_non_option(self, non_option: NonOption) -> None:
        """Append a positional token."""

        self._non_options.append(non_option)

    def reset(self) -> None:
        """Discard every record."""

        self._parsed.clear()
        self._by_slot.clear()
        self._illegal.clear()
        self._non_options.clear()

    # Queries -----------------------------------------------------------------

    @property
    def parsed_options(self) -> tuple[ParsedOption, ...]:
        """Return every recognised occurrence in scan order."""

        return tuple(self._parsed)

    @property
    def illegal_options(self) -> tuple[IllegalOption, ...]:
        """Return every illegal option in scan order."""

        return tuple(self._illegal)

    @property
    def non_options(self) -> tuple[NonOption, ...]:
        """Return every positional token in scan order."""

        return tuple(self._non_options)

    @property
    def has_errors(self) -> bool:
        """Return ``True`` once any illegal option has been recorded."""

        return bool(self._illegal)

    def occurrences(self, slot: int) -> tuple[ParsedOption, ...]:
        """Return the recorded occurrences of the option in ``slot``."""

        return tuple(self._by_slot.get(slot, ()))

    def option_count(self, slot: int) -> int:
        """Return how many occurrences were recorded for ``slot``."""

        return len(self._by_slot.get(slot, ()))

    def is_present(self, slot: int) -> bool:
        """Return ``True`` when ``slot`` has at least one occurrence."""

        return self.option_count(slot) > 0

    def occurrence(self, slot: int, offset: int = 0) -> ParsedOption | None:
        """Return the occurrence at ``offset`` for ``slot`` or ``None`` when absent."""

        entries = self._by_slot.get(slot, ())
        if offset < 0 or offset >= len(entries):
            return None
        return entries[offset]

    def param_value(self, slot: int, offset: int = 0) -> str | None:
        """Return the single parameter of an occurrence.

        Args:
            slot: Catalog slot of the option.
            offset: Zero-based occurrence number (``-i a -i b`` has offsets 0 and 1).

        Returns:
            str | None: The parameter, or ``None`` when the occurrence is absent
            or does not carry exactly one parameter.
        """

        found = self.occurrence(slot, offset)
        if found is None:
            return None
        match found.params:
            case SingleParam(value=value):
                return value
            case NoParams() | MultiParams():
                return None

    def param_list(self, slot: int, offset: int = 0) -> tuple[str, ...] | None:
        """Return the parameter sequence of a multi-parameter occurrence.

        Args:
            slot: Catalog slot of the option.
            offset: Zero-based occurrence number.

        Returns:
            tuple[str, ...] | None: The parameters in token order, or ``None``
            when the occurrence is absent or is not a multi-parameter one.
        """

        found = self.occurrence(slot, offset)
        if found is None:
            return None
        match found.params:
            case MultiParams(values=values):
                return values
            case NoParams() | SingleParam():
                return None


__all__ = ["ResultLedger"]
