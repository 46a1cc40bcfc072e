# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""State machine classifying command-line tokens against an option catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .catalog import OptionCatalog
from .cursor import RewindableCursor
from .declarations import OptionSpec
from .errors import ErrorCode
from .ledger import ResultLedger
from .models import IllegalOption, NonOption, ParsedOption, SingleParam, params_for

LOGGER = logging.getLogger(__name__)

END_OF_OPTIONS: Final[str] = "--"
STDIN_MARKER: Final[str] = "-"
EQUAL_FIRST_CHAR_NAME: Final[str] = "--="


class HaltReason(str, Enum):
    """Why a scan stopped."""

    EXHAUSTED = "exhausted"
    END_OF_OPTIONS = "end-of-options"
    FATAL = "fatal"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of a single scan.

    Attributes:
        ok: ``True`` when the ledger holds no illegal options after the scan.
        halt: Reason the scan stopped.
        stop_index: Absolute index of the last token the scan consumed, or
            ``None`` when it consumed nothing.
        next_index: Absolute index of the first token the scan did not
            classify. Tokens from here on (after ``--`` or a fatal halt) are
            left for the caller; equals the sequence length when exhausted.
    """

    ok: bool
    halt: HaltReason
    stop_index: int | None
    next_index: int

    def __bool__(self) -> bool:
        return self.ok


class ParseEngine:
    """Drive a left-to-right scan of tokens and record outcomes in a ledger."""

    def __init__(
        self,
        catalog: OptionCatalog,
        ledger: ResultLedger,
        *,
        enforce_max_occurs: bool = False,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._enforce_max_occurs = enforce_max_occurs

    def run(
        self,
        tokens: Sequence[str],
        offset: int = 0,
        allowed_groups: Iterable[str] | None = None,
    ) -> ParseResult:
        """Scan ``tokens`` from ``offset`` and record every outcome.

        Args:
            tokens: Full command line, usually ``sys.argv[1:]``.
            offset: Absolute index at which scanning starts.
            allowed_groups: Groups admitted for this scan. ``None`` admits no
                group, so only ungrouped options can match.

        Returns:
            ParseResult: Scan outcome; truthy when no illegal option was recorded.
        """

        cursor = RewindableCursor(tokens, offset)
        scan = _Scan(
            catalog=self._catalog,
            ledger=self._ledger,
            cursor=cursor,
            allowed=frozenset(allowed_groups or ()),
            enforce_max_occurs=self._enforce_max_occurs,
        )
        LOGGER.debug("scanning %d tokens from offset %d", cursor.original_count, offset)
        halt = scan.run()
        position = cursor.position
        result = ParseResult(
            ok=not self._ledger.has_errors,
            halt=halt,
            stop_index=position - 1 if position > offset else None,
            next_index=position,
        )
        LOGGER.debug("scan stopped (%s) before index %d", halt.value, position)
        return result


@dataclass(slots=True)
class _Scan:
    """Per-invocation scan state."""

    catalog: OptionCatalog
    ledger: ResultLedger
    cursor: RewindableCursor
    allowed: frozenset[str]
    enforce_max_occurs: bool

    def run(self) -> HaltReason:
        while not self.cursor.is_empty:
            token, index = self.cursor.pop_front()
            if token == END_OF_OPTIONS:
                return HaltReason.END_OF_OPTIONS
            if token.startswith(END_OF_OPTIONS):
                if not self._long_option(token[2:], index):
                    return HaltReason.FATAL
            elif token == STDIN_MARKER or not token.startswith(STDIN_MARKER):
                self.ledger.record_non_option(NonOption(text=token, index=index))
            elif not self._short_bundle(token[1:], index):
                return HaltReason.FATAL
        return HaltReason.EXHAUSTED

    # Rules -------------------------------------------------------------------

    def _long_option(self, body: str, index: int) -> bool:
        """Handle the text after ``--``; return ``False`` to halt the scan."""

        name, equals, value = body.partition("=")
        if equals and not name:
            self._illegal(EQUAL_FIRST_CHAR_NAME, index, ErrorCode.EQUAL_FIRST_CHAR)
            return True

        resolved = self._admit(self.catalog.lookup_long(name))
        if resolved is None:
            self._illegal(name, index, ErrorCode.OPTION_NOT_SPECIFIED)
            return True
        slot, spec = resolved

        if equals:
            if spec.arity != 1:
                self._illegal(name, index, ErrorCode.EQUAL_OPTION_NOT_SINGLE_PARAM)
                return True
            if not value:
                self._illegal(name, index, ErrorCode.EQUAL_OPTION_EMPTY_PARAMETER)
            option = ParsedOption(index=index, slot=slot, params=SingleParam(value=value))
            self._record(name, spec, option)
            return True

        if spec.arity > self.cursor.remaining:
            return self._not_enough_params(name, index)
        self._record(name, spec, self._with_following_params(slot, spec, index))
        return True

    def _short_bundle(self, body: str, index: int) -> bool:
        """Handle the characters after a single dash; return ``False`` to halt."""

        last = len(body) - 1
        for position, char in enumerate(body):
            resolved = self._admit(self.catalog.lookup_short(char))
            if resolved is None:
                self._illegal(char, index, ErrorCode.OPTION_NOT_SPECIFIED)
                continue
            slot, spec = resolved

            if position == last:
                if spec.arity > self.cursor.remaining:
                    return self._not_enough_params(char, index)
                self._record(char, spec, self._with_following_params(slot, spec, index))
            elif spec.arity == 0:
                self._record(char, spec, ParsedOption(index=index, slot=slot))
            elif spec.arity == 1:
                adjoining = SingleParam(value=body[position + 1 :])
                self._record(char, spec, ParsedOption(index=index, adjoining=True, slot=slot, params=adjoining))
                break
            else:
                self._illegal(char, index, ErrorCode.ADJOINING_OPTION_NOT_SINGLE_PARAM)
                LOGGER.debug("bundled option -%s at index %d needs %d parameters", char, index, spec.arity)
                return False
        return True

    # Helpers -----------------------------------------------------------------

    def _admit(self, slot: int | None) -> tuple[int, OptionSpec] | None:
        if slot is None:
            return None
        spec = self.catalog.spec_at(slot)
        if not spec.admissible(self.allowed):
            return None
        return slot, spec

    def _with_following_params(self, slot: int, spec: OptionSpec, index: int) -> ParsedOption:
        values = tuple(self.cursor.pop_front()[0] for _ in range(spec.arity))
        return ParsedOption(index=index, slot=slot, params=params_for(values, spec.arity))

    def _not_enough_params(self, name: str, index: int) -> bool:
        self._illegal(name, index, ErrorCode.OPTION_NOT_ENOUGH_PARAMS)
        LOGGER.debug("option %r at index %d is missing parameters; halting", name, index)
        return False

    def _illegal(self, name: str, index: int, code: ErrorCode) -> None:
        self.ledger.record_illegal(IllegalOption(name=name, index=index, code=code))

    def _record(self, name: str, spec: OptionSpec, option: ParsedOption) -> None:
        if self.enforce_max_occurs and self.ledger.option_count(option.slot) >= spec.max_occurs:
            self._illegal(name, option.index, ErrorCode.OPTION_TOO_MANY_OCCURRENCES)
            return
        self.ledger.record_option(option)


__all__ = ["END_OF_OPTIONS", "HaltReason", "ParseEngine", "ParseResult"]
