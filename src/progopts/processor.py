# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public facade tying the catalog, parse engine and result ledger together."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .catalog import OptionCatalog
from .config import ParserSettings, normalize_groups
from .declarations import OptionSpec
from .engine import ParseEngine, ParseResult
from .keys import KeyLike, option_key
from .ledger import ResultLedger
from .models import IllegalOption, NonOption, ParsedOption

LOGGER = logging.getLogger(__name__)


class OptionsProcessor:
    """Parse command lines against a fixed set of option declarations.

    Every :meth:`parse` starts from an empty ledger unless the settings ask
    for results to accumulate. Query methods accept either a key object or a
    bare name: one-character names address the short form and longer names
    the long form, and both forms of one option answer identically.

    A processor holds mutable per-parse state and must not be shared between
    threads that parse concurrently.

    Example:
        >>> processor = OptionsProcessor([OptionSpec(short="f", long="file", arity=1)])
        >>> bool(processor.parse(["-f", "in.txt", "rest"]))
        True
        >>> processor.get_value("file")
        'in.txt'
    """

    def __init__(self, specs: Iterable[OptionSpec], settings: ParserSettings | None = None) -> None:
        """Index ``specs`` and prepare an empty ledger.

        Args:
            specs: Option declarations accepted by this processor.
            settings: Optional behaviour switches; defaults apply when omitted.

        Raises:
            DuplicateOptionError: If two declarations share a short or long key.
        """

        self._settings = settings or ParserSettings()
        self._catalog = OptionCatalog.build(specs)
        self._ledger = ResultLedger()
        self._engine = ParseEngine(
            self._catalog,
            self._ledger,
            enforce_max_occurs=self._settings.enforce_max_occurs,
        )
        self._allowed_groups: tuple[str, ...] = ()
        self._last_result: ParseResult | None = None

    @property
    def catalog(self) -> OptionCatalog:
        """Return the validated catalog built from the declarations."""

        return self._catalog

    @property
    def settings(self) -> ParserSettings:
        """Return the behaviour switches this processor was created with."""

        return self._settings

    def parse(
        self,
        tokens: Sequence[str],
        offset: int = 0,
        allowed_groups: str | Iterable[str] | None = None,
    ) -> ParseResult:
        """Classify ``tokens`` and record the outcome.

        Args:
            tokens: Full command line.
            offset: Absolute index at which to start scanning.
            allowed_groups: Groups admitted for this parse. A bare string names
                one group. When omitted the settings' ``default_groups`` apply,
                which are empty by default.

        Returns:
            ParseResult: Truthy when no illegal option has been recorded.
        """

        if not self._settings.accumulate_results:
            self._ledger.reset()
        groups = self._settings.default_groups if allowed_groups is None else allowed_groups
        self._allowed_groups = normalize_groups(groups)
        LOGGER.debug("parsing with allowed groups %s", self._allowed_groups or "(none)")
        self._last_result = self._engine.run(tokens, offset, self._allowed_groups)
        return self._last_result

    # Queries -----------------------------------------------------------------

    @property
    def last_result(self) -> ParseResult | None:
        """Return the outcome of the most recent parse, or ``None`` before any parse."""

        return self._last_result

    @property
    def allowed_groups(self) -> tuple[str, ...]:
        """Return the admitted groups used by the most recent parse."""

        return self._allowed_groups

    @property
    def illegal_options(self) -> tuple[IllegalOption, ...]:
        """Return every illegal option recorded, in scan order."""

        return self._ledger.illegal_options

    @property
    def non_options(self) -> tuple[NonOption, ...]:
        """Return every positional token recorded, in scan order."""

        return self._ledger.non_options

    @property
    def parsed_options(self) -> tuple[ParsedOption, ...]:
        """Return every recognised option occurrence, in scan order."""

        return self._ledger.parsed_options

    def option_count(self, key: KeyLike) -> int:
        """Return how many times the option addressed by ``key`` was matched."""

        slot = self._slot(key)
        return 0 if slot is None else self._ledger.option_count(slot)

    def is_present(self, key: KeyLike) -> bool:
        """Return ``True`` when the option addressed by ``key`` matched at least once."""

        slot = self._slot(key)
        return slot is not None and self._ledger.is_present(slot)

    def get_value(self, key: KeyLike, offset: int = 0) -> str | None:
        """Return the single parameter of the ``offset``-th occurrence of ``key``.

        Args:
            key: Key object or bare option name.
            offset: Zero-based occurrence number.

        Returns:
            str | None: The parameter, or ``None`` when the key is undeclared or
            empty, was never matched, the occurrence does not exist, or the
            option does not take exactly one parameter.
        """

        slot = self._slot(key)
        return None if slot is None else self._ledger.param_value(slot, offset)

    def get_list(self, key: KeyLike, offset: int = 0) -> tuple[str, ...] | None:
        """Return the parameters of the ``offset``-th occurrence of a multi-parameter option.

        Args:
            key: Key object or bare option name.
            offset: Zero-based occurrence number.

        Returns:
            tuple[str, ...] | None: The parameters in token order, or ``None``
            when no such multi-parameter occurrence was recorded.
        """

        slot = self._slot(key)
        return None if slot is None else self._ledger.param_list(slot, offset)

    def occurrences(self, key: KeyLike) -> tuple[ParsedOption, ...]:
        """Return every recorded occurrence of ``key``; empty when undeclared or unmatched."""

        slot = self._slot(key)
        return () if slot is None else self._ledger.occurrences(slot)

    def remaining_tokens(self, tokens: Sequence[str]) -> tuple[str, ...]:
        """Return the tokens the most recent parse left unclassified.

        Args:
            tokens: The sequence passed to the most recent :meth:`parse`.

        Returns:
            tuple[str, ...]: Tokens after ``--`` or after a fatal halt; empty
            when the scan consumed everything or no parse has run yet.
        """

        if self._last_result is None:
            return ()
        return tuple(tokens[self._last_result.next_index :])

    def _slot(self, key: KeyLike) -> int | None:
        # an empty name addresses no option
        if isinstance(key, str) and not key:
            return None
        return self._catalog.lookup(option_key(key))


__all__ = ["OptionsProcessor"]
