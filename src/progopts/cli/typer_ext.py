# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application whose command help lists options alphabetically."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import typer
from click import Argument, Context, HelpFormatter, Parameter
from typer.core import TyperCommand


class SortedTyperCommand(TyperCommand):
    """Command that prints arguments first, then options sorted by long name."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Write the ``Arguments`` and ``Options`` help sections.

        Args:
            ctx: Click context of the command being described.
            formatter: Formatter receiving the definition lists.
        """

        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if isinstance(param, Argument):
                arguments.append(record)
            else:
                options.append((_sort_name(param), record))

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            # sorted() is stable, so options sharing a name keep declaration order
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in sorted(options, key=lambda entry: entry[0])])


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application registering every command as a :class:`SortedTyperCommand`."""

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(**kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` built with ``kwargs``."""

    return SortedTyper(**kwargs)


def _sort_name(param: Parameter) -> str:
    names = [*param.opts, *param.secondary_opts]
    long_names = [name for name in names if name.startswith("--")]
    chosen = long_names[0] if long_names else (names[0] if names else param.name or "")
    return chosen.lstrip("-").lower()


__all__ = ["SortedTyper", "SortedTyperCommand", "create_typer"]
