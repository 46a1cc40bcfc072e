# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render parse outcomes as Rich tables or JSON-compatible payloads."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .catalog import OptionCatalog
from .models import params_as_list
from .processor import OptionsProcessor


def catalog_table(catalog: OptionCatalog) -> Table:
    """Return a table listing every declared option."""

    table = Table(title="Declared options", show_lines=False)
    table.add_column("Slot", justify="right")
    table.add_column("Option", no_wrap=True)
    table.add_column("Arity", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Group")
    for slot, spec in enumerate(catalog):
        table.add_row(str(slot), spec.label, str(spec.arity), str(spec.max_occurs), spec.group or "-")
    return table


def build_report(processor: OptionsProcessor, tokens: Sequence[str]) -> dict[str, Any]:
    """Return a JSON-serialisable summary of the processor's last parse.

    Args:
        processor: Processor that has completed a parse.
        tokens: Token sequence handed to that parse.

    Returns:
        dict[str, Any]: Mapping with ``ok``, ``halt``, ``options``,
        ``nonOptions``, ``illegalOptions`` and ``unprocessed`` entries.
    """

    result = processor.last_result
    catalog = processor.catalog
    return {
        "ok": bool(result),
        "halt": result.halt.value if result is not None else None,
        "nextIndex": result.next_index if result is not None else None,
        "allowedGroups": list(processor.allowed_groups),
        "options": [
            {
                "option": catalog.spec_at(parsed.slot).label,
                "index": parsed.index,
                "adjoining": parsed.adjoining,
                "params": params_as_list(parsed.params),
            }
            for parsed in processor.parsed_options
        ],
        "nonOptions": [{"text": item.text, "index": item.index} for item in processor.non_options],
        "illegalOptions": [
            {"name": item.name, "index": item.index, "code": item.code.value} for item in processor.illegal_options
        ],
        "unprocessed": list(processor.remaining_tokens(tokens)),
    }


def render_report(console: Console, processor: OptionsProcessor, tokens: Sequence[str]) -> None:
    """Print tables for recognised options, positionals and illegal options."""

    catalog = processor.catalog
    if processor.parsed_options:
        options = Table(title="Options")
        options.add_column("Index", justify="right", no_wrap=True)
        options.add_column("Option", no_wrap=True)
        options.add_column("Parameters")
        for parsed in processor.parsed_options:
            params = params_as_list(parsed.params)
            rendered = " ".join(repr(value) for value in params) or "-"
            if parsed.adjoining:
                rendered = f"{rendered} (adjoining)"
            options.add_row(str(parsed.index), catalog.spec_at(parsed.slot).label, Text(rendered))
        console.print(options)

    if processor.non_options:
        positionals = Table(title="Positional arguments")
        positionals.add_column("Index", justify="right", no_wrap=True)
        positionals.add_column("Text")
        for item in processor.non_options:
            positionals.add_row(str(item.index), Text(item.text))
        console.print(positionals)

    if processor.illegal_options:
        illegal = Table(title="Illegal options")
        illegal.add_column("Index", justify="right", no_wrap=True)
        illegal.add_column("Name", no_wrap=True)
        illegal.add_column("Error", no_wrap=True)
        illegal.add_column("Meaning")
        for item in processor.illegal_options:
            illegal.add_row(str(item.index), Text(item.name), item.code.value, item.code.description)
        console.print(illegal)

    leftover = processor.remaining_tokens(tokens)
    if leftover:
        console.print(Text(f"Unprocessed tokens: {' '.join(leftover)}"))


__all__ = ["build_report", "catalog_table", "render_report"]
