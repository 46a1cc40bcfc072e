# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI commands exercising an option catalog against a command line."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ..config import ParserSettings
from ..console import detect_tty, enable_debug_logging, fail, get_console_manager, info, ok, warn
from ..errors import ProgOptsError
from ..loader import load_option_specs
from ..processor import OptionsProcessor
from ..reporting import build_report, catalog_table, render_report
from .typer_ext import SortedTyper

EXIT_ILLEGAL_OPTIONS = 1
EXIT_BAD_CATALOG = 2


def parse_command(
    catalog: Path = typer.Option(..., "--catalog", "-c", help="JSON document declaring the options."),
    tokens: list[str] | None = typer.Argument(
        None,
        metavar="[TOKENS]...",
        help="Command line to classify; put it after '--'.",
    ),
    group: list[str] | None = typer.Option(None, "--group", "-g", help="Admit options of this group."),
    offset: int = typer.Option(0, "--offset", min=0, help="Index of the first token to scan."),
    enforce_max_occurs: bool = typer.Option(
        False,
        "--enforce-max-occurs",
        help="Report options repeated more often than declared.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the report as JSON."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji prefixes."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser decisions to stderr."),
) -> None:
    """Classify TOKENS against the options declared in the catalog."""

    if verbose:
        enable_debug_logging()
    use_color = not no_color and detect_tty()
    use_emoji = not no_emoji
    arguments = list(tokens or ())
    settings = ParserSettings(enforce_max_occurs=enforce_max_occurs)
    processor = _load_processor(catalog, settings, use_emoji=use_emoji, use_color=use_color)

    if offset > len(arguments):
        raise typer.BadParameter(f"offset {offset} is past the {len(arguments)} given tokens", param_hint="--offset")
    result = processor.parse(arguments, offset=offset, allowed_groups=group or ())

    if as_json:
        typer.echo(json.dumps(build_report(processor, arguments), indent=2))
    else:
        render_report(get_console_manager().get(color=use_color, emoji=use_emoji), processor, arguments)
        if result:
            ok("No illegal options found", use_emoji=use_emoji, use_color=use_color)
        else:
            warn(f"{len(processor.illegal_options)} illegal option(s) found", use_emoji=use_emoji, use_color=use_color)
    if not result:
        raise typer.Exit(code=EXIT_ILLEGAL_OPTIONS)


def catalog_command(
    catalog: Path = typer.Option(..., "--catalog", "-c", help="JSON document declaring the options."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
) -> None:
    """List the options declared in the catalog."""

    use_color = not no_color and detect_tty()
    processor = _load_processor(catalog, ParserSettings(), use_emoji=True, use_color=use_color)
    get_console_manager().get(color=use_color, emoji=True).print(catalog_table(processor.catalog))
    info(f"{len(processor.catalog)} option(s) declared", use_emoji=False, use_color=use_color)


def _load_processor(
    catalog: Path,
    settings: ParserSettings,
    *,
    use_emoji: bool,
    use_color: bool,
) -> OptionsProcessor:
    try:
        return OptionsProcessor(load_option_specs(catalog), settings)
    except (ProgOptsError, FileNotFoundError) as exc:
        fail(f"Cannot load catalog {catalog}: {exc}", use_emoji=use_emoji, use_color=use_color)
        raise typer.Exit(code=EXIT_BAD_CATALOG) from exc


def register_commands(app: SortedTyper) -> None:
    """Attach the ``parse`` and ``catalog`` commands to ``app``."""

    app.command("parse")(parse_command)
    app.command("catalog")(catalog_command)


__all__ = ["catalog_command", "parse_command", "register_commands"]
