# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from progopts import OptionBuilder, OptionSpec, OptionsProcessor


@pytest.fixture
def grep_specs() -> list[OptionSpec]:
    """Return declarations modelled on a grep-like tool."""
    builder = OptionBuilder()
    return [
        builder.reset().with_short("i").with_long("ignore-case").build(),
        builder.reset().with_short("P").with_long("perl-regexp").build(),
        builder.reset().with_short("o").with_long("only-matching").build(),
        builder.reset().with_short("e").with_long("regexp").with_arity(1).with_max_occurs(5).build(),
        builder.reset().with_short("f").with_long("file").with_arity(1).with_group("io").build(),
        builder.reset().with_short("r").with_long("range").with_arity(2).build(),
        builder.reset().with_long("colour").with_arity(1).build(),
    ]


@pytest.fixture
def processor(grep_specs: list[OptionSpec]) -> OptionsProcessor:
    return OptionsProcessor(grep_specs)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small catalog document and return its path."""
    document = {
        "options": [
            {"short": "f", "long": "file", "arity": 1, "group": "Hello"},
            {"short": "n", "long": "max-count", "arity": 1, "group": "Count"},
            {"short": "v", "long": "verbose"},
            {"short": "r", "long": "range", "arity": 2},
        ],
    }
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
