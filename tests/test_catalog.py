# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for building and querying the option catalog."""

from __future__ import annotations

import pytest

from progopts import DuplicateOptionError, LongKey, OptionCatalog, OptionSpec, ShortKey


def test_short_and_long_lookups_share_a_slot() -> None:
    catalog = OptionCatalog.build(
        [OptionSpec(short="v", long="verbose"), OptionSpec(short="f", long="file", arity=1)],
    )

    assert len(catalog) == 2
    assert catalog.lookup_short("f") == 1
    assert catalog.lookup_long("file") == 1
    assert catalog.lookup(ShortKey("v")) == catalog.lookup(LongKey("verbose")) == 0
    assert catalog.spec_at(1).arity == 1
    assert catalog.resolve(LongKey("missing")) is None
    assert [spec.label for spec in catalog] == ["-v/--verbose", "-f/--file"]


def test_options_without_one_form_do_not_collide() -> None:
    catalog = OptionCatalog.build(
        [OptionSpec(long="colour"), OptionSpec(long="size"), OptionSpec(short="a"), OptionSpec(short="b")],
    )

    assert catalog.lookup_long("size") == 1
    assert catalog.lookup_short("b") == 3
    assert catalog.lookup_short("c") is None


def test_duplicates_are_all_reported() -> None:
    specs = [
        OptionSpec(short="a", long="alpha"),
        OptionSpec(short="a", long="apple"),
        OptionSpec(short="b", long="alpha"),
        OptionSpec(short="c", long="apple"),
    ]

    with pytest.raises(DuplicateOptionError) as excinfo:
        OptionCatalog.build(specs)

    assert excinfo.value.duplicates == ("-a", "--alpha", "--apple")
    message = str(excinfo.value)
    assert "option -a specified more than once" in message
    assert "option --alpha specified more than once" in message
    assert "option --apple specified more than once" in message


def test_empty_catalog_is_valid() -> None:
    catalog = OptionCatalog.build([])

    assert len(catalog) == 0
    assert catalog.lookup_short("x") is None
