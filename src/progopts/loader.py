# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load option declarations from JSON catalog documents.

A catalog document is a JSON object with an ``options`` array::

    {
        "options": [
            {"short": "f", "long": "file", "arity": 1, "group": "io"},
            {"short": "v", "long": "verbose"}
        ]
    }

``arity`` defaults to 0 and ``maxOccurs`` to 1.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TypeAlias, cast

from .declarations import OptionSpec
from .errors import CatalogDocumentError, OptionDeclarationError

JSONValue: TypeAlias = str | int | float | bool | None | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

_KNOWN_KEYS = frozenset({"short", "long", "arity", "maxOccurs", "group"})


def load_option_specs(path: Path) -> tuple[OptionSpec, ...]:
    """Read ``path`` and return the option declarations it describes.

    Args:
        path: Filesystem path to the JSON catalog document.

    Returns:
        tuple[OptionSpec, ...]: Declarations in document order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogDocumentError: If the document is not valid JSON or an entry
            is malformed.
    """

    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogDocumentError(f"{path}: failed to parse catalog JSON") from exc
    return specs_from_document(payload, context=str(path))


def specs_from_document(payload: JSONValue, *, context: str) -> tuple[OptionSpec, ...]:
    """Return declarations from an already-decoded catalog document."""

    if not isinstance(payload, Mapping):
        raise CatalogDocumentError(f"{context}: expected a JSON object")
    entries = payload.get("options")
    if not isinstance(entries, Sequence) or isinstance(entries, (str, bytes, bytearray)):
        raise CatalogDocumentError(f"{context}: expected 'options' to be an array of option objects")
    specs: list[OptionSpec] = []
    for index, entry in enumerate(entries):
        entry_context = f"{context}.options[{index}]"
        specs.append(spec_from_mapping(_expect_mapping(entry, context=entry_context), context=entry_context))
    return tuple(specs)


def spec_from_mapping(data: Mapping[str, JSONValue], *, context: str) -> OptionSpec:
    """Create an :class:`OptionSpec` from one catalog entry.

    Args:
        data: Mapping describing a single option.
        context: Human-readable location used in error messages.

    Returns:
        OptionSpec: Validated declaration.

    Raises:
        CatalogDocumentError: If a field has the wrong type, an unknown field
            is present, or the declaration itself is invalid.
    """

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise CatalogDocumentError(f"{context}: unknown field(s) {', '.join(unknown)}")
    try:
        return OptionSpec(
            short=_optional_string(data.get("short"), key="short", context=context),
            long=_optional_string(data.get("long"), key="long", context=context),
            arity=_integer(data.get("arity"), key="arity", context=context, default=0),
            max_occurs=_integer(data.get("maxOccurs"), key="maxOccurs", context=context, default=1),
            group=_optional_string(data.get("group"), key="group", context=context),
        )
    except OptionDeclarationError as exc:
        raise CatalogDocumentError(f"{context}: {exc}") from exc


def _expect_mapping(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    if not isinstance(value, Mapping):
        raise CatalogDocumentError(f"{context}: expected an object")
    return value


def _optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogDocumentError(f"{context}: expected '{key}' to be a string if present")
    return value


def _integer(value: JSONValue | None, *, key: str, context: str, default: int) -> int:
    if value is None:
        return default
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogDocumentError(f"{context}: expected '{key}' to be an integer")
    return value


__all__ = ["load_option_specs", "spec_from_mapping", "specs_from_document"]
