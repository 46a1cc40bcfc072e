# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify command-line tokens against a declared catalog of options."""

from __future__ import annotations

from .catalog import OptionCatalog
from .config import ParserSettings
from .cursor import RewindableCursor
from .declarations import OptionBuilder, OptionSpec
from .engine import HaltReason, ParseEngine, ParseResult
from .errors import (
    CatalogDocumentError,
    CursorAtOriginalFillLevelError,
    CursorExhaustedError,
    DuplicateOptionError,
    ErrorCode,
    OptionDeclarationError,
    ProgOptsError,
)
from .keys import LongKey, OptionKey, ShortKey, option_key
from .ledger import ResultLedger
from .loader import load_option_specs
from .models import IllegalOption, MultiParams, NonOption, NoParams, ParsedOption, SingleParam
from .processor import OptionsProcessor

__version__ = "0.1.0"

__all__ = [
    "CatalogDocumentError",
    "CursorAtOriginalFillLevelError",
    "CursorExhaustedError",
    "DuplicateOptionError",
    "ErrorCode",
    "HaltReason",
    "IllegalOption",
    "LongKey",
    "MultiParams",
    "NoParams",
    "NonOption",
    "OptionBuilder",
    "OptionCatalog",
    "OptionDeclarationError",
    "OptionKey",
    "OptionSpec",
    "OptionsProcessor",
    "ParseEngine",
    "ParseResult",
    "ParsedOption",
    "ParserSettings",
    "ProgOptsError",
    "ResultLedger",
    "RewindableCursor",
    "ShortKey",
    "SingleParam",
    "load_option_specs",
    "option_key",
]
