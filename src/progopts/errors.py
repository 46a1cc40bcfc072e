# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error vocabulary shared by option declaration, cursor and parse layers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class ErrorCode(str, Enum):
    """Kinds of illegal option recorded while scanning a command line."""

    OPTION_NOT_SPECIFIED = "OptionNotSpecified"
    EQUAL_OPTION_NOT_SINGLE_PARAM = "EqualOptionNotSingleParam"
    EQUAL_FIRST_CHAR = "EqualFirstChar"
    OPTION_NOT_ENOUGH_PARAMS = "OptionNotEnoughParams"
    ADJOINING_OPTION_NOT_SINGLE_PARAM = "AdjoiningOptionNotSingleParam"
    EQUAL_OPTION_EMPTY_PARAMETER = "EqualOptionEmptyParameter"
    OPTION_TOO_MANY_OCCURRENCES = "OptionTooManyOccurrences"

    @property
    def is_fatal(self) -> bool:
        """Return ``True`` when recording this code halts the remaining scan."""

        return self in _FATAL_CODES

    @property
    def description(self) -> str:
        """Return a short human-readable explanation of the code."""

        return _DESCRIPTIONS[self]


_FATAL_CODES: Final[frozenset[ErrorCode]] = frozenset(
    {
        ErrorCode.OPTION_NOT_ENOUGH_PARAMS,
        ErrorCode.ADJOINING_OPTION_NOT_SINGLE_PARAM,
    },
)

_DESCRIPTIONS: Final[dict[ErrorCode, str]] = {
    ErrorCode.OPTION_NOT_SPECIFIED: "option is not declared or its group is not allowed",
    ErrorCode.EQUAL_OPTION_NOT_SINGLE_PARAM: "'--name=value' used for an option that does not take exactly one parameter",
    ErrorCode.EQUAL_FIRST_CHAR: "'--=' is not a valid option",
    ErrorCode.OPTION_NOT_ENOUGH_PARAMS: "not enough arguments left for the option parameters",
    ErrorCode.ADJOINING_OPTION_NOT_SINGLE_PARAM: "bundled option takes more than one parameter",
    ErrorCode.EQUAL_OPTION_EMPTY_PARAMETER: "nothing follows the '=' of a long option",
    ErrorCode.OPTION_TOO_MANY_OCCURRENCES: "option given more often than declared",
}


class ProgOptsError(Exception):
    """Base class for every exception raised by :mod:`progopts`."""


class OptionDeclarationError(ProgOptsError):
    """Raised when an option declaration fails validation."""


class DuplicateOptionError(ProgOptsError, ValueError):
    """Raised when a catalog declares the same short or long key more than once."""

    def __init__(self, duplicates: tuple[str, ...]) -> None:
        """Create the error listing every duplicated key.

        Args:
            duplicates: Display forms (``-x`` or ``--name``) of each repeated key.
        """

        self.duplicates = duplicates
        super().__init__("\n".join(f"option {key} specified more than once" for key in duplicates))


class CatalogDocumentError(ProgOptsError):
    """Raised when a catalog document on disk cannot be turned into declarations."""


class CursorExhaustedError(ProgOptsError, IndexError):
    """Raised when popping from a cursor that has no tokens left."""


class CursorAtOriginalFillLevelError(ProgOptsError, IndexError):
    """Raised when undoing a pop on a cursor that is back at its starting state."""


__all__ = [
    "CatalogDocumentError",
    "CursorAtOriginalFillLevelError",
    "CursorExhaustedError",
    "DuplicateOptionError",
    "ErrorCode",
    "OptionDeclarationError",
    "ProgOptsError",
]
