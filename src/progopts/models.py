# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Records produced by a parse: recognised options, illegal options and positionals."""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorCode


class NoParams(BaseModel):
    """Parameter payload of an option that takes no parameters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class SingleParam(BaseModel):
    """Parameter payload of an option that takes exactly one parameter."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    value: str


class MultiParams(BaseModel):
    """Parameter payload of an option that takes two or more parameters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multi"] = "multi"
    values: tuple[str, ...]


OptionParams: TypeAlias = Annotated[NoParams | SingleParam | MultiParams, Field(discriminator="kind")]

NO_PARAMS = NoParams()


def params_for(values: tuple[str, ...], arity: int) -> NoParams | SingleParam | MultiParams:
    """Return the payload variant matching an option's declared ``arity``.

    Args:
        values: Parameters consumed for the occurrence.
        arity: Declared parameter count of the option.

    Returns:
        NoParams | SingleParam | MultiParams: Payload for ``values``.
    """

    if arity == 0:
        return NO_PARAMS
    if arity == 1:
        return SingleParam(value=values[0])
    return MultiParams(values=values)


def params_as_list(params: NoParams | SingleParam | MultiParams) -> list[str]:
    """Return ``params`` flattened into a list of strings."""

    match params:
        case NoParams():
            return []
        case SingleParam(value=value):
            return [value]
        case MultiParams(values=values):
            return list(values)


class ParsedOption(BaseModel):
    """One recognised occurrence of a declared option."""

    model_config = ConfigDict(frozen=True)

    index: int
    adjoining: bool = False
    slot: int
    params: OptionParams = Field(default=NO_PARAMS)


class IllegalOption(BaseModel):
    """An option the parser rejected, with the reason."""

    model_config = ConfigDict(frozen=True)

    name: str
    index: int
    code: ErrorCode

    def __str__(self) -> str:
        return f"{self.name} {self.index} {self.code.value}"


class NonOption(BaseModel):
    """A positional token that is neither an option nor an option parameter."""

    model_config = ConfigDict(frozen=True)

    text: str
    index: int

    def __str__(self) -> str:
        return self.text


__all__ = [
    "IllegalOption",
    "MultiParams",
    "NO_PARAMS",
    "NoParams",
    "NonOption",
    "OptionParams",
    "ParsedOption",
    "SingleParam",
    "params_as_list",
    "params_for",
]
