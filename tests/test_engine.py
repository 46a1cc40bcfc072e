# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the token classification state machine."""

from __future__ import annotations

import pytest

from progopts import (
    ErrorCode,
    HaltReason,
    IllegalOption,
    MultiParams,
    NonOption,
    NoParams,
    OptionCatalog,
    OptionSpec,
    ParseEngine,
    ResultLedger,
    SingleParam,
)


def _engine(*specs: OptionSpec, enforce_max_occurs: bool = False) -> tuple[ParseEngine, ResultLedger]:
    ledger = ResultLedger()
    return ParseEngine(OptionCatalog.build(specs), ledger, enforce_max_occurs=enforce_max_occurs), ledger


def _codes(ledger: ResultLedger) -> list[tuple[str, int, ErrorCode]]:
    return [(item.name, item.index, item.code) for item in ledger.illegal_options]


def test_empty_token_sequence() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    result = engine.run([])

    assert result.ok
    assert result.halt is HaltReason.EXHAUSTED
    assert result.stop_index is None
    assert result.next_index == 0
    assert ledger.parsed_options == ledger.illegal_options == ledger.non_options == ()


def test_double_dash_alone_halts_immediately() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    result = engine.run(["--"])

    assert result
    assert result.halt is HaltReason.END_OF_OPTIONS
    assert result.stop_index == 0
    assert result.next_index == 1
    assert ledger.parsed_options == ledger.illegal_options == ledger.non_options == ()


def test_tokens_after_double_dash_are_not_classified() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    result = engine.run(["a", "-v", "--", "-v", "-x", "b"])

    assert result.next_index == 3
    assert ledger.non_options == (NonOption(text="a", index=0),)
    assert len(ledger.parsed_options) == 1
    assert ledger.illegal_options == ()


def test_lone_dash_and_plain_words_are_positional() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    engine.run(["-", "file.txt", ""])

    assert ledger.non_options == (
        NonOption(text="-", index=0),
        NonOption(text="file.txt", index=1),
        NonOption(text="", index=2),
    )


def test_repeated_short_option_collects_each_parameter() -> None:
    engine, ledger = _engine(OptionSpec(short="i", arity=1))

    result = engine.run(["-i", "file1.c", "-i", "file2.c"])

    assert result.ok
    assert ledger.option_count(0) == 2
    assert ledger.param_value(0, 0) == "file1.c"
    assert ledger.param_value(0, 1) == "file2.c"
    assert [parsed.index for parsed in ledger.occurrences(0)] == [0, 2]


def test_offset_skips_leading_tokens() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    result = engine.run(["-x", "-v", "word"], offset=1)

    assert result.ok
    assert ledger.occurrences(0)[0].index == 1
    assert ledger.non_options == (NonOption(text="word", index=2),)


# Long options --------------------------------------------------------------


def test_long_option_with_embedded_value() -> None:
    engine, ledger = _engine(OptionSpec(long="message", arity=1))

    result = engine.run(["--message=a=b=c"])

    assert result.ok
    assert ledger.param_value(0) == "a=b=c"
    assert ledger.occurrences(0)[0].adjoining is False


def test_long_option_with_empty_embedded_value_records_both() -> None:
    engine, ledger = _engine(OptionSpec(short="f", long="file", arity=1))

    result = engine.run(["--file="])

    assert not result.ok
    assert _codes(ledger) == [("file", 0, ErrorCode.EQUAL_OPTION_EMPTY_PARAMETER)]
    assert ledger.option_count(0) == 1
    assert ledger.param_value(0) == ""


def test_equals_as_first_character_is_soft_error() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    result = engine.run(["--=x", "-v"])

    assert result.halt is HaltReason.EXHAUSTED
    assert _codes(ledger) == [("--=", 0, ErrorCode.EQUAL_FIRST_CHAR)]
    assert ledger.is_present(0)


@pytest.mark.parametrize("arity", [0, 2])
def test_embedded_value_requires_single_parameter(arity: int) -> None:
    engine, ledger = _engine(OptionSpec(long="opt", arity=arity), OptionSpec(short="v"))

    result = engine.run(["--opt=value", "-v"])

    assert result.halt is HaltReason.EXHAUSTED
    assert _codes(ledger) == [("opt", 0, ErrorCode.EQUAL_OPTION_NOT_SINGLE_PARAM)]
    assert not ledger.is_present(0)
    assert ledger.is_present(1)


def test_unknown_long_option_is_soft_error() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    result = engine.run(["--nope", "--nope=1", "-v"])

    assert result.halt is HaltReason.EXHAUSTED
    assert _codes(ledger) == [
        ("nope", 0, ErrorCode.OPTION_NOT_SPECIFIED),
        ("nope", 1, ErrorCode.OPTION_NOT_SPECIFIED),
    ]
    assert ledger.is_present(0)


def test_long_option_parameter_payloads_follow_arity() -> None:
    engine, ledger = _engine(
        OptionSpec(long="flag"),
        OptionSpec(long="one", arity=1),
        OptionSpec(long="three", arity=3),
    )

    result = engine.run(["--flag", "--one", "x", "--three", "a", "b", "c", "tail"])

    assert result.ok
    assert [parsed.params for parsed in ledger.parsed_options] == [
        NoParams(),
        SingleParam(value="x"),
        MultiParams(values=("a", "b", "c")),
    ]
    assert ledger.param_list(2) == ("a", "b", "c")
    assert ledger.non_options == (NonOption(text="tail", index=7),)


def test_long_option_without_enough_parameters_halts() -> None:
    engine, ledger = _engine(OptionSpec(long="range", arity=2), OptionSpec(short="v"))

    result = engine.run(["-v", "--range", "1"])

    assert not result.ok
    assert result.halt is HaltReason.FATAL
    assert result.stop_index == 1
    assert result.next_index == 2
    assert _codes(ledger) == [("range", 1, ErrorCode.OPTION_NOT_ENOUGH_PARAMS)]
    assert ledger.non_options == ()


def test_long_option_parameters_may_look_like_options() -> None:
    engine, ledger = _engine(OptionSpec(long="exec", arity=2))

    engine.run(["--exec", "-v", "--"])

    assert ledger.param_list(0) == ("-v", "--")


# Short option bundles ------------------------------------------------------


def test_adjoining_parameter_consumes_no_extra_tokens() -> None:
    engine, ledger = _engine(OptionSpec(short="x", arity=1))

    result = engine.run(["-xvalue", "next"])

    assert result.ok
    occurrence = ledger.occurrences(0)[0]
    assert occurrence.adjoining is True
    assert occurrence.params == SingleParam(value="value")
    assert ledger.non_options == (NonOption(text="next", index=1),)


def test_bundled_flag_then_parameter_option_uses_next_token() -> None:
    engine, ledger = _engine(OptionSpec(short="a"), OptionSpec(short="b", arity=1))

    result = engine.run(["-ab", "value"])

    assert result.ok
    assert ledger.occurrences(0)[0].params == NoParams()
    assert ledger.param_value(1) == "value"
    assert ledger.occurrences(1)[0].adjoining is False
    assert ledger.non_options == ()


def test_bundle_stops_after_adjoining_parameter() -> None:
    engine, ledger = _engine(OptionSpec(short="i"), OptionSpec(short="e", arity=1), OptionSpec(short="o"))

    engine.run(["-ieoi"])

    assert ledger.option_count(0) == 1
    assert ledger.param_value(1) == "oi"
    assert not ledger.is_present(2)


def test_unknown_characters_in_bundle_are_skipped() -> None:
    engine, ledger = _engine(OptionSpec(short="i"), OptionSpec(short="o"))

    result = engine.run(["-iZo", "word"])

    assert result.halt is HaltReason.EXHAUSTED
    assert _codes(ledger) == [("Z", 0, ErrorCode.OPTION_NOT_SPECIFIED)]
    assert ledger.is_present(0)
    assert ledger.is_present(1)
    assert ledger.non_options == (NonOption(text="word", index=1),)


def test_multi_parameter_option_inside_bundle_halts() -> None:
    engine, ledger = _engine(OptionSpec(short="r", arity=2), OptionSpec(short="v"))

    result = engine.run(["-rv", "1", "2", "-v"])

    assert result.halt is HaltReason.FATAL
    assert result.next_index == 1
    assert _codes(ledger) == [("r", 0, ErrorCode.ADJOINING_OPTION_NOT_SINGLE_PARAM)]
    assert ledger.parsed_options == ()
    assert ledger.non_options == ()


def test_last_short_option_without_enough_parameters_halts() -> None:
    engine, ledger = _engine(OptionSpec(short="a"), OptionSpec(short="r", arity=2))

    result = engine.run(["-ar", "1"])

    assert result.halt is HaltReason.FATAL
    assert _codes(ledger) == [("r", 0, ErrorCode.OPTION_NOT_ENOUGH_PARAMS)]
    assert ledger.is_present(0)
    assert ledger.non_options == ()


def test_last_short_option_with_many_parameters() -> None:
    engine, ledger = _engine(OptionSpec(short="r", arity=2))

    engine.run(["-r", "1", "9"])

    assert ledger.param_list(0) == ("1", "9")
    assert ledger.param_value(0) is None


# Groups --------------------------------------------------------------------


def test_grouped_option_without_allowed_groups_is_not_specified() -> None:
    engine, ledger = _engine(OptionSpec(short="f", long="file", arity=1, group="io"))

    result = engine.run(["-f", "a", "--file=b", "--file", "c"])

    assert not result.ok
    assert [item.code for item in ledger.illegal_options] == [ErrorCode.OPTION_NOT_SPECIFIED] * 3
    assert ledger.parsed_options == ()
    assert ledger.non_options == (NonOption(text="a", index=1), NonOption(text="c", index=4))


def test_grouped_option_admitted_by_allowed_groups() -> None:
    engine, ledger = _engine(
        OptionSpec(short="f", arity=1, group="Hello"),
        OptionSpec(short="n", arity=1, group="Count"),
    )

    result = engine.run(["-f", "a", "-n", "3"], allowed_groups=["Hello"])

    assert _codes(ledger) == [("n", 2, ErrorCode.OPTION_NOT_SPECIFIED)]
    assert ledger.param_value(0) == "a"
    assert ledger.non_options == (NonOption(text="3", index=3),)
    assert not result


# Maximum occurrences -------------------------------------------------------


def test_max_occurs_is_ignored_by_default() -> None:
    engine, ledger = _engine(OptionSpec(short="v"))

    assert engine.run(["-vvv"]).ok
    assert ledger.option_count(0) == 3


def test_max_occurs_enforced_when_enabled() -> None:
    engine, ledger = _engine(OptionSpec(short="i", arity=1, max_occurs=1), enforce_max_occurs=True)

    result = engine.run(["-i", "a", "-i", "b", "tail"])

    assert not result.ok
    assert ledger.illegal_options == (IllegalOption(name="i", index=2, code=ErrorCode.OPTION_TOO_MANY_OCCURRENCES),)
    assert ledger.option_count(0) == 1
    assert ledger.non_options == (NonOption(text="tail", index=4),)
