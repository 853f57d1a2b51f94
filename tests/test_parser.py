import math

import pytest

from tests._debug import debug_dump_diagnostic, debug_dump_value
from tests._shared_cases import ALL_VALUE_CASES, ERROR_CASES, ErrorCase, YamlCase, case_id
from yamlipy import load
from yamlipy.lexer import TokenKind, tokenize
from yamlipy.parser import ParseContext, ParserOptions, ignore_space, parse_value
from yamlipy.result import Err, Ok
from yamlipy.value import YamlArray, YamlBool, YamlDouble, YamlInt, YamlMap, YamlString, YamlValue, to_value


def assert_same_kinds(actual: YamlValue, expected: YamlValue) -> None:
    """Value equality treats Int(3) and Double(3.0) as equal; kinds must match too."""
    assert type(actual) is type(expected), f"{actual} is not the same kind as {expected}"
    match actual, expected:
        case YamlArray(), YamlArray():
            for actual_item, expected_item in zip(actual, expected, strict=True):
                assert_same_kinds(actual_item, expected_item)
        case YamlMap(), YamlMap():
            for key, value in actual:
                expected_key, expected_value = next(entry for entry in expected if entry[0] == key)
                assert_same_kinds(key, expected_key)
                assert_same_kinds(value, expected_value)


@pytest.mark.parametrize("case", ALL_VALUE_CASES, ids=case_id)
def test_load_produces_expected_value(case: YamlCase) -> None:
    outcome = load(case.source)

    assert isinstance(outcome, Ok), outcome
    debug_dump_value(case.name, outcome.value, case.source)
    expected = to_value(case.expected)
    assert outcome.value == expected
    assert_same_kinds(outcome.value, expected)


def test_kind_check_tells_int_from_double() -> None:
    assert YamlInt(3) == YamlDouble(3.0)
    with pytest.raises(AssertionError):
        assert_same_kinds(to_value({"n": [3]}), to_value({"n": [3.0]}))


@pytest.mark.parametrize("case", ERROR_CASES, ids=case_id)
def test_load_reports_expected_error(case: ErrorCase) -> None:
    outcome = load(case.source)

    assert isinstance(outcome, Err), outcome
    debug_dump_diagnostic(case.name, outcome.error, case.source)
    assert outcome.error.code == case.code


def test_numbers_keep_their_kind() -> None:
    value = load("i: 1\nd: 1.0\nh: 0x10\n").unwrap()

    assert isinstance(value, YamlMap)
    assert isinstance(value.get(YamlString("i")), YamlInt)
    assert isinstance(value.get(YamlString("d")), YamlDouble)
    assert value.get(YamlString("h")) == YamlInt(16)


def test_nan_is_a_double() -> None:
    value = load(".nan").unwrap()

    assert isinstance(value, YamlDouble)
    assert math.isnan(value.value)


def test_booleans_do_not_equal_numbers() -> None:
    value = load("[true, 1]").unwrap()

    assert isinstance(value, YamlArray)
    first, second = value.items
    assert isinstance(first, YamlBool)
    assert first != second


def test_map_preserves_source_order() -> None:
    value = load("z: 1\na: 2\nm: 3\n").unwrap()

    assert isinstance(value, YamlMap)
    assert value.keys() == [YamlString("z"), YamlString("a"), YamlString("m")]


def test_alias_refers_to_value_at_anchor_time() -> None:
    value = load("a: &x 1\nb: *x\nc: &x 2\nd: *x\n").unwrap()

    assert value == to_value({"a": 1, "b": 1, "c": 2, "d": 2})


def test_alias_before_anchor_is_unknown() -> None:
    outcome = load("a: *x\nb: &x 1\n")

    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE003"
    assert outcome.error.message == "Unknown alias `x`"
    assert outcome.error.excerpt.startswith("*x")


def test_anchor_inside_flow_sequence_is_visible_after_it() -> None:
    value = load("[&a 1, *a, {k: *a}]").unwrap()

    assert value == to_value([1, 1, {"k": 1}])


def test_duplicate_key_message_names_the_key() -> None:
    outcome = load("a: 1\na: 2\n")

    assert isinstance(outcome, Err)
    assert outcome.error.message == "Duplicate key String(a)"


def test_unexpected_token_message_uses_token_label() -> None:
    outcome = load("[a,]")

    assert isinstance(outcome, Err)
    assert outcome.error.message == "Unexpected ]"
    assert outcome.error.excerpt == "]"


def test_key_value_pair_inside_flow_sequence_is_a_single_entry_map() -> None:
    value = load("[a b: 1, c]").unwrap()

    assert value == to_value([{"a b": 1}, "c"])


def test_missing_comma_message() -> None:
    outcome = load("[a, b")

    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE001"
    assert outcome.error.message == "Expected comma"


def test_trailing_content_after_document_is_an_error() -> None:
    outcome = load("a: 1\n---\nb: 2\n")

    assert isinstance(outcome, Err)
    assert outcome.error.message == "Expected end of input"
    assert outcome.error.excerpt.startswith("---")


def test_nesting_deeper_than_limit_is_rejected() -> None:
    options = ParserOptions(max_depth=2)

    assert isinstance(load("a:\n  b: 1\n", options), Ok)
    outcome = load("a:\n  b:\n    c: 1\n", options)
    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE011"

    flow = load("[[[1]]]", options)
    assert isinstance(flow, Err)
    assert flow.error.code == "PARSE011"
    assert flow.error.excerpt == "[1]]]"


def test_default_depth_limit_rejects_pathological_nesting() -> None:
    source = "[" * 100 + "]" * 100

    outcome = load(source)

    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE011"
    assert isinstance(load(source, ParserOptions(max_depth=None)), Ok)


def test_integer_overflow_raises() -> None:
    with pytest.raises(OverflowError):
        load("n: 9223372036854775808\n")

    assert load("n: 9223372036854775807\n").unwrap() == to_value({"n": 9223372036854775807})
    assert load("n: -9223372036854775808\n").unwrap() == to_value({"n": -9223372036854775808})


def test_parse_value_from_context() -> None:
    tokens = tokenize("[1, 2] # tail").unwrap()
    context = ParseContext.start(tokens)

    outcome = parse_value(context)

    assert isinstance(outcome, Ok)
    next_context, value = outcome.value
    assert value == to_value([1, 2])
    assert next_context.kind == TokenKind.SPACE
    assert ignore_space(next_context).kind == TokenKind.END
    # the starting context is untouched
    assert context.position == 0


def test_context_aliases_are_copy_on_write() -> None:
    context = ParseContext.start(tokenize("a").unwrap())

    with_alias = context.with_alias("x", YamlInt(1))

    assert "x" in with_alias.aliases
    assert "x" not in context.aliases
    assert "x" not in with_alias.without_aliases().aliases


def test_context_past_the_end_reads_end_token() -> None:
    context = ParseContext.start(tokenize("a").unwrap())

    assert context.nth(10).kind == TokenKind.END
    assert context.at(10).kind == TokenKind.END
    assert context.advance().advance().advance().kind == TokenKind.END
