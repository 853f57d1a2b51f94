import pytest

from tests._shared_cases import DOCUMENT_STREAM_CASES, YamlCase, case_id
from yamlipy import ParseMode, ParserOptions, debug_load, debug_load_all, load, load_all
from yamlipy.parser.load import _resolve_options
from yamlipy.result import Err, Ok
from yamlipy.value import to_value


@pytest.mark.parametrize("case", DOCUMENT_STREAM_CASES, ids=case_id)
def test_load_all_produces_expected_documents(case: YamlCase) -> None:
    outcome = load_all(case.source)

    assert isinstance(outcome, Ok), outcome
    assert outcome.value == [to_value(document) for document in case.expected]


def test_aliases_do_not_cross_document_boundaries() -> None:
    outcome = load_all("a: &x 1\n---\nb: *x\n")

    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE003"


def test_aliases_work_within_each_document() -> None:
    outcome = load_all("a: &x 1\nb: *x\n---\nc: &x 2\nd: *x\n")

    assert outcome.unwrap() == [to_value({"a": 1, "b": 1}), to_value({"c": 2, "d": 2})]


def test_error_in_later_document_fails_whole_stream() -> None:
    outcome = load_all("a: 1\n---\n[b,\n")

    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE001"


def test_single_document_load_rejects_second_document() -> None:
    outcome = load("--- 1\n--- 2\n")

    assert isinstance(outcome, Err)
    assert outcome.error.message == "Expected end of input"


def test_version_directive_requires_document_start() -> None:
    outcome = load("%YAML 1.2\na: 1\n")

    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE007"


def test_invalid_version_is_reported_with_the_version() -> None:
    outcome = load("%YAML 1.0\n---\na\n")

    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE005"
    assert outcome.error.message == "Invalid YAML version '1.0'"


def test_permissive_mode_accepts_older_version_and_wide_integers() -> None:
    source = "%YAML 1.0\n---\nn: 99999999999999999999\n"

    assert isinstance(load(source), Err)
    outcome = load(source, mode=ParseMode.PERMISSIVE)

    assert outcome.unwrap() == to_value({"n": 99999999999999999999})


def test_custom_accepted_versions() -> None:
    options = ParserOptions(accepted_versions=frozenset({"1.2"}))

    assert isinstance(load("%YAML 1.2\n--- a\n", options), Ok)
    outcome = load("%YAML 1.1\n--- a\n", options)
    assert isinstance(outcome, Err)
    assert outcome.error.code == "PARSE005"


def test_narrow_integer_width_option() -> None:
    options = ParserOptions(int_bits=8)

    assert load("127", options).unwrap() == to_value(127)
    with pytest.raises(OverflowError):
        load("128", options)


def test_resolve_options_prefers_explicit_options() -> None:
    options = ParserOptions(max_depth=3)

    assert _resolve_options(options, None) is options
    assert _resolve_options(None, None) == ParserOptions()
    assert _resolve_options(None, ParseMode.PERMISSIVE).max_depth is None


def test_resolve_options_rejects_both_options_and_mode() -> None:
    with pytest.raises(ValueError):
        load("a", ParserOptions(), mode=ParseMode.STRICT)


def test_for_mode_strict_matches_defaults() -> None:
    assert ParserOptions.for_mode(ParseMode.STRICT) == ParserOptions()
    permissive = ParserOptions.for_mode(ParseMode.PERMISSIVE)
    assert permissive.mode == ParseMode.PERMISSIVE
    assert "1.0" in permissive.accepted_versions
    assert permissive.int_bits is None


def test_debug_load_prints_tokens_and_value(capsys: pytest.CaptureFixture[str]) -> None:
    outcome = debug_load("a: 1")

    out = capsys.readouterr().out
    assert isinstance(outcome, Ok)
    assert "====== tokens ======" in out
    assert "000 STRING" in out
    assert "====== result ======" in out
    assert "Map({String(a): Int(1)})" in out


def test_debug_load_prints_error_location(capsys: pytest.CaptureFixture[str]) -> None:
    outcome = debug_load("a: 1\nb: *nope\n")

    out = capsys.readouterr().out
    assert isinstance(outcome, Err)
    assert "- PARSE003 2:4 Unknown alias `nope`" in out


def test_debug_load_all_prints_each_document(capsys: pytest.CaptureFixture[str]) -> None:
    outcome = debug_load_all("--- 1\n--- 2\n")

    out = capsys.readouterr().out
    assert isinstance(outcome, Ok)
    assert "--- document 0\nInt(1)" in out
    assert "--- document 1\nInt(2)" in out


def test_debug_load_reports_lexer_errors(capsys: pytest.CaptureFixture[str]) -> None:
    debug_load("a: `x`")

    out = capsys.readouterr().out
    assert out.count("LEX002") == 2
    assert "1:4" in out
