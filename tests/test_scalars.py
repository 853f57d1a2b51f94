import pytest

from yamlipy.lexer import TokenKind
from yamlipy.parser.scalars import (
    BlockHeader,
    Chomping,
    block_scalar_text,
    detect_block_indent,
    double_quoted_string,
    fold_block,
    fold_flow,
    has_overindented_leading_blank,
    parse_block_header,
    parse_int_literal,
    plain_string,
    single_quoted_string,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\nb", "a b"),
        ("a\n\nb", "a\nb"),
        ("a\n\n\nb", "a\n\nb"),
        ("a  \n  b", "a b"),
        ("  a\nb  ", "  a b  "),
        ("a\\\nb", "ab"),
        ("", ""),
    ],
)
def test_fold_flow(text: str, expected: str) -> None:
    assert fold_flow(text) == expected


def test_plain_string_trims_edges_and_folds() -> None:
    assert plain_string("  first\r\nsecond\n") == "first second"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ('"plain"', "plain"),
        ('"a\\nb"', "a\nb"),
        ('"\\0\\a\\b\\t\\v\\f\\r\\e"', "\x00\x07\b\t\v\f\r\x1b"),
        ('"\\ \\"\\\\\\/"', ' "\\/'),
        ('"\\N\\_\\L\\P"', "\x85\xa0\u2028\u2029"),
        ('"\\x7e\\u263A\\U0001F600"', "~\u263a\U0001f600"),
        ('"\\\\n"', "\\n"),
        ('"\\U00110000"', "\\U00110000"),
        ('"\\z"', "\\z"),
    ],
)
def test_double_quoted_escapes(token: str, expected: str) -> None:
    assert double_quoted_string(token) == expected


def test_single_quoted_string_collapses_doubled_quotes() -> None:
    assert single_quoted_string("'a''b'") == "a'b"
    assert single_quoted_string("'a\\nb'") == "a\\nb"
    assert single_quoted_string("'one\n  two'") == "one two"


@pytest.mark.parametrize(
    ("kind", "text", "expected"),
    [
        (TokenKind.INT, "42", 42),
        (TokenKind.INT, "-42", -42),
        (TokenKind.INT, "+7", 7),
        (TokenKind.INT_OCT, "0o777", 511),
        (TokenKind.INT_HEX, "0xDeadBeef", 0xDEADBEEF),
        (TokenKind.INT_SEX, "01:30", 90),
        (TokenKind.INT_SEX, "01:00:00", 3600),
    ],
)
def test_parse_int_literal(kind: TokenKind, text: str, expected: int) -> None:
    assert parse_int_literal(kind, text) == expected


def test_parse_int_literal_overflow() -> None:
    assert parse_int_literal(TokenKind.INT_HEX, "0x7fffffffffffffff") == 2**63 - 1
    with pytest.raises(OverflowError):
        parse_int_literal(TokenKind.INT_HEX, "0x8000000000000000")
    assert parse_int_literal(TokenKind.INT_HEX, "0x8000000000000000", bits=None) == 2**63


def test_parse_int_literal_rejects_non_integer_kinds() -> None:
    with pytest.raises(ValueError):
        parse_int_literal(TokenKind.DOUBLE, "1.5")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("|", BlockHeader(Chomping.CLIP, None)),
        (">", BlockHeader(Chomping.CLIP, None)),
        ("|-", BlockHeader(Chomping.STRIP, None)),
        ("|+", BlockHeader(Chomping.KEEP, None)),
        ("|2", BlockHeader(Chomping.CLIP, 2)),
        ("|2-", BlockHeader(Chomping.STRIP, 2)),
        ("|-2", BlockHeader(Chomping.STRIP, 2)),
        (">+9", BlockHeader(Chomping.KEEP, 9)),
        ("| # comment", BlockHeader(Chomping.CLIP, None)),
    ],
)
def test_parse_block_header(text: str, expected: BlockHeader) -> None:
    assert parse_block_header(text) == expected


@pytest.mark.parametrize("text", ["|x", "|0", "|--", "|+-", "|10", "|2#"])
def test_parse_block_header_rejects_malformed_indicators(text: str) -> None:
    assert parse_block_header(text) is None


def test_detect_block_indent_skips_blank_lines() -> None:
    assert detect_block_indent("  a\n") == 2
    assert detect_block_indent("\n \n    a\n") == 4
    assert detect_block_indent("") == 0
    assert detect_block_indent("\n\n") == 0


def test_overindented_leading_blank() -> None:
    assert has_overindented_leading_blank("     \n  a\n", 2) is True
    assert has_overindented_leading_blank("  \n  a\n", 2) is False
    assert has_overindented_leading_blank("    a\n", 2) is False


@pytest.mark.parametrize(
    ("chomping", "expected"),
    [
        (Chomping.STRIP, "a\n b"),
        (Chomping.CLIP, "a\n b\n"),
        (Chomping.KEEP, "a\n b\n\n"),
    ],
)
def test_block_scalar_text_chomping(chomping: Chomping, expected: str) -> None:
    assert block_scalar_text("  a\n   b\n\n", 2, chomping) == expected


def test_fold_block_keeps_more_indented_lines() -> None:
    assert fold_block("a\nb\n  code\nc\n") == "a b\n  code\nc\n"
    assert fold_block("a\n\nb\n\n") == "a\nb\n\n"
