"""Ordered lexical rule table.

Rules are tried top to bottom at the current position and the first match
wins, so keyword and number rules must precede the plain scalar rules that
would otherwise swallow them.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from functools import cache
from typing import Final

from yamlipy.diagnostics.codes import (
    LEXER_RESERVED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from yamlipy.lexer.tokens import TokenKind

BREAK: Final[str] = r"(?:\r\n|\r|\n)"

# Printable characters that may continue a plain scalar inside flow
# collections: everything but space, `#`, `,`, `:`, `[`, `]`, `{` and `}`.
_SAFE_IN: Final[str] = (
    r"\x21\x22\x24-\x2b\x2d-\x39\x3b-\x5a\x5c\x5e-\x7a\x7c\x7e\x85"
    r"\xa0-\ud7ff\ue000-\ufefe\uff00\ufffd\U00010000-\U0010ffff"
)
_SAFE_OUT: Final[str] = r"\x2c\x5b\x5d\x7b\x7d" + _SAFE_IN

PLAIN_OUT: Final[str] = rf"(?:[{_SAFE_OUT}]#|:(?![ \t]|{BREAK})|[{_SAFE_OUT}]|[ \t])+"
PLAIN_IN: Final[str] = rf"(?:[{_SAFE_IN}]#|:(?![ \t]|{BREAK})|[{_SAFE_IN}]|[ \t]|{BREAK})+"

# A scalar keyword or number must end at one of these.
_FINISH: Final[str] = r"(?= *(?:,|\]|\}|(?: #[^\r\n]*)?(?:" + BREAK + r"|\Z)))"

DASH_RE: Final[re.Pattern[str]] = re.compile(
    rf"-(?:[ \t]+(?![ \t]|#|{BREAK})|(?=[ \t\r\n]|\Z))"
)
BREAK_RE: Final[re.Pattern[str]] = re.compile(BREAK)
# A tab in a line's leading whitespace, on a line that has content.
TAB_INDENT_RE: Final[re.Pattern[str]] = re.compile(rf"\t[ \t]*(?![ \t#]|{BREAK}|\Z)")


class PlainStyle(StrEnum):
    """How a plain scalar rule treats line breaks."""

    MULTILINE = "multiline"
    INLINE = "inline"


@dataclass(frozen=True, slots=True)
class LexRule:
    kind: TokenKind
    pattern: re.Pattern[str]
    plain: PlainStyle | None = None
    error: DiagnosticSpec | None = None

    @property
    def block_context_only(self) -> bool:
        return self.plain is PlainStyle.MULTILINE


def _rule(
    kind: TokenKind,
    pattern: str,
    *,
    plain: PlainStyle | None = None,
    error: DiagnosticSpec | None = None,
) -> LexRule:
    return LexRule(kind, re.compile(pattern), plain=plain, error=error)


LEX_RULES: Final[tuple[LexRule, ...]] = (
    _rule(TokenKind.YAML_DIRECTIVE, r"%YAML(?= )"),
    _rule(TokenKind.DOC_START, r"---"),
    _rule(TokenKind.DOC_END, r"\.\.\."),
    # Blank and comment-only lines are comments, not newlines.
    _rule(TokenKind.COMMENT, rf"#[^\r\n]*|{BREAK} *(?:#[^\r\n]*)?(?={BREAK}|\Z)"),
    _rule(TokenKind.SPACE, r" +"),
    _rule(TokenKind.NEWLINE, rf"{BREAK} *"),
    LexRule(TokenKind.DASH, DASH_RE),
    _rule(TokenKind.NULL, r"(?:null|Null|NULL|~)" + _FINISH),
    _rule(TokenKind.TRUE, r"(?:true|True|TRUE)" + _FINISH),
    _rule(TokenKind.FALSE, r"(?:false|False|FALSE)" + _FINISH),
    _rule(TokenKind.INFINITY_POS, r"\+?\.(?:inf|Inf|INF)" + _FINISH),
    _rule(TokenKind.INFINITY_NEG, r"-\.(?:inf|Inf|INF)" + _FINISH),
    _rule(TokenKind.NAN, r"\.(?:nan|NaN|NAN)" + _FINISH),
    _rule(TokenKind.INT, r"[-+]?[0-9]+" + _FINISH),
    _rule(TokenKind.INT_OCT, r"0o[0-7]+" + _FINISH),
    _rule(TokenKind.INT_HEX, r"0x[0-9a-fA-F]+" + _FINISH),
    _rule(TokenKind.INT_SEX, r"[0-9]{2}(?::[0-9]{2})+" + _FINISH),
    _rule(TokenKind.DOUBLE, r"[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?" + _FINISH),
    _rule(TokenKind.ANCHOR, r"&\w+"),
    _rule(TokenKind.ALIAS, r"\*\w+"),
    _rule(TokenKind.COMMA, r","),
    _rule(TokenKind.LBRACKET, r"\["),
    _rule(TokenKind.RBRACKET, r"\]"),
    _rule(TokenKind.LBRACE, r"\{"),
    _rule(TokenKind.RBRACE, r"\}"),
    _rule(TokenKind.QUESTION, rf"\?(?: +|(?={BREAK}))"),
    _rule(TokenKind.COLON, r":(?!:)"),
    _rule(TokenKind.LITERAL, r"\|[^\r\n]*"),
    _rule(TokenKind.FOLDED, r">[^\r\n]*"),
    _rule(TokenKind.RESERVED, r"[@`]", error=LEXER_RESERVED_CHARACTER),
    _rule(TokenKind.STRING_DQ, rf'"(?:[^\\"]|\\(?:[^\r\n]|{BREAK}))*"'),
    _rule(TokenKind.STRING_SQ, r"'(?:[^']|'')*'"),
    # Reached only when the closing quote is missing.
    _rule(TokenKind.STRING_DQ, r'"', error=LEXER_UNTERMINATED_STRING),
    _rule(TokenKind.STRING_SQ, r"'", error=LEXER_UNTERMINATED_STRING),
    _rule(
        TokenKind.STRING,
        rf"{PLAIN_OUT}(?=:(?:[ \t]|{BREAK})|{BREAK}|\Z)",
        plain=PlainStyle.MULTILINE,
    ),
    _rule(TokenKind.STRING, PLAIN_IN, plain=PlainStyle.INLINE),
)


def _at_least(count: int) -> str:
    return f" {{{count},}}"


@cache
def block_scalar_pattern(min_indent: int) -> re.Pattern[str]:
    """Body of a block scalar whose content is indented by at least `min_indent`.

    Leading blank lines, a first content line, then every line that is blank
    or starts with the first line's indentation. Group 1 is that indentation.
    """
    return re.compile(
        rf"(?:{BREAK} *)*"
        rf"{BREAK}({_at_least(min_indent)})[^ ][^\r\n]*"
        rf"(?:{BREAK}(?: *|\1[^\r\n]*))*"
        rf"(?={BREAK}|\Z)"
    )


@cache
def plain_continuation_pattern(indent: int) -> re.Pattern[str]:
    """One continuation line of a multi-line plain scalar.

    Blank lines always continue; content lines need `indent` spaces. Document
    markers in column zero end the scalar.
    """
    return re.compile(
        rf"{BREAK}(?!(?:---|\.\.\.)(?:[ \t\r\n]|\Z))"
        rf"(?: *|{_at_least(indent)}{PLAIN_OUT})(?={BREAK}|\Z)"
    )


CONTINUATION_TRIM_RE: Final[re.Pattern[str]] = re.compile(rf"^{BREAK}[ \t]*|[ \t]+\Z")


@cache
def indentation_patterns(width: int) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Up to `width` spaces at the start of text, and after each line break."""
    return re.compile(rf"^ {{0,{width}}}"), re.compile(rf"{BREAK} {{0,{width}}}")
