"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from yamlipy.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    END = 1

    # -------------------------
    # Document structure
    # -------------------------
    YAML_DIRECTIVE = 10  # %YAML
    DOC_START = 11  # ---
    DOC_END = 12  # ...

    # -------------------------
    # Trivia tokens (skipped by the parser)
    # -------------------------
    COMMENT = 20
    SPACE = 21
    NEWLINE = 22

    # -------------------------
    # Indentation (synthesized from the indent stack)
    # -------------------------
    INDENT = 30
    DEDENT = 31

    # -------------------------
    # Scalars
    # -------------------------
    NULL = 40
    TRUE = 41
    FALSE = 42
    INFINITY_POS = 43
    INFINITY_NEG = 44
    NAN = 45
    INT = 46
    INT_OCT = 47  # 0o17
    INT_HEX = 48  # 0xff
    INT_SEX = 49  # 12:30:45
    DOUBLE = 50
    STRING_DQ = 51  # "..."
    STRING_SQ = 52  # '...'
    STRING = 53  # plain

    # -------------------------
    # Node properties
    # -------------------------
    ANCHOR = 60  # &name
    ALIAS = 61  # *name

    # -------------------------
    # Indicators / punctuation
    # -------------------------
    DASH = 70  # -
    QUESTION = 71  # ?
    COLON = 72  # :
    COMMA = 73  # ,
    LBRACKET = 74  # [
    RBRACKET = 75  # ]
    LBRACE = 76  # {
    RBRACE = 77  # }
    LITERAL = 78  # |
    FOLDED = 79  # >
    RESERVED = 80  # @ `

    @property
    def is_string(self) -> bool:
        return self in (
            TokenKind.STRING,
            TokenKind.STRING_DQ,
            TokenKind.STRING_SQ,
        )

    @property
    def label(self) -> str:
        return _LABELS.get(self, self.name.lower().replace("_", " "))


_LABELS: Final[dict[TokenKind, str]] = {
    TokenKind.END: "end of input",
    TokenKind.YAML_DIRECTIVE: "%YAML",
    TokenKind.DOC_START: "---",
    TokenKind.DOC_END: "...",
    TokenKind.DASH: "-",
    TokenKind.QUESTION: "?",
    TokenKind.COLON: ":",
    TokenKind.COMMA: ",",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.LITERAL: "|",
    TokenKind.FOLDED: ">",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed token.

    `text` is the token's meaning-bearing text. For most kinds it equals the
    source slice at `range`; block scalar bodies and multi-line plain scalars
    carry their normalized text instead.
    """

    kind: TokenKind
    text: str
    range: TextRange


END_TOKEN: Final[Token] = Token(TokenKind.END, "", TextRange.empty(TextSize(0)))
