"""Lexer."""

from yamlipy.lexer.lexer import IndentLevel, Lexer, dump_tokens, token_text, tokenize
from yamlipy.lexer.rules import LEX_RULES, LexRule, PlainStyle
from yamlipy.lexer.tokens import END_TOKEN, Token, TokenKind

__all__ = [
    "END_TOKEN",
    "LEX_RULES",
    "IndentLevel",
    "LexRule",
    "Lexer",
    "PlainStyle",
    "Token",
    "TokenKind",
    "dump_tokens",
    "token_text",
    "tokenize",
]
