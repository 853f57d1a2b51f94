"""Diagnostics."""

from yamlipy.diagnostics.codes import (
    LEXER_INCONSISTENT_INDENTATION,
    LEXER_RESERVED_CHARACTER,
    LEXER_TAB_INDENTATION,
    LEXER_UNEXPECTED_INPUT,
    LEXER_UNTERMINATED_STRING,
    PARSER_BLOCK_LEADING_BLANK,
    PARSER_BLOCK_UNDERINDENTED,
    PARSER_DUPLICATE_DIRECTIVE,
    PARSER_DUPLICATE_KEY,
    PARSER_EXPECTED_TOKEN,
    PARSER_INVALID_BLOCK_HEADER,
    PARSER_INVALID_VERSION,
    PARSER_MISSING_DOCUMENT_START,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNKNOWN_ALIAS,
    DiagnosticSpec,
)
from yamlipy.diagnostics.diagnostic import EXCERPT_LENGTH, Diagnostic, escape_excerpt

__all__ = [
    "EXCERPT_LENGTH",
    "LEXER_INCONSISTENT_INDENTATION",
    "LEXER_RESERVED_CHARACTER",
    "LEXER_TAB_INDENTATION",
    "LEXER_UNEXPECTED_INPUT",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_BLOCK_LEADING_BLANK",
    "PARSER_BLOCK_UNDERINDENTED",
    "PARSER_DUPLICATE_DIRECTIVE",
    "PARSER_DUPLICATE_KEY",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_INVALID_BLOCK_HEADER",
    "PARSER_INVALID_VERSION",
    "PARSER_MISSING_DOCUMENT_START",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNKNOWN_ALIAS",
    "Diagnostic",
    "DiagnosticSpec",
    "escape_excerpt",
]
