"""YAML subset parser: text to tokens to an immutable value tree."""

from yamlipy.diagnostics import Diagnostic
from yamlipy.lexer import Token, TokenKind, dump_tokens, tokenize
from yamlipy.parser import (
    ParseMode,
    ParserOptions,
    debug_load,
    debug_load_all,
    load,
    load_all,
    parse_document,
    parse_documents,
)
from yamlipy.result import Err, Ok, Outcome, YamlError
from yamlipy.value import (
    NULL,
    YamlArray,
    YamlBool,
    YamlDouble,
    YamlInt,
    YamlMap,
    YamlNull,
    YamlString,
    YamlValue,
    YamlView,
    to_value,
    view,
)

__all__ = [
    "NULL",
    "Diagnostic",
    "Err",
    "Ok",
    "Outcome",
    "ParseMode",
    "ParserOptions",
    "Token",
    "TokenKind",
    "YamlArray",
    "YamlBool",
    "YamlDouble",
    "YamlError",
    "YamlInt",
    "YamlMap",
    "YamlNull",
    "YamlString",
    "YamlValue",
    "YamlView",
    "debug_load",
    "debug_load_all",
    "dump_tokens",
    "load",
    "load_all",
    "parse_document",
    "parse_documents",
    "to_value",
    "view",
]
