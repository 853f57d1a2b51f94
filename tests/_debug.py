"""Shared debug printers for lexer/parser/value tests."""

from __future__ import annotations

import os

from yamlipy.diagnostics import Diagnostic
from yamlipy.lexer import Token, token_text
from yamlipy.text import line_column
from yamlipy.value import YamlArray, YamlMap, YamlValue

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_VALUES = os.getenv("PRINT_VALUES", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        raw = token_text(source, tok)
        print(f"{index:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} text={tok.text!r} source={raw!r}")


def debug_dump_value(test_name: str, value: YamlValue, source: str | None = None) -> None:
    if not PRINT_VALUES:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"\n===== {test_name} VALUE =====")
    print(_dump_value(value))


def debug_dump_diagnostic(test_name: str, diagnostic: Diagnostic | None, source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTIC =====")
    if diagnostic is None:
        print("(none)")
        return
    location = ""
    if source is not None:
        line, column = line_column(source, diagnostic.range.start)
        location = f" {line}:{column}"
    print(f"{diagnostic.code}{location} {diagnostic}")


def _dump_value(value: YamlValue) -> str:
    lines: list[str] = []

    def walk(current: YamlValue, depth: int, label: str) -> None:
        indent = "  " * depth
        if isinstance(current, YamlMap):
            lines.append(f"{indent}{label}Map len={len(current)}")
            for key, item in current.entries:
                walk(item, depth + 1, f"{key} => ")
            return
        if isinstance(current, YamlArray):
            lines.append(f"{indent}{label}Array len={len(current)}")
            for item in current.items:
                walk(item, depth + 1, "- ")
            return
        lines.append(f"{indent}{label}{current}")

    walk(value, 0, "")
    return "\n".join(lines)
