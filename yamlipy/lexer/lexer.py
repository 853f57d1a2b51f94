"""Lexer."""

import re
from dataclasses import dataclass

from yamlipy.diagnostics import Diagnostic, DiagnosticSpec
from yamlipy.diagnostics.codes import (
    LEXER_INCONSISTENT_INDENTATION,
    LEXER_TAB_INDENTATION,
    LEXER_UNEXPECTED_INPUT,
)
from yamlipy.lexer.rules import (
    BREAK_RE,
    CONTINUATION_TRIM_RE,
    DASH_RE,
    LEX_RULES,
    TAB_INDENT_RE,
    LexRule,
    PlainStyle,
    block_scalar_pattern,
    indentation_patterns,
    plain_continuation_pattern,
)
from yamlipy.lexer.tokens import Token, TokenKind
from yamlipy.result import Err, Ok, Outcome
from yamlipy.text import TextRange, TextSize, slice_text_range


@dataclass(frozen=True, slots=True)
class IndentLevel:
    """One entry of the indentation stack.

    `implicit` levels are opened by a `-`, `?` or `:` marker on the current
    line rather than by the indentation of a new line.
    """

    column: int
    implicit: bool = False


class Lexer:
    """Indentation-aware lexer producing a flat token list ending in END."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._tokens: list[Token] = []
        self._indents: list[IndentLevel] = [IndentLevel(0)]
        self._flow_depth = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def indent(self) -> int:
        """Column of the innermost open indentation level."""
        return self._indents[-1].column

    @property
    def in_flow(self) -> bool:
        return self._flow_depth > 0

    def lex(self) -> Outcome[list[Token]]:
        while not self.is_eof:
            error = self._lex_token()
            if error is not None:
                return Err(error)

        end = TextRange.empty(TextSize.from_int(self._position))
        while len(self._indents) > 1:
            self._indents.pop()
            self._tokens.append(Token(TokenKind.DEDENT, "", end))
        self._tokens.append(Token(TokenKind.END, "", end))
        return Ok(self._tokens)

    def _lex_token(self) -> Diagnostic | None:
        for rule in LEX_RULES:
            if rule.block_context_only and self.in_flow:
                continue
            found = rule.pattern.match(self._source, self._position)
            if found is None:
                continue
            if rule.error is not None:
                return self._error(rule.error)
            return self._apply(rule, found)
        return self._error(LEXER_UNEXPECTED_INPUT)

    def _apply(self, rule: LexRule, found: re.Match[str]) -> Diagnostic | None:
        match rule.kind:
            case TokenKind.NEWLINE:
                return self._lex_newline(found)
            case TokenKind.DASH | TokenKind.QUESTION:
                self._lex_entry_indicator(rule.kind, found)
            case TokenKind.COLON:
                self._emit_match(TokenKind.COLON, found)
                if not self.in_flow:
                    self._open_implicit_level(self.indent + 1)
                    self._emit(TokenKind.INDENT, "", found.end(), found.end())
            case TokenKind.LBRACKET | TokenKind.LBRACE:
                self._flow_depth += 1
                self._emit_match(rule.kind, found)
            case TokenKind.RBRACKET | TokenKind.RBRACE:
                self._flow_depth = max(0, self._flow_depth - 1)
                self._emit_match(rule.kind, found)
            case TokenKind.LITERAL | TokenKind.FOLDED:
                self._emit_match(rule.kind, found)
                self._lex_block_scalar_body()
            case TokenKind.STRING if rule.plain is PlainStyle.MULTILINE:
                self._lex_multiline_plain(found)
            case TokenKind.STRING:
                self._emit(TokenKind.STRING, found.group().strip(" \t"), *found.span())
            case _:
                self._emit_match(rule.kind, found)
        return None

    def _lex_newline(self, found: re.Match[str]) -> Diagnostic | None:
        text = found.group()
        start, end = found.span()
        spaces = len(text) - len(text.rstrip(" "))

        if self.in_flow:
            self._emit(TokenKind.NEWLINE, text, start, end)
            return None

        if TAB_INDENT_RE.match(self._source, end) is not None:
            self._position = end
            return self._error(LEXER_TAB_INDENTATION)

        if spaces == self.indent:
            self._emit(TokenKind.NEWLINE, text, start, end)
            return None

        if spaces > self.indent:
            if self._tokens and self._tokens[-1].kind == TokenKind.INDENT:
                # A marker's pending level takes the column of its content line.
                self._indents[-1] = IndentLevel(spaces)
                self._tokens[-1] = Token(TokenKind.INDENT, text, TextRange(start, end))
                self._position = end
            else:
                self._indents.append(IndentLevel(spaces))
                self._emit(TokenKind.INDENT, text, start, end)
            return None

        # `- - x` style nesting: a dash one column left of the innermost level
        # still belongs to it.
        nested_dash = DASH_RE.match(self._source, end) is not None
        if nested_dash and spaces == self.indent - 1:
            self._emit(TokenKind.NEWLINE, text, start, end)
            return None

        limit = spaces + 1 if nested_dash else spaces
        while len(self._indents) > 1 and limit < self.indent:
            self._indents.pop()
            self._emit(TokenKind.DEDENT, "", start, start)
        # Other lines must land exactly on an open level.
        if not nested_dash and spaces != self.indent:
            self._position = end
            return self._error(LEXER_INCONSISTENT_INDENTATION)
        self._emit(TokenKind.NEWLINE, text, start, end)
        return None

    def _lex_entry_indicator(self, kind: TokenKind, found: re.Match[str]) -> None:
        text = found.group()
        start, end = found.span()
        self._open_implicit_level(self.indent + len(text))
        self._emit(kind, text[0], start, start + 1)
        self._emit(TokenKind.INDENT, text[1:], start + 1, end)

    def _lex_block_scalar_body(self) -> None:
        """Emit the body following a `|` or `>` header as one STRING token.

        The parent node's indentation is removed here; header indicators,
        content indentation and chomping are applied by the parser.
        """
        top = self._indents[-1]
        parent = self._indents[-2].column if top.implicit else top.column
        start = self._position

        body = block_scalar_pattern(parent + 1).match(self._source, start)
        lead = body.group() if body is not None else ""
        self._position = start + len(lead)

        first_line, next_lines = indentation_patterns(parent)
        text = BREAK_RE.sub("", lead, count=1)
        text = first_line.sub("", text, count=1)
        text = next_lines.sub("\n", text)
        if lead and BREAK_RE.match(self._source, self._position) is not None:
            text += "\n"
        self._emit(TokenKind.STRING, text, start, self._position)

    def _lex_multiline_plain(self, found: re.Match[str]) -> None:
        text = found.group().strip(" \t")
        start, position = found.span()
        continuation = plain_continuation_pattern(self.indent)
        while True:
            line = continuation.match(self._source, position)
            if line is None:
                break
            text += "\n" + CONTINUATION_TRIM_RE.sub("", line.group())
            position = line.end()
        self._emit(TokenKind.STRING, text, start, position)

    def _open_implicit_level(self, column: int) -> None:
        self._indents.append(IndentLevel(column, implicit=True))

    def _emit_match(self, kind: TokenKind, found: re.Match[str]) -> None:
        self._emit(kind, found.group(), *found.span())

    def _emit(self, kind: TokenKind, text: str, start: int, end: int) -> None:
        self._tokens.append(Token(kind, text, TextRange(start, end)))
        self._position = max(self._position, end)

    def _error(self, spec: DiagnosticSpec) -> Diagnostic:
        offset = TextSize.from_int(self._position)
        return Diagnostic.from_spec(
            spec,
            excerpt=self._source[self._position :],
            range=TextRange.empty(offset),
        )


def tokenize(text: str) -> Outcome[list[Token]]:
    """Tokenize `text`, or fail with the first lexical error."""
    return Lexer(text).lex()


def token_text(source: str, token: Token) -> str:
    """Source slice a token was lexed from."""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str | None = None) -> None:
    """Print token list with kind, range, and text for debugging."""
    for i, tok in enumerate(tokens):
        raw = "" if source is None else f" source={token_text(source, tok)!r}"
        print(f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} text={tok.text!r}{raw}")
