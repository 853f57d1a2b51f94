"""Immutable parser state threaded through every grammar function."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from yamlipy.diagnostics import Diagnostic, DiagnosticSpec
from yamlipy.diagnostics.codes import PARSER_EXPECTED_TOKEN
from yamlipy.diagnostics.diagnostic import EXCERPT_LENGTH
from yamlipy.lexer import END_TOKEN, Token, TokenKind
from yamlipy.parser.options import ParserOptions
from yamlipy.result import Err, Ok, Outcome
from yamlipy.value import YamlValue

_NO_ALIASES: Mapping[str, YamlValue] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ParseContext:
    """A position in a shared token tuple plus the aliases defined so far.

    Steps never mutate a context; they return a new one. `aliases` is
    copy-on-write, so earlier contexts keep seeing only earlier anchors.
    """

    tokens: tuple[Token, ...]
    position: int = 0
    aliases: Mapping[str, YamlValue] = field(default=_NO_ALIASES)
    options: ParserOptions = field(default_factory=ParserOptions)

    @staticmethod
    def start(tokens: Sequence[Token], options: ParserOptions | None = None) -> "ParseContext":
        return ParseContext(tuple(tokens), options=options or ParserOptions())

    @property
    def current(self) -> Token:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return END_TOKEN

    @property
    def kind(self) -> TokenKind:
        return self.current.kind

    def nth(self, offset: int) -> Token:
        index = self.position + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return END_TOKEN

    def advance(self) -> "ParseContext":
        return replace(self, position=min(self.position + 1, len(self.tokens)))

    def at(self, position: int) -> "ParseContext":
        return replace(self, position=position)

    def with_alias(self, name: str, value: YamlValue) -> "ParseContext":
        return replace(self, aliases=MappingProxyType({**self.aliases, name: value}))

    def without_aliases(self) -> "ParseContext":
        return replace(self, aliases=_NO_ALIASES)

    def excerpt(self) -> str:
        """Text of the tokens from the current position, cut at the excerpt length."""
        parts: list[str] = []
        length = 0
        for token in self.tokens[self.position :]:
            if token.kind == TokenKind.END or length >= EXCERPT_LENGTH:
                break
            parts.append(token.text)
            length += len(token.text)
        return "".join(parts)[:EXCERPT_LENGTH]

    def error(self, spec: DiagnosticSpec, message: str | None = None) -> Diagnostic:
        return Diagnostic.from_spec(
            spec,
            excerpt=self.excerpt(),
            range=self.current.range,
            message=message,
        )

    def fail(self, spec: DiagnosticSpec, message: str | None = None) -> Err:
        return Err(self.error(spec, message))


_SPACE_KINDS = frozenset({TokenKind.COMMENT, TokenKind.SPACE, TokenKind.NEWLINE})
_DOCUMENT_END_KINDS = _SPACE_KINDS | {TokenKind.DOC_END}


def _skip(context: ParseContext, kinds: frozenset[TokenKind]) -> ParseContext:
    position = context.position
    while position < len(context.tokens) and context.tokens[position].kind in kinds:
        position += 1
    return context if position == context.position else context.at(position)


def ignore_space(context: ParseContext) -> ParseContext:
    """Skip comments, spaces and newlines."""
    return _skip(context, _SPACE_KINDS)


def ignore_document_end(context: ParseContext) -> ParseContext:
    """Skip trivia and `...` markers after a document's content."""
    return _skip(context, _DOCUMENT_END_KINDS)


def expect(context: ParseContext, kind: TokenKind, what: str) -> Outcome[ParseContext]:
    """Consume a token of `kind`, or fail with "Expected <what>"."""
    if context.kind == kind:
        return Ok(context.advance())
    return context.fail(PARSER_EXPECTED_TOKEN, f"Expected {what}")
