"""Recursive-descent grammar.

Each function takes a `ParseContext` and returns an `Outcome` of the next
context plus the parsed value. Repetition is a loop; nesting is recursion,
bounded by the depth check in `_start`.
"""

import math
from collections.abc import Callable, Sequence

from yamlipy.diagnostics.codes import (
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
)
from yamlipy.lexer import Token, TokenKind
from yamlipy.parser.context import ParseContext, expect, ignore_document_end, ignore_space
from yamlipy.parser.options import ParserOptions
from yamlipy.parser.scalars import (
    block_scalar_text,
    detect_block_indent,
    double_quoted_string,
    fold_block,
    has_overindented_leading_blank,
    normalize_breaks,
    parse_block_header,
    parse_int_literal,
    plain_string,
    single_quoted_string,
)
from yamlipy.result import Err, Ok, Outcome, guard
from yamlipy.value import FALSE, NULL, TRUE, YamlArray, YamlDouble, YamlInt, YamlMap, YamlString, YamlValue

type ContextValue = tuple[ParseContext, YamlValue]
type Entry = tuple[YamlValue, YamlValue]
type ContextEntry = tuple[ParseContext, Entry]

_OPENERS = frozenset({TokenKind.INDENT, TokenKind.LBRACKET, TokenKind.LBRACE})
_CLOSERS = frozenset({TokenKind.DEDENT, TokenKind.RBRACKET, TokenKind.RBRACE})
_ABSENT = frozenset({TokenKind.END, TokenKind.DEDENT, TokenKind.DOC_START, TokenKind.DOC_END})


# -------------------------
# Documents
# -------------------------


def parse_document(tokens: Sequence[Token], options: ParserOptions | None = None) -> Outcome[YamlValue]:
    """Parse exactly one document; anything but trivia after it is an error."""
    return _start(tokens, options).and_then(parse_header).and_then(parse_value).and_then(_finish_document)


def parse_documents(tokens: Sequence[Token], options: ParserOptions | None = None) -> Outcome[list[YamlValue]]:
    """Parse every document in the stream. Each starts with no aliases."""
    started = _start(tokens, options)
    if isinstance(started, Err):
        return started

    context = ignore_space(started.value)
    documents: list[YamlValue] = []
    while context.kind != TokenKind.END:
        outcome = parse_header(context).and_then(parse_value)
        if isinstance(outcome, Err):
            return outcome
        next_context, document = outcome.value
        next_context = ignore_document_end(next_context)
        if next_context.position == context.position:
            return _unexpected(context)
        documents.append(document)
        context = next_context
    return Ok(documents)


def _start(tokens: Sequence[Token], options: ParserOptions | None) -> Outcome[ParseContext]:
    context = ParseContext.start(tokens, options)
    max_depth = context.options.max_depth
    if max_depth is None:
        return Ok(context)

    depth = 0
    for position, token in enumerate(context.tokens):
        if token.kind in _OPENERS:
            depth += 1
            if depth > max_depth:
                return context.at(position).fail(PARSER_NESTING_TOO_DEEP)
        elif token.kind in _CLOSERS:
            depth -= 1
    return Ok(context)


def _finish_document(result: ContextValue) -> Outcome[YamlValue]:
    context, document = result
    return expect(ignore_document_end(context), TokenKind.END, "end of input").map(lambda _: document)


def parse_header(context: ParseContext) -> Outcome[ParseContext]:
    """Skip trivia, an optional `%YAML` directive and an optional `---`."""
    context = context.without_aliases()
    seen_directive = False
    while True:
        match context.kind:
            case TokenKind.COMMENT | TokenKind.SPACE | TokenKind.NEWLINE:
                context = context.advance()
            case TokenKind.YAML_DIRECTIVE:
                if seen_directive:
                    return context.fail(PARSER_DUPLICATE_DIRECTIVE)
                outcome = expect(context.advance(), TokenKind.SPACE, "space after %YAML").and_then(_parse_version)
                if isinstance(outcome, Err):
                    return outcome
                context = outcome.value
                seen_directive = True
            case TokenKind.DOC_START:
                return Ok(context.advance())
            case _ if seen_directive:
                return context.fail(PARSER_MISSING_DOCUMENT_START)
            case _:
                return Ok(context)


def _parse_version(context: ParseContext) -> Outcome[ParseContext]:
    version = context.current.text
    return guard(
        version in context.options.accepted_versions,
        lambda: context.error(PARSER_INVALID_VERSION, f"Invalid YAML version {version!r}"),
    ).then(lambda: Ok(context.advance()))


# -------------------------
# Values
# -------------------------


def parse_value(context: ParseContext) -> Outcome[ContextValue]:
    context = ignore_space(context)
    token = context.current
    match token.kind:
        case TokenKind.NULL:
            return Ok((context.advance(), NULL))
        case TokenKind.TRUE:
            return Ok((context.advance(), TRUE))
        case TokenKind.FALSE:
            return Ok((context.advance(), FALSE))
        case TokenKind.INT | TokenKind.INT_OCT | TokenKind.INT_HEX | TokenKind.INT_SEX:
            number = parse_int_literal(token.kind, token.text, bits=context.options.int_bits)
            return Ok((context.advance(), YamlInt(number)))
        case TokenKind.INFINITY_POS:
            return Ok((context.advance(), YamlDouble(math.inf)))
        case TokenKind.INFINITY_NEG:
            return Ok((context.advance(), YamlDouble(-math.inf)))
        case TokenKind.NAN:
            return Ok((context.advance(), YamlDouble(math.nan)))
        case TokenKind.DOUBLE:
            return Ok((context.advance(), YamlDouble(float(token.text))))
        case TokenKind.DASH:
            return parse_block_sequence(context)
        case TokenKind.LBRACKET:
            return parse_flow_sequence(context)
        case TokenKind.LBRACE:
            return parse_flow_mapping(context)
        case TokenKind.QUESTION:
            return parse_block_mapping(context)
        case TokenKind.STRING | TokenKind.STRING_DQ | TokenKind.STRING_SQ:
            return parse_block_mapping_or_string(context)
        case TokenKind.LITERAL | TokenKind.FOLDED:
            return parse_block_scalar(context)
        case TokenKind.INDENT:
            return parse_value(context.advance()).and_then(_closed_by(TokenKind.DEDENT, "dedent"))
        case TokenKind.ANCHOR:
            name = token.text[1:]
            return parse_value(context.advance()).map(
                lambda result: (result[0].with_alias(name, result[1]), result[1])
            )
        case TokenKind.ALIAS:
            return _resolve_alias(context, token.text[1:])
        case kind if kind in _ABSENT:
            return Ok((context, NULL))
        case _:
            return _unexpected(context)


def _resolve_alias(context: ParseContext, name: str) -> Outcome[ContextValue]:
    value = context.aliases.get(name)
    if value is None:
        return context.fail(PARSER_UNKNOWN_ALIAS, f"Unknown alias `{name}`")
    return Ok((context.advance(), value))


def _unexpected(context: ParseContext) -> Err:
    return context.fail(PARSER_UNEXPECTED_TOKEN, f"Unexpected {context.kind.label}")


def _closed_by(kind: TokenKind, what: str) -> Callable[[ContextValue], Outcome[ContextValue]]:
    """After a nested value, skip trivia and require a closing `kind` token."""

    def close(result: ContextValue) -> Outcome[ContextValue]:
        context, value = result
        return expect(ignore_space(context), kind, what).map(lambda closed: (closed, value))

    return close


# -------------------------
# Scalars
# -------------------------


def parse_string(context: ParseContext) -> Outcome[ContextValue]:
    token = context.current
    match token.kind:
        case TokenKind.STRING:
            text = plain_string(token.text)
        case TokenKind.STRING_DQ:
            text = double_quoted_string(token.text)
        case TokenKind.STRING_SQ:
            text = single_quoted_string(token.text)
        case _:
            return context.fail(PARSER_EXPECTED_TOKEN, "Expected string")
    return Ok((context.advance(), YamlString(text)))


def parse_block_mapping_or_string(context: ParseContext) -> Outcome[ContextValue]:
    """A string directly followed by `:` on its own line starts a block map."""
    if context.nth(1).kind == TokenKind.COLON and "\n" not in context.current.text:
        return parse_block_mapping(context)
    return parse_string(context)


def parse_block_scalar(context: ParseContext) -> Outcome[ContextValue]:
    """`|` literal or `>` folded scalar: header, body, indentation and chomping."""
    folded = context.kind == TokenKind.FOLDED
    header = parse_block_header(context.current.text)
    if header is None:
        return context.fail(PARSER_INVALID_BLOCK_HEADER)

    body_context = context.advance()
    after_body = expect(body_context, TokenKind.STRING, "block scalar body")
    if isinstance(after_body, Err):
        return after_body

    body = normalize_breaks(body_context.current.text)
    detected = detect_block_indent(body)
    indent = header.indent or detected
    if indent > 0 and has_overindented_leading_blank(body, indent):
        return body_context.fail(PARSER_BLOCK_LEADING_BLANK)
    if header.indent is not None and 0 < detected < header.indent:
        return body_context.fail(PARSER_BLOCK_UNDERINDENTED)

    text = block_scalar_text(body, indent, header.chomping)
    if folded:
        text = fold_block(text)
    return Ok((after_body.value, YamlString(text)))


# -------------------------
# Collections
# -------------------------


def parse_block_sequence(context: ParseContext) -> Outcome[ContextValue]:
    items: list[YamlValue] = []
    while context.kind == TokenKind.DASH:
        outcome = (
            expect(context.advance(), TokenKind.INDENT, "indent after dash")
            .and_then(parse_value)
            .and_then(_closed_by(TokenKind.DEDENT, "dedent after dash indent"))
        )
        if isinstance(outcome, Err):
            return outcome
        context, item = outcome.value
        context = ignore_space(context)
        items.append(item)
    return Ok((context, YamlArray(tuple(items))))


def parse_block_mapping(context: ParseContext) -> Outcome[ContextValue]:
    """Entries continue while the next token is `?` or a string key."""
    entries: list[Entry] = []
    seen: set[YamlValue] = set()
    while True:
        if context.kind == TokenKind.QUESTION:
            outcome = _parse_explicit_entry(context, seen)
        elif context.kind.is_string:
            outcome = _parse_implicit_entry(context, seen)
        else:
            return Ok((context, YamlMap(tuple(entries))))
        if isinstance(outcome, Err):
            return outcome
        context, entry = outcome.value
        seen.add(entry[0])
        entries.append(entry)


def _parse_explicit_entry(context: ParseContext, seen: set[YamlValue]) -> Outcome[ContextEntry]:
    """`? key` with an optional `: value`; a missing value is null."""
    keyed = parse_value(context.advance()).and_then(_unique_key(seen))
    if isinstance(keyed, Err):
        return keyed
    context, key = keyed.value
    context = ignore_space(context)
    valued = _parse_colon_value(context) if context.kind == TokenKind.COLON else Ok((context, NULL))
    return valued.map(lambda result: (ignore_space(result[0]), (key, result[1])))


def _parse_implicit_entry(context: ParseContext, seen: set[YamlValue]) -> Outcome[ContextEntry]:
    keyed = parse_string(context).and_then(_unique_key(seen))
    if isinstance(keyed, Err):
        return keyed
    context, key = keyed.value
    valued = _parse_colon_value(ignore_space(context))
    return valued.map(lambda result: (ignore_space(result[0]), (key, result[1])))


def _parse_colon_value(context: ParseContext) -> Outcome[ContextValue]:
    return expect(context, TokenKind.COLON, "colon").and_then(parse_value)


def _unique_key(seen: set[YamlValue]) -> Callable[[ContextValue], Outcome[ContextValue]]:
    def check(result: ContextValue) -> Outcome[ContextValue]:
        context, key = result
        return guard(
            key not in seen,
            lambda: context.error(PARSER_DUPLICATE_KEY, f"Duplicate key {key}"),
        ).then(lambda: Ok(result))

    return check


def parse_flow_sequence(context: ParseContext) -> Outcome[ContextValue]:
    opened = expect(context, TokenKind.LBRACKET, "[")
    if isinstance(opened, Err):
        return opened
    context = opened.value

    items: list[YamlValue] = []
    while True:
        context = ignore_space(context)
        if context.kind == TokenKind.RBRACKET:
            return Ok((context.advance(), YamlArray(tuple(items))))
        outcome = _after_separator(context, first=not items).and_then(parse_value)
        if isinstance(outcome, Err):
            return outcome
        context, item = outcome.value
        items.append(item)


def parse_flow_mapping(context: ParseContext) -> Outcome[ContextValue]:
    opened = expect(context, TokenKind.LBRACE, "{")
    if isinstance(opened, Err):
        return opened
    context = opened.value

    entries: list[Entry] = []
    seen: set[YamlValue] = set()
    while True:
        context = ignore_space(context)
        if context.kind == TokenKind.RBRACE:
            return Ok((context.advance(), YamlMap(tuple(entries))))
        keyed = (
            _after_separator(context, first=not entries)
            .map(ignore_space)
            .and_then(parse_string)
            .and_then(_unique_key(seen))
        )
        if isinstance(keyed, Err):
            return keyed
        context, key = keyed.value
        valued = _parse_colon_value(ignore_space(context))
        if isinstance(valued, Err):
            return valued
        context, value = valued.value
        seen.add(key)
        entries.append((key, value))


def _after_separator(context: ParseContext, *, first: bool) -> Outcome[ParseContext]:
    """Every flow element but the first is preceded by a comma."""
    if first:
        return Ok(context)
    return expect(context, TokenKind.COMMA, "comma")
