"""High-level parse entrypoints for YAML source text."""

from yamlipy.lexer import dump_tokens, tokenize
from yamlipy.parser.grammar import parse_document, parse_documents
from yamlipy.parser.options import ParseMode, ParserOptions
from yamlipy.result import Err, Outcome
from yamlipy.text import line_column
from yamlipy.value import YamlValue


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def load(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Outcome[YamlValue]:
    """Parse a single-document stream."""
    resolved_options = _resolve_options(options=options, mode=mode)
    return tokenize(text).and_then(lambda tokens: parse_document(tokens, resolved_options))


def load_all(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Outcome[list[YamlValue]]:
    """Parse every document of a multi-document stream."""
    resolved_options = _resolve_options(options=options, mode=mode)
    return tokenize(text).and_then(lambda tokens: parse_documents(tokens, resolved_options))


def debug_load(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Outcome[YamlValue]:
    """`load`, printing the token stream and the result along the way."""
    _debug_tokens(text)
    outcome = load(text, options, mode=mode)
    _debug_outcome(text, outcome)
    return outcome


def debug_load_all(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Outcome[list[YamlValue]]:
    _debug_tokens(text)
    outcome = load_all(text, options, mode=mode)
    _debug_outcome(text, outcome)
    return outcome


def _debug_tokens(text: str) -> None:
    print("====== tokens ======")
    match tokenize(text):
        case Err(error=error):
            print(f"- {error.code} {error}")
        case lexed:
            dump_tokens(lexed.value, text)


def _debug_outcome(text: str, outcome: Outcome[YamlValue] | Outcome[list[YamlValue]]) -> None:
    print("====== result ======")
    match outcome:
        case Err(error=error):
            line, column = line_column(text, error.range.start)
            print(f"- {error.code} {line}:{column} {error}")
            if error.hint:
                print(f"  hint: {error.hint}")
        case _ if isinstance(outcome.value, list):
            for index, document in enumerate(outcome.value):
                print(f"--- document {index}")
                print(document)
        case _:
            print(outcome.value)
