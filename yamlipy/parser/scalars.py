"""Scalar text conversions: numbers, quoting, folding and block scalar bodies."""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from yamlipy.lexer import TokenKind
from yamlipy.lexer.rules import indentation_patterns

_BREAKS_RE: Final = re.compile(r"\r\n|\r")
_PLAIN_EDGES_RE: Final = re.compile(r"^[ \t\n]+|[ \t\n]+$")
_LEAD_RE: Final = re.compile(r"^[ \t]+")
_TRAIL_RE: Final = re.compile(r"[ \t]+$")
_LINE_EDGES_RE: Final = re.compile(r"^[ \t]+|[ \t]+$|\\\n", re.MULTILINE)
_SINGLE_BREAK_RE: Final = re.compile(r"(^|.)\n(?=.|$)")
_BREAK_RUN_RE: Final = re.compile(r"(.)\n(\n+)")

_ESCAPE_RE: Final = re.compile(
    r"\\(?:([0abtnvfre \t\"\\/N_LP])|x([0-9A-Fa-f]{2})|u([0-9A-Fa-f]{4})|U([0-9A-Fa-f]{8}))"
)
_NAMED_ESCAPES: Final[dict[str, str]] = {
    "0": "\x00",
    "a": "\x07",
    "b": "\b",
    "t": "\t",
    "\t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
    "e": "\x1b",
    " ": " ",
    '"': '"',
    "\\": "\\",
    "/": "/",
    "N": "\x85",
    "_": "\xa0",
    "L": "\u2028",
    "P": "\u2029",
}

_BLOCK_HEADER_RE: Final = re.compile(r"^[|>]([1-9][-+]|[-+]?[1-9]?)(?: |$)")
_FIRST_INDENT_RE: Final = re.compile(r"^(?: *\n)* +(?! |\n|$)")
_TRAILING_BREAKS_RE: Final = re.compile(r"\n*\Z")
_FOLD_LINE_RE: Final = re.compile(r"^([^ \t\n].*)\n(?=[^ \t\n])", re.MULTILINE)
_FOLD_BLANKS_RE: Final = re.compile(r"^([^ \t\n].*)\n(\n+)(?![ \t])", re.MULTILINE)


def normalize_breaks(text: str) -> str:
    return _BREAKS_RE.sub("\n", text)


def fold_flow(text: str) -> str:
    """Flow folding: one line break becomes a space, N breaks become N-1.

    Blanks around each line break are dropped, blanks at either end of the
    whole text are kept, and an escaped break (backslash, newline) joins
    lines with nothing in between.
    """
    lead = _LEAD_RE.match(text)
    head = lead.group() if lead else ""
    rest = text[len(head) :]
    trail = _TRAIL_RE.search(rest)
    cut = trail.start() if trail else len(rest)
    body, tail = rest[:cut], rest[cut:]

    body = _LINE_EDGES_RE.sub("", body)
    body = _SINGLE_BREAK_RE.sub(r"\1 ", body)
    body = _BREAK_RUN_RE.sub(r"\1\2", body)
    return head + body + tail


def fold_block(text: str) -> str:
    """Folded block scalar folding; more-indented lines and trailing breaks are kept."""
    trail = _TRAILING_BREAKS_RE.search(text)
    tail = trail.group() if trail else ""
    body = text[: len(text) - len(tail)]
    body = _FOLD_LINE_RE.sub(r"\1 ", body)
    body = _FOLD_BLANKS_RE.sub(r"\1\2", body)
    return body + tail


def plain_string(text: str) -> str:
    return fold_flow(_PLAIN_EDGES_RE.sub("", normalize_breaks(text)))


def _unescape(found: re.Match[str]) -> str:
    named, hex2, hex4, hex8 = found.groups()
    if named is not None:
        return _NAMED_ESCAPES[named]
    code = int(hex2 or hex4 or hex8, 16)
    if code > 0x10FFFF:
        return found.group()
    return chr(code)


def double_quoted_string(text: str) -> str:
    """Unwrap, fold and decode escapes in a single left-to-right pass."""
    return _ESCAPE_RE.sub(_unescape, fold_flow(normalize_breaks(text[1:-1])))


def single_quoted_string(text: str) -> str:
    return fold_flow(normalize_breaks(text[1:-1])).replace("''", "'")


def parse_int_literal(kind: TokenKind, text: str, *, bits: int | None = 64) -> int:
    """Integer value of an INT, INT_OCT, INT_HEX or INT_SEX token.

    Raises OverflowError when the value does not fit a signed `bits`-wide
    integer; `bits=None` disables the check.
    """
    match kind:
        case TokenKind.INT:
            value = int(text, 10)
        case TokenKind.INT_OCT:
            value = int(text.removeprefix("0o"), 8)
        case TokenKind.INT_HEX:
            value = int(text.removeprefix("0x"), 16)
        case TokenKind.INT_SEX:
            value = 0
            for part in text.split(":"):
                value = value * 60 + int(part, 10)
        case _:
            raise ValueError(f"Not an integer token: {kind.name}")

    if bits is not None:
        limit = 1 << (bits - 1)
        if not -limit <= value < limit:
            raise OverflowError(f"Integer literal {text!r} does not fit in {bits} bits")
    return value


class Chomping(IntEnum):
    STRIP = -1
    CLIP = 0
    KEEP = 1


@dataclass(frozen=True, slots=True)
class BlockHeader:
    chomping: Chomping
    indent: int | None


def parse_block_header(text: str) -> BlockHeader | None:
    """Chomping and explicit indentation from a `|` or `>` header, or None if malformed."""
    found = _BLOCK_HEADER_RE.match(text)
    if found is None:
        return None
    indicators = found.group(1)
    if "-" in indicators:
        chomping = Chomping.STRIP
    elif "+" in indicators:
        chomping = Chomping.KEEP
    else:
        chomping = Chomping.CLIP
    digits = indicators.strip("-+")
    return BlockHeader(chomping=chomping, indent=int(digits) if digits else None)


def detect_block_indent(body: str) -> int:
    """Indentation of the first non-blank line, or 0 when there is none."""
    found = _FIRST_INDENT_RE.match(body)
    if found is None:
        return 0
    lead = found.group()
    return len(lead) - (lead.rfind("\n") + 1)


def has_overindented_leading_blank(body: str, indent: int) -> bool:
    """A leading all-space line with more than `indent` spaces."""
    return re.match(rf"(?: {{0,{indent}}}\n)* {{{indent + 1},}}\n", body) is not None


def block_scalar_text(body: str, indent: int, chomping: Chomping) -> str:
    """Remove `indent` columns from every line, then apply chomping."""
    first_line, next_lines = indentation_patterns(indent)
    text = next_lines.sub("\n", first_line.sub("", body, count=1))
    match chomping:
        case Chomping.STRIP:
            return re.sub(r"(?:\n *)*\Z", "", text, count=1)
        case Chomping.CLIP:
            return re.sub(r"(?:\n *)+\Z", "\n", text, count=1)
        case Chomping.KEEP:
            return text
