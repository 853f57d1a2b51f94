"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    category: str | None = None


LEXER_UNEXPECTED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEX001",
    message="Unrecognized input",
    category="lexer",
)

LEXER_RESERVED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEX002",
    message="Reserved indicator character",
    hint="`@` and backtick cannot start a plain scalar; quote the value.",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEX003",
    message="Unterminated quoted scalar",
    hint="Close the scalar with a matching quote.",
    category="lexer",
)

LEXER_INCONSISTENT_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEX004",
    message="Indentation does not match any enclosing block",
    hint="Align the line with an enclosing entry or indent it past its parent.",
    category="lexer",
)

LEXER_TAB_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEX005",
    message="Tab character used for indentation",
    hint="Indent block content with spaces.",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE001",
    message="Expected token",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE002",
    message="Unexpected token",
    category="parser",
)

PARSER_UNKNOWN_ALIAS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE003",
    message="Unknown alias",
    hint="Anchors (`&name`) must appear before their aliases in the same document.",
    category="parser",
)

PARSER_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE004",
    message="Duplicate key",
    category="parser",
)

PARSER_INVALID_VERSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE005",
    message="Invalid YAML version",
    hint="Use `%YAML 1.1` or `%YAML 1.2`.",
    category="parser",
)

PARSER_DUPLICATE_DIRECTIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE006",
    message="Duplicate %YAML directive",
    category="parser",
)

PARSER_MISSING_DOCUMENT_START: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE007",
    message="Expected `---` after directives",
    category="parser",
)

PARSER_INVALID_BLOCK_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE008",
    message="Invalid chomping or indentation indicator in block scalar header",
    hint="Headers look like `|`, `|-`, `>+` or `|2-`.",
    category="block-scalar",
)

PARSER_BLOCK_LEADING_BLANK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE009",
    message="Leading all-space line must not have more spaces than the block scalar content",
    category="block-scalar",
)

PARSER_BLOCK_UNDERINDENTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE010",
    message="Block scalar is less indented than the indicated level",
    category="block-scalar",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE011",
    message="Maximum nesting depth exceeded",
    hint="Raise `ParserOptions.max_depth` or parse in permissive mode.",
    category="parser",
)
