"""Parser."""

from yamlipy.parser.context import ParseContext, expect, ignore_document_end, ignore_space
from yamlipy.parser.grammar import (
    parse_block_mapping,
    parse_block_scalar,
    parse_block_sequence,
    parse_document,
    parse_documents,
    parse_flow_mapping,
    parse_flow_sequence,
    parse_header,
    parse_string,
    parse_value,
)
from yamlipy.parser.load import debug_load, debug_load_all, load, load_all
from yamlipy.parser.options import ParseMode, ParserOptions

__all__ = [
    "ParseContext",
    "ParseMode",
    "ParserOptions",
    "debug_load",
    "debug_load_all",
    "expect",
    "ignore_document_end",
    "ignore_space",
    "load",
    "load_all",
    "parse_block_mapping",
    "parse_block_scalar",
    "parse_block_sequence",
    "parse_document",
    "parse_documents",
    "parse_flow_mapping",
    "parse_flow_sequence",
    "parse_header",
    "parse_string",
    "parse_value",
]
