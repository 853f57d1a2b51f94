"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits and accepted directive versions."""

    mode: ParseMode = ParseMode.STRICT
    accepted_versions: frozenset[str] = frozenset({"1.1", "1.2"})
    max_depth: int | None = 64
    int_bits: int | None = 64

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                accepted_versions=frozenset({"1.0", "1.1", "1.2"}),
                max_depth=None,
                int_bits=None,
            )

        return ParserOptions(mode=mode)
