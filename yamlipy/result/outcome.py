"""Success-or-error carrier threaded through the lexer and parser.

Expected failures never raise: every stage returns `Ok(value)` or
`Err(diagnostic)` and the combinators below short-circuit on the first error.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar

from yamlipy.diagnostics import Diagnostic

T = TypeVar("T")
U = TypeVar("U")


class YamlError(Exception):
    """Raised by `Err.unwrap()` for callers that prefer exceptions."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> Literal[True]:
        return True

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        return fn(self.value)

    def then(self, fn: Callable[[], "Outcome[U]"]) -> "Outcome[U]":
        """Run `fn` and discard this value."""
        return fn()

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    error: Diagnostic

    @property
    def is_ok(self) -> Literal[False]:
        return False

    def map(self, fn: Callable[[object], object]) -> "Err":
        return self

    def and_then(self, fn: Callable[[object], object]) -> "Err":
        return self

    def then(self, fn: Callable[[], object]) -> "Err":
        return self

    def unwrap(self) -> NoReturn:
        raise YamlError(self.error)


type Outcome[T] = Ok[T] | Err


def guard(condition: bool, make_error: Callable[[], Diagnostic]) -> Outcome[None]:
    """`Ok(None)` when `condition` holds, otherwise `Err(make_error())`."""
    if condition:
        return Ok(None)
    return Err(make_error())
