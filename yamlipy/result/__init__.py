"""Outcome type and combinators."""

from yamlipy.result.outcome import Err, Ok, Outcome, YamlError, guard

__all__ = [
    "Err",
    "Ok",
    "Outcome",
    "YamlError",
    "guard",
]
