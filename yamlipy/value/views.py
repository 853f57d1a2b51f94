"""Typed, read-only views over parsed values for consumer code.

Every accessor returns `None` on a type mismatch instead of raising, so
callers can probe optional structure without pre-checking value kinds.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from yamlipy.value.model import (
    NULL,
    SCALAR_TYPES,
    YamlArray,
    YamlBool,
    YamlDouble,
    YamlInt,
    YamlMap,
    YamlNull,
    YamlString,
    YamlValue,
    to_value,
)

type Lookup = YamlValue | str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class YamlView:
    value: YamlValue

    @property
    def is_null(self) -> bool:
        return isinstance(self.value, YamlNull)

    @property
    def is_map(self) -> bool:
        return isinstance(self.value, YamlMap)

    @property
    def is_array(self) -> bool:
        return isinstance(self.value, YamlArray)

    @property
    def is_scalar(self) -> bool:
        return isinstance(self.value, SCALAR_TYPES)

    @property
    def count(self) -> int | None:
        """Number of items or entries, or None for scalars."""
        if isinstance(self.value, (YamlArray, YamlMap)):
            return len(self.value)
        return None

    def as_bool(self) -> bool | None:
        return self.value.value if isinstance(self.value, YamlBool) else None

    def as_int(self) -> int | None:
        """Int values, and Double values with no fractional part."""
        match self.value:
            case YamlInt(value=number):
                return number
            case YamlDouble(value=number) if number.is_integer():
                return int(number)
            case _:
                return None

    def as_float(self) -> float | None:
        if isinstance(self.value, (YamlDouble, YamlInt)):
            return float(self.value.value)
        return None

    def as_str(self) -> str | None:
        return self.value.value if isinstance(self.value, YamlString) else None

    def as_array(self) -> list[YamlValue] | None:
        return list(self.value.items) if isinstance(self.value, YamlArray) else None

    def as_map(self) -> YamlMap | None:
        return self.value if isinstance(self.value, YamlMap) else None

    def as_dict(self) -> dict[str, YamlValue] | None:
        """String-keyed maps as a dict; None if any key is not a string."""
        if not isinstance(self.value, YamlMap):
            return None
        result: dict[str, YamlValue] = {}
        for key, value in self.value.entries:
            if not isinstance(key, YamlString):
                return None
            result[key.value] = value
        return result

    def get(self, key: Lookup) -> "YamlView | None":
        """Map entry by key, or array item by non-negative index."""
        if isinstance(self.value, YamlArray):
            if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(self.value.items):
                return YamlView(self.value.items[key])
            return None
        if isinstance(self.value, YamlMap):
            found = self.value.get(to_value(key))
            return None if found is None else YamlView(found)
        return None

    def items(self) -> Iterator[tuple["YamlView", "YamlView"]]:
        """Map entries as view pairs; empty for anything else."""
        if isinstance(self.value, YamlMap):
            for key, value in self.value.entries:
                yield YamlView(key), YamlView(value)

    def __getitem__(self, key: Lookup) -> "YamlView":
        found = self.get(key)
        return YamlView(NULL) if found is None else found

    def __iter__(self) -> Iterator["YamlView"]:
        """Array items as views; empty for anything else."""
        if isinstance(self.value, YamlArray):
            for item in self.value.items:
                yield YamlView(item)

    def __str__(self) -> str:
        return str(self.value)


def view(value: YamlValue) -> YamlView:
    return YamlView(value)
