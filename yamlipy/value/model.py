"""Parsed value tree.

Values are immutable and compare structurally. Int and Double compare
numerically with each other, Bool never equals a number, and Map equality
ignores entry order. Hashes agree with equality, so any value can be a map key.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, eq=False)
class YamlNull:
    def __eq__(self, other: object) -> bool:
        return isinstance(other, YamlNull)

    def __hash__(self) -> int:
        return hash(None)

    def __str__(self) -> str:
        return "Null"


@dataclass(frozen=True, slots=True, eq=False)
class YamlBool:
    value: bool

    def __eq__(self, other: object) -> bool:
        return isinstance(other, YamlBool) and other.value == self.value

    def __hash__(self) -> int:
        return hash(("bool", self.value))

    def __str__(self) -> str:
        return f"Bool({self.value})"


@dataclass(frozen=True, slots=True, eq=False)
class YamlInt:
    value: int

    def __eq__(self, other: object) -> bool:
        return isinstance(other, (YamlInt, YamlDouble)) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __neg__(self) -> "YamlInt":
        return YamlInt(-self.value)

    def __str__(self) -> str:
        return f"Int({self.value})"


@dataclass(frozen=True, slots=True, eq=False)
class YamlDouble:
    value: float

    def __eq__(self, other: object) -> bool:
        return isinstance(other, (YamlInt, YamlDouble)) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __neg__(self) -> "YamlDouble":
        return YamlDouble(-self.value)

    def __str__(self) -> str:
        return f"Double({self.value})"


@dataclass(frozen=True, slots=True, eq=False)
class YamlString:
    value: str

    def __eq__(self, other: object) -> bool:
        return isinstance(other, YamlString) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"String({self.value})"


@dataclass(frozen=True, slots=True, eq=False)
class YamlArray:
    items: tuple["YamlValue", ...] = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, YamlArray) and other.items == self.items

    def __hash__(self) -> int:
        return hash(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["YamlValue"]:
        return iter(self.items)

    def __str__(self) -> str:
        return f"Array([{', '.join(str(item) for item in self.items)}])"


@dataclass(frozen=True, slots=True, eq=False)
class YamlMap:
    """Key/value pairs in source order. Keys are distinct under value equality."""

    entries: tuple[tuple["YamlValue", "YamlValue"], ...] = ()

    def get(self, key: "YamlValue") -> "YamlValue | None":
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None

    def keys(self) -> list["YamlValue"]:
        return [key for key, _ in self.entries]

    def values(self) -> list["YamlValue"]:
        return [value for _, value in self.entries]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YamlMap) or len(other.entries) != len(self.entries):
            return False
        return all(other.get(key) == value for key, value in self.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple["YamlValue", "YamlValue"]]:
        return iter(self.entries)

    def __str__(self) -> str:
        return f"Map({{{', '.join(f'{key}: {value}' for key, value in self.entries)}}})"


type YamlScalar = YamlNull | YamlBool | YamlInt | YamlDouble | YamlString
type YamlValue = YamlScalar | YamlArray | YamlMap

SCALAR_TYPES: Final = (YamlNull, YamlBool, YamlInt, YamlDouble, YamlString)
VALUE_TYPES: Final = (*SCALAR_TYPES, YamlArray, YamlMap)

NULL: Final[YamlNull] = YamlNull()
TRUE: Final[YamlBool] = YamlBool(True)
FALSE: Final[YamlBool] = YamlBool(False)


def to_value(obj: object) -> YamlValue:
    """Build a value tree from Python builtins."""
    match obj:
        case None:
            return NULL
        case YamlNull() | YamlBool() | YamlInt() | YamlDouble() | YamlString() | YamlArray() | YamlMap():
            return obj
        case bool():
            return TRUE if obj else FALSE
        case int():
            return YamlInt(obj)
        case float():
            return YamlDouble(obj)
        case str():
            return YamlString(obj)
        case list() | tuple():
            return YamlArray(tuple(to_value(item) for item in obj))
        case dict():
            return YamlMap(tuple((to_value(key), to_value(value)) for key, value in obj.items()))
        case _:
            raise TypeError(f"Cannot convert {type(obj).__name__} to a YAML value")
