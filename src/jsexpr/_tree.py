"""
Value tree produced by the parser.

Each node is a frozen dataclass; containers own their children through
tuples, so a tree can only be built bottom-up and never changes once it
has been handed to a caller.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import ClassVar
from typing import TypeAlias

# Native Python rendition of a tree - recursive definition
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)


class ValueKind(Enum):
    """Discriminates the variants of the value tree."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class JsonObject:
    """
    Ordered object members.

    Duplicate keys are kept in source order; which one wins is left to
    the consumer. ``get`` follows the usual last-one-wins convention.
    """

    members: tuple[tuple[str, "Value"], ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[tuple[str, "Value"]]:
        return iter(self.members)

    def keys(self) -> list[str]:
        """Returns member keys in source order, duplicates included."""
        return [key for key, _ in self.members]

    def get(self, key: str, default: "Value | None" = None) -> "Value | None":
        """Returns the last value bound to ``key``."""
        for member_key, value in reversed(self.members):
            if member_key == key:
                return value
        return default

    def get_all(self, key: str) -> list["Value"]:
        """Returns every value bound to ``key`` in source order."""
        return [
            value for member_key, value in self.members if member_key == key
        ]


@dataclass(frozen=True)
class JsonArray:
    """Ordered array elements."""

    elements: tuple["Value", ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> "Value":
        return self.elements[index]


@dataclass(frozen=True)
class JsonString:
    """Decoded string contents."""

    text: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass(frozen=True)
class JsonNumber:
    """A 64-bit float; integer-ness is decided when rendering."""

    value: float
    kind: ClassVar[ValueKind] = ValueKind.NUMBER


@dataclass(frozen=True)
class JsonBoolean:
    """A ``true`` or ``false`` literal."""

    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN


@dataclass(frozen=True)
class JsonNull:
    """The ``null`` literal."""

    kind: ClassVar[ValueKind] = ValueKind.NULL


Value: TypeAlias = (
    JsonObject | JsonArray | JsonString | JsonNumber | JsonBoolean | JsonNull
)


def to_python(value: Value) -> JsonValue:  # noqa: PLR0911
    """
    Converts a value tree into plain Python objects.

    Objects become dicts, so duplicate keys collapse with the last
    occurrence winning. Numbers stay floats.
    """
    if isinstance(value, JsonObject):
        return {key: to_python(member) for key, member in value.members}
    elif isinstance(value, JsonArray):
        return [to_python(element) for element in value.elements]
    elif isinstance(value, JsonString):
        return value.text
    elif isinstance(value, JsonNumber):
        return value.value
    elif isinstance(value, JsonBoolean):
        return value.value
    elif isinstance(value, JsonNull):
        return None
    else:
        msg = f"Object of type {type(value).__name__} is not a JSON value"
        raise TypeError(msg)


def from_python(obj: Any) -> Value:  # noqa: PLR0911
    """
    Builds a value tree from plain Python objects.

    Accepts dicts with string keys, lists, tuples, strings, ints, floats,
    booleans and None.
    """
    if obj is None:
        return JsonNull()
    elif obj is True or obj is False:
        return JsonBoolean(obj)
    elif isinstance(obj, str):
        return JsonString(obj)
    elif isinstance(obj, int | float):
        return JsonNumber(float(obj))
    elif isinstance(obj, dict):
        members = []
        for key, member in obj.items():
            if not isinstance(key, str):
                msg = f"keys must be str, not {type(key).__name__}"
                raise TypeError(msg)
            members.append((key, from_python(member)))
        return JsonObject(tuple(members))
    elif isinstance(obj, list | tuple):
        return JsonArray(tuple(from_python(element) for element in obj))
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)
