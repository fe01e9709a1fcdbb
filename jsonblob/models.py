"""Immutable value-tree nodes for jsonblob.

Every node is a frozen dataclass.  "Adding" to an object or array returns a
new node and leaves the receiver untouched, so partially built trees can be
shared freely between call sites and threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Union

if TYPE_CHECKING:
    from .printer import Printer

DEFAULT_MASK = "***masked***"

Number = Union[int, float, Decimal]


class _Node:
    """Behaviour shared by every node of the value tree."""

    __slots__ = ()

    def write_to(self, printer: Printer) -> Printer:
        """Serialize this node into *printer* and return the printer."""
        from .renderer import render

        render(self, printer)
        return printer

    def to_json(self, mask: bool = False) -> str:
        """Return the compact JSON text for this node.

        When *mask* is True every :class:`MaskedValue` renders its
        replacement text instead of the wrapped value.
        """
        from .printer import StringPrinter

        return self.write_to(StringPrinter(mask=mask)).getvalue()

    def __str__(self) -> str:
        return self.to_json()


@dataclass(frozen=True)
class JsonUnit(_Node):
    """The JSON ``null`` literal."""


@dataclass(frozen=True)
class JsonString(_Node):
    """A string primitive.

    The text is emitted verbatim between quotes: embedded quotes, backslashes
    and control characters are NOT escaped.  Callers own that.
    """

    text: str


@dataclass(frozen=True)
class JsonNumber(_Node):
    number: Number


@dataclass(frozen=True)
class JsonBoolean(_Node):
    boolean: bool


@dataclass(frozen=True)
class JsonKeyValue(_Node):
    """A ``"key":value`` member of a :class:`JsonObject`."""

    key: str
    value: JsonValue


@dataclass(frozen=True)
class EmptyKeyValue(_Node):
    """Absent key-value pair.  Renders as nothing and is dropped by objects."""

    @property
    def key(self) -> str:
        return ""

    @property
    def value(self) -> JsonValue:
        return UNIT


@dataclass(frozen=True)
class MaskedValue(_Node):
    """Wraps *value*; renders *mask* instead when the printer asks for masking."""

    value: JsonValue
    mask: str = DEFAULT_MASK


@dataclass(frozen=True)
class JsonArray(_Node):
    values: tuple[JsonValue, ...] = ()

    def add(self, value) -> JsonArray:
        """Return a new array with *value* appended at the end."""
        from .builder import v

        item = value if isinstance(value, _Node) else v(value)
        return JsonArray(self.values + (item,))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)


@dataclass(frozen=True)
class JsonObject(_Node):
    """An ordered mapping of key to :class:`JsonKeyValue`.

    A key keeps the position of its first occurrence; the most recent value
    for that key wins.  Empty pairs are never stored.
    """

    members: Mapping[str, JsonKeyValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only view over a private copy; callers keep no handle on it
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    @classmethod
    def of(cls, pairs) -> JsonObject:
        members: dict[str, JsonKeyValue] = {}
        for pair in pairs:
            if isinstance(pair, EmptyKeyValue):
                continue
            if not isinstance(pair, JsonKeyValue):
                raise TypeError(f"JsonObject takes key-value pairs, got {type(pair).__name__}")
            members[pair.key] = pair
        return cls(members)

    def put(self, pair: JsonKeyValue | EmptyKeyValue) -> JsonObject:
        """Return a new object with *pair* inserted or overriding its key."""
        if isinstance(pair, EmptyKeyValue):
            return self
        return JsonObject.of([*self.members.values(), pair])

    def get(self, key: str) -> JsonValue | None:
        pair = self.members.get(key)
        return pair.value if pair is not None else None

    def keys(self):
        return self.members.keys()

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members.values())

    # members is a mapping; hash its items
    def __hash__(self) -> int:
        return hash(tuple(self.members.items()))


JsonValue = Union[
    JsonUnit,
    JsonString,
    JsonNumber,
    JsonBoolean,
    JsonKeyValue,
    EmptyKeyValue,
    JsonObject,
    JsonArray,
    MaskedValue,
]

UNIT = JsonUnit()
EMPTY_KV = EmptyKeyValue()
