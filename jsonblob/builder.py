"""Construction functions for jsonblob value trees.

Example::

    blob = obj(
        kv("name", "value"),
        kv("isOpen", True),
        kv("primes", num_array(2, 3, 5, 7, 11)),
        kv("password", mask("hunter2")),
    )
    blob.to_json()           # {"name":"value",...,"password":"hunter2"}
    blob.to_json(mask=True)  # {"name":"value",...,"password":"***masked***"}

None of these functions fail on absent input: ``None`` becomes ``null``, an
empty object, an empty array or a suppressed key-value pair.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Callable, Optional

from .models import (
    DEFAULT_MASK,
    EMPTY_KV,
    UNIT,
    EmptyKeyValue,
    JsonArray,
    JsonBoolean,
    JsonKeyValue,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    MaskedValue,
    _Node,
)

_NUMBER_TYPES = (int, float, Decimal)


def _items(args: tuple) -> Iterable:
    # obj([a, b]), obj(a, b) and obj(p for p in pairs) mean the same thing
    if len(args) == 1:
        only = args[0]
        if isinstance(only, Iterable) and not isinstance(only, (str, bytes, Mapping, _Node)):
            return only
    return args


def unit() -> JsonValue:
    """Return the shared ``null`` value.

        kv("key", unit())  ->  "key":null
    """
    return UNIT


def v(raw) -> JsonValue:
    """Lift a ``str``, ``bool`` or number to a node.  ``None`` becomes ``null``.

    Nodes are returned unchanged, except key-value pairs.  Those and any
    other type raise :class:`TypeError`.
    """
    if raw is None:
        return UNIT
    if isinstance(raw, (JsonKeyValue, EmptyKeyValue)):
        raise TypeError("Key-value pairs only belong in obj()")
    if isinstance(raw, _Node):
        return raw
    if isinstance(raw, bool):
        return JsonBoolean(raw)
    if isinstance(raw, _NUMBER_TYPES):
        return JsonNumber(raw)
    if isinstance(raw, str):
        return JsonString(raw)
    raise TypeError(f"Cannot build a JSON value from {type(raw).__name__}")


def kv(key: str, value) -> JsonKeyValue:
    """Create a key-value pair for use in :func:`obj`.

    An absent *value* still produces ``"key":null``; only :func:`kv_of`
    can suppress a pair entirely.
    """
    return JsonKeyValue(key, v(value))


def obj(*pairs) -> JsonObject:
    """Create an object from key-value pairs (varargs or a single iterable).

    Later pairs override earlier ones with the same key, which keeps its
    original position.
    """
    return JsonObject.of(_items(pairs))


def array(*values) -> JsonArray:
    """Create an array of heterogeneous values (varargs or a single iterable)."""
    return JsonArray(tuple(v(item) for item in _items(values)))


def str_array(*strings: Optional[str]) -> JsonArray:
    return _typed_array(_items(strings), (str,), "str_array")


def num_array(*numbers) -> JsonArray:
    return _typed_array(_items(numbers), _NUMBER_TYPES, "num_array", reject=bool)


def bool_array(*booleans: bool) -> JsonArray:
    return _typed_array(_items(booleans), (bool,), "bool_array", nullable=False)


def _typed_array(items, types, name, reject=None, nullable=True) -> JsonArray:
    values = []
    for item in items:
        ok = isinstance(item, types) and not (reject and isinstance(item, reject))
        if not ok and not (nullable and item is None):
            raise TypeError(f"{name}() got {type(item).__name__}")
        values.append(v(item))
    return JsonArray(tuple(values))


def mask(value, replacement: str = DEFAULT_MASK) -> JsonValue:
    """Wrap *value* so masked output shows *replacement* instead.

        # {"key":"some value"} normally, {"key":"***masked***"} when masked
        obj(kv("key", mask("some value")))

    Wrapped objects and arrays render in full when masking is off.
    """
    return MaskedValue(v(value), replacement)


# ---------------------------------------------------------------------------
# Supplier forms: the callable runs once, immediately, on the caller's thread.
# ---------------------------------------------------------------------------


def v_of(supplier: Callable[[], object]) -> JsonValue:
    """Return the supplied value, or ``null`` if the supplier returns ``None``."""
    return v(supplier())


def kv_of(supplier: Callable[[], Optional[JsonKeyValue]]) -> JsonKeyValue | EmptyKeyValue:
    """Return the supplied pair, or the empty pair that objects leave out."""
    pair = supplier()
    return EMPTY_KV if pair is None else pair


def array_of(supplier: Callable[[], Optional[JsonArray]]) -> JsonArray:
    result = supplier()
    return JsonArray() if result is None else result


def obj_of(supplier: Callable[[], Optional[JsonObject]]) -> JsonObject:
    result = supplier()
    return JsonObject() if result is None else result
