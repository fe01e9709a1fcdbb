"""Build value trees from plain Python data, masking sensitive keys."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Iterable, Mapping

from .builder import array, kv, mask, obj, v
from .models import DEFAULT_MASK, JsonObject, JsonValue

# Keys that are masked by default (case-insensitive substring match)
DEFAULT_SENSITIVE_FRAGMENTS = (
    "pass",
    "password",
    "passwd",
    "secret",
    "token",
    "key",
    "api_key",
    "apikey",
    "auth",
    "credential",
    "private",
    "cert",
)


def is_sensitive(key: str, fragments: Iterable[str] = DEFAULT_SENSITIVE_FRAGMENTS) -> bool:
    """Heuristically decide whether *key* names a secret."""
    lower = key.lower()
    return any(frag.lower() in lower for frag in fragments)


def from_python(
    data,
    *,
    sensitive: Callable[[str], bool] = is_sensitive,
    placeholder: str = DEFAULT_MASK,
) -> JsonValue:
    """Convert nested dicts, lists, tuples and scalars into a value tree.

    Every value stored under a key for which *sensitive* returns True is
    wrapped in :func:`~jsonblob.builder.mask`, whole sub-trees included.
    Mapping keys are converted with ``str()``.  Leaves that are not
    ``str``/``bool``/number/``None`` raise :class:`TypeError`.
    """
    if isinstance(data, Mapping):
        return obj_from_mapping(data, sensitive=sensitive, placeholder=placeholder)
    if isinstance(data, (list, tuple)):
        return array(
            [from_python(item, sensitive=sensitive, placeholder=placeholder) for item in data]
        )
    if data is None or isinstance(data, (str, bool, int, float, Decimal)):
        return v(data)
    raise TypeError(f"Cannot convert {type(data).__name__} to JSON")


def obj_from_mapping(
    mapping: Mapping,
    *,
    sensitive: Callable[[str], bool] = is_sensitive,
    placeholder: str = DEFAULT_MASK,
) -> JsonObject:
    """Convert *mapping* into a :class:`JsonObject`, preserving key order."""
    pairs = []
    for raw_key, raw_value in mapping.items():
        key = str(raw_key)
        value = from_python(raw_value, sensitive=sensitive, placeholder=placeholder)
        if sensitive(key):
            value = mask(value, placeholder)
        pairs.append(kv(key, value))
    return obj(pairs)
