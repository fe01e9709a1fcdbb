"""jsonblob: immutable JSON value trees with render-time masking."""

from __future__ import annotations

from .builder import (
    array,
    array_of,
    bool_array,
    kv,
    kv_of,
    mask,
    num_array,
    obj,
    obj_of,
    str_array,
    unit,
    v,
    v_of,
)
from .convert import from_python, is_sensitive, obj_from_mapping
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
    JsonUnit,
    JsonValue,
    MaskedValue,
)
from .printer import Printer, StreamPrinter, StringPrinter
from .renderer import render, to_json

__all__ = [
    "DEFAULT_MASK",
    "EMPTY_KV",
    "UNIT",
    "EmptyKeyValue",
    "JsonArray",
    "JsonBoolean",
    "JsonKeyValue",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonUnit",
    "JsonValue",
    "MaskedValue",
    "Printer",
    "StreamPrinter",
    "StringPrinter",
    "array",
    "array_of",
    "bool_array",
    "from_python",
    "is_sensitive",
    "kv",
    "kv_of",
    "mask",
    "num_array",
    "obj",
    "obj_from_mapping",
    "obj_of",
    "render",
    "str_array",
    "to_json",
    "unit",
    "v",
    "v_of",
]
