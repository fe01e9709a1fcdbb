"""Depth-first serializer from a value tree to a :class:`~jsonblob.printer.Printer`."""

from __future__ import annotations

import logging
from decimal import Decimal

from .models import (
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
from .printer import Printer, StringPrinter

logger = logging.getLogger(__name__)


def _number_text(number) -> str:
    # Decimal keeps its exact digits; floats use the shortest text that round-trips.
    if isinstance(number, Decimal):
        return str(number)
    if isinstance(number, float):
        return repr(float(number))
    return str(int(number))


class _Token(str):
    """Punctuation waiting on the render stack."""


_LBRACE, _RBRACE, _LBRACKET, _RBRACKET, _COMMA = map(_Token, "{}[],")


def _render_node(node: JsonValue, printer: Printer) -> None:
    # Explicit stack instead of recursion so nesting depth is unbounded.
    stack: list = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, _Token):
            printer.append_char(item)
        elif isinstance(item, JsonObject):
            pending: list = [_LBRACE]
            for pair in item.members.values():
                if isinstance(pair, EmptyKeyValue):
                    continue
                if len(pending) > 1:
                    pending.append(_COMMA)
                pending.append(pair)
            pending.append(_RBRACE)
            stack.extend(reversed(pending))
        elif isinstance(item, JsonArray):
            pending = [_LBRACKET]
            for i, value in enumerate(item.values):
                if i > 0:
                    pending.append(_COMMA)
                pending.append(value)
            pending.append(_RBRACKET)
            stack.extend(reversed(pending))
        elif isinstance(item, JsonKeyValue):
            printer.append_char('"').append(item.key).append_char('"').append_char(":")
            stack.append(item.value)
        elif isinstance(item, EmptyKeyValue):
            pass
        elif isinstance(item, MaskedValue):
            if printer.should_mask():
                printer.append_char('"').append(item.mask).append_char('"')
            else:
                stack.append(item.value)
        elif isinstance(item, JsonString):
            printer.append_char('"').append(item.text).append_char('"')
        elif isinstance(item, JsonBoolean):
            printer.append("true" if item.boolean else "false")
        elif isinstance(item, JsonNumber):
            printer.append(_number_text(item.number))
        elif isinstance(item, JsonUnit):
            printer.append("null")
        else:
            raise TypeError(f"Not a jsonblob node: {item!r}")


def render(node: JsonValue, printer: Printer) -> None:
    """Append the JSON text for *node* to *printer*.

    Masking is decided by ``printer.should_mask()``.  Errors raised by the
    printer propagate unchanged and leave whatever was already appended.
    """
    logger.debug("Rendering %s (mask=%s)", type(node).__name__, printer.should_mask())
    _render_node(node, printer)


def to_json(node: JsonValue, mask: bool = False) -> str:
    """Render *node* into a fresh in-memory printer and return the text."""
    printer = StringPrinter(mask=mask)
    render(node, printer)
    return printer.getvalue()
