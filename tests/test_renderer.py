"""Tests for jsonblob.renderer and jsonblob.printer."""

from __future__ import annotations

import io
import logging

import pytest

from jsonblob.builder import array, kv, kv_of, mask, num_array, obj, str_array, v
from jsonblob.models import EMPTY_KV
from jsonblob.printer import Printer, StreamPrinter, StringPrinter
from jsonblob.renderer import render, to_json


class _FailingPrinter(Printer):
    """Accepts *limit* appends, then raises like a broken stream."""

    def __init__(self, limit: int, mask: bool = False) -> None:
        super().__init__(mask)
        self.limit = limit
        self.parts: list[str] = []

    def append(self, text: str) -> Printer:
        if len(self.parts) >= self.limit:
            raise OSError("disk full")
        self.parts.append(text)
        return self


@pytest.fixture
def blob():
    return obj(
        kv("user", "alice"),
        kv("password", mask("hunter2")),
        kv("tags", str_array("a", "b")),
        kv("card", mask(obj(kv("number", "4111"), kv("cvv", 123)))),
    )


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("node", [
    obj(),
    obj(kv("a", 1)),
    obj(kv_of(lambda: None), kv("a", 1), kv_of(lambda: None)),
    obj(kv("a", obj(kv("b", array(1, obj()))))),
])
def test_object_brackets_and_commas(node):
    text = to_json(node)
    assert text.startswith("{")
    assert text.endswith("}")
    assert ",," not in text
    assert "{," not in text
    assert ",}" not in text


@pytest.mark.parametrize("node", [
    array(),
    array(1),
    array(1, "two", array(), obj()),
])
def test_array_brackets_and_commas(node):
    text = to_json(node)
    assert text[0] == "[" and text[-1] == "]"
    assert ",," not in text and "[," not in text and ",]" not in text


def test_compact_output_has_no_whitespace():
    assert to_json(obj(kv("a", array(1, 2)), kv("b", obj()))) == '{"a":[1,2],"b":{}}'


def test_strings_are_not_escaped():
    assert to_json(v('say "hi"\\n')) == '"say "hi"\\n"'


def test_float_round_trips():
    assert to_json(v(0.1)) == "0.1"
    assert to_json(v(1.01)) == "1.01"


def test_empty_sentinel_renders_nothing():
    printer = StringPrinter()
    render(EMPTY_KV, printer)
    assert printer.getvalue() == ""


def test_render_rejects_foreign_objects():
    with pytest.raises(TypeError):
        render("not a node", StringPrinter())


# ---------------------------------------------------------------------------
# Masking
# ---------------------------------------------------------------------------


class TestMasking:
    def test_unmasked(self, blob):
        assert blob.to_json() == (
            '{"user":"alice","password":"hunter2","tags":["a","b"],'
            '"card":{"number":"4111","cvv":123}}'
        )

    def test_masked(self, blob):
        assert blob.to_json(mask=True) == (
            '{"user":"alice","password":"***masked***","tags":["a","b"],'
            '"card":"***masked***"}'
        )

    def test_same_tree_renders_repeatably(self, blob):
        first = blob.to_json()
        second = blob.to_json(mask=True)
        third = blob.to_json()
        assert first == third
        assert first != second
        assert blob.to_json(mask=True) == second

    def test_tree_without_masks_is_flag_independent(self):
        node = obj(kv("a", num_array(1, 2)))
        assert node.to_json(mask=True) == node.to_json(mask=False)

    def test_printer_flag_drives_masking(self, blob):
        assert str(blob.write_to(StringPrinter(mask=True))) == blob.to_json(mask=True)


# ---------------------------------------------------------------------------
# Printers
# ---------------------------------------------------------------------------


class TestPrinters:
    def test_string_printer_accumulates(self):
        printer = StringPrinter()
        printer.append("ab").append_char("c").append_range("xdefx", 1, 4)
        assert printer.getvalue() == "abcdef"

    def test_string_printer_defaults_unmasked(self):
        assert StringPrinter().should_mask() is False

    def test_stream_printer_writes_through(self, blob):
        buf = io.StringIO()
        returned = blob.write_to(StreamPrinter(buf, mask=True))
        assert isinstance(returned, StreamPrinter)
        assert buf.getvalue() == blob.to_json(mask=True)

    def test_stream_printer_to_file(self, tmp_path, blob):
        path = tmp_path / "out.json"
        with path.open("w", encoding="utf-8") as fh:
            blob.write_to(StreamPrinter(fh))
        assert path.read_text(encoding="utf-8") == blob.to_json()

    def test_sink_failure_propagates_unchanged(self, blob):
        printer = _FailingPrinter(limit=3)
        with pytest.raises(OSError, match="disk full"):
            render(blob, printer)
        assert printer.parts == ["{", '"', "user"]

    def test_closed_stream_error_propagates(self):
        buf = io.StringIO()
        buf.close()
        with pytest.raises(ValueError):
            v("x").write_to(StreamPrinter(buf))

    def test_printer_is_abstract(self):
        with pytest.raises(TypeError):
            Printer()  # type: ignore[abstract]


def test_render_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="jsonblob.renderer"):
        to_json(obj())
    assert "Rendering JsonObject" in caplog.text


def test_deep_nesting_renders_without_recursion_limit():
    node = array()
    for _ in range(5000):
        node = obj(kv("n", node))
    text = to_json(node)
    assert text.startswith('{"n":' * 3)
    assert text.endswith("[]" + "}" * 5000)
