"""Tests for jsonblob.formatters — Rich table output."""

from __future__ import annotations

from jsonblob.builder import kv, mask, num_array, obj
from jsonblob.formatters import format_table


def _blob():
    return obj(kv("user", "alice"), kv("token", mask("abc")), kv("ids", num_array(1, 2)))


def test_table_masked_hides_values():
    out = format_table(_blob(), mask=True)
    assert '"alice"' in out
    assert "***masked***" in out
    assert "abc" not in out
    assert "3 keys, 1 hidden" in out


def test_table_unmasked_shows_values():
    out = format_table(_blob(), mask=False)
    assert '"abc"' in out
    assert "[1,2]" in out
    assert "shown in plaintext" in out


def test_table_without_masks_has_no_summary():
    out = format_table(obj(kv("a", 1)), mask=True)
    assert "keys," not in out
