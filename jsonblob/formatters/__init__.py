"""Output formatters for rendered objects."""

from __future__ import annotations

from .terminal import format_table

__all__ = ["format_table"]
