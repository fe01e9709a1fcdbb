"""Rich terminal table formatter."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import JsonObject, MaskedValue


def format_table(blob: JsonObject, *, mask: bool = True) -> str:
    """Render each member of *blob* as a table row and return the string output."""
    table = Table(
        title="masked" if mask else "unmasked",
        show_header=True,
        header_style="bold cyan",
        expand=False,
        box=None,
        show_edge=True,
        padding=(0, 1),
    )

    table.add_column("Key", style="bold", no_wrap=True)
    table.add_column("Value", no_wrap=False)

    masked_count = 0
    for pair in blob:
        is_masked = isinstance(pair.value, MaskedValue)
        if is_masked:
            masked_count += 1
        style = "yellow" if is_masked and mask else ""
        table.add_row(Text(pair.key), Text(pair.value.to_json(mask=mask), style=style))

    buf = StringIO()
    console = Console(file=buf, highlight=False, no_color=False)
    console.print(table)

    if masked_count:
        state = "hidden" if mask else "shown in plaintext"
        console.print(f"  [dim]{len(blob)} keys, {masked_count} {state}[/]")

    return buf.getvalue()
