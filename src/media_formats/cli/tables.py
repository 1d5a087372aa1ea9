"""Table rendering for CLI results.

Rows are rendered as a Rich table when Rich is installed and as
fixed-width plain text otherwise.  Cell values must be plain strings;
no Rich markup is used so both renderings read the same.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from media_formats.cli.console import console, load_rich_table_class
from media_formats.exceptions import EnvironmentError


def _print_plain_table(
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Render *rows* without Rich."""
    widths = [
        max([len(header), *(len(row[i]) for row in rows)])
        for i, header in enumerate(headers)
    ]
    total = sum(widths) + len(widths) - 1
    print(f"\n{title}", file=sys.stdout)
    print("=" * total, file=sys.stdout)
    print(" ".join(h.ljust(w) for h, w in zip(headers, widths)), file=sys.stdout)
    print("-" * total, file=sys.stdout)
    for row in rows:
        print(" ".join(c.ljust(w) for c, w in zip(row, widths)), file=sys.stdout)
    print(file=sys.stdout)


def render_table(
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Print a titled table of string cells."""
    try:
        table_class = load_rich_table_class()
    except EnvironmentError:
        _print_plain_table(title, headers, rows)
        return

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for index, header in enumerate(headers):
        table.add_column(header, style="bold" if index == 0 else None)
    for row in rows:
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()
