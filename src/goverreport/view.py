from __future__ import annotations

from typing import TextIO

from rich import box
from rich.console import Console
from rich.table import Table

from .models import Report, Summary

UNDEFINED_COVERAGE = "-"
TABLE_MARGIN = 80
NUMERIC_HEADERS = ("Blocks", "Missing", "Stmts", "Missing", "Block cover %", "Stmt cover %")


def format_coverage(value: float | None) -> str:
    if value is None:
        return UNDEFINED_COVERAGE
    return f"{value:.2f}"


def make_row(summary: Summary) -> list[str]:
    """Table cells for one summary, in header order."""
    return [
        summary.name,
        str(summary.blocks),
        str(summary.missing_blocks),
        str(summary.stmts),
        str(summary.missing_stmts),
        format_coverage(summary.block_coverage),
        format_coverage(summary.stmt_coverage),
    ]


def build_table(report: Report, packages: bool = False) -> Table:
    footer = make_row(report.total)
    table = Table(box=box.ASCII, show_footer=True, header_style=None, footer_style=None)
    table.add_column("Package" if packages else "File", footer=footer[0], overflow="fold")
    for header, cell in zip(NUMERIC_HEADERS, footer[1:]):
        table.add_column(header, footer=cell, justify="right", no_wrap=True)

    for summary in report.files:
        table.add_row(*make_row(summary))
    return table


def print_table(report: Report, stream: TextIO | None = None, packages: bool = False) -> None:
    """Render the report as an ASCII table with the total as footer."""
    # Wide enough that names never fold; the table itself does not expand.
    longest_name = max((len(summary.name) for summary in report.files), default=0)
    console = Console(
        file=stream,
        highlight=False,
        markup=False,
        emoji=False,
        width=longest_name + TABLE_MARGIN,
    )
    console.print(build_table(report, packages))
