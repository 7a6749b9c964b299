"""
Show and sheets commands - inspect a table or workbook without converting it.
"""
from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from tablewarp.cli.console import console
from tablewarp.cli.helpers import report_errors, resolve_source
from tablewarp.formats import list_sheets
from tablewarp.table import DataTable
from tablewarp.values import render_value


def display_table(table: DataTable, limit: int) -> None:
    """Render the first `limit` rows of a DataTable."""
    columns = table.columns
    tbl = Table(title=table.name or None, header_style="table.header")
    tbl.add_column("#", style="muted", justify="right")
    for column in columns:
        tbl.add_column(escape(column))

    for i, row in enumerate(table.rows[:limit], 1):
        cells = []
        for column in columns:
            text = render_value(row.get(column))
            cells.append("[muted]-[/]" if text is None else escape(text))
        tbl.add_row(str(i), *cells)

    console.print(tbl)
    if len(table) > limit:
        console.print(f"[muted]... {len(table) - limit} more rows[/]")


@click.command('show')
@click.argument('source')
@click.option('--sheet', help='Worksheet to read (.xlsx only, default: first sheet)')
@click.option('--limit', default=20, show_default=True, help='Maximum rows to display')
def show_command(source: str, sheet: Optional[str], limit: int):
    """Display the rows of SOURCE."""
    with report_errors(), resolve_source(source) as local_path:
        options = {'sheet_name': sheet} if sheet else {}
        table = DataTable.load(local_path, **options)

    if not table.rows:
        console.print("[warning]No rows[/]")
        return
    display_table(table, limit)


@click.command('sheets')
@click.argument('source')
def sheets_command(source: str):
    """List the worksheets of an .xlsx workbook."""
    with report_errors(), resolve_source(source) as local_path:
        names = list_sheets(local_path)

    for i, sheet_name in enumerate(names, 1):
        console.print(f"  {i}. {sheet_name}")
