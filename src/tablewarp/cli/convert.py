"""
Convert command - load a table, apply column operations, save it in another format.
"""
from typing import Optional, Tuple

import click

from tablewarp.cli.console import console
from tablewarp.cli.helpers import parse_renames, report_errors, resolve_source
from tablewarp.table import DataTable


@click.command('convert')
@click.argument('source')
@click.argument('target')
@click.option('--sheet', help='Worksheet to read (.xlsx only, default: first sheet)')
@click.option('--drop', 'drops', multiple=True, metavar='COLUMN', help='Remove a column (repeatable)')
@click.option('--rename', 'renames', multiple=True, metavar='OLD=NEW', help='Rename a column (repeatable)')
@click.option('--name', help='Table name to write (default: keep the loaded one)')
def convert_command(
    source: str,
    target: str,
    sheet: Optional[str],
    drops: Tuple[str, ...],
    renames: Tuple[str, ...],
    name: Optional[str],
):
    """Convert SOURCE (.json/.xml/.xlsx or URL) to TARGET (.json/.xml)."""
    rename_map = parse_renames(renames)

    with report_errors(), resolve_source(source) as local_path:
        options = {'sheet_name': sheet} if sheet else {}
        table = DataTable.load(local_path, **options)

        for column in drops:
            table.remove_column(column)
        for old, new in rename_map.items():
            table.rename_column(old, new)
        if name:
            table.name = name

        table.save(target)

    console.print(f"[success]Wrote {len(table)} rows to {target}[/]")
