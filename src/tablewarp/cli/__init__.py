"""
TableWarp CLI - convert and inspect tables.

Commands:
    convert   Load a table, optionally drop/rename columns, save it
    show      Display the rows of a table
    sheets    List the worksheets of an .xlsx workbook
"""
import logging

import click

from tablewarp.cli.console import console, custom_theme
from tablewarp.cli.convert import convert_command
from tablewarp.cli.show import show_command, sheets_command, display_table
from tablewarp.config import get_settings


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool):
    """TableWarp - tabular data across JSON, XML and Excel"""
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level, logging.WARNING)
    logging.basicConfig(level=level)


cli.add_command(convert_command)
cli.add_command(show_command)
cli.add_command(sheets_command)


def main():
    cli()


__all__ = [
    'cli',
    'main',
    'console',
    'custom_theme',
    'convert_command',
    'show_command',
    'sheets_command',
    'display_table',
]
