"""
Helpers shared by CLI commands: remote sources, option parsing, error reporting.
"""
import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Dict, Generator, Tuple

import click
import requests

from tablewarp.cli.console import console
from tablewarp.config import get_settings
from tablewarp.errors import TableWarpError

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.lower().startswith(('http://', 'https://'))


def download_file(url: str, target_dir: str) -> str:
    """
    Download a file from URL to local path.

    Returns the local file path.
    """
    filename = url.split('/')[-1].split('?')[0]
    local_path = os.path.join(target_dir, filename)

    logger.debug(f"Downloading {url}")
    response = requests.get(url, timeout=get_settings().http_timeout)
    response.raise_for_status()

    with open(local_path, 'wb') as f:
        f.write(response.content)

    return local_path


@contextmanager
def resolve_source(source: str) -> Generator[str, None, None]:
    """
    Local path for a source, downloading it first if it's a URL.

    Downloads go to a temporary directory removed when the block exits.
    """
    if not is_url(source):
        yield source
        return

    with tempfile.TemporaryDirectory() as tmpdir:
        with console.status(f"Downloading {source}..."):
            local_path = download_file(source, tmpdir)
        yield local_path


def parse_renames(values: Tuple[str, ...]) -> Dict[str, str]:
    """Parse repeated OLD=NEW options into a dict."""
    renames = {}
    for value in values:
        old, sep, new = value.partition('=')
        if not sep or not old or not new:
            raise click.BadParameter(f"expected OLD=NEW, got '{value}'", param_hint='--rename')
        renames[old] = new
    return renames


@contextmanager
def report_errors() -> Generator[None, None, None]:
    """
    Print table, parse and file errors on the console and exit with status 1.

    Anything else propagates so click shows the traceback.
    """
    try:
        yield
    except (TableWarpError, ValueError, OSError, requests.RequestException) as e:
        console.print(f"[error]Error:[/] {e}")
        raise click.exceptions.Exit(1)
