"""Shared adapter interface"""
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..errors import UnsupportedFormatError

if TYPE_CHECKING:
    from ..table.model import DataTable


class TableFormat(Enum):
    JSON = 'json'
    XML = 'xml'
    XLSX = 'xlsx'


class TableAdapter:
    """
    Converts between file content and a DataTable for one format.

    Adapters never touch the filesystem: `parse` gets the whole file as
    bytes and `render` returns the whole file as bytes.
    """

    format: TableFormat
    extension: str
    writable: bool = True

    def parse(self, data: bytes, **options: Any) -> 'DataTable':
        raise NotImplementedError

    def render(self, table: 'DataTable') -> bytes:
        raise UnsupportedFormatError(self.extension)
