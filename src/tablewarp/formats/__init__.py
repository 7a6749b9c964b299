"""File format adapters, picked by file extension"""
import os
from typing import Dict

from ..errors import UnsupportedFormatError
from .base import TableAdapter, TableFormat
from .excel import ExcelAdapter, list_sheets
from .json_format import JsonAdapter
from .xml_format import XmlAdapter

EXTENSIONS: Dict[str, TableFormat] = {
    '.json': TableFormat.JSON,
    '.xml': TableFormat.XML,
    '.xlsx': TableFormat.XLSX,
}

ADAPTERS: Dict[TableFormat, TableAdapter] = {
    TableFormat.JSON: JsonAdapter(),
    TableFormat.XML: XmlAdapter(),
    TableFormat.XLSX: ExcelAdapter(),
}


def get_adapter(file_name: str, for_write: bool = False) -> TableAdapter:
    """
    Return the adapter for a file name's extension (case-insensitive).

    Raises UnsupportedFormatError for unknown extensions, and for formats
    that can't be written when `for_write` is set.
    """
    ext = os.path.splitext(file_name)[1].lower()
    table_format = EXTENSIONS.get(ext)
    if table_format is None:
        raise UnsupportedFormatError(ext)

    adapter = ADAPTERS[table_format]
    if for_write and not adapter.writable:
        raise UnsupportedFormatError(ext)
    return adapter


__all__ = [
    'TableFormat',
    'TableAdapter',
    'JsonAdapter',
    'XmlAdapter',
    'ExcelAdapter',
    'EXTENSIONS',
    'ADAPTERS',
    'get_adapter',
    'list_sheets',
]
