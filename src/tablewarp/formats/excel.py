"""Excel adapter - read only, trusts the workbook's native cell types"""
import logging
import warnings
from datetime import datetime, timezone
from io import BytesIO
from typing import Any, List, Optional

import openpyxl

from ..table.model import DataTable
from ..values.codec import render_value
from .base import TableAdapter, TableFormat

logger = logging.getLogger(__name__)


def _open_workbook(source):
    warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')
    return openpyxl.load_workbook(source, data_only=True)


def _cell_value(value: Any) -> Any:
    # openpyxl returns naive datetimes; workbook times are taken as UTC
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def list_sheets(file_path: str) -> List[str]:
    """Get list of sheet names from an Excel file."""
    wb = openpyxl.load_workbook(file_path, read_only=True)
    try:
        return wb.sheetnames
    finally:
        wb.close()


class ExcelAdapter(TableAdapter):
    """
    First row of the used range is the header. Every later row becomes a
    table row; a cell is kept only when both it and its header cell have a
    value. The sheet title becomes the table name.
    """

    format = TableFormat.XLSX
    extension = '.xlsx'
    writable = False

    def parse(self, data: bytes, sheet_name: Optional[str] = None, **options: Any) -> DataTable:
        wb = _open_workbook(BytesIO(data))
        try:
            if sheet_name is None:
                ws = wb.worksheets[0]
            elif sheet_name in wb.sheetnames:
                ws = wb[sheet_name]
            else:
                raise ValueError(f"Sheet '{sheet_name}' not found. Available: {wb.sheetnames}")

            table = DataTable(name=ws.title)
            rows = ws.iter_rows(
                min_row=ws.min_row, max_row=ws.max_row,
                min_col=ws.min_column, max_col=ws.max_column,
                values_only=True,
            )

            header = next(rows, None)
            if header is None:
                return table
            column_names = [render_value(h) for h in header]

            for values in rows:
                row = {}
                for column, value in zip(column_names, values):
                    if column is not None and value is not None:
                        row[column] = _cell_value(value)
                table.rows.append(row)
        finally:
            wb.close()

        logger.debug(f"Parsed {len(table.rows)} rows from sheet '{table.name}'")
        return table
