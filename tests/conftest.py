"""Pytest configuration for the TableWarp test suite."""
from datetime import datetime, timezone

import openpyxl
import pytest

from tablewarp import DataTable


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that touch the filesystem end to end"
    )


@pytest.fixture
def sample_table():
    """Small table covering every value kind."""
    return DataTable('Contacts', [
        {'firstname': 'Ann', 'age': 30, 'active': True,
         'created': datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)},
        {'firstname': 'Bob', 'age': 41.5, 'active': False},
    ])


@pytest.fixture
def make_workbook(tmp_path):
    """
    Factory writing an .xlsx with one sheet per (title, rows) pair.

    Usage:
        path = make_workbook([('People', [['name', 'age'], ['Ann', 30]])])
    """
    def _make(sheets, filename='book.xlsx'):
        wb = openpyxl.Workbook()
        wb.remove(wb.active)
        for title, rows in sheets:
            ws = wb.create_sheet(title)
            for row in rows:
                ws.append(row)
        path = tmp_path / filename
        wb.save(path)
        return str(path)

    return _make
