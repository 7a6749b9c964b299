"""Test the read-only Excel adapter."""
from datetime import datetime, timezone

import pytest

from tablewarp import DataTable, list_sheets


@pytest.mark.integration
class TestExcelLoad:

    def test_header_and_native_types(self, make_workbook):
        path = make_workbook([('People', [['name', 'age'], ['Ann', 30]])])
        table = DataTable.load(path)

        assert table.name == 'People'
        assert table.rows == [{'name': 'Ann', 'age': 30}]
        age = table.rows[0]['age']
        assert isinstance(age, (int, float)) and not isinstance(age, bool)

    def test_no_text_inference(self, make_workbook):
        path = make_workbook([('S', [['code', 'flag'], ['007', 'true']])])
        assert DataTable.load(path).rows == [{'code': '007', 'flag': 'true'}]

    def test_empty_cells_skipped(self, make_workbook):
        path = make_workbook([('S', [
            ['name', 'age', 'city'],
            ['Ann', None, 'Leeds'],
            ['Bob', 41, None],
        ])])
        assert DataTable.load(path).rows == [
            {'name': 'Ann', 'city': 'Leeds'},
            {'name': 'Bob', 'age': 41},
        ]

    def test_cells_without_header_skipped(self, make_workbook):
        path = make_workbook([('S', [['name', None, 'age'], ['Ann', 'stray', 30]])])
        assert DataTable.load(path).rows == [{'name': 'Ann', 'age': 30}]

    def test_empty_rows_kept(self, make_workbook):
        path = make_workbook([('S', [['name'], ['Ann'], [None], ['Bob']])])
        assert DataTable.load(path).rows == [{'name': 'Ann'}, {}, {'name': 'Bob'}]

    def test_numeric_header_rendered_as_text(self, make_workbook):
        path = make_workbook([('S', [['name', 2020], ['Ann', 5]])])
        assert DataTable.load(path).rows == [{'name': 'Ann', '2020': 5}]

    def test_dates_and_booleans(self, make_workbook):
        path = make_workbook([('S', [
            ['when', 'active'],
            [datetime(2020, 1, 2, 3, 4, 5), True],
        ])])
        row = DataTable.load(path).rows[0]

        assert row['when'] == datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert row['when'].tzinfo is not None
        assert row['active'] is True

    def test_header_only(self, make_workbook):
        path = make_workbook([('S', [['name', 'age']])])
        table = DataTable.load(path)
        assert table.name == 'S'
        assert table.rows == []

    def test_first_sheet_by_default(self, make_workbook):
        path = make_workbook([
            ('First', [['a'], [1]]),
            ('Second', [['b'], [2]]),
        ])
        assert DataTable.load(path).name == 'First'

    def test_sheet_name_option(self, make_workbook):
        path = make_workbook([
            ('First', [['a'], [1]]),
            ('Second', [['b'], [2]]),
        ])
        table = DataTable.load(path, sheet_name='Second')
        assert table.name == 'Second'
        assert table.rows == [{'b': 2}]

    def test_missing_sheet(self, make_workbook):
        path = make_workbook([('First', [['a'], [1]])])
        with pytest.raises(ValueError, match='not found'):
            DataTable.load(path, sheet_name='Nope')

    def test_convert_to_json(self, make_workbook, tmp_path):
        path = make_workbook([('People', [['name', 'age'], ['Ann', 30]])])
        target = str(tmp_path / 'people.json')
        DataTable.load(path).save(target)

        loaded = DataTable.load(target)
        assert loaded.name == 'People'
        assert loaded.rows == [{'name': 'Ann', 'age': 30}]


class TestListSheets:

    def test_names_in_order(self, make_workbook):
        path = make_workbook([('First', [['a']]), ('Second', [['b']])])
        assert list_sheets(path) == ['First', 'Second']
