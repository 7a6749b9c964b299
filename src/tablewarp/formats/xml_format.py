"""XML adapter - text only, types recovered by inference or a `type` attribute"""
import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, Optional

from ..config import get_settings
from ..errors import InvalidColumnNameError
from ..table.model import DataTable
from ..values.codec import TaggedValue, as_tagged, render_value
from ..values.inference import infer_value
from .base import TableAdapter, TableFormat

logger = logging.getLogger(__name__)

ROOT_TAG = 'DataTable'
ROW_TAG = 'row'

# Letter or underscore first, then letters, digits, '.', '-', '_' (no namespaces)
XML_NAME_PATTERN = re.compile(r'[^\W\d][\w.\-]*')


class XmlAdapter(TableAdapter):
    """
    Wire format:

        <DataTable name="Contacts">
          <row>
            <firstname>Ann</firstname>
            <parentcustomerid type="account">42</parentcustomerid>
          </row>
        </DataTable>

    Every column's text is re-inferred on load, so a string such as "42"
    comes back as a number. That reclassification is expected behaviour:
    the `type` attribute is the only way to carry extra type information.

    Column names become element names, so a name such as "first name" or
    "2020" raises InvalidColumnNameError on save instead of writing a file
    that can't be read back.
    """

    format = TableFormat.XML
    extension = '.xml'

    def __init__(self, indent: Optional[int] = None):
        self.indent = indent

    def render(self, table: DataTable) -> bytes:
        indent = self.indent if self.indent is not None else get_settings().xml_indent

        root = ET.Element(ROOT_TAG)
        if table.name:
            root.set('name', table.name)

        for row in table.rows:
            row_element = ET.SubElement(root, ROW_TAG)
            for column, value in row.items():
                tagged = as_tagged(value)
                text = render_value(tagged.value if tagged else value)
                if text is None:
                    continue
                if not isinstance(column, str) or not XML_NAME_PATTERN.fullmatch(column):
                    raise InvalidColumnNameError(column)
                column_element = ET.SubElement(row_element, column)
                if tagged:
                    column_element.set('type', tagged.type)
                column_element.text = text

        if indent > 0:
            ET.indent(root, space=' ' * indent)
        return ET.tostring(root, encoding='utf-8', xml_declaration=True)

    def parse(self, data: bytes, **options: Any) -> DataTable:
        root = ET.fromstring(data)
        table = DataTable(name=root.get('name') or None)

        for row_element in root:
            row = {}
            for column_element in row_element:
                value = infer_value(column_element.text or '')
                column_type = column_element.get('type')
                if column_type:
                    value = TaggedValue(type=column_type, value=value)
                row[column_element.tag] = value
            table.rows.append(row)

        logger.debug(f"Parsed {len(table.rows)} rows from XML")
        return table
