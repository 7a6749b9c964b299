"""JSON adapter - lossless apart from timestamps, which are revived on load"""
import json
import logging
from typing import Any, Optional

from ..config import get_settings
from ..errors import MalformedTableError
from ..table.model import DataTable
from ..values.codec import json_default
from ..values.inference import revive_timestamps
from .base import TableAdapter, TableFormat

logger = logging.getLogger(__name__)


class JsonAdapter(TableAdapter):
    """
    Wire format:

        {
            "name": "Contacts",
            "rows": [{"firstname": "Ann", "age": 30, "created": "2020-01-02T03:04:05.000Z"}]
        }

    `name` is optional. Row values are native JSON types plus timestamp
    strings; None values are left out of the row.
    """

    format = TableFormat.JSON
    extension = '.json'

    def __init__(self, indent: Optional[int] = None):
        self.indent = indent

    def render(self, table: DataTable) -> bytes:
        indent = self.indent if self.indent is not None else get_settings().json_indent
        payload: dict = {}
        if table.name:
            payload['name'] = table.name
        payload['rows'] = [
            {key: value for key, value in row.items() if value is not None}
            for row in table.rows
        ]
        text = json.dumps(payload, indent=indent, default=json_default, ensure_ascii=False)
        return text.encode('utf-8')

    def parse(self, data: bytes, **options: Any) -> DataTable:
        payload = json.loads(data.decode('utf-8-sig'))

        if not isinstance(payload, dict) or not isinstance(payload.get('rows'), list):
            raise MalformedTableError("The parsed file doesn't look like a DataTable")

        rows = [revive_timestamps(row) for row in payload['rows']]
        logger.debug(f"Parsed {len(rows)} rows from JSON")
        return DataTable(name=payload.get('name'), rows=rows)
