"""The DataTable: named list of rows plus column operations"""
import logging
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional

from ..values.codec import as_tagged, render_value

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def _cache_key(value: Any) -> Hashable:
    """
    Hashable projection of a lookup key.

    Keeps True apart from 1 (equal in Python), keeps the type tag of tagged
    values, and falls back to the rendered text for other unhashable values
    such as dicts and lists.
    """
    tagged = as_tagged(value)
    if tagged is not None:
        return ('tagged', tagged.type, _cache_key(tagged.value))
    try:
        hash(value)
    except TypeError:
        return ('unhashable', type(value).__name__, render_value(value))
    return (isinstance(value, bool), value)


class DataTable:
    """
    Named, ordered collection of rows.

    Each row is a plain dict from column name to value. Rows don't need to
    share the same columns. `rows` is the hand-off surface for downstream
    consumers and may be mutated freely.
    """

    def __init__(self, name: Optional[str] = None, rows: Optional[List[Row]] = None):
        self.name = name
        self.rows: List[Row] = rows if rows is not None else []

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __repr__(self) -> str:
        return f"DataTable(name={self.name!r}, rows={len(self.rows)})"

    @property
    def columns(self) -> List[str]:
        """Union of column names across all rows, in first-seen order."""
        seen: Dict[str, None] = {}
        for row in self.rows:
            for key in row:
                seen.setdefault(key, None)
        return list(seen)

    def to_dict(self) -> dict:
        result: dict = {}
        if self.name:
            result['name'] = self.name
        result['rows'] = self.rows
        return result

    def lookup(
        self,
        column_name: str,
        resolver: Callable[[Row], Any],
        use_cache: bool = True,
    ) -> None:
        """
        Replace every value in a column with the result of `resolver(row)`.

        Typical use is resolving lookup data before sending rows somewhere,
        e.g. turning a parent account phone number into an account reference:

            table.lookup('parentcustomerid',
                         lambda row: find_account(row['telephone1']))

        With `use_cache`, rows sharing the same original value in the column
        reuse the first resolved result instead of calling `resolver` again.
        The cache lives for this call only. A resolver returning None removes
        the column from that row. Rows are processed in order; anything the
        resolver raises propagates and stops processing.
        """
        cache: Dict[Hashable, Any] = {}
        logger.debug(f"Resolving lookups for column '{column_name}'{' using cache' if use_cache else ''}...")

        total = len(self.rows)
        for i, row in enumerate(self.rows):
            logger.debug(f"{i} of {total}")
            lookup_value = row.get(column_name)
            key = _cache_key(lookup_value) if use_cache and lookup_value is not None else None

            if key is not None and key in cache:
                resolved = cache[key]
                logger.debug(f"Resolved '{column_name}' value '{lookup_value}' using cache")
            else:
                resolved = resolver(row)

            if key is not None:
                cache[key] = resolved

            if resolved is None:
                row.pop(column_name, None)
            else:
                row[column_name] = resolved

    def remove_column(self, column_name: str) -> None:
        """Remove a column from every row (rows without it are left alone)."""
        for row in self.rows:
            row.pop(column_name, None)

    def rename_column(self, column_name: str, new_name: str) -> None:
        """
        Rename a column.

        Only rows that have `column_name` are touched, so `new_name` is
        never created on rows that didn't have the column.
        """
        for row in self.rows:
            if column_name in row:
                row[new_name] = row.pop(column_name)

    def save(self, file_name: str) -> None:
        """Write the table to `file_name`; the extension picks the format."""
        from ..formats import get_adapter

        adapter = get_adapter(file_name, for_write=True)
        logger.debug(f"Serializing to {adapter.format.value}...")
        content = adapter.render(self)

        logger.debug(f"About to write {len(content)} bytes to file...")
        with open(file_name, 'wb') as f:
            f.write(content)

    @classmethod
    def load(cls, file_name: str, **options: Any) -> 'DataTable':
        """
        Read a table from `file_name`; the extension picks the format.

        Options are passed to the adapter (e.g. `sheet_name` for .xlsx).
        """
        from ..formats import get_adapter

        adapter = get_adapter(file_name)
        with open(file_name, 'rb') as f:
            content = f.read()

        logger.debug(f"Read {len(content)} bytes from {file_name}")
        return adapter.parse(content, **options)

    @classmethod
    def from_dataframe(cls, df, name: Optional[str] = None) -> 'DataTable':
        """Build a table from a pandas DataFrame (missing cells are dropped)."""
        from .frames import dataframe_to_rows

        return cls(name=name, rows=dataframe_to_rows(df))

    def to_dataframe(self):
        """Return the rows as a pandas DataFrame, one column per known column."""
        from .frames import rows_to_dataframe

        return rows_to_dataframe(self.rows, self.columns)
