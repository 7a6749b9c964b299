"""pandas hand-off: DataTable rows <-> DataFrame"""
from datetime import timezone
from typing import Any, Dict, List

import pandas as pd


def _from_cell(value: Any) -> Any:
    """Convert a DataFrame cell to a row value (None for missing)."""
    if isinstance(value, (list, dict, tuple)):
        return value
    if pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        ts = value.tz_localize('UTC') if value.tzinfo is None else value.tz_convert('UTC')
        return ts.to_pydatetime().astimezone(timezone.utc)
    if hasattr(value, 'item'):
        # numpy scalar -> Python scalar
        return value.item()
    return value


def dataframe_to_rows(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    One dict per DataFrame row.

    Missing cells (NaN/NaT/None) are left out of the row rather than stored
    as None, matching how the file adapters represent absent values.
    """
    rows = []
    for record in df.to_dict(orient='records'):
        row = {}
        for col, value in record.items():
            converted = _from_cell(value)
            if converted is not None:
                row[str(col)] = converted
        rows.append(row)
    return rows


def rows_to_dataframe(rows: List[Dict[str, Any]], columns: List[str]) -> pd.DataFrame:
    """DataFrame with the given columns; absent values become NaN/None."""
    return pd.DataFrame(rows, columns=columns)
