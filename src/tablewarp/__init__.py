"""TableWarp - tabular data that survives JSON, XML and Excel round-trips"""
from .errors import TableWarpError, UnsupportedFormatError, MalformedTableError, InvalidColumnNameError
from .table import DataTable
from .values import TaggedValue, infer_value, render_value
from .formats import get_adapter, list_sheets

__version__ = '0.1.0'
