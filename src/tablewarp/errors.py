"""Exceptions raised by TableWarp"""


class TableWarpError(Exception):
    """Base class for all TableWarp errors."""


class UnsupportedFormatError(TableWarpError, ValueError):
    """File extension has no adapter (or no writer) registered."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f'Format "{extension}" not supported')


class MalformedTableError(TableWarpError, ValueError):
    """Parsed payload does not look like a DataTable."""


class InvalidColumnNameError(TableWarpError, ValueError):
    """Column name can't be written as an XML element name."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Column '{column}' is not a valid XML element name")
