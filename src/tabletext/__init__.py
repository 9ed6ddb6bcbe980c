"""
tabletext: Aligned plain-text tables.

This library renders rows of strings as fixed-width text columns with:
- Per-column truncation with an ellipsis
- Left or right justification
- Multiline cells, aligned across the whole row
- Atomic, validated row ingestion

Example:
    from tabletext import Column, Justification, Table

    table = Table([
        Column("Name"),
        Column("Description", truncate_at=20),
        Column("Balance", justification=Justification.RIGHT),
    ])
    table.add_row(["John Doe", "Software Engineer\\nRust, Go", "100.00"])
    print(table, end="")
"""

from .column import Column, Justification
from .exceptions import (
    ColumnCountMismatchError,
    InvalidNameError,
    LayoutError,
    NoColumnsError,
    RowLimitExceededError,
    TableError,
    TabletextError,
    TooManyLinesError,
    TruncationTooWideError,
    ValidationError,
)
from .layout import load_layout, table_from_mapping
from .limits import MAX_CELL_LINES, MAX_ROWS, MAX_TRUNCATE_WIDTH
from .table import Table

__all__ = [
    # Core
    "Column",
    "Justification",
    "Table",
    # Layout documents
    "load_layout",
    "table_from_mapping",
    # Limits
    "MAX_CELL_LINES",
    "MAX_ROWS",
    "MAX_TRUNCATE_WIDTH",
    # Exceptions
    "TabletextError",
    "ValidationError",
    "TableError",
    "InvalidNameError",
    "TruncationTooWideError",
    "LayoutError",
    "NoColumnsError",
    "ColumnCountMismatchError",
    "RowLimitExceededError",
    "TooManyLinesError",
]
