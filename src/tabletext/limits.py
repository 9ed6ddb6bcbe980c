"""Configured ceilings and rendering constants.

These values are fixed at import time and are not runtime-configurable.
"""

MAX_TRUNCATE_WIDTH = 5000
"""Largest truncation width a column accepts, in characters."""

MAX_ROWS = 5_000_000
"""Largest number of data rows a single table holds."""

MAX_CELL_LINES = 5000
"""Largest number of newline-separated lines in a single cell value."""

ELLIPSIS = "..."
"""Marker appended to truncated lines."""

MIN_TRUNCATE_WIDTH = len(ELLIPSIS)
"""Truncating columns are never narrower than the ellipsis."""

COLUMN_SEPARATOR = " "
"""Text placed between adjacent columns."""

HEADER_RULE = "-"
"""Character repeated under each header."""

LINE_BREAK = "\n"
"""Separator used to split multiline cell values."""


def split_lines(value: str) -> list[str]:
    """Split a cell value into its lines.

    An empty value is a single empty line; a trailing newline produces a
    trailing empty line.
    """
    return value.split(LINE_BREAK)
