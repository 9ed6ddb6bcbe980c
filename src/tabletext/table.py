"""
Table assembly and rendering.

A Table owns a fixed list of columns and an append-only list of rows.
Rendering produces a header line, a dashed separator, and one or more
output lines per data row:

    Name       Age
    ---------- ---
    John Doe   30
    Jane Smith 25
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .column import Column
from .exceptions import (
    ColumnCountMismatchError,
    NoColumnsError,
    RowLimitExceededError,
    TabletextError,
    TooManyLinesError,
    ValidationError,
)
from .limits import (
    COLUMN_SEPARATOR,
    HEADER_RULE,
    MAX_CELL_LINES,
    MAX_ROWS,
    split_lines,
)

logger = logging.getLogger(__name__)


class Table:
    """Aligned text table built from columns and rows."""

    def __init__(self, columns: Sequence[Column]) -> None:
        """
        Initialize the table.

        Args:
            columns: Ordered columns; fixed for the table's lifetime

        Raises:
            NoColumnsError: If no columns are given
            ValidationError: If an item is not a Column
        """
        columns = list(columns)
        if not columns:
            raise NoColumnsError()
        for index, column in enumerate(columns):
            if not isinstance(column, Column):
                raise ValidationError(f"columns[{index}]", column, "Must be a Column")

        self._columns = columns
        self._rows: list[tuple[str, ...]] = []

    @property
    def columns(self) -> tuple[Column, ...]:
        """Columns in display order."""
        return tuple(self._columns)

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        """Raw row values in insertion order."""
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def add_row(self, values: Sequence[str]) -> None:
        """
        Validate and append one row.

        The row is checked completely before any state changes, so a
        rejected row leaves the table and its columns untouched.

        Args:
            values: One string per column, in column order

        Raises:
            ColumnCountMismatchError: If the value count differs from the column count
            RowLimitExceededError: If the table already holds MAX_ROWS rows
            TooManyLinesError: If any value has more than MAX_CELL_LINES lines
            ValidationError: If ``values`` is a single string
        """
        if isinstance(values, str):
            raise ValidationError("values", values, "Row must be a sequence of strings")
        row = tuple(values)
        if len(row) != len(self._columns):
            logger.debug("Rejected row with %d values", len(row))
            raise ColumnCountMismatchError(len(row), len(self._columns))
        if len(self._rows) >= MAX_ROWS:
            raise RowLimitExceededError(MAX_ROWS)
        for value in row:
            line_count = len(split_lines(value))
            if line_count > MAX_CELL_LINES:
                logger.debug("Rejected row with a %d-line cell", line_count)
                raise TooManyLinesError(line_count, MAX_CELL_LINES)

        for column, value in zip(self._columns, row):
            column.update_max_length(value)
        self._rows.append(row)

    def add_rows(self, rows: Iterable[Sequence[str]]) -> None:
        """Append rows in order; stops at the first rejected row."""
        for row in rows:
            self.add_row(row)

    def render(self) -> str:
        """
        Render the table as text.

        Every line, including the last, ends with a newline. A cell that
        fails to format is replaced by its error message.

        Returns:
            Header, separator, and data lines
        """
        header = [self._format(column, column.name)[0] for column in self._columns]
        separator = [HEADER_RULE * column.width for column in self._columns]
        lines = [COLUMN_SEPARATOR.join(header), COLUMN_SEPARATOR.join(separator)]

        for row in self._rows:
            cells = [self._format(column, value) for column, value in zip(self._columns, row)]
            max_lines = max((len(cell) for cell in cells), default=1)

            for line_idx in range(max_lines):
                parts = []
                for column, cell in zip(self._columns, cells):
                    if line_idx < len(cell):
                        parts.append(cell[line_idx])
                    else:
                        parts.append(column.format_empty())
                lines.append(COLUMN_SEPARATOR.join(parts))

        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        names = ", ".join(repr(column.name) for column in self._columns)
        return f"Table(columns=[{names}], rows={len(self._rows)})"

    @staticmethod
    def _format(column: Column, value: str) -> list[str]:
        try:
            return column.format_cell(value)
        except TabletextError as e:
            logger.warning("Could not format cell in column %r: %s", column.name, e)
            return [str(e)]
