"""Exceptions for tabletext."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TabletextError(Exception):
    """
    Base exception for all tabletext errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ValidationError(TabletextError):
    """
    Raised when a user-provided value is rejected.

    Attributes:
        field: Name of the rejected input (e.g., "name", "truncate_at")
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class TableError(TabletextError):
    """
    Base exception for table structure errors.

    This includes errors raised when a table is built without columns or
    when a row does not fit the table.
    """

    pass


# ---------------------------------------------------------------------------
# Column Exceptions
# ---------------------------------------------------------------------------


class InvalidNameError(ValidationError):
    """Raised when a column name is empty."""

    def __init__(self, name: str) -> None:
        super().__init__("name", name, "Column name cannot be empty")


class TruncationTooWideError(ValidationError):
    """Raised when the requested truncation width exceeds the ceiling."""

    def __init__(self, truncate_at: int, maximum: int) -> None:
        self.maximum = maximum
        super().__init__(
            "truncate_at",
            truncate_at,
            f"Truncation width exceeds the maximum of {maximum} characters",
        )


class LayoutError(ValidationError):
    """
    Raised when a layout document is malformed.

    The ``field`` attribute holds the path of the offending entry,
    e.g. ``columns[1].truncate``.
    """


# ---------------------------------------------------------------------------
# Table Exceptions
# ---------------------------------------------------------------------------


class NoColumnsError(TableError):
    """Raised when a table is constructed without columns."""

    def __init__(self) -> None:
        super().__init__("Table requires at least one column")


class ColumnCountMismatchError(TableError):
    """Raised when a row's value count differs from the column count."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Row has {actual} columns, expected {expected}")


class RowLimitExceededError(TableError):
    """Raised when a row is added to a table that is already full."""

    def __init__(self, maximum: int) -> None:
        self.maximum = maximum
        super().__init__(f"Table already holds the maximum of {maximum:,} rows")


# ---------------------------------------------------------------------------
# Cell Exceptions
# ---------------------------------------------------------------------------


class TooManyLinesError(TabletextError):
    """
    Raised when a cell value splits into more lines than allowed.

    Attributes:
        line_count: Number of lines in the rejected value
        maximum: The configured ceiling
    """

    def __init__(self, line_count: int, maximum: int) -> None:
        self.line_count = line_count
        self.maximum = maximum
        super().__init__(f"Cell has {line_count:,} lines, maximum is {maximum:,}")
