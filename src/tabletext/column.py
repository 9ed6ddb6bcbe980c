"""Column display policy and cell formatting."""

from __future__ import annotations

from enum import Enum

from .exceptions import (
    InvalidNameError,
    TooManyLinesError,
    TruncationTooWideError,
    ValidationError,
)
from .limits import (
    ELLIPSIS,
    MAX_CELL_LINES,
    MAX_TRUNCATE_WIDTH,
    MIN_TRUNCATE_WIDTH,
    split_lines,
)


class Justification(Enum):
    """Horizontal placement of text inside a column."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Justification | str) -> Justification:
        """
        Coerce a member or its string form to a Justification.

        Accepts ``"left"``/``"right"`` and the shorthands ``"l"``/``"r"``,
        case-insensitively.

        Raises:
            ValidationError: If the value names neither side
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.value[0]):
                    return member
        raise ValidationError(
            "justification",
            value,
            "Must be 'left' or 'right'",
        )


class Column:
    """
    Display policy for one table column.

    The column remembers the widest line it has been fed so far, and renders
    every cell at the same width: ``truncate_at`` when truncation is enabled,
    otherwise that running maximum. Only the justification can be changed
    after construction.

    Attributes:
        name: Header text (never empty)
        truncate_at: Effective truncation width, 0 for no truncation. A
            nonzero request is widened to at least 3 and to the header
            length so the ellipsis always fits and headers are never clipped.
        justification: LEFT pads after the text, RIGHT pads before it
        max_length: Longest line seen so far, header included
    """

    def __init__(
        self,
        name: str,
        truncate_at: int = 0,
        justification: Justification | str = Justification.LEFT,
    ) -> None:
        if not name:
            raise InvalidNameError(name)
        if truncate_at < 0:
            raise ValidationError(
                "truncate_at",
                truncate_at,
                "Truncation width cannot be negative",
            )
        if truncate_at > MAX_TRUNCATE_WIDTH:
            raise TruncationTooWideError(truncate_at, MAX_TRUNCATE_WIDTH)

        self.justification = Justification.parse(justification)
        self._name = name
        self._truncate_at = truncate_at
        if truncate_at > 0:
            self._truncate_at = max(truncate_at, MIN_TRUNCATE_WIDTH, len(name))
        self._max_length = len(name)

    @property
    def name(self) -> str:
        """Header text."""
        return self._name

    @property
    def truncate_at(self) -> int:
        """Effective truncation width, 0 when truncation is off."""
        return self._truncate_at

    @property
    def max_length(self) -> int:
        """Longest line seen so far, header included."""
        return self._max_length

    @property
    def width(self) -> int:
        """Rendered width of every cell in this column."""
        return self._truncate_at if self._truncate_at > 0 else self._max_length

    def __repr__(self) -> str:
        return (
            f"Column(name={self._name!r}, truncate_at={self._truncate_at}, "
            f"justification={self.justification}, max_length={self._max_length})"
        )

    def set_justification(self, justification: Justification | str) -> None:
        """Replace the column's justification."""
        self.justification = Justification.parse(justification)

    def update_max_length(self, value: str) -> None:
        """Grow ``max_length`` to fit the longest line of ``value``."""
        for line in split_lines(value):
            if len(line) > self._max_length:
                self._max_length = len(line)

    def format_cell(self, value: str) -> list[str]:
        """
        Format a cell value into padded display lines.

        Each newline-separated line is truncated (when enabled) and padded
        to the column width independently.

        Args:
            value: Raw cell text

        Returns:
            One formatted line per input line, in order

        Raises:
            TooManyLinesError: If the value has more than MAX_CELL_LINES lines
        """
        lines = split_lines(value)
        if len(lines) > MAX_CELL_LINES:
            raise TooManyLinesError(len(lines), MAX_CELL_LINES)

        width = self.width
        formatted: list[str] = []
        for line in lines:
            if self.truncate_at > 0 and len(line) > self.truncate_at:
                keep = max(self.truncate_at - len(ELLIPSIS), 0)
                line = line[:keep] + ELLIPSIS
            if self.justification is Justification.RIGHT:
                formatted.append(line.rjust(width))
            else:
                formatted.append(line.ljust(width))
        return formatted

    def format_empty(self) -> str:
        """Blank cell used when a sibling cell has more lines."""
        return " " * self.width
