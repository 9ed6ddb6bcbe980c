"""Build tables from layout documents.

A layout document is a mapping with a ``columns`` list and an optional
``rows`` list, usually loaded from YAML:

    columns:
      - name: Name
      - name: Balance
        truncate: 12
        justify: right
    rows:
      - ["John Doe", "100.00"]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .column import Column
from .exceptions import LayoutError
from .table import Table

logger = logging.getLogger(__name__)

COLUMN_KEYS = frozenset({"name", "truncate", "justify"})


def load_layout(path: str | Path) -> Table:
    """
    Load a YAML layout file into a Table.

    Args:
        path: Layout file location

    Returns:
        Table with the document's columns and rows

    Raises:
        LayoutError: If the document is not a valid layout
        TabletextError: If a column or row is rejected by the table
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LayoutError("document", str(path), f"Invalid YAML: {e}") from e
    except UnicodeDecodeError as e:
        raise LayoutError("document", str(path), "File is not valid UTF-8") from e
    if not isinstance(data, dict):
        raise LayoutError("document", type(data).__name__, "Layout must be a mapping")
    logger.debug("Loaded layout from %s", path)
    return table_from_mapping(data)


def table_from_mapping(data: dict[str, Any]) -> Table:
    """
    Build a Table from a parsed layout document.

    Raises:
        LayoutError: If ``columns`` or ``rows`` are malformed
        TabletextError: If a column or row is rejected by the table
    """
    raw_columns = data.get("columns")
    if not isinstance(raw_columns, list):
        raise LayoutError("columns", raw_columns, "Must be a list of columns")

    table = Table([_parse_column(f"columns[{i}]", item) for i, item in enumerate(raw_columns)])

    raw_rows = data.get("rows") or []
    if not isinstance(raw_rows, list):
        raise LayoutError("rows", raw_rows, "Must be a list of rows")
    for i, raw_row in enumerate(raw_rows):
        if not isinstance(raw_row, list):
            raise LayoutError(f"rows[{i}]", raw_row, "Row must be a list of values")
        table.add_row([_cell_text(value) for value in raw_row])

    logger.debug("Built table with %d columns and %d rows", len(table.columns), len(table))
    return table


def _parse_column(path: str, item: Any) -> Column:
    if isinstance(item, str):
        return Column(item)
    if not isinstance(item, dict):
        raise LayoutError(path, item, "Column must be a name or a mapping")

    unknown = set(item) - COLUMN_KEYS
    if unknown:
        raise LayoutError(path, sorted(unknown), "Unknown column keys")

    name = item.get("name")
    if not isinstance(name, str):
        raise LayoutError(f"{path}.name", name, "Column name must be a string")

    truncate = item.get("truncate", 0)
    # bool is an int subclass
    if isinstance(truncate, bool) or not isinstance(truncate, int):
        raise LayoutError(f"{path}.truncate", truncate, "Must be an integer")
    if truncate < 0:
        raise LayoutError(f"{path}.truncate", truncate, "Cannot be negative")

    justify = item.get("justify", "left")
    if not isinstance(justify, str):
        raise LayoutError(f"{path}.justify", justify, "Must be 'left' or 'right'")

    return Column(name, truncate, justify)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
