"""Tests for layout documents."""

from pathlib import Path

import pytest

from tabletext import (
    InvalidNameError,
    Justification,
    LayoutError,
    NoColumnsError,
    load_layout,
    table_from_mapping,
)

LAYOUT = """\
columns:
  - name: Name
  - name: Description
    truncate: 12
  - name: Balance
    justify: right
rows:
  - ["John Doe", "Software Engineer", 100]
  - - Jane Smith
    - |-
      Manager
      Remote
    - null
"""


class TestTableFromMapping:
    """Tests for table_from_mapping."""

    def test_columns_and_rows(self) -> None:
        """Columns and rows are built in document order."""
        table = table_from_mapping(
            {
                "columns": ["Name", {"name": "Age", "justify": "r"}],
                "rows": [["John Doe", 30]],
            }
        )
        name, age = table.columns
        assert name.name == "Name"
        assert age.justification is Justification.RIGHT
        assert table.rows == (("John Doe", "30"),)

    def test_rows_optional(self) -> None:
        """A layout without rows yields an empty table."""
        table = table_from_mapping({"columns": ["A"]})
        assert len(table) == 0

    def test_missing_columns_raises(self) -> None:
        """columns must be present."""
        with pytest.raises(LayoutError) as exc_info:
            table_from_mapping({"rows": []})
        assert exc_info.value.field == "columns"

    def test_empty_columns_raises(self) -> None:
        """An empty column list is rejected by the table."""
        with pytest.raises(NoColumnsError):
            table_from_mapping({"columns": []})

    def test_empty_name_raises(self) -> None:
        """Empty column names are rejected by the column."""
        with pytest.raises(InvalidNameError):
            table_from_mapping({"columns": [{"name": ""}]})

    def test_bad_truncate_names_path(self) -> None:
        """Errors name the offending entry."""
        with pytest.raises(LayoutError) as exc_info:
            table_from_mapping({"columns": ["A", {"name": "B", "truncate": "wide"}]})
        assert exc_info.value.field == "columns[1].truncate"

    def test_negative_truncate_names_path(self) -> None:
        """Negative widths are reported against the layout entry."""
        with pytest.raises(LayoutError) as exc_info:
            table_from_mapping({"columns": [{"name": "A", "truncate": -2}]})
        assert exc_info.value.field == "columns[0].truncate"
        assert exc_info.value.value == -2

    def test_boolean_truncate_rejected(self) -> None:
        """Booleans are not accepted as widths."""
        with pytest.raises(LayoutError):
            table_from_mapping({"columns": [{"name": "A", "truncate": True}]})

    def test_unknown_column_key_raises(self) -> None:
        """Misspelled keys are reported."""
        with pytest.raises(LayoutError) as exc_info:
            table_from_mapping({"columns": [{"name": "A", "width": 3}]})
        assert exc_info.value.field == "columns[0]"
        assert exc_info.value.value == ["width"]

    def test_row_must_be_list(self) -> None:
        """Rows must be lists of values."""
        with pytest.raises(LayoutError) as exc_info:
            table_from_mapping({"columns": ["A"], "rows": ["x"]})
        assert exc_info.value.field == "rows[0]"


class TestLoadLayout:
    """Tests for load_layout."""

    def test_renders_yaml_layout(self, tmp_path: Path) -> None:
        """A YAML layout renders with truncation, justification and multiline cells."""
        path = tmp_path / "layout.yaml"
        path.write_text(LAYOUT)

        table = load_layout(path)

        assert table.render() == (
            "Name       Description  Balance\n"
            "---------- ------------ -------\n"
            "John Doe   Software ...     100\n"
            "Jane Smith Manager             \n"
            "           Remote              \n"
        )

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """The document root must be a mapping."""
        path = tmp_path / "layout.yaml"
        path.write_text("- Name\n- Age\n")
        with pytest.raises(LayoutError) as exc_info:
            load_layout(path)
        assert exc_info.value.field == "document"

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        """YAML syntax errors are reported as layout errors."""
        path = tmp_path / "layout.yaml"
        path.write_text("columns: [A, B\nrows: :\n")
        with pytest.raises(LayoutError) as exc_info:
            load_layout(path)
        assert exc_info.value.field == "document"
        assert exc_info.value.value == str(path)
        assert "Invalid YAML" in exc_info.value.reason

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        """Files that are not UTF-8 are reported as layout errors."""
        path = tmp_path / "layout.yaml"
        path.write_bytes(b"columns: [\xff\xfe]")
        with pytest.raises(LayoutError) as exc_info:
            load_layout(path)
        assert exc_info.value.field == "document"
        assert "not valid UTF-8" in exc_info.value.reason
