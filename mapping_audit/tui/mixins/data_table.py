"""
Table helpers shared by the mapping screen and the file picker.

A screen declares its table once through class attributes and then only
hands over keyed rows:

    class MyScreen(DataTableMixin, Screen):
        TABLE_ID = "my-table"
        TABLE_COLUMNS = (("NAME", 30), ("VALUE", None))

        def on_mount(self):
            self._install_columns()
            self._replace_rows([("a", ("Alpha", "1"))])
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.text import Text
from textual.widgets import DataTable

Column = tuple[str, int | None]
KeyedRow = tuple[str, Sequence[str | Text]]


class DataTableMixin:
    """Declarative columns, keyed row replacement and row-key lookup."""

    TABLE_ID: str = ""
    TABLE_COLUMNS: tuple[Column, ...] = ()
    ROW_HEIGHT: int = 1

    def _table(self) -> DataTable:
        return self.query_one(f"#{self.TABLE_ID}", DataTable)

    def _install_columns(self) -> DataTable:
        """Add the declared columns with row cursor and zebra stripes."""
        table = self._table()
        table.cursor_type = "row"
        table.zebra_stripes = True
        for label, width in self.TABLE_COLUMNS:
            table.add_column(label, width=width, key=label.lower())
        return table

    def _replace_rows(self, rows: Iterable[KeyedRow]) -> int:
        """Clear the table and add the given rows.

        Args:
            rows: (row_key, cells) pairs, in display order.

        Returns:
            The number of rows now in the table.
        """
        table = self._table()
        table.clear()
        for key, cells in rows:
            table.add_row(*cells, height=self.ROW_HEIGHT, key=key)
        return table.row_count

    @staticmethod
    def _row_key(event: DataTable.RowSelected) -> str | None:
        """Key of the selected row, or None for an unkeyed row."""
        value = event.row_key.value if event.row_key is not None else None
        return None if value is None else str(value)
