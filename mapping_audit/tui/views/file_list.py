"""
File picker for the Mapping Audit Viewer.

Lists the auditable files of the browse directory. Enter loads the
highlighted file into the mapping screen; Escape goes back unchanged.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from mapping_audit.data_formats import DataFile, format_file_size
from mapping_audit.tui.mixins import DataTableMixin


class FileListScreen(DataTableMixin, Screen):
    """Pick a mapping file from a directory."""

    CSS = """
    FileListScreen {
        layout: vertical;
    }

    #dir-header {
        background: $primary-background;
        padding: 0 1;
        text-style: bold;
    }

    #file-table {
        height: 1fr;
        border: solid $primary;
    }
    """

    BINDINGS = [
        Binding("escape", "go_back", "Back", show=True),
    ]

    TABLE_ID = "file-table"
    TABLE_COLUMNS = (
        ("FILE NAME", None),
        ("FORMAT", 9),
        ("SIZE", 10),
    )

    class FileSelected(Message):
        """Posted with the picked file."""

        def __init__(self, data_file: DataFile) -> None:
            self.data_file = data_file
            super().__init__()

    def __init__(self, directory: str, files: list[DataFile]) -> None:
        super().__init__()
        self._directory = directory
        self._files = {data_file.path: data_file for data_file in files}

    def compose(self) -> ComposeResult:
        count = len(self._files)
        noun = "file" if count == 1 else "files"
        yield Header()
        yield Static(f"{self._directory}  ({count} {noun})", id="dir-header")
        yield DataTable(id="file-table")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Open File"
        self._install_columns()
        self._replace_rows(
            (
                data_file.path,
                (data_file.name, data_file.format.upper(), format_file_size(data_file.size)),
            )
            for data_file in self._files.values()
        )
        self._table().focus()

    def action_go_back(self) -> None:
        self.app.pop_screen()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        data_file = self._files.get(self._row_key(event) or "")
        if data_file is not None:
            self.post_message(self.FileSelected(data_file))
