"""
Mapping Screen for auditing title matches.

Shows the file input, the two field selectors, the match summary and one
table row per record. The screen holds no state of its own: every refresh
reads the session owned by the app.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Input, Label, Select, Static

from mapping_audit.tui.mixins import DataTableMixin
from mapping_audit.tui.widgets import row_cells, summary_text

if TYPE_CHECKING:
    from mapping_audit.session import AuditSession


def _select_options(keys: list[str], selected: str) -> list[tuple[str, str]]:
    """Options for a field selector.

    The selected key is always offered, even when the first record does not
    have it, so the selector can show what is actually being compared.
    """
    options = list(keys)
    if selected not in options:
        options.append(selected)
    return [(key, key) for key in options]


class MappingScreen(DataTableMixin, Screen):
    """Main screen: load a file, pick fields, review matches."""

    AUTO_FOCUS = "#results-table"

    TABLE_ID = "results-table"
    TABLE_COLUMNS = (
        ("#", 6),
        ("EXPECTED", None),
        ("MATCHED", None),
        ("MATCH", 7),
    )
    # Raw title over its normalized form
    ROW_HEIGHT = 2

    CSS = """
    MappingScreen {
        layout: vertical;
    }

    #controls-card {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    #description {
        color: $text-muted;
    }

    #file-input {
        width: 1fr;
    }

    #status {
        height: auto;
    }

    #status.error {
        color: $error;
        text-style: bold;
    }

    #status.info {
        color: $warning;
    }

    #key-controls {
        height: auto;
    }

    .key-field {
        width: 1fr;
        height: auto;
    }

    #summary {
        height: auto;
        padding: 0 1;
        background: $primary-background;
        text-style: bold;
    }

    #results-table {
        height: 1fr;
        border: solid $primary;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._ready = False

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        with Vertical(id="controls-card"):
            yield Static(
                "Load a mapping file and choose the fields to compare. "
                "Titles match when their normalized forms are identical.",
                id="description",
            )
            yield Input(
                placeholder="Path to a JSON, JSONL or Parquet file (Enter to load)",
                id="file-input",
            )
            yield Static("", id="status")
            with Horizontal(id="key-controls"):
                with Vertical(classes="key-field"):
                    yield Label("Expected title field")
                    yield Select([], id="expected-key", prompt="Expected field")
                with Vertical(classes="key-field"):
                    yield Label("Matched title field")
                    yield Select([], id="actual-key", prompt="Matched field")
        yield Static("", id="summary")
        yield DataTable(id="results-table")
        yield Footer()

    def on_mount(self) -> None:
        """Configure the table and render the current session."""
        self._install_columns()
        self._ready = True
        self.refresh_view()

    @property
    def session(self) -> "AuditSession":
        return self.app.session

    def refresh_view(self) -> None:
        """Render status, selectors, summary and rows from the session."""
        if not self._ready:
            return
        self._render_status()
        has_records = bool(self.session.records)
        self.query_one("#key-controls").display = has_records
        self.query_one("#summary").display = has_records
        self.query_one("#results-table").display = has_records
        if has_records:
            self._render_key_selectors()
        self.refresh_rows()

    def refresh_rows(self) -> None:
        """Re-render summary and table rows for the current selection."""
        session = self.session
        self.query_one("#summary", Static).update(summary_text(session.summary))

        self._replace_rows(
            (str(index), row_cells(index, row)) for index, row in enumerate(session.rows)
        )

    def _render_status(self) -> None:
        status = self.query_one("#status", Static)
        status.remove_class("error", "info")
        if self.session.loading:
            status.update("Loading default file…")
            status.add_class("info")
        elif self.session.error:
            status.update(self.session.error)
            status.add_class("error")
        else:
            status.update("")

    def _render_key_selectors(self) -> None:
        keys = self.session.keys
        selectors = (
            ("#expected-key", self.session.expected_key),
            ("#actual-key", self.session.actual_key),
        )
        for selector_id, selected in selectors:
            select = self.query_one(selector_id, Select)
            # Programmatic updates must not feed back into the session
            with select.prevent(Select.Changed):
                select.set_options(_select_options(keys, selected))
                select.value = selected

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Load the file whose path was entered."""
        if event.input.id != "file-input":
            return
        path = event.value.strip()
        if path:
            self.app.load_file(path)

    def on_select_changed(self, event: Select.Changed) -> None:
        """Recompute rows for a new field selection, without reloading."""
        if not isinstance(event.value, str):
            return
        if event.select.id == "expected-key":
            if event.value == self.session.expected_key:
                return
            self.session.expected_key = event.value
        elif event.select.id == "actual-key":
            if event.value == self.session.actual_key:
                return
            self.session.actual_key = event.value
        else:
            return
        self.refresh_rows()
