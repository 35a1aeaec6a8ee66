"""TUI widgets for the Mapping Audit Viewer."""

from mapping_audit.tui.widgets.result_cells import (
    MATCH_MARK,
    MISMATCH_MARK,
    match_cell,
    row_cells,
    summary_text,
    title_cell,
)

__all__ = [
    "MATCH_MARK",
    "MISMATCH_MARK",
    "match_cell",
    "row_cells",
    "summary_text",
    "title_cell",
]
