"""Mixins for the TUI application."""

from mapping_audit.tui.mixins.data_table import DataTableMixin
from mapping_audit.tui.mixins.load_task import LoadTaskMixin

__all__ = [
    "DataTableMixin",
    "LoadTaskMixin",
]
