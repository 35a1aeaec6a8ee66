"""TUI views for the Mapping Audit Viewer."""

from mapping_audit.tui.views.file_list import FileListScreen
from mapping_audit.tui.views.mapping_screen import MappingScreen

__all__ = ["FileListScreen", "MappingScreen"]
