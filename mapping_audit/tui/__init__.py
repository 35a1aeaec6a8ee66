"""
TUI Mapping Audit Viewer.

A Textual-based terminal UI for checking expected titles against the
titles an automated matcher picked for them.

Usage:
    uv run python -m mapping_audit.tui.app --file mappings.json

Components:
    - MappingAuditApp: Main application class
    - MappingScreen: File input, field selectors, summary and result table
    - FileListScreen: File picker for a directory
    - LoadTaskMixin: Epoch-tagged background loading
"""
