"""
Mapping Audit Viewer.

Loads a list of title mappings, normalizes the expected and actual titles
of every record and reports which pairs match exactly after normalization.

Usage:
    mapping-audit --file mappings.json
    mapping-audit --file https://example.com/mappings.json --report

Components:
    - matching: normalization, field extraction and row comparison
    - data_formats: JSON / JSONL / Parquet loaders and remote fetch
    - session: load state and recompute-on-change controller
    - tui: Textual application and screens
"""

__version__ = "0.1.0"
