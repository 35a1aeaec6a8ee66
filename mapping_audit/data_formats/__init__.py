"""
Data formats module for loading mapping datasets.

This module provides a unified interface for loading record lists from
local files (JSON, JSONL, Parquet) and from http(s) URLs.

Usage:
    from mapping_audit.data_formats import load_source, LoadError

    try:
        records = load_source("https://example.com/mappings.json")
    except LoadError as e:
        print(e.reason)

    # Or pick a loader explicitly
    from mapping_audit.data_formats import get_loader
    records = get_loader("data.jsonl").load_all("data.jsonl")
"""

from mapping_audit.data_formats.base import DataLoader
from mapping_audit.data_formats.directory_loader import (
    DataFile,
    discover_data_files,
    format_file_size,
)
from mapping_audit.data_formats.errors import (
    DEFAULT_READ_ERROR,
    LoadError,
    ParseError,
    ShapeError,
    TransportError,
)
from mapping_audit.data_formats.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    detect_format,
    get_loader,
    get_loader_for_format,
    sniff_format,
)
from mapping_audit.data_formats.json_loader import JSONLoader
from mapping_audit.data_formats.jsonl_loader import JSONLLoader
from mapping_audit.data_formats.parquet_loader import ParquetLoader
from mapping_audit.data_formats.remote import DEFAULT_TIMEOUT, fetch_records
from mapping_audit.data_formats.sources import (
    is_remote,
    load_file,
    load_source,
    resolve_source,
)

__all__ = [
    # Base class
    "DataLoader",
    # Errors
    "DEFAULT_READ_ERROR",
    "LoadError",
    "ParseError",
    "ShapeError",
    "TransportError",
    # Format detection
    "detect_format",
    "get_loader",
    "get_loader_for_format",
    "sniff_format",
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    # Directory scanning
    "DataFile",
    "discover_data_files",
    "format_file_size",
    # Sources
    "DEFAULT_TIMEOUT",
    "fetch_records",
    "is_remote",
    "load_file",
    "load_source",
    "resolve_source",
    # Loaders
    "JSONLLoader",
    "JSONLoader",
    "ParquetLoader",
]
