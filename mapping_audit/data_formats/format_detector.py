"""
Format detection utilities for data files.

This module provides functions to detect file formats and get appropriate loaders.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse

if TYPE_CHECKING:
    from mapping_audit.data_formats.base import DataLoader


# Mapping of file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".jsonl": "jsonl",
    ".json": "json",
    ".parquet": "parquet",
    ".pq": "parquet",
}

# Supported format names
SUPPORTED_FORMATS = frozenset(["jsonl", "json", "parquet"])

# How much of a file is inspected when sniffing content
SNIFF_BYTES = 64 * 1024

PARQUET_MAGIC = b"PAR1"


def _is_json_document(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def sniff_format(head: bytes) -> str:
    """Guess the format of raw content.

    Parquet is recognized by its magic bytes. Text starting with '[' is
    JSON. Text starting with '{' is JSONL only when it spans more than one
    non-blank line and is not itself one JSON document; a single object,
    pretty-printed or not, is treated as JSON so that it is rejected as not
    being a sequence. Everything else is JSON.

    Args:
        head: The first bytes of the content.

    Returns:
        Format name: "jsonl", "json", or "parquet"

    Examples:
        >>> sniff_format(b'[{"a": 1}]')
        'json'
        >>> sniff_format(b'{"a": 1}\\n{"a": 2}\\n')
        'jsonl'
        >>> sniff_format(b'{"a": 1}')
        'json'
        >>> sniff_format(b'{\\n  "a": 1\\n}\\n')
        'json'
    """
    if head.startswith(PARQUET_MAGIC):
        return "parquet"

    text = head.decode("utf-8", errors="ignore").lstrip("\ufeff \t\r\n")
    if text.startswith("{"):
        lines = [line for line in text.splitlines() if line.strip()]
        if len(lines) > 1 and not _is_json_document(text):
            return "jsonl"
    return "json"


def format_from_extension(filename: str) -> str | None:
    """Return the format for a known extension, or None."""
    return EXTENSION_MAP.get(Path(filename).suffix.lower())


def format_from_url(url: str) -> str | None:
    """Return the format implied by a URL path extension, or None.

    Examples:
        >>> format_from_url("https://example.com/data/mappings.jsonl?rev=2")
        'jsonl'
        >>> format_from_url("https://example.com/api/mappings") is None
        True
    """
    return format_from_extension(urlparse(url).path)


def detect_format(filename: str) -> str:
    """Detect file format from extension or content.

    Args:
        filename: Path to the file.

    Returns:
        Format name: "jsonl", "json", or "parquet"

    Examples:
        >>> detect_format("data.jsonl")
        'jsonl'
        >>> detect_format("data.parquet")
        'parquet'
        >>> detect_format("records.json")
        'json'
    """
    format_name = format_from_extension(filename)
    if format_name:
        return format_name

    # Content sniffing for files without a known extension
    try:
        with open(filename, "rb") as f:
            return sniff_format(f.read(SNIFF_BYTES))
    except OSError:
        return "json"


def get_loader_for_format(format_name: str) -> "DataLoader":
    """Get a loader for a specific format name.

    Args:
        format_name: The format name ("jsonl", "json", or "parquet").

    Returns:
        A DataLoader instance for the specified format.

    Raises:
        ValueError: If the format name is not supported.

    Examples:
        >>> loader = get_loader_for_format("parquet")
        >>> loader.format_name
        'parquet'
    """
    # Import loaders here to avoid circular imports
    from mapping_audit.data_formats.json_loader import JSONLoader
    from mapping_audit.data_formats.jsonl_loader import JSONLLoader
    from mapping_audit.data_formats.parquet_loader import ParquetLoader

    if format_name not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported format '{format_name}'. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )

    loaders: dict[str, DataLoader] = {
        "jsonl": JSONLLoader(),
        "json": JSONLoader(),
        "parquet": ParquetLoader(),
    }

    return loaders[format_name]


def get_loader(filename: str) -> "DataLoader":
    """Factory function to get appropriate loader for a file.

    Args:
        filename: Path to the file.

    Returns:
        A DataLoader instance appropriate for the file format.

    Examples:
        >>> loader = get_loader("data.jsonl")
        >>> loader.format_name
        'jsonl'
    """
    return get_loader_for_format(detect_format(filename))
