"""
Directory scanning for the Open File picker.

Only files that could be audited are offered: a known data extension,
not hidden, and not empty (an empty file never yields a record list).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from mapping_audit.data_formats.format_detector import format_from_extension


@dataclass(frozen=True)
class DataFile:
    """A loadable file found in a directory.

    Attributes:
        path: Absolute path of the file.
        name: File name shown in the picker.
        format: Format implied by the extension.
        size: Size in bytes.
    """

    path: str
    name: str
    format: str
    size: int


def discover_data_files(directory: str) -> list[DataFile]:
    """List the auditable data files of a directory, sorted by name.

    Subdirectories are not searched. A directory that cannot be read
    yields an empty list.
    """
    found: list[DataFile] = []
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return []

    for entry in entries:
        if entry.name.startswith("."):
            continue
        format_name = format_from_extension(entry.name)
        if format_name is None:
            continue
        try:
            if not entry.is_file():
                continue
            size = entry.stat().st_size
        except OSError:
            continue
        if size == 0:
            continue
        found.append(DataFile(os.path.abspath(entry.path), entry.name, format_name, size))

    found.sort(key=lambda data_file: data_file.name.lower())
    return found


def format_file_size(size_bytes: float) -> str:
    """Human-readable size, e.g. '512 B' or '1.2 MB'."""
    if size_bytes < 1024:
        return f"{int(size_bytes)} B"
    size = float(size_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1024
        if size < 1024:
            return f"{size:.1f} {unit}"
    return f"{size / 1024:.1f} TB"
