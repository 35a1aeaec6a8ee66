"""
JSONL format data loader.

This module provides the JSONLLoader class for loading JSONL (JSON Lines)
content where each non-blank line is one JSON value.
"""

from __future__ import annotations

import json
from typing import Any

from mapping_audit.data_formats.base import DataLoader, decode_text
from mapping_audit.data_formats.errors import ParseError, ensure_sequence

_NOT_A_DOCUMENT = object()


def _parse_document(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _NOT_A_DOCUMENT


class JSONLLoader(DataLoader):
    """Data loader for JSONL (JSON Lines) format.

    Blank lines are skipped. Content that turns out to be one JSON
    document is checked like a JSON file.

    Attributes:
        format_name: Returns 'jsonl'.
        supported_extensions: Returns ['.jsonl'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "jsonl"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".jsonl"]

    def parse(self, data: bytes) -> list[Any]:
        """Parse JSON Lines content.

        When the first record line is not valid JSON, the content is tried
        as a single JSON document instead. This catches a pretty-printed
        document whose first line is only an opening brace: an array is
        returned as is, anything else fails the sequence check.

        Args:
            data: Raw JSONL content.

        Returns:
            One record per non-blank line.

        Raises:
            ParseError: If any line is not valid JSON.
            ShapeError: If the content is one JSON document that is not an array.
        """
        text = decode_text(data)
        records: list[Any] = []
        for line_num, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                if not records:
                    whole = _parse_document(text)
                    if whole is not _NOT_A_DOCUMENT:
                        return ensure_sequence(whole)
                raise ParseError(f"Invalid JSON on line {line_num}: {e.msg}") from e
        return records
