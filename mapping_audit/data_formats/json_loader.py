"""
JSON format data loader.

This module provides the JSONLoader class for loading JSON documents whose
top-level value is an array of records.
"""

from __future__ import annotations

import json
from typing import Any

from mapping_audit.data_formats.base import DataLoader, decode_text
from mapping_audit.data_formats.errors import ParseError, ensure_sequence


class JSONLoader(DataLoader):
    """Data loader for JSON format.

    The document must be an array: [{...}, {...}, ...]. Any other top-level
    value (object, string, number) is rejected with a ShapeError. Items are
    not validated; a non-object item simply extracts as empty fields.

    Attributes:
        format_name: Returns 'json'.
        supported_extensions: Returns ['.json'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "json"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".json"]

    def parse(self, data: bytes) -> list[Any]:
        """Parse a JSON array.

        Args:
            data: Raw JSON content.

        Returns:
            The array items in order.

        Raises:
            ParseError: If the content is not valid JSON.
            ShapeError: If the top-level value is not an array.

        Examples:
            >>> JSONLoader().parse(b'[{"title": "Studio"}]')
            [{'title': 'Studio'}]
        """
        text = decode_text(data)
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON: {e}") from e
        return ensure_sequence(parsed)
