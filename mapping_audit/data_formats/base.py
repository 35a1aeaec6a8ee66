"""
Abstract base class for data loaders.

This module defines the DataLoader interface that all format-specific
loaders must implement.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from mapping_audit.data_formats.errors import ParseError

logger = logging.getLogger(__name__)


def decode_text(data: bytes) -> str:
    """Decode raw file content as UTF-8, tolerating a leading BOM.

    Raises:
        ParseError: If the content is not valid UTF-8.
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"File is not valid UTF-8: {e}") from e


class DataLoader(ABC):
    """Abstract base class for loading datasets.

    Loaders parse a complete payload at once. The same parse() is used for
    local files and for bodies fetched over HTTP.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'jsonl', 'json', 'parquet')."""
        pass

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions (e.g., ['.jsonl'])."""
        pass

    @abstractmethod
    def parse(self, data: bytes) -> list[Any]:
        """Parse a complete payload into a list of records.

        Args:
            data: Raw file or response content.

        Returns:
            The records in document order.

        Raises:
            ParseError: If the content is not valid for this format.
            ShapeError: If the content is valid but not a sequence.
        """
        pass

    def load_all(self, filename: str) -> list[Any]:
        """Read a file and parse all of its records.

        Args:
            filename: Path to the file.

        Returns:
            A list of all records.

        Raises:
            FileNotFoundError: If the file does not exist.
            ParseError: If the content is not valid for this format.
            ShapeError: If the content is valid but not a sequence.
        """
        with open(filename, "rb") as f:
            data = f.read()
        logger.debug("Read %d bytes from %s as %s", len(data), filename, self.format_name)
        return self.parse(data)
