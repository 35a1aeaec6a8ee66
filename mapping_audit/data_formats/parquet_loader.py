"""
Parquet format data loader.

This module provides the ParquetLoader class for loading Apache Parquet
files. Each row becomes one record keyed by column name.
"""

from __future__ import annotations

from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from mapping_audit.data_formats.base import DataLoader
from mapping_audit.data_formats.errors import ParseError


class ParquetLoader(DataLoader):
    """Data loader for Apache Parquet format.

    Nested columns (lists, structs) are converted to Python lists and
    dicts by pyarrow.

    Attributes:
        format_name: Returns 'parquet'.
        supported_extensions: Returns ['.parquet', '.pq'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "parquet"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".parquet", ".pq"]

    def parse(self, data: bytes) -> list[dict[str, Any]]:
        """Parse Parquet content held in memory.

        Args:
            data: Raw Parquet file content.

        Returns:
            One dict per row, in file order.

        Raises:
            ParseError: If the content is not a valid Parquet file.
        """
        try:
            table = pq.read_table(pa.BufferReader(data))
        except (pa.ArrowException, OSError) as e:
            raise ParseError(f"Invalid Parquet file: {e}") from e
        return table.to_pylist()
