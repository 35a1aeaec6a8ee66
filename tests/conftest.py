"""Pytest configuration and shared fixtures for mapping_audit tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq
import pytest


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Return a two-record dataset with one match and one mismatch."""
    return [
        {"title": "Ocean View", "matched_csv_title": "ocean view"},
        {"title": "Studio A", "matched_csv_title": "Studio B"},
    ]


@pytest.fixture
def mixed_records() -> list[dict[str, Any]]:
    """Return records with missing, null, numeric and nested values."""
    return [
        {"id": 1, "title": "Café — 2 Bedrooms", "matched_csv_title": "cafe 2 bedrooms", "alt": "Café 2 Bedrooms"},
        {"id": 2, "title": None, "matched_csv_title": ""},
        {"id": 3, "title": 42, "matched_csv_title": "42"},
        {"id": 4, "matched_csv_title": "Loft"},
        {"id": 5, "title": ["Loft"], "matched_csv_title": {"name": "Loft"}, "extra": True},
    ]


def write_json(path: Path, data: Any) -> Path:
    """Helper to write any value as a JSON document."""
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def write_jsonl(path: Path, records: list[Any]) -> Path:
    """Helper to write records to a JSONL file."""
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    return path


def write_parquet(path: Path, records: list[dict[str, Any]]) -> Path:
    """Helper to write records to a Parquet file."""
    pq.write_table(pa.Table.from_pylist(records), path)
    return path
