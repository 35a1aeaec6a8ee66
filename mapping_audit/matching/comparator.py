"""
Row comparison and summary counts.

Both functions are pure. Callers re-run them whenever the dataset or the
selected keys change; nothing here is updated incrementally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from mapping_audit.matching.extractor import extract_string
from mapping_audit.matching.normalizer import normalize_title


@dataclass(frozen=True)
class ComparisonRow:
    """Comparison result for one record.

    Attributes:
        expected_title: Raw text of the expected field.
        actual_title: Raw text of the actual (matched) field.
        expected_norm: Canonical form of expected_title.
        actual_norm: Canonical form of actual_title.
        is_exact: Whether both canonical forms are equal.
    """

    expected_title: str
    actual_title: str
    expected_norm: str
    actual_norm: str
    is_exact: bool


@dataclass(frozen=True)
class Summary:
    """Aggregate counts over a list of comparison rows."""

    total: int = 0
    matched: int = 0
    mismatched: int = 0


def compare_record(record: Any, expected_key: str, actual_key: str) -> ComparisonRow:
    """Compare the two selected fields of a single record."""
    expected_title = extract_string(record, expected_key)
    actual_title = extract_string(record, actual_key)
    expected_norm = normalize_title(expected_title)
    actual_norm = normalize_title(actual_title)
    return ComparisonRow(
        expected_title=expected_title,
        actual_title=actual_title,
        expected_norm=expected_norm,
        actual_norm=actual_norm,
        is_exact=expected_norm == actual_norm,
    )


def compute_rows(
    records: Sequence[Any],
    expected_key: str,
    actual_key: str,
) -> list[ComparisonRow]:
    """Build one comparison row per record, in dataset order.

    Args:
        records: The loaded dataset.
        expected_key: Field holding the expected title.
        actual_key: Field holding the matched title.

    Returns:
        A new list with exactly one row per record.

    Examples:
        >>> rows = compute_rows([{"title": "Ocean View", "name": "ocean view"}], "title", "name")
        >>> rows[0].is_exact
        True
    """
    return [compare_record(record, expected_key, actual_key) for record in records]


def summarize(rows: Sequence[ComparisonRow]) -> Summary:
    """Count matched and mismatched rows.

    Args:
        rows: Rows returned by compute_rows().

    Returns:
        A Summary where matched + mismatched == total.
    """
    matched = 0
    for row in rows:
        if row.is_exact:
            matched += 1
    return Summary(total=len(rows), matched=matched, mismatched=len(rows) - matched)
