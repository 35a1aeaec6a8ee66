"""
Field extraction from loosely typed records.

Records come straight from the loaded file, so values can be anything a
JSON document or a Parquet row holds. Extraction never fails: missing keys
and nulls become an empty string, everything else becomes text.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any


def _float_to_text(value: float) -> str:
    """Render a float the way a JSON reader on the web would show it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def coerce_to_text(value: Any) -> str:
    """Convert an arbitrary record value to text.

    Args:
        value: Any value found in a record.

    Returns:
        The textual form of the value. ``None`` becomes ``""``, booleans
        become ``"true"``/``"false"`` and nested structures are serialized
        as canonical JSON (sorted keys).

    Examples:
        >>> coerce_to_text(42)
        '42'
        >>> coerce_to_text(True)
        'true'
        >>> coerce_to_text({"b": 1, "a": [1, 2]})
        '{"a": [1, 2], "b": 1}'
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_to_text(value)
    try:
        return json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)
    except (TypeError, ValueError):
        return str(value)


def extract_string(record: Any, key: str) -> str:
    """Get a field of a record as text.

    Args:
        record: A record from the loaded dataset.
        key: The field name.

    Returns:
        The field value as text, or ``""`` if the key is absent, the value
        is null, or the record is not a mapping at all.

    Examples:
        >>> extract_string({}, "title")
        ''
        >>> extract_string({"title": None}, "title")
        ''
        >>> extract_string({"title": 42}, "title")
        '42'
    """
    if not isinstance(record, Mapping):
        return ""
    return coerce_to_text(record.get(key))


def detect_keys(records: list[Any]) -> list[str]:
    """Propose selectable field names from the first record.

    Only the first record is inspected. Keys that appear only in later
    records are not offered.

    Args:
        records: The loaded dataset.

    Returns:
        The first record's keys in their original order, or an empty list.

    Examples:
        >>> detect_keys([])
        []
        >>> detect_keys([{"a": 1, "b": 2}, {"c": 3}])
        ['a', 'b']
    """
    if not records:
        return []
    first = records[0]
    if not isinstance(first, Mapping):
        return []
    return [str(key) for key in first.keys()]
