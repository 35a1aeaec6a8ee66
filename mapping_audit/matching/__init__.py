"""Title normalization and row comparison."""

from mapping_audit.matching.comparator import (
    ComparisonRow,
    Summary,
    compute_rows,
    summarize,
)
from mapping_audit.matching.extractor import detect_keys, extract_string
from mapping_audit.matching.normalizer import normalize_title

__all__ = [
    "ComparisonRow",
    "Summary",
    "compute_rows",
    "detect_keys",
    "extract_string",
    "normalize_title",
    "summarize",
]
