"""
Cell renderers for the comparison table.

Each title cell shows the original text on the first line and its
normalized form, dimmed, on the second.
"""

from __future__ import annotations

from rich.text import Text

from mapping_audit.matching import ComparisonRow, Summary

MATCH_MARK = "✅"
MISMATCH_MARK = "❌"

# Rendered in place of an empty title so the row keeps its height
EMPTY_PLACEHOLDER = "∅"


def title_cell(title: str, normalized: str) -> Text:
    """Two-line cell: title, then its normalized form."""
    text = Text()
    if title:
        text.append(title, style="bold")
    else:
        text.append(EMPTY_PLACEHOLDER, style="italic dim")
    text.append("\n")
    text.append(normalized, style="dim")
    return text


def match_cell(is_exact: bool) -> Text:
    if is_exact:
        return Text(MATCH_MARK, style="green")
    return Text(MISMATCH_MARK, style="red")


def row_cells(index: int, row: ComparisonRow) -> tuple[Text | str, ...]:
    """Build the cells of one table row.

    Args:
        index: Zero-based position of the record in the dataset.
        row: The comparison result for that record.

    Returns:
        Cells for the #, expected, actual and match columns.
    """
    return (
        str(index + 1),
        title_cell(row.expected_title, row.expected_norm),
        title_cell(row.actual_title, row.actual_norm),
        match_cell(row.is_exact),
    )


def summary_text(summary: Summary) -> str:
    """One-line summary of the counts.

    Examples:
        >>> summary_text(Summary(total=2, matched=1, mismatched=1))
        'Total: 2   Matched: 1   Mismatched: 1'
    """
    return (
        f"Total: {summary.total:,}   "
        f"Matched: {summary.matched:,}   "
        f"Mismatched: {summary.mismatched:,}"
    )
