"""
Plain-text report of a mapping audit.

Used by ``mapping-audit --report`` to check a mapping file without the
terminal UI, e.g. from CI.
"""

from __future__ import annotations

import logging
from typing import TextIO

from mapping_audit.config import AuditConfig
from mapping_audit.data_formats import load_source
from mapping_audit.session import AuditSession, LoadStatus

logger = logging.getLogger(__name__)

COLUMN_WIDTH = 40


def truncate(text: str, max_len: int = COLUMN_WIDTH) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def render_report(session: AuditSession, mismatches_only: bool = False) -> list[str]:
    """Render the loaded session as report lines.

    Args:
        session: A session whose load has finished.
        mismatches_only: Only list rows whose titles did not match.

    Returns:
        Lines of the report, without trailing newlines.
    """
    if session.error:
        return [f"Error: {session.error}"]

    summary = session.summary
    lines = [
        f"Expected field: {session.expected_key}",
        f"Matched field:  {session.actual_key}",
        "",
    ]

    header = f"{'#':<6} {'EXPECTED':<{COLUMN_WIDTH}} {'MATCHED':<{COLUMN_WIDTH}} MATCH"
    lines.append("-" * len(header))
    lines.append(header)
    lines.append("-" * len(header))

    for index, row in enumerate(session.rows):
        if mismatches_only and row.is_exact:
            continue
        mark = "yes" if row.is_exact else "NO"
        lines.append(
            f"{index + 1:<6} {truncate(row.expected_title):<{COLUMN_WIDTH}} "
            f"{truncate(row.actual_title):<{COLUMN_WIDTH}} {mark}"
        )
        if not row.is_exact:
            lines.append(
                f"{'':<6} {truncate(row.expected_norm):<{COLUMN_WIDTH}} "
                f"{truncate(row.actual_norm):<{COLUMN_WIDTH}}"
            )

    lines.append("-" * len(header))
    lines.append(
        f"Total: {summary.total}  Matched: {summary.matched}  "
        f"Mismatched: {summary.mismatched}"
    )
    return lines


def run_report(
    config: AuditConfig,
    out: TextIO,
    mismatches_only: bool = False,
) -> int:
    """Load the configured source once and write the report.

    Args:
        config: Startup configuration.
        out: Stream the report is written to.
        mismatches_only: Only list rows whose titles did not match.

    Returns:
        Process exit status: 0 if the dataset loaded, 1 otherwise.
    """
    session = AuditSession(expected_key=config.expected_key, actual_key=config.actual_key)
    logger.info("Loading %s", config.source)
    state = session.run_load(
        lambda: load_source(config.source, base_url=config.base_url, timeout=config.timeout)
    )
    for line in render_report(session, mismatches_only=mismatches_only):
        print(line, file=out)
    return 0 if state.status is LoadStatus.LOADED else 1
