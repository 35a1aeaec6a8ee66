"""
Logging setup for the viewer and the report command.

Verbosity: 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG. While the TUI is running,
records go to the Textual devtools console (stdout belongs to the screen);
in report mode they go to stderr. An optional log file receives the same
records in both modes.
"""

from __future__ import annotations

import logging as _logging
import sys

from textual.logging import TextualHandler

_LOGGER = _logging.getLogger("mapping_audit")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    if verbosity >= 2:
        return _logging.DEBUG
    if verbosity == 1:
        return _logging.INFO
    return _logging.WARNING


def setup_logging(
    verbosity: int = 0,
    log_file: str | None = None,
    *,
    tui: bool = True,
) -> _logging.Logger:
    """Configure the package logger.

    Args:
        verbosity: Number of -v flags given on the command line.
        log_file: Optional path of a file that receives all records.
        tui: Route console records through Textual instead of stderr.

    Returns:
        The configured "mapping_audit" logger.
    """
    level = verbosity_to_level(verbosity)

    _LOGGER.handlers.clear()
    _LOGGER.setLevel(level)
    _LOGGER.propagate = False

    fmt = _logging.Formatter(LOG_FORMAT)

    console: _logging.Handler
    if tui:
        console = TextualHandler()
    else:
        console = _logging.StreamHandler(stream=sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    _LOGGER.addHandler(console)

    if log_file:
        fh = _logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        _LOGGER.addHandler(fh)

    return _LOGGER
