"""
Main Textual application for the Mapping Audit Viewer.

This is the entry point for the TUI that compares the expected title of
each record with the title an automated matcher picked for it.

Supported Formats:
    - JSON (.json): Array of JSON objects
    - JSONL (.jsonl): One JSON object per line
    - Parquet (.parquet, .pq): Apache Parquet columnar format

Sources can be local paths or http(s) URLs.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from mapping_audit import data_formats
from mapping_audit.config import AuditConfig
from mapping_audit.logging import setup_logging
from mapping_audit.report import run_report
from mapping_audit.session import AuditSession, LoadOutcome
from mapping_audit.tui.mixins import LoadTaskMixin
from mapping_audit.tui.views import FileListScreen, MappingScreen

logger = logging.getLogger(__name__)


class MappingAuditApp(LoadTaskMixin, App):
    """A Textual app for auditing title mappings."""

    TITLE = "Mapping Audit"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    DataTable {
        background: $surface;
    }

    DataTable > .datatable--header {
        background: $primary-darken-1;
        color: $text;
        text-style: bold;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "reload", "Reload Source", show=True),
        Binding("o", "open_file", "Open File", show=True),
    ]

    def __init__(self, config: AuditConfig | None = None) -> None:
        """Initialize the app.

        Args:
            config: Startup configuration. Defaults are used if None.
        """
        super().__init__()
        self.config = config or AuditConfig()
        self.session = AuditSession(
            expected_key=self.config.expected_key,
            actual_key=self.config.actual_key,
        )
        self._mapping_screen = MappingScreen()

    def get_default_screen(self) -> Screen:
        return self._mapping_screen

    def on_mount(self) -> None:
        """Load the configured source once at startup."""
        self.load_default_source()

    def load_default_source(self) -> int:
        """Fetch the configured source in the background.

        Returns:
            The epoch of the started load.
        """
        config = self.config
        self.sub_title = config.source
        logger.info("Loading source %s", config.source)
        return self._start_load(
            lambda: data_formats.load_source(
                config.source, base_url=config.base_url, timeout=config.timeout
            )
        )

    def load_file(self, path: str) -> int:
        """Read a local file in the background.

        Returns:
            The epoch of the started load.
        """
        self.sub_title = os.path.basename(path) or path
        logger.info("Loading file %s", path)
        return self._start_load(lambda: data_formats.load_file(path), show_loading=False)

    def _refresh_view(self) -> None:
        self._mapping_screen.refresh_view()

    def _on_load_started(self, epoch: int) -> None:
        self._refresh_view()

    def _on_load_applied(self, outcome: LoadOutcome) -> None:
        self._refresh_view()
        if outcome.error is not None:
            self.notify(f"Error loading file: {outcome.error}", severity="error")
        else:
            self.notify(f"Loaded {len(outcome.records):,} records")

    def action_reload(self) -> None:
        """Re-fetch the configured source."""
        self.load_default_source()

    def action_open_file(self) -> None:
        """Show the data files of the browse directory."""
        directory = self.config.browse_dir
        files = data_formats.discover_data_files(directory)
        if not files:
            self.notify(f"No data files to audit in {directory}", severity="warning")
            return
        self.push_screen(FileListScreen(os.path.abspath(directory), files))

    def on_file_list_screen_file_selected(
        self, event: FileListScreen.FileSelected
    ) -> None:
        """Load the file picked in the file list."""
        self.pop_screen()
        self.load_file(event.data_file.path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mapping-audit",
        description="Check expected titles against matched titles in a terminal UI. "
        "Supports JSON, JSONL, and Parquet files and http(s) URLs.",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="URL or path of the mapping file (default: $MAPPING_AUDIT_FILE or /mappings.json)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Base URL that relative sources are fetched from (default: $MAPPING_AUDIT_BASE_URL)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--expected-key",
        default=None,
        help="Field holding the expected title (default: title)",
    )
    parser.add_argument(
        "--actual-key",
        default=None,
        help="Field holding the matched title (default: matched_csv_title)",
    )
    parser.add_argument(
        "--browse-dir",
        default=None,
        help="Directory listed by the Open File picker (default: current directory)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a plain-text report instead of starting the UI",
    )
    parser.add_argument(
        "--mismatches-only",
        action="store_true",
        help="With --report, only list rows that did not match",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=None,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file (default: $MAPPING_AUDIT_LOG_FILE)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the application."""
    args = build_parser().parse_args(argv)

    if args.timeout is not None and args.timeout <= 0:
        print(f"Error: Timeout must be positive: {args.timeout}", file=sys.stderr)
        sys.exit(1)

    if args.browse_dir is not None and not os.path.isdir(args.browse_dir):
        print(f"Error: Not a directory: {args.browse_dir}", file=sys.stderr)
        sys.exit(1)

    config = AuditConfig.from_env().with_overrides(
        source=args.file,
        base_url=args.base_url,
        timeout=args.timeout,
        expected_key=args.expected_key,
        actual_key=args.actual_key,
        browse_dir=args.browse_dir,
        verbosity=args.verbose,
        log_file=args.log_file,
    )
    setup_logging(config.verbosity, config.log_file, tui=not args.report)

    if args.report:
        sys.exit(run_report(config, sys.stdout, mismatches_only=args.mismatches_only))

    app = MappingAuditApp(config)
    app.run()


if __name__ == "__main__":
    main()
