"""
Audit session state.

AuditSession owns the loaded dataset and the selected field names. It hands
out a request epoch for every load so that only the most recently started
load may replace the state, and it recomputes comparison rows whenever the
dataset or the selection changes.

The session itself does no I/O scheduling. Callers (the TUI, the report
command) decide where a load runs, capture its result with capture_load()
and hand it back through apply_outcome(), or use run_load() for a
blocking load.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence

from mapping_audit.data_formats import LoadError, ParseError
from mapping_audit.matching import (
    ComparisonRow,
    Summary,
    compute_rows,
    detect_keys,
    summarize,
)

logger = logging.getLogger(__name__)

DEFAULT_EXPECTED_KEY = "title"
DEFAULT_ACTUAL_KEY = "matched_csv_title"


class LoadStatus(Enum):
    """Lifecycle of the current dataset load."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadState:
    """The single live load state.

    Records are only present when the status is LOADED, and an error is
    only present when the status is FAILED.
    """

    status: LoadStatus = LoadStatus.IDLE
    records: tuple[Any, ...] = field(default=())
    error: str | None = None

    @classmethod
    def idle(cls) -> "LoadState":
        return cls(LoadStatus.IDLE)

    @classmethod
    def loading(cls) -> "LoadState":
        return cls(LoadStatus.LOADING)

    @classmethod
    def loaded(cls, records: Sequence[Any]) -> "LoadState":
        return cls(LoadStatus.LOADED, records=tuple(records))

    @classmethod
    def failed(cls, reason: str) -> "LoadState":
        return cls(LoadStatus.FAILED, error=reason)


@dataclass(frozen=True)
class LoadOutcome:
    """Result of running a loader: either records or an error reason."""

    records: tuple[Any, ...] = ()
    error: str | None = None


def capture_load(load_fn: Callable[[], Sequence[Any]]) -> LoadOutcome:
    """Run a loader and capture its result without raising.

    LoadError reasons are kept as they are; any other exception is treated
    as a parse failure. Safe to call from a worker thread since it does not
    touch any session.
    """
    try:
        records = load_fn()
    except LoadError as e:
        return LoadOutcome(error=e.reason)
    except Exception as e:
        return LoadOutcome(error=ParseError.from_exception(e).reason)
    return LoadOutcome(records=tuple(records))


class AuditSession:
    """Holds records and field selection, derives rows and summary.

    Attributes:
        expected_key: Field compared as the expected title.
        actual_key: Field compared as the matched title.
    """

    def __init__(
        self,
        expected_key: str = DEFAULT_EXPECTED_KEY,
        actual_key: str = DEFAULT_ACTUAL_KEY,
    ) -> None:
        self._state = LoadState.idle()
        self._epoch = 0
        self._expected_key = expected_key
        self._actual_key = actual_key
        self._cache_inputs: tuple[LoadState, str, str] | None = None
        self._cache_rows: list[ComparisonRow] = []
        self._cache_summary = Summary()

    # -- load lifecycle ---------------------------------------------------

    @property
    def state(self) -> LoadState:
        """The current load state."""
        return self._state

    @property
    def epoch(self) -> int:
        """Epoch of the most recently started load."""
        return self._epoch

    def begin_load(self, show_loading: bool = True) -> int:
        """Start a new load and return its epoch.

        Any load started earlier becomes stale. When show_loading is set the
        state switches to LOADING. Otherwise loaded records stay visible
        until the outcome arrives, while a previous error is cleared at once.
        """
        self._epoch += 1
        if show_loading:
            self._state = LoadState.loading()
        elif self._state.status is LoadStatus.FAILED:
            self._state = LoadState.idle()
        logger.debug("Load %d started", self._epoch)
        return self._epoch

    def is_current(self, epoch: int) -> bool:
        return epoch == self._epoch

    def complete_load(self, epoch: int, records: Sequence[Any]) -> bool:
        """Apply a successful load if it is still the current one.

        Returns:
            True if the state was replaced, False if the result was stale.
        """
        if not self.is_current(epoch):
            logger.debug("Ignoring stale load %d (current is %d)", epoch, self._epoch)
            return False
        self._state = LoadState.loaded(records)
        logger.info("Loaded %d records", len(self._state.records))
        return True

    def fail_load(self, epoch: int, reason: str) -> bool:
        """Apply a failed load if it is still the current one.

        The dataset is cleared so stale rows never show next to an error.

        Returns:
            True if the state was replaced, False if the result was stale.
        """
        if not self.is_current(epoch):
            logger.debug("Ignoring stale failure of load %d: %s", epoch, reason)
            return False
        self._state = LoadState.failed(reason)
        logger.warning("Load failed: %s", reason)
        return True

    def apply_outcome(self, epoch: int, outcome: LoadOutcome) -> bool:
        """Apply a captured load outcome under the given epoch.

        Returns:
            True if the outcome was applied, False if it was stale.
        """
        if outcome.error is not None:
            return self.fail_load(epoch, outcome.error)
        return self.complete_load(epoch, outcome.records)

    def run_load(self, load_fn: Callable[[], Sequence[Any]], show_loading: bool = True) -> LoadState:
        """Start a load, run it to completion on this thread and return the new state."""
        epoch = self.begin_load(show_loading=show_loading)
        self.apply_outcome(epoch, capture_load(load_fn))
        return self._state

    # -- derived values ---------------------------------------------------

    @property
    def records(self) -> tuple[Any, ...]:
        """The loaded dataset, empty unless the state is LOADED."""
        return self._state.records

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def loading(self) -> bool:
        return self._state.status is LoadStatus.LOADING

    @property
    def keys(self) -> list[str]:
        """Selectable field names taken from the first record."""
        return detect_keys(list(self._state.records))

    @property
    def expected_key(self) -> str:
        return self._expected_key

    @expected_key.setter
    def expected_key(self, key: str) -> None:
        self._expected_key = key

    @property
    def actual_key(self) -> str:
        return self._actual_key

    @actual_key.setter
    def actual_key(self, key: str) -> None:
        self._actual_key = key

    def _refresh(self) -> None:
        inputs = (self._state, self._expected_key, self._actual_key)
        cached = self._cache_inputs
        if (
            cached is not None
            and cached[0] is inputs[0]
            and cached[1] == inputs[1]
            and cached[2] == inputs[2]
        ):
            return
        self._cache_rows = compute_rows(self._state.records, self._expected_key, self._actual_key)
        self._cache_summary = summarize(self._cache_rows)
        self._cache_inputs = inputs

    @property
    def rows(self) -> list[ComparisonRow]:
        """Comparison rows for the current dataset and selection."""
        self._refresh()
        return self._cache_rows

    @property
    def summary(self) -> Summary:
        """Counts over the current rows."""
        self._refresh()
        return self._cache_summary
