"""
Load Task Mixin for running dataset loads off the event loop.

Every load is tagged with the epoch handed out by the session. The worker
thread only captures the loader's result; applying it happens back on the
event loop, where stale epochs are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Sequence

from textual import work

from mapping_audit.session import LoadOutcome, capture_load

if TYPE_CHECKING:
    from mapping_audit.session import AuditSession


class LoadTaskMixin:
    """Mixin providing epoch-tagged background loads.

    The host must be the App and provide a ``session`` attribute. It may
    override ``_on_load_applied(outcome)``, which is called only for
    outcomes that were applied.

    Usage:
        class MyApp(LoadTaskMixin, App):
            def reload(self):
                self._start_load(lambda: load_source(url))
    """

    session: "AuditSession"

    def _start_load(
        self,
        load_fn: Callable[[], Sequence[Any]],
        *,
        show_loading: bool = True,
    ) -> int:
        """Begin a load in a background thread.

        Args:
            load_fn: Blocking function returning the records.
            show_loading: Switch the session to LOADING while it runs.

        Returns:
            The epoch of the new load.
        """
        epoch = self.session.begin_load(show_loading=show_loading)
        self._on_load_started(epoch)
        self._run_load_worker(epoch, load_fn)
        return epoch

    @work(thread=True, group="load")
    def _run_load_worker(
        self,
        epoch: int,
        load_fn: Callable[[], Sequence[Any]],
    ) -> None:
        """Background worker for loads."""
        outcome = capture_load(load_fn)
        self.call_from_thread(self._apply_load_outcome, epoch, outcome)

    def _apply_load_outcome(self, epoch: int, outcome: LoadOutcome) -> None:
        """Apply a finished load on the event loop, unless it is stale."""
        if self.session.apply_outcome(epoch, outcome):
            self._on_load_applied(outcome)

    def _on_load_started(self, epoch: int) -> None:
        """Hook called on the event loop right after a load begins."""

    def _on_load_applied(self, outcome: LoadOutcome) -> None:
        """Hook called on the event loop when an outcome replaced the state."""
