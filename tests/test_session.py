"""Tests for AuditSession and LoadState in mapping_audit/session.py."""

from __future__ import annotations

import pytest

from conftest import write_json
from mapping_audit.data_formats import ShapeError, load_file
from mapping_audit.matching import Summary
from mapping_audit.session import (
    DEFAULT_ACTUAL_KEY,
    DEFAULT_EXPECTED_KEY,
    AuditSession,
    LoadOutcome,
    LoadState,
    LoadStatus,
    capture_load,
)


class TestLoadState:
    """Tests for the LoadState constructors."""

    def test_idle(self):
        state = LoadState.idle()
        assert state.status is LoadStatus.IDLE
        assert state.records == ()
        assert state.error is None

    def test_loading_has_no_records(self):
        state = LoadState.loading()
        assert state.status is LoadStatus.LOADING
        assert state.records == ()

    def test_loaded_copies_records(self, sample_records):
        """Loaded state keeps its own immutable copy."""
        state = LoadState.loaded(sample_records)
        sample_records.append({"title": "late"})
        assert len(state.records) == 2
        assert isinstance(state.records, tuple)

    def test_failed_has_error_only(self):
        state = LoadState.failed("expected a sequence of records (got object)")
        assert state.status is LoadStatus.FAILED
        assert state.records == ()
        assert state.error.startswith("expected a sequence")


class TestCaptureLoad:
    """Tests for capture_load()."""

    def test_success(self, sample_records):
        outcome = capture_load(lambda: sample_records)
        assert outcome == LoadOutcome(records=tuple(sample_records))

    def test_load_error_reason(self):
        def fail():
            raise ShapeError({})

        assert capture_load(fail).error == "expected a sequence of records (got object)"

    def test_unexpected_error(self):
        def fail():
            raise KeyError("nope")

        assert capture_load(fail).error == "'nope'"

    def test_unexpected_error_without_message(self):
        def fail():
            raise RuntimeError()

        assert capture_load(fail).error == "error reading file"


class TestAuditSessionDefaults:
    """Tests for a fresh session."""

    def test_default_keys(self):
        session = AuditSession()
        assert session.expected_key == DEFAULT_EXPECTED_KEY == "title"
        assert session.actual_key == DEFAULT_ACTUAL_KEY == "matched_csv_title"

    def test_starts_idle_and_empty(self):
        session = AuditSession()
        assert session.state.status is LoadStatus.IDLE
        assert session.rows == []
        assert session.summary == Summary(total=0, matched=0, mismatched=0)
        assert session.keys == []
        assert session.error is None
        assert not session.loading


class TestAuditSessionLoading:
    """Tests for the load lifecycle and epochs."""

    def test_begin_load_shows_loading(self):
        session = AuditSession()
        epoch = session.begin_load()
        assert epoch == 1
        assert session.loading

    def test_begin_load_without_loading_keeps_state(self, sample_records):
        """File loads keep the previous state until their outcome arrives."""
        session = AuditSession()
        session.run_load(lambda: sample_records)
        session.begin_load(show_loading=False)
        assert session.state.status is LoadStatus.LOADED
        assert len(session.records) == 2

    def test_begin_file_load_clears_previous_error(self):
        session = AuditSession()
        session.run_load(lambda: [][0])
        assert session.error is not None

        session.begin_load(show_loading=False)

        assert session.error is None
        assert session.state.status is LoadStatus.IDLE
        assert not session.loading

    def test_complete_load(self, sample_records):
        session = AuditSession()
        epoch = session.begin_load()
        assert session.complete_load(epoch, sample_records) is True
        assert session.state.status is LoadStatus.LOADED
        assert session.summary == Summary(total=2, matched=1, mismatched=1)

    def test_failure_clears_dataset(self, sample_records):
        """A failed load never leaves old rows next to the error."""
        session = AuditSession()
        session.run_load(lambda: sample_records)
        epoch = session.begin_load()
        session.fail_load(epoch, "HTTP 500")

        assert session.error == "HTTP 500"
        assert session.records == ()
        assert session.rows == []
        assert session.summary.total == 0
        assert session.keys == []

    def test_success_clears_error(self, sample_records):
        session = AuditSession()
        session.run_load(lambda: [][0])
        assert session.error is not None
        session.run_load(lambda: sample_records)
        assert session.error is None

    def test_stale_success_ignored(self, sample_records):
        """An older load finishing last does not overwrite the newer one."""
        session = AuditSession()
        first = session.begin_load()
        second = session.begin_load()

        assert session.complete_load(second, [{"title": "new", "matched_csv_title": "new"}])
        assert session.complete_load(first, sample_records) is False

        assert len(session.records) == 1
        assert session.rows[0].expected_title == "new"

    def test_stale_failure_ignored(self, sample_records):
        """A stale failure does not clear a newer dataset."""
        session = AuditSession()
        first = session.begin_load()
        second = session.begin_load()
        session.complete_load(second, sample_records)

        assert session.fail_load(first, "timeout") is False
        assert session.error is None
        assert len(session.records) == 2

    def test_pending_newer_load_blocks_older(self, sample_records):
        """An older load completing while a newer one is pending is dropped."""
        session = AuditSession()
        first = session.begin_load()
        session.begin_load()

        assert session.complete_load(first, sample_records) is False
        assert session.loading

    def test_apply_outcome(self, sample_records):
        session = AuditSession()
        epoch = session.begin_load()
        assert session.apply_outcome(epoch, LoadOutcome(records=tuple(sample_records)))
        epoch = session.begin_load()
        assert session.apply_outcome(epoch, LoadOutcome(error="boom"))
        assert session.error == "boom"

    def test_object_file_fails_with_empty_dataset(self, tmp_path, sample_records):
        """Loading a top-level object fails and empties the dataset."""
        session = AuditSession()
        good = write_json(tmp_path / "good.json", sample_records)
        bad = write_json(tmp_path / "bad.json", {"title": "x"})

        session.run_load(lambda: load_file(str(good)), show_loading=False)
        state = session.run_load(lambda: load_file(str(bad)), show_loading=False)

        assert state.status is LoadStatus.FAILED
        assert "expected a sequence" in state.error
        assert session.records == ()


class TestAuditSessionDerived:
    """Tests for rows, summary and keys."""

    def test_default_selection_example(self, sample_records):
        session = AuditSession()
        session.run_load(lambda: sample_records)

        rows = session.rows
        assert rows[0].is_exact is True
        assert rows[1].is_exact is False
        assert session.summary == Summary(total=2, matched=1, mismatched=1)

    def test_keys_from_first_record(self):
        session = AuditSession()
        session.run_load(lambda: [{"a": 1, "b": 2}, {"c": 3}])
        assert session.keys == ["a", "b"]

    def test_key_change_recomputes_without_reload(self, sample_records):
        """Changing the selection recomputes rows; the loader is not called again."""
        calls = []

        def loader():
            calls.append(1)
            return sample_records

        session = AuditSession()
        session.run_load(loader)
        assert session.summary.matched == 1

        session.actual_key = "title"
        assert session.summary == Summary(total=2, matched=2, mismatched=0)
        assert session.rows[1].actual_title == "Studio A"

        session.expected_key = "missing"
        assert session.summary.matched == 0
        assert len(calls) == 1

    def test_rows_memoized_for_same_inputs(self, sample_records):
        """Same dataset and selection return the same row list."""
        session = AuditSession()
        session.run_load(lambda: sample_records)
        assert session.rows is session.rows

    def test_rows_rebuilt_after_reload(self, sample_records):
        """A new load with equal content still rebuilds the rows."""
        session = AuditSession()
        session.run_load(lambda: sample_records)
        before = session.rows
        session.run_load(lambda: sample_records)
        assert session.rows is not before
        assert session.rows == before

    @pytest.mark.parametrize("key", ["title", "matched_csv_title", "nope"])
    def test_summary_invariant(self, mixed_records, key):
        session = AuditSession(expected_key=key)
        session.run_load(lambda: mixed_records)
        summary = session.summary
        assert summary.matched + summary.mismatched == summary.total == len(mixed_records)
