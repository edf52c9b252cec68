"""Tests for logging infrastructure."""

import logging
from pathlib import Path

import pytest

from struct_slot_layout.domain.models.layout import InvalidWidthError
from struct_slot_layout.infrastructure.logging import (
    LoggerSetup,
    ProgressTracker,
    get_logger,
    log_timing,
)


@pytest.mark.unit
def test_logger_setup_creates_log_file(tmp_path: Path) -> None:
    LoggerSetup.initialize(tmp_path / "logs", verbose=True)

    get_logger("struct_slot_layout.test").debug("hello from test")

    log_file = LoggerSetup.get_log_file_path()
    assert LoggerSetup.is_initialized()
    assert log_file is not None and log_file.parent == tmp_path / "logs"
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text(encoding="utf-8")


@pytest.mark.unit
def test_logger_setup_console_only() -> None:
    LoggerSetup.initialize(None)

    assert LoggerSetup.get_log_file_path() is None
    LoggerSetup.reset()
    assert not LoggerSetup.is_initialized()


@pytest.mark.unit
def test_log_timing_passes_results_and_errors() -> None:
    @log_timing
    def add(a: int, b: int) -> int:
        return a + b

    @log_timing
    def fail() -> None:
        raise KeyError("nope")

    assert add(2, 3) == 5
    assert add.__name__ == "add"
    with pytest.raises(KeyError):
        fail()


@pytest.mark.unit
def test_log_timing_levels(caplog: pytest.LogCaptureFixture) -> None:
    """Test that rejected input stays at debug level while crashes log an error."""

    @log_timing
    def reject() -> None:
        raise InvalidWidthError("uint7", "7 is not a multiple of 8")

    @log_timing
    def crash() -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(InvalidWidthError):
            reject()
        with pytest.raises(RuntimeError):
            crash()

    rejected = [r for r in caplog.records if "rejected after" in r.getMessage()]
    failed = [r for r in caplog.records if "failed after" in r.getMessage()]
    assert [r.levelno for r in rejected] == [logging.DEBUG]
    assert "InvalidWidthError" in rejected[0].getMessage()
    assert [r.levelno for r in failed] == [logging.ERROR]


@pytest.mark.unit
def test_progress_tracker_counts() -> None:
    tracker = ProgressTracker(get_logger(__name__))

    with tracker.track_operation("outer"):
        assert tracker.get_current_context() == "outer"
        tracker.record_struct("A", 3)
        tracker.record_failure("B", ValueError("bad"))

    assert tracker.get_current_context() == "idle"
    assert (tracker.struct_count, tracker.field_count, tracker.failure_count) == (1, 3, 1)

    tracker.report_summary()
    tracker.reset()
    assert tracker.struct_count == 0


@pytest.mark.unit
def test_progress_tracker_reraises() -> None:
    tracker = ProgressTracker(get_logger(__name__))

    with pytest.raises(RuntimeError):
        with tracker.track_operation("failing"):
            raise RuntimeError("boom")

    assert tracker.operation_stack == []
