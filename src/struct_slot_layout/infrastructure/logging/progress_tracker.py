#!/usr/bin/env python3

"""Progress tracking for struct layout runs."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from time import time


class ProgressTracker:
    """
    Track and report layout progress with summary statistics.

    Counts structs and fields laid out, and times named operations. Counters
    are guarded by a lock so worker threads can share one tracker.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.struct_count = 0
        self.field_count = 0
        self.failure_count = 0
        self.operation_stack: list[tuple[str, float]] = []
        self._lock = threading.Lock()

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def record_struct(self, struct_name: str, field_count: int) -> None:
        """Count one successfully laid out struct."""
        with self._lock:
            self.struct_count += 1
            self.field_count += field_count
        self.logger.debug(f"Laid out {struct_name} ({field_count} fields)")

    def record_failure(self, struct_name: str, error: Exception) -> None:
        """Count one struct that could not be laid out."""
        with self._lock:
            self.failure_count += 1
        self.logger.debug(f"Layout failed for {struct_name}: {error}")

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time

        self.logger.info(
            f"Layout complete: {self.struct_count} structs, {self.field_count} fields, "
            f"{self.failure_count} failures in {total_time:.3f}s"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        return " -> ".join(op[0] for op in self.operation_stack)

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.struct_count = 0
        self.field_count = 0
        self.failure_count = 0
        self.operation_stack.clear()
