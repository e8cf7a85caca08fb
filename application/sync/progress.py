"""
Progress reporter: owns the mutable counters of one operation.

Each export or import builds its own reporter. The observer only ever sees
immutable OperationStatus copies.
"""

import logging
from typing import List, Optional

from application.exceptions import RecordWriteError
from application.ports.progress_observer import ProgressObserver
from application.sync.status import OperationStatus

logger = logging.getLogger(__name__)


class ProgressReporter:
    """
    Tracks processed/successful/failed counts and notifies an observer.

    Usage:
        >>> reporter = ProgressReporter(total_records=350, on_progress=print)
        >>> reporter.record_success(100)
        >>> reporter.emit()
        >>> final = reporter.emit(final=True)
    """

    def __init__(self, total_records: int, on_progress: Optional[ProgressObserver] = None) -> None:
        if total_records < 0:
            raise ValueError(f"total_records must be >= 0, got {total_records}")
        self._total = total_records
        self._on_progress = on_progress
        self._processed = 0
        self._successful = 0
        self._failed = 0
        self._errors: List[RecordWriteError] = []
        self._conflicts = 0
        self._skipped = 0
        self._imported = 0
        self._complete = False

    @property
    def total_records(self) -> int:
        return self._total

    @property
    def processed_records(self) -> int:
        return self._processed

    def _advance(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"count must be >= 0, got {n}")
        if self._processed + n > self._total:
            raise ValueError(
                f"processed records would exceed total ({self._processed + n} > {self._total})"
            )
        self._processed += n

    def record_success(self, n: int = 1) -> None:
        """Count n records as written (import) or collected (export)."""
        self._advance(n)
        self._successful += n
        self._imported += n

    def record_failure(self, n: int, error: RecordWriteError) -> None:
        """Count n records as failed and keep the error."""
        self._advance(n)
        self._failed += n
        self._errors.append(error)

    def record_skip(self, n: int = 1) -> None:
        """Count n records as processed but not written. Skips are successful."""
        self._advance(n)
        self._successful += n
        self._skipped += n

    def record_conflict(self, n: int = 1) -> None:
        """Note n records that collided with existing data. Does not advance."""
        if n < 0:
            raise ValueError(f"count must be >= 0, got {n}")
        self._conflicts += n

    def snapshot(self, final: bool = False) -> OperationStatus:
        """Build an immutable status without notifying the observer."""
        if self._total == 0:
            progress = 0.0
            complete = True
        else:
            progress = self._processed / self._total
            complete = self._complete or (final and self._processed == self._total)
        return OperationStatus(
            is_complete=complete,
            total_records=self._total,
            processed_records=self._processed,
            successful_records=self._successful,
            failed_records=self._failed,
            errors=tuple(self._errors),
            conflicts_detected=self._conflicts,
            items_skipped=self._skipped,
            items_imported=self._imported,
            progress=progress,
        )

    def emit(self, final: bool = False) -> OperationStatus:
        """
        Build a status copy and hand it to the observer.

        Args:
            final: Mark completion if every record has been processed

        Returns:
            The emitted status
        """
        status = self.snapshot(final=final)
        if final and status.is_complete:
            self._complete = True
        if self._on_progress is not None:
            try:
                self._on_progress(status)
            except Exception:
                logger.exception("Progress observer raised; continuing operation")
        return status
