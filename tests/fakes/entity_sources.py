"""
Fake EntitySource for testing.

This module provides an in-memory fake implementation of the EntitySource
port for unit testing without database access, with switches to inject the
read, count and write failures the sync engine has to handle.
"""
from typing import Any, Dict, List, Optional, Set

from application.exceptions import RecordConflictError, RecordValidationError
from domain.models import SyncCategory, validate_for_write


class FakeEntitySource:
    """
    In-memory fake implementation of EntitySource for testing.

    Records are kept in insertion order and keyed by id. write() applies the
    same write-time validation as the Supabase sources, so a blank id is
    rejected with RecordValidationError.
    """

    def __init__(
        self,
        category: SyncCategory,
        records: Optional[List[Any]] = None,
        *,
        conflict_on_existing: bool = False,
    ):
        """
        Initialize with optional seed records.

        Args:
            category: Category this source stores
            records: Records to seed
            conflict_on_existing: Raise RecordConflictError when a write
                targets an id that is already stored
        """
        self.category = category
        self.conflict_on_existing = conflict_on_existing
        self._records: Dict[str, Any] = {}
        self.write_calls: List[Any] = []
        self._read_error: Optional[Exception] = None
        self._count_error: Optional[Exception] = None
        self._count_override: Optional[int] = None
        self._write_errors: Dict[str, Exception] = {}
        self._conflict_ids: Set[str] = set()
        if records:
            self.seed(records)

    # =========================================================================
    # EntitySource
    # =========================================================================

    async def count_for_profile(self, profile_id: str) -> int:
        if self._count_error is not None:
            raise self._count_error
        if self._count_override is not None:
            return self._count_override
        return len(self._owned_by(profile_id))

    async def read_all_for_profile(self, profile_id: str) -> List[Any]:
        if self._read_error is not None:
            raise self._read_error
        return self._owned_by(profile_id)

    async def write(self, entity: Any) -> Any:
        self.write_calls.append(entity)
        record_id = getattr(entity, "id", "")

        if record_id in self._write_errors:
            raise self._write_errors[record_id]
        if record_id in self._conflict_ids or (
            self.conflict_on_existing and record_id in self._records
        ):
            raise RecordConflictError(f"Record {record_id} already exists", record_id=record_id)

        errors = validate_for_write(entity)
        if errors:
            raise RecordValidationError("; ".join(errors), errors=errors)

        self._records[record_id] = entity
        return entity

    # =========================================================================
    # Test helpers
    # =========================================================================

    def _owned_by(self, profile_id: str) -> List[Any]:
        return [r for r in self._records.values() if r.profile_id == profile_id]

    def seed(self, records: List[Any]) -> None:
        """Seed the source with records (bypasses validation)."""
        for record in records:
            self._records[record.id] = record

    def get_all(self) -> List[Any]:
        """Get all stored records (for assertions)."""
        return list(self._records.values())

    def get(self, record_id: str) -> Optional[Any]:
        return self._records.get(record_id)

    def reset(self) -> None:
        """Clear all records, recorded calls and injected failures."""
        self._records.clear()
        self.write_calls.clear()
        self._read_error = None
        self._count_error = None
        self._count_override = None
        self._write_errors.clear()
        self._conflict_ids.clear()

    def fail_reads_with(self, error: Exception) -> None:
        self._read_error = error

    def fail_counts_with(self, error: Exception) -> None:
        self._count_error = error

    def report_count(self, count: int) -> None:
        """Make count_for_profile return a fixed number regardless of contents."""
        self._count_override = count

    def fail_write(self, record_id: str, error: Exception) -> None:
        """Make write() raise `error` for the given record id."""
        self._write_errors[record_id] = error

    def conflict_on(self, record_id: str) -> None:
        """Make write() raise RecordConflictError for the given record id."""
        self._conflict_ids.add(record_id)
