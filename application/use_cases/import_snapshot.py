"""
ImportSnapshot Use Case.

Writes a snapshot into the local store one record at a time, category by
category in dependency order. A failing record is recorded in the status and
never stops the rest of the import.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from application.exceptions import (
    ApplicationError,
    OperationCancelledError,
    RecordConflictError,
    RecordValidationError,
    RecordWriteError,
)
from application.ports import EntitySource, ProgressObserver
from application.sync.cancellation import CancellationToken
from application.sync.chunking import DEFAULT_CHUNK_SIZE, ChunkScheduler
from application.sync.codec import describe_validation_error, parse_envelope, validate_record
from application.sync.progress import ProgressReporter
from application.sync.status import ImportStatus
from application.use_cases.export_profile import require_sources
from domain.models import IMPORT_ORDER, CategoryDescriptor, SnapshotEnvelope, SyncCategory

logger = logging.getLogger(__name__)


@dataclass
class ImportSnapshotResult:
    """Result of the ImportSnapshot use case execution."""

    success: bool
    status: Optional[ImportStatus] = None
    error: Optional[str] = None
    exception: Optional[ApplicationError] = None
    cancelled: bool = False


class ImportSnapshotUseCase:
    """
    Use case for importing a snapshot.

    Orchestrates the following workflow:
    1. Check the version and envelope (nothing is written on failure)
    2. Fix the total as the sum of all category lengths
    3. Write categories in IMPORT_ORDER, chunk by chunk, record by record,
       validating each raw record just before its write
    4. Report progress after each chunk and return the final status

    Usage:
        >>> use_case = ImportSnapshotUseCase(sources=sources)
        >>> result = await use_case.execute(snapshot, on_progress=print)
        >>> if result.success and result.status.failed_records:
        ...     for error in result.status.errors:
        ...         print(error)
    """

    def __init__(
        self,
        sources: Mapping[SyncCategory, EntitySource],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        pause_seconds: float = 0.0,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            sources: One entity source per category
            chunk_size: Records per write batch and progress update
            pause_seconds: Pause between chunks
        """
        self._sources = require_sources(sources)
        self._scheduler = ChunkScheduler(chunk_size=chunk_size, pause_seconds=pause_seconds)

    async def execute(
        self,
        snapshot: Union[SnapshotEnvelope, Mapping[str, Any]],
        on_progress: Optional[ProgressObserver] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> ImportSnapshotResult:
        """
        Execute the import workflow.

        Args:
            snapshot: Parsed Snapshot or raw payload mapping
            on_progress: Optional observer called after each chunk
            cancellation: Optional token checked at chunk boundaries

        Returns:
            ImportSnapshotResult. success is True whenever the import ran,
            even if some records failed; see status.errors.
        """
        try:
            parsed = parse_envelope(snapshot)
        except ApplicationError as e:
            logger.warning("Rejected snapshot: %s", e)
            return ImportSnapshotResult(success=False, error=str(e), exception=e)

        reporter = ProgressReporter(parsed.total_records, on_progress)
        logger.info(
            "Starting import of %d records (snapshot version %s)",
            parsed.total_records,
            parsed.version,
        )

        try:
            for descriptor in IMPORT_ORDER:
                await self._import_category(descriptor, parsed, reporter, cancellation)

        except OperationCancelledError as e:
            status = reporter.emit(final=True)
            logger.info(
                "Import cancelled after %d of %d records: %s",
                status.processed_records,
                status.total_records,
                e,
            )
            return ImportSnapshotResult(success=True, status=status, cancelled=True)

        except Exception as e:
            logger.exception(f"Unexpected error importing snapshot: {e}")
            wrapped = ApplicationError(f"Import failed: {e}", cause=e)
            return ImportSnapshotResult(success=False, error=str(wrapped), exception=wrapped)

        status = reporter.emit(final=True)
        logger.info(
            "Imported snapshot: %d successful, %d failed, %d skipped",
            status.successful_records,
            status.failed_records,
            status.items_skipped,
        )
        return ImportSnapshotResult(success=True, status=status)

    async def _import_category(
        self,
        descriptor: CategoryDescriptor,
        snapshot: SnapshotEnvelope,
        reporter: ProgressReporter,
        cancellation: Optional[CancellationToken],
    ) -> None:
        records = snapshot.records_for(descriptor.category)
        if not records:
            return
        logger.debug("Importing %d %s", len(records), descriptor.label)
        source = self._sources[descriptor.category]
        async for chunk in self._scheduler.chunks(records, cancellation):
            for item in chunk:
                await self._write_record(source, descriptor, item, reporter)
            reporter.emit()

    async def _write_record(
        self,
        source: EntitySource,
        descriptor: CategoryDescriptor,
        item: Any,
        reporter: ProgressReporter,
    ) -> None:
        category = descriptor.category.value
        try:
            record = validate_record(descriptor.category, item)
        except ValidationError as e:
            record_id = _raw_record_id(item)
            message = f"Invalid record: {describe_validation_error(e)}"
            logger.warning("Rejected %s record %r: %s", category, record_id, message)
            reporter.record_failure(
                1, RecordWriteError(category, record_id, message, retryable=False, cause=e)
            )
            return

        record_id = getattr(record, "id", "") or ""
        try:
            await source.write(record)
        except RecordConflictError as e:
            logger.info("Kept existing %s record %s: %s", category, record_id, e.message)
            reporter.record_conflict(1)
            reporter.record_skip(1)
        except RecordValidationError as e:
            logger.warning("Rejected %s record %r: %s", category, record_id, e.message)
            reporter.record_failure(
                1, RecordWriteError(category, record_id, e.message, retryable=False, cause=e)
            )
        except Exception as e:
            logger.exception(f"Failed to write {category} record {record_id!r}: {e}")
            reporter.record_failure(
                1,
                RecordWriteError(
                    category, record_id, str(e) or type(e).__name__, retryable=True, cause=e
                ),
            )
        else:
            reporter.record_success(1)


def _raw_record_id(item: Any) -> str:
    """Best-effort id of a record that failed validation, for error reporting."""
    if isinstance(item, Mapping):
        value = item.get("id")
    else:
        value = getattr(item, "id", None)
    return "" if value is None else str(value)
