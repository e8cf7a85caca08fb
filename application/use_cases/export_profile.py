"""
ExportProfile Use Case.

Reads every category of one profile through its entity source and assembles
an immutable Snapshot, reporting progress after each chunk. Any read failure
aborts the whole export; a partial snapshot is never returned.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from application.exceptions import ApplicationError, CategoryReadError
from application.ports import EntitySource, ProgressObserver
from application.sync.cancellation import CancellationToken
from application.sync.chunking import DEFAULT_CHUNK_SIZE, ChunkScheduler
from application.sync.progress import ProgressReporter
from application.sync.status import ExportStatus
from domain.models import EXPORT_ORDER, SNAPSHOT_VERSION, CategoryDescriptor, Snapshot, SyncCategory

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def require_sources(sources: Mapping[SyncCategory, EntitySource]) -> Dict[SyncCategory, EntitySource]:
    """Check that every category has an entity source."""
    missing = [category.value for category in SyncCategory if category not in sources]
    if missing:
        raise ValueError(f"Missing entity sources for: {', '.join(missing)}")
    return dict(sources)


@dataclass
class ExportProfileResult:
    """Result of the ExportProfile use case execution."""

    success: bool
    snapshot: Optional[Snapshot] = None
    status: Optional[ExportStatus] = None
    error: Optional[str] = None
    exception: Optional[ApplicationError] = None


class ExportProfileUseCase:
    """
    Use case for exporting a profile's complete data graph.

    Orchestrates the following workflow:
    1. Count records per category to fix the total
    2. Read each category, chunk it, report progress per chunk
    3. Check every record belongs to the profile
    4. Build the Snapshot and emit the final status

    Usage:
        >>> use_case = ExportProfileUseCase(sources=sources, chunk_size=100)
        >>> result = await use_case.execute("profile-123", on_progress=print)
        >>> if result.success:
        ...     payload = result.snapshot.to_payload()
    """

    def __init__(
        self,
        sources: Mapping[SyncCategory, EntitySource],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        pause_seconds: float = 0.0,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            sources: One entity source per category
            chunk_size: Records per progress update
            pause_seconds: Pause between chunks
            clock: Source of the export timestamp (defaults to UTC now)
        """
        self._sources = require_sources(sources)
        self._scheduler = ChunkScheduler(chunk_size=chunk_size, pause_seconds=pause_seconds)
        self._clock = clock or _utcnow

    async def execute(
        self,
        profile_id: str,
        on_progress: Optional[ProgressObserver] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> ExportProfileResult:
        """
        Execute the export workflow.

        Args:
            profile_id: Profile to export
            on_progress: Optional observer called after each chunk
            cancellation: Optional token checked at chunk boundaries

        Returns:
            ExportProfileResult with the snapshot, or the failure
        """
        logger.info("Starting export for profile %s", profile_id)
        try:
            counts = await self._count_all(profile_id)
            reporter = ProgressReporter(sum(counts.values()), on_progress)

            collected: Dict[str, Tuple[Any, ...]] = {}
            for descriptor in EXPORT_ORDER:
                records = await self._read_category(descriptor, profile_id, counts[descriptor.category])
                exported = []
                async for chunk in self._scheduler.chunks(records, cancellation):
                    exported.extend(chunk)
                    reporter.record_success(len(chunk))
                    reporter.emit()
                collected[descriptor.category.value] = tuple(exported)

            status = reporter.emit(final=True)
            snapshot = Snapshot(version=SNAPSHOT_VERSION, exported_at=self._clock(), **collected)

            logger.info(
                "Exported %d records for profile %s", status.processed_records, profile_id
            )
            return ExportProfileResult(success=True, snapshot=snapshot, status=status)

        except ApplicationError as e:
            logger.warning("Export failed for profile %s: %s", profile_id, e)
            return ExportProfileResult(success=False, error=str(e), exception=e)

        except Exception as e:
            logger.exception(f"Unexpected error exporting profile {profile_id}: {e}")
            wrapped = ApplicationError(
                f"Export failed: {e}", cause=e, context={"profile_id": profile_id}
            )
            return ExportProfileResult(success=False, error=str(wrapped), exception=wrapped)

    async def _count_all(self, profile_id: str) -> Dict[SyncCategory, int]:
        counts: Dict[SyncCategory, int] = {}
        for descriptor in EXPORT_ORDER:
            try:
                count = await self._sources[descriptor.category].count_for_profile(profile_id)
            except Exception as e:
                raise CategoryReadError(
                    descriptor.category.value,
                    f"Failed to count {descriptor.label}: {e}",
                    cause=e,
                    context={"profile_id": profile_id},
                ) from e
            if count < 0:
                raise CategoryReadError(
                    descriptor.category.value,
                    f"Negative count for {descriptor.label}: {count}",
                    context={"profile_id": profile_id},
                )
            counts[descriptor.category] = count
        return counts

    async def _read_category(
        self,
        descriptor: CategoryDescriptor,
        profile_id: str,
        expected: int,
    ) -> Sequence[Any]:
        category = descriptor.category.value
        try:
            records = list(await self._sources[descriptor.category].read_all_for_profile(profile_id))
        except Exception as e:
            raise CategoryReadError(
                category,
                f"Failed to read {descriptor.label}: {e}",
                cause=e,
                context={"profile_id": profile_id},
            ) from e

        if len(records) != expected:
            raise CategoryReadError(
                category,
                f"Read {len(records)} {descriptor.label} but counted {expected}",
                context={"profile_id": profile_id},
            )

        for record in records:
            if record.profile_id != profile_id:
                raise CategoryReadError(
                    category,
                    f"Record {record.id!r} in {descriptor.label} belongs to profile "
                    f"{record.profile_id!r}",
                    context={"profile_id": profile_id},
                )
        return records
