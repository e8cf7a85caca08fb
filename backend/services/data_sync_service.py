"""
Data Sync Service.

Facade over the export and import use cases. Wires chunking from settings
and, via create_data_sync_service(), Supabase-backed entity sources.
"""

import logging
from typing import Any, Mapping, Optional, Union

from application.ports import EntitySource, ProgressObserver
from application.sync import CancellationToken, IntegrityReport, check_snapshot_integrity, parse_snapshot
from application.use_cases import (
    ExportProfileResult,
    ExportProfileUseCase,
    ImportSnapshotResult,
    ImportSnapshotUseCase,
)
from backend.database import get_supabase_client
from backend.settings import Settings, get_settings
from domain.models import Snapshot, SyncCategory
from infrastructure.db import build_supabase_sources

logger = logging.getLogger(__name__)


class DataSyncService:
    """
    Whole-profile export and whole-snapshot import.

    Usage:
        >>> service = create_data_sync_service()
        >>> result = await service.export_profile("profile-123")
        >>> await other_service.import_snapshot(result.snapshot)
    """

    def __init__(
        self,
        sources: Mapping[SyncCategory, EntitySource],
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self._settings = settings
        self._export = ExportProfileUseCase(
            sources,
            chunk_size=settings.sync_chunk_size,
            pause_seconds=settings.sync_chunk_pause_seconds,
        )
        self._import = ImportSnapshotUseCase(
            sources,
            chunk_size=settings.sync_chunk_size,
            pause_seconds=settings.sync_chunk_pause_seconds,
        )

    async def export_profile(
        self,
        profile_id: str,
        on_progress: Optional[ProgressObserver] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> ExportProfileResult:
        """Export every record of a profile into a snapshot."""
        return await self._export.execute(profile_id, on_progress, cancellation=cancellation)

    async def import_snapshot(
        self,
        snapshot: Union[Snapshot, Mapping[str, Any]],
        on_progress: Optional[ProgressObserver] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> ImportSnapshotResult:
        """Import a snapshot (parsed or raw payload) into the store."""
        return await self._import.execute(snapshot, on_progress, cancellation=cancellation)

    def check_integrity(self, snapshot: Union[Snapshot, Mapping[str, Any]]) -> IntegrityReport:
        """
        Run the advisory integrity check on a snapshot.

        Raises:
            UnsupportedVersionError: Raw payload has an unsupported version
            SnapshotFormatError: Raw payload is malformed
        """
        report = check_snapshot_integrity(parse_snapshot(snapshot))
        if not report.is_valid:
            logger.warning("Snapshot integrity check found %d issue(s)", len(report.issues))
        return report


def create_data_sync_service(settings: Optional[Settings] = None) -> DataSyncService:
    """Build a DataSyncService backed by Supabase."""
    settings = settings or get_settings()
    client = get_supabase_client(settings)
    return DataSyncService(build_supabase_sources(client), settings)
