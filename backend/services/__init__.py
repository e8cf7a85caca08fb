"""Backend services for the fitness data sync engine."""

from backend.services.data_sync_service import DataSyncService, create_data_sync_service

__all__ = [
    "DataSyncService",
    "create_data_sync_service",
]
