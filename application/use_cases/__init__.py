"""
Use cases for the data sync engine.

Each use case orchestrates one operation over injected entity sources and
returns a result dataclass instead of raising.
"""

from application.use_cases.export_profile import ExportProfileResult, ExportProfileUseCase
from application.use_cases.import_snapshot import ImportSnapshotResult, ImportSnapshotUseCase

__all__ = [
    "ExportProfileUseCase",
    "ExportProfileResult",
    "ImportSnapshotUseCase",
    "ImportSnapshotResult",
]
