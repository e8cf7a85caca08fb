"""
Operation status reported by export and import.

Invariants held by every status the reporter hands out:
- processed_records == successful_records + failed_records
- processed_records <= total_records
- is_complete implies processed_records == total_records
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from application.exceptions import RecordWriteError


@dataclass(frozen=True)
class OperationStatus:
    """Immutable progress snapshot of a sync operation."""

    is_complete: bool
    total_records: int
    processed_records: int = 0
    successful_records: int = 0
    failed_records: int = 0
    errors: Tuple[RecordWriteError, ...] = ()
    conflicts_detected: int = 0
    items_skipped: int = 0
    items_imported: int = 0
    progress: float = 0.0

    @property
    def has_failures(self) -> bool:
        return self.failed_records > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_complete": self.is_complete,
            "total_records": self.total_records,
            "processed_records": self.processed_records,
            "successful_records": self.successful_records,
            "failed_records": self.failed_records,
            "errors": [error.to_dict() for error in self.errors],
            "conflicts_detected": self.conflicts_detected,
            "items_skipped": self.items_skipped,
            "items_imported": self.items_imported,
            "progress": self.progress,
        }


ImportStatus = OperationStatus
ExportStatus = OperationStatus
