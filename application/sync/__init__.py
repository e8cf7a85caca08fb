"""
Building blocks shared by the export and import use cases.

- chunking: fixed-size slicing and the async ChunkScheduler
- cancellation: CancellationToken checked at chunk boundaries
- status / progress: OperationStatus and the ProgressReporter that owns it
- codec: raw payload and JSON parsing with the version gate
- integrity: advisory snapshot integrity check
"""

from application.sync.cancellation import CancellationToken
from application.sync.chunking import DEFAULT_CHUNK_SIZE, ChunkScheduler, chunk_count, iter_chunks
from application.sync.codec import (
    describe_validation_error,
    dump_snapshot,
    ensure_supported_version,
    load_snapshot,
    parse_envelope,
    parse_snapshot,
    validate_record,
)
from application.sync.integrity import (
    DataIssue,
    IntegrityReport,
    IssueSeverity,
    IssueType,
    check_snapshot_integrity,
)
from application.sync.progress import ProgressReporter
from application.sync.status import ExportStatus, ImportStatus, OperationStatus

__all__ = [
    "CancellationToken",
    "DEFAULT_CHUNK_SIZE",
    "ChunkScheduler",
    "chunk_count",
    "iter_chunks",
    "describe_validation_error",
    "dump_snapshot",
    "ensure_supported_version",
    "load_snapshot",
    "parse_envelope",
    "parse_snapshot",
    "validate_record",
    "DataIssue",
    "IntegrityReport",
    "IssueSeverity",
    "IssueType",
    "check_snapshot_integrity",
    "ProgressReporter",
    "OperationStatus",
    "ImportStatus",
    "ExportStatus",
]
