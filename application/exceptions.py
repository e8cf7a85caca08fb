"""
Error taxonomy for the data sync engine.

Two families:
- Outer failures (ApplicationError subclasses) mean the operation did not
  happen. Use cases turn them into a failed result.
- RecordWriteError is an in-band, per-record failure collected in the import
  status. It is never raised past the import coordinator.

Entity source adapters signal per-record problems by raising
RecordValidationError or RecordConflictError. Anything else an adapter raises
is treated as an infrastructure failure.
"""

from typing import Any, Dict, FrozenSet, Iterable, Optional


class ApplicationError(Exception):
    """Base class for outer failures of a sync operation."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class UnsupportedVersionError(ApplicationError):
    """Snapshot major version is not importable."""

    def __init__(self, version: Any, supported_major_versions: Iterable[int]):
        self.version = version
        self.supported_major_versions: FrozenSet[int] = frozenset(supported_major_versions)
        supported = ", ".join(f"{v}.x" for v in sorted(self.supported_major_versions))
        super().__init__(
            f"Unsupported snapshot version {version!r} (supported: {supported})",
            context={"version": version},
        )


class SnapshotFormatError(ApplicationError):
    """Raw snapshot payload is not structurally valid."""


class CategoryReadError(ApplicationError):
    """Reading or counting one category failed during export."""

    def __init__(
        self,
        category: str,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.category = category
        ctx = {"category": category}
        ctx.update(context or {})
        super().__init__(message, cause=cause, context=ctx)


class OperationCancelledError(ApplicationError):
    """The caller cancelled the operation."""


class RecordWriteError(Exception):
    """
    A single record failed to import.

    Attributes:
        category: Category the record belongs to
        record_id: Id of the failing record (may be empty)
        message: Human-readable reason
        retryable: True for infrastructure failures, False for bad records
        cause: Underlying exception, if any
    """

    def __init__(
        self,
        category: str,
        record_id: str,
        message: str,
        *,
        retryable: bool = False,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.category = category
        self.record_id = record_id
        self.message = message
        self.retryable = retryable
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.category}[{self.record_id or '<no id>'}]: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordWriteError):
            return NotImplemented
        return (
            self.category == other.category
            and self.record_id == other.record_id
            and self.message == other.message
            and self.retryable == other.retryable
        )

    def __hash__(self) -> int:
        return hash((self.category, self.record_id, self.message, self.retryable))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "record_id": self.record_id,
            "message": self.message,
            "retryable": self.retryable,
        }


class RecordValidationError(Exception):
    """Raised by an adapter when a record is rejected as invalid."""

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])


class RecordConflictError(Exception):
    """Raised by an adapter when a record collides with existing data."""

    def __init__(self, message: str, record_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.record_id = record_id
