"""
Advisory integrity check for snapshots.

Finds data problems a strict store would reject on import: duplicated ids,
blank ids, records owned by a profile the snapshot does not carry, and
references to exercises the snapshot does not carry. The importer does not
block on the report; it is for callers who want to inspect a file first.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from domain.models.categories import IMPORT_ORDER, SyncCategory
from domain.models.snapshot import Snapshot


class IssueType(str, Enum):
    ORPHANED_RECORD = "orphaned_record"
    MISSING_REFERENCE = "missing_reference"
    DUPLICATE_ENTRY = "duplicate_entry"
    INVALID_DATA = "invalid_data"


class IssueSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


_BLOCKING_SEVERITIES = frozenset({IssueSeverity.HIGH, IssueSeverity.CRITICAL})

# Categories whose records carry an exercise_id.
_EXERCISE_REFERENCING = (SyncCategory.EXERCISE_TEMPLATES, SyncCategory.MAX_LOGS)


@dataclass(frozen=True)
class DataIssue:
    """One problem found in a snapshot."""

    type: IssueType
    severity: IssueSeverity
    category: SyncCategory
    record_id: str
    message: str
    field: Optional[str] = None


@dataclass
class IntegrityReport:
    """Result of check_snapshot_integrity."""

    issues: List[DataIssue] = field(default_factory=list)
    total_checks: int = 0

    @property
    def issues_by_severity(self) -> Dict[IssueSeverity, int]:
        counts = {severity: 0 for severity in IssueSeverity}
        for issue in self.issues:
            counts[issue.severity] += 1
        return counts

    @property
    def is_valid(self) -> bool:
        return not any(issue.severity in _BLOCKING_SEVERITIES for issue in self.issues)

    def to_dict(self) -> Dict[str, object]:
        return {
            "is_valid": self.is_valid,
            "total_checks": self.total_checks,
            "issues_by_severity": {k.value: v for k, v in self.issues_by_severity.items()},
            "issues": [
                {
                    "type": issue.type.value,
                    "severity": issue.severity.value,
                    "category": issue.category.value,
                    "record_id": issue.record_id,
                    "field": issue.field,
                    "message": issue.message,
                }
                for issue in self.issues
            ],
        }


def check_snapshot_integrity(snapshot: Snapshot) -> IntegrityReport:
    """
    Check a snapshot for duplicate, blank, orphaned and dangling records.

    Args:
        snapshot: Parsed snapshot

    Returns:
        IntegrityReport listing every issue found
    """
    report = IntegrityReport()
    profile_ids: Set[str] = {p.id for p in snapshot.profiles if p.id.strip()}
    exercise_ids: Set[str] = {e.id for e in snapshot.exercises if e.id.strip()}

    for descriptor in IMPORT_ORDER:
        category = descriptor.category
        records = snapshot.records_for(category)

        id_counts = Counter(record.id for record in records)
        for record_id, count in id_counts.items():
            report.total_checks += 1
            if record_id.strip() and count > 1:
                report.issues.append(
                    DataIssue(
                        type=IssueType.DUPLICATE_ENTRY,
                        severity=IssueSeverity.HIGH,
                        category=category,
                        record_id=record_id,
                        field="id",
                        message=f"{count} {descriptor.label} share id {record_id!r}",
                    )
                )

        for record in records:
            report.total_checks += 1
            if not record.id.strip():
                report.issues.append(
                    DataIssue(
                        type=IssueType.INVALID_DATA,
                        severity=IssueSeverity.CRITICAL,
                        category=category,
                        record_id=record.id,
                        field="id",
                        message=f"Record in {descriptor.label} has a blank id",
                    )
                )

            if category != SyncCategory.PROFILES:
                report.total_checks += 1
                if record.profile_id not in profile_ids:
                    report.issues.append(
                        DataIssue(
                            type=IssueType.ORPHANED_RECORD,
                            severity=IssueSeverity.MEDIUM,
                            category=category,
                            record_id=record.id,
                            field="profile_id",
                            message=f"Profile {record.profile_id!r} is not in the snapshot",
                        )
                    )

            if category in _EXERCISE_REFERENCING:
                report.total_checks += 1
                if record.exercise_id not in exercise_ids:
                    report.issues.append(
                        DataIssue(
                            type=IssueType.MISSING_REFERENCE,
                            severity=IssueSeverity.LOW,
                            category=category,
                            record_id=record.id,
                            field="exercise_id",
                            message=f"Exercise {record.exercise_id!r} is not in the snapshot",
                        )
                    )

    return report
