"""
Snapshot: the versioned, self-describing export format.

A snapshot holds every record of one profile, grouped by category. It is
immutable once built. Category arrays are always present (possibly empty)
and unknown top-level fields are kept, so a newer minor version can add
fields without breaking older readers.

Wire form (JSON, camelCase keys):

    {
        "version": "1.0.0",
        "exportedAt": "2024-05-01T10:00:00Z",
        "profiles": [...],
        "exercises": [...],
        "exerciseTemplates": [...],
        "trainingPlans": [...],
        "workoutLogs": [...],
        "maxLogs": [...],
        "bodyMetrics": [...]
    }
"""

import re
from datetime import datetime
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import Field

from domain.models.base import SyncModel
from domain.models.categories import SyncCategory
from domain.models.exercise import Exercise, ExerciseTemplate
from domain.models.metrics import BodyMetricRecord, MaxLog
from domain.models.profile import Profile
from domain.models.training import TrainingPlan, WorkoutLog


SNAPSHOT_VERSION = "1.0.0"
SUPPORTED_MAJOR_VERSIONS: FrozenSet[int] = frozenset({1})

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:[-+][0-9A-Za-z.\-+]*)?$")

# Record type carried by each category (BodyMetricRecord is a tagged union).
RECORD_TYPES: Dict[SyncCategory, Any] = {
    SyncCategory.PROFILES: Profile,
    SyncCategory.EXERCISES: Exercise,
    SyncCategory.EXERCISE_TEMPLATES: ExerciseTemplate,
    SyncCategory.TRAINING_PLANS: TrainingPlan,
    SyncCategory.WORKOUT_LOGS: WorkoutLog,
    SyncCategory.MAX_LOGS: MaxLog,
    SyncCategory.BODY_METRICS: BodyMetricRecord,
}


def parse_major_version(version: Any) -> Optional[int]:
    """
    Extract the major component of a semantic version string.

    Returns:
        The major version, or None if the value is not a semantic version.
    """
    if not isinstance(version, str):
        return None
    match = _VERSION_PATTERN.match(version.strip())
    if not match:
        return None
    return int(match.group(1))


def is_supported_version(version: Any) -> bool:
    """True if a snapshot with this version can be imported."""
    return parse_major_version(version) in SUPPORTED_MAJOR_VERSIONS


class SnapshotEnvelope(SyncModel):
    """
    A snapshot whose category arrays have not been validated record by record.

    Only the envelope is checked: version, export timestamp, and that every
    category is an array. Items stay as they were decoded, so the importer can
    validate (and reject) each record on its own.
    """

    version: str = Field(default=SNAPSHOT_VERSION, description="Semantic format version")
    exported_at: datetime = Field(..., description="When the snapshot was produced")

    profiles: Tuple[Any, ...] = ()
    exercises: Tuple[Any, ...] = ()
    exercise_templates: Tuple[Any, ...] = ()
    training_plans: Tuple[Any, ...] = ()
    workout_logs: Tuple[Any, ...] = ()
    max_logs: Tuple[Any, ...] = ()
    body_metrics: Tuple[Any, ...] = ()

    def records_for(self, category: SyncCategory) -> Tuple[Any, ...]:
        """Return the records of one category."""
        return getattr(self, SyncCategory(category).value)

    @property
    def total_records(self) -> int:
        """Number of records across all categories."""
        return sum(len(self.records_for(category)) for category in SyncCategory)

    @property
    def counts(self) -> Dict[str, int]:
        """Record count per category."""
        return {category.value: len(self.records_for(category)) for category in SyncCategory}


class Snapshot(SnapshotEnvelope):
    """Portable copy of one profile's complete data graph."""

    profiles: Tuple[Profile, ...] = ()
    exercises: Tuple[Exercise, ...] = ()
    exercise_templates: Tuple[ExerciseTemplate, ...] = ()
    training_plans: Tuple[TrainingPlan, ...] = ()
    workout_logs: Tuple[WorkoutLog, ...] = ()
    max_logs: Tuple[MaxLog, ...] = ()
    body_metrics: Tuple[BodyMetricRecord, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict using wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to a JSON string using wire (camelCase) keys."""
        return self.model_dump_json(by_alias=True, indent=indent)
