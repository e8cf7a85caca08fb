"""
Domain models for the fitness data sync engine.

These models represent the records that make up one profile's data graph
and the snapshot that carries them between stores:
- Profile: the owner of every other record
- Exercise / ExerciseTemplate: exercise definitions and set prescriptions
- TrainingPlan / WorkoutLog: plans and performed sessions
- MaxLog: one-rep-max entries
- WeightRecord / HeightRecord: body metrics (BodyMetricRecord variant)
- Snapshot: the versioned export format

Usage:
    >>> from domain.models import Snapshot, SyncCategory

    >>> snapshot = Snapshot.model_validate_json(payload)
    >>> snapshot.records_for(SyncCategory.EXERCISES)
"""

from domain.models.base import SyncEntity, SyncModel, validate_for_write
from domain.models.categories import (
    EXPORT_ORDER,
    IMPORT_ORDER,
    CategoryDescriptor,
    SyncCategory,
)
from domain.models.exercise import Exercise, ExerciseTemplate
from domain.models.metrics import BodyMetricRecord, HeightRecord, MaxLog, WeightRecord
from domain.models.profile import Profile
from domain.models.snapshot import (
    RECORD_TYPES,
    SNAPSHOT_VERSION,
    SUPPORTED_MAJOR_VERSIONS,
    Snapshot,
    SnapshotEnvelope,
    is_supported_version,
    parse_major_version,
)
from domain.models.training import TrainingPlan, WorkoutLog

__all__ = [
    # Base
    "SyncModel",
    "SyncEntity",
    "validate_for_write",
    # Entities
    "Profile",
    "Exercise",
    "ExerciseTemplate",
    "TrainingPlan",
    "WorkoutLog",
    "MaxLog",
    "WeightRecord",
    "HeightRecord",
    "BodyMetricRecord",
    # Categories
    "SyncCategory",
    "CategoryDescriptor",
    "IMPORT_ORDER",
    "EXPORT_ORDER",
    # Snapshot
    "Snapshot",
    "SnapshotEnvelope",
    "RECORD_TYPES",
    "SNAPSHOT_VERSION",
    "SUPPORTED_MAJOR_VERSIONS",
    "is_supported_version",
    "parse_major_version",
]
