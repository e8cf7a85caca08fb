"""
Domain layer for the fitness data sync engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, transport, UI).
"""

from domain.models import (
    Exercise,
    ExerciseTemplate,
    HeightRecord,
    MaxLog,
    Profile,
    Snapshot,
    SyncCategory,
    TrainingPlan,
    WeightRecord,
    WorkoutLog,
)

__all__ = [
    "Profile",
    "Exercise",
    "ExerciseTemplate",
    "TrainingPlan",
    "WorkoutLog",
    "MaxLog",
    "WeightRecord",
    "HeightRecord",
    "Snapshot",
    "SyncCategory",
]
