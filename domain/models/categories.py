"""
Synchronizable entity categories and their processing order.

Import writes categories in IMPORT_ORDER so that records referencing a
profile (or an exercise, or a plan) are written after the record they point
at has been attempted. A strict backend would otherwise reject them as
orphaned foreign keys.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class SyncCategory(str, Enum):
    """Entity categories carried by a snapshot. Values are snapshot field names."""

    PROFILES = "profiles"
    EXERCISES = "exercises"
    EXERCISE_TEMPLATES = "exercise_templates"
    TRAINING_PLANS = "training_plans"
    WORKOUT_LOGS = "workout_logs"
    MAX_LOGS = "max_logs"
    BODY_METRICS = "body_metrics"


@dataclass(frozen=True)
class CategoryDescriptor:
    """
    Describes one category for the export and import coordinators.

    Attributes:
        category: The category
        label: Human-readable plural name used in logs and errors
        depends_on: Categories whose records this category may reference
    """

    category: SyncCategory
    label: str
    depends_on: Tuple[SyncCategory, ...] = ()


IMPORT_ORDER: Tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor(SyncCategory.PROFILES, "profiles"),
    CategoryDescriptor(
        SyncCategory.EXERCISES,
        "exercises",
        depends_on=(SyncCategory.PROFILES,),
    ),
    CategoryDescriptor(
        SyncCategory.EXERCISE_TEMPLATES,
        "exercise templates",
        depends_on=(SyncCategory.PROFILES, SyncCategory.EXERCISES),
    ),
    CategoryDescriptor(
        SyncCategory.TRAINING_PLANS,
        "training plans",
        depends_on=(SyncCategory.PROFILES, SyncCategory.EXERCISES),
    ),
    CategoryDescriptor(
        SyncCategory.WORKOUT_LOGS,
        "workout logs",
        depends_on=(SyncCategory.PROFILES, SyncCategory.TRAINING_PLANS),
    ),
    CategoryDescriptor(
        SyncCategory.MAX_LOGS,
        "max logs",
        depends_on=(SyncCategory.PROFILES, SyncCategory.EXERCISES),
    ),
    CategoryDescriptor(
        SyncCategory.BODY_METRICS,
        "body metrics",
        depends_on=(SyncCategory.PROFILES,),
    ),
)

# Export only reads, so any order works; the import order keeps logs and
# progress events consistent between the two directions.
EXPORT_ORDER: Tuple[CategoryDescriptor, ...] = IMPORT_ORDER

