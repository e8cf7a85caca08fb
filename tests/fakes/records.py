"""
Record builders for tests.

Every builder produces a valid, fully-populated record with deterministic
timestamps so exported snapshots compare equal across runs.
"""
from datetime import datetime, timedelta, timezone
from typing import Any

from domain.models import (
    Exercise,
    ExerciseTemplate,
    HeightRecord,
    MaxLog,
    Profile,
    TrainingPlan,
    WeightRecord,
    WorkoutLog,
)

BASE_TIME = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


def _at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


def make_profile(profile_id: str = "profile-1", **overrides: Any) -> Profile:
    data = {
        "id": profile_id,
        "name": f"Profile {profile_id}",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    data.update(overrides)
    return Profile(**data)


def make_exercise(index: int = 1, profile_id: str = "profile-1", **overrides: Any) -> Exercise:
    data = {
        "id": f"{profile_id}-exercise-{index}",
        "profile_id": profile_id,
        "name": f"Exercise {index}",
        "description": "Compound press",
        "category": "strength",
        "movement_type": "push",
        "movement_pattern": "horizontal_push",
        "difficulty": "intermediate",
        "equipment": ["barbell", "bench"],
        "muscle_activation": {"chest": 1.0, "triceps": 0.5},
        "counter_type": "reps",
        "joint_type": "compound",
        "created_at": _at(index),
        "updated_at": _at(index),
    }
    data.update(overrides)
    return Exercise(**data)


def make_template(
    index: int = 1,
    profile_id: str = "profile-1",
    exercise_id: str = "",
    **overrides: Any,
) -> ExerciseTemplate:
    data = {
        "id": f"{profile_id}-template-{index}",
        "profile_id": profile_id,
        "name": f"Template {index}",
        "exercise_id": exercise_id or f"{profile_id}-exercise-1",
        "set_configuration": {"type": "standard", "sets": 3, "reps": {"min": 8, "max": 12}},
        "created_at": _at(index),
        "updated_at": _at(index),
    }
    data.update(overrides)
    return ExerciseTemplate(**data)


def make_plan(index: int = 1, profile_id: str = "profile-1", **overrides: Any) -> TrainingPlan:
    data = {
        "id": f"{profile_id}-plan-{index}",
        "profile_id": profile_id,
        "name": f"Plan {index}",
        "description": "Upper / lower split",
        "current_session_index": 0,
        "order": index,
        "created_at": _at(index),
        "updated_at": _at(index),
    }
    data.update(overrides)
    return TrainingPlan(**data)


def make_workout_log(index: int = 1, profile_id: str = "profile-1", **overrides: Any) -> WorkoutLog:
    data = {
        "id": f"{profile_id}-log-{index}",
        "profile_id": profile_id,
        "training_plan_id": f"{profile_id}-plan-1",
        "training_plan_name": "Plan 1",
        "session_id": "session-a",
        "session_name": "Upper A",
        "start_time": _at(index * 60),
        "end_time": _at(index * 60 + 45),
        "duration_seconds": 45 * 60,
        "total_volume": 5400.0,
        "user_rating": 4,
        "performed_group_ids": ["group-1", "group-2"],
        "created_at": _at(index * 60),
        "updated_at": _at(index * 60 + 45),
    }
    data.update(overrides)
    return WorkoutLog(**data)


def make_max_log(index: int = 1, profile_id: str = "profile-1", **overrides: Any) -> MaxLog:
    data = {
        "id": f"{profile_id}-max-{index}",
        "profile_id": profile_id,
        "exercise_id": f"{profile_id}-exercise-1",
        "weight_entered_by_user": 100.0,
        "reps": 5,
        "date": _at(index),
        "estimated_1rm": 112.5,
        "max_brzycki": 112.5,
        "max_baechle": 115.0,
        "created_at": _at(index),
        "updated_at": _at(index),
    }
    data.update(overrides)
    return MaxLog(**data)


def make_weight(index: int = 1, profile_id: str = "profile-1", **overrides: Any) -> WeightRecord:
    data = {
        "id": f"{profile_id}-weight-{index}",
        "profile_id": profile_id,
        "date": _at(index),
        "weight": 80.0 + index / 10,
        "created_at": _at(index),
        "updated_at": _at(index),
    }
    data.update(overrides)
    return WeightRecord(**data)


def make_height(index: int = 1, profile_id: str = "profile-1", **overrides: Any) -> HeightRecord:
    data = {
        "id": f"{profile_id}-height-{index}",
        "profile_id": profile_id,
        "date": _at(index),
        "height": 180.0,
        "created_at": _at(index),
        "updated_at": _at(index),
    }
    data.update(overrides)
    return HeightRecord(**data)
