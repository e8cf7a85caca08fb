"""
Exercise and exercise template records.

An Exercise is a profile's exercise definition (name, equipment, muscle
activation). An ExerciseTemplate is a reusable set prescription attached to
one exercise.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from domain.models.base import SyncEntity


class Exercise(SyncEntity):
    """
    A user-defined exercise.

    Examples:
        >>> exercise = Exercise(
        ...     id="ex-1",
        ...     profile_id="profile-1",
        ...     name="Bench Press",
        ...     category="strength",
        ...     movement_type="push",
        ...     difficulty="intermediate",
        ...     counter_type="reps",
        ...     joint_type="compound",
        ...     equipment=["barbell", "bench"],
        ...     muscle_activation={"chest": 1.0, "triceps": 0.5},
        ...     created_at="2024-01-01T00:00:00Z",
        ...     updated_at="2024-01-01T00:00:00Z",
        ... )
    """

    name: str = Field(..., description="Exercise name")
    description: str = Field(default="", description="Free-form description")
    category: str = Field(..., description="Category (strength, hypertrophy, cardio, ...)")
    movement_type: str = Field(..., description="Movement type (push, pull, dynamic, ...)")
    movement_pattern: Optional[str] = Field(
        default=None, description="Movement pattern (squat, hinge, press, ...)"
    )
    difficulty: str = Field(..., description="Difficulty level")
    equipment: List[str] = Field(default_factory=list, description="Required equipment")
    muscle_activation: Dict[str, float] = Field(
        default_factory=dict,
        description="Muscle group -> activation coefficient (0..1)",
    )
    counter_type: str = Field(..., description="How sets are counted (reps, mins, secs)")
    joint_type: str = Field(..., description="Compound or isolation")
    notes: Optional[str] = None
    substitutions: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Suggested substitute exercises",
    )


class ExerciseTemplate(SyncEntity):
    """A named set configuration for an exercise."""

    name: str = Field(..., description="Template name")
    exercise_id: str = Field(..., description="Exercise the template applies to")
    set_configuration: Dict[str, Any] = Field(
        default_factory=dict,
        description="Set prescription (type, sets, counts, load, rpe, ...)",
    )
    notes: Optional[str] = None
