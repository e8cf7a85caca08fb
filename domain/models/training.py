"""
Training plan and workout log records.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.models.base import SyncEntity


class TrainingPlan(SyncEntity):
    """A training plan (a sequence of sessions the user cycles through)."""

    name: str = Field(..., description="Plan name")
    description: Optional[str] = None
    is_archived: bool = Field(default=False, description="Archived plans are hidden")
    current_session_index: int = Field(
        default=0, ge=0, description="Index of the next session to perform"
    )
    notes: Optional[str] = None
    cycle_id: Optional[str] = Field(default=None, description="Owning training cycle")
    order: Optional[int] = Field(default=None, description="Display order")
    last_used: Optional[datetime] = None


class WorkoutLog(SyncEntity):
    """
    A completed (or in-progress) workout session.

    The plan and session names are denormalized so that the log stays
    readable after the plan it was performed from is edited or deleted.
    """

    training_plan_id: Optional[str] = None
    training_plan_name: str = Field(..., description="Plan name at the time of the workout")
    session_id: Optional[str] = None
    session_name: str = Field(..., description="Session name at the time of the workout")
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_seconds: Optional[int] = Field(default=None, ge=0)
    total_volume: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None
    user_rating: Optional[int] = Field(default=None, ge=1, le=5)
    performed_group_ids: List[str] = Field(default_factory=list)
