"""
Max logs and body-metric records.

Body metrics come in two shapes, weight and height, stored separately but
exported as one category. The `metric_type` tag selects the variant; older
payloads without the tag are routed by which measurement key they carry.
"""

from datetime import datetime
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag

from domain.models.base import SyncEntity


class MaxLog(SyncEntity):
    """A tested or estimated one-rep-max entry for an exercise."""

    exercise_id: str = Field(..., description="Exercise the max was logged for")
    weight_entered_by_user: float = Field(..., ge=0, description="Weight lifted")
    reps: int = Field(..., ge=1, description="Reps performed at that weight")
    date: datetime
    notes: Optional[str] = None
    estimated_1rm: float = Field(..., ge=0, alias="estimated1RM", description="Estimated one-rep max")
    max_brzycki: Optional[float] = None
    max_baechle: Optional[float] = None


class WeightRecord(SyncEntity):
    """Body weight measurement."""

    metric_type: Literal["weight"] = "weight"
    date: datetime
    weight: float = Field(..., gt=0)
    notes: Optional[str] = None


class HeightRecord(SyncEntity):
    """Body height measurement."""

    metric_type: Literal["height"] = "height"
    date: datetime
    height: float = Field(..., gt=0)
    notes: Optional[str] = None


def _body_metric_tag(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        tag = value.get("metricType", value.get("metric_type"))
        if tag is not None:
            return tag
        if "weight" in value:
            return "weight"
        if "height" in value:
            return "height"
        return None
    return getattr(value, "metric_type", None)


BodyMetricRecord = Annotated[
    Union[
        Annotated[WeightRecord, Tag("weight")],
        Annotated[HeightRecord, Tag("height")],
    ],
    Discriminator(_body_metric_tag),
]
