"""
Shared base models for synchronizable fitness records.

Every record that travels inside a snapshot is an immutable pydantic model.
Field names are snake_case in Python and camelCase on the wire, so a snapshot
produced by one client can be read by another regardless of which naming it
was written with.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SyncModel(BaseModel):
    """
    Base configuration for snapshot models (frozen, camelCase aliases).

    Unknown fields are kept, so records written by a newer minor version
    survive an export and import round trip unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class SyncEntity(SyncModel):
    """
    A record owned by exactly one profile.

    Ids are preserved verbatim across export and import; the sync engine
    never generates or rewrites them.
    """

    id: str = Field(..., description="Record identifier")
    profile_id: str = Field(..., description="Identifier of the owning profile")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")


def validate_for_write(record: SyncModel) -> List[str]:
    """
    Check the write-time constraints shared by every entity store.

    Structural validation already happened when the record was parsed; this
    covers what a strict backend would reject as a constraint violation.

    Args:
        record: Entity about to be persisted

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: List[str] = []

    record_id = getattr(record, "id", None)
    if not record_id or not str(record_id).strip():
        errors.append("Record id must not be empty")

    profile_id = getattr(record, "profile_id", None)
    if not profile_id or not str(profile_id).strip():
        errors.append("Record profile_id must not be empty")

    return errors
