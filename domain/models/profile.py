"""
Profile aggregate root.
"""

from datetime import datetime

from pydantic import Field

from domain.models.base import SyncModel


class Profile(SyncModel):
    """
    A user profile. Every other synchronizable record belongs to one.

    Examples:
        >>> profile = Profile(
        ...     id="profile-1",
        ...     name="Main",
        ...     created_at="2024-01-01T00:00:00Z",
        ...     updated_at="2024-01-01T00:00:00Z",
        ... )
        >>> profile.profile_id
        'profile-1'
    """

    id: str = Field(..., description="Profile identifier")
    name: str = Field(..., description="Display name")
    created_at: datetime
    updated_at: datetime

    @property
    def profile_id(self) -> str:
        """A profile owns itself."""
        return self.id
