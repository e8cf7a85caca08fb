"""
Entity Source Interface (Port).

One adapter per snapshot category. The sync engine only ever counts, reads
and writes through this contract; where the records actually live (Supabase,
an in-memory fake, another device) is an adapter concern.
"""
from typing import Protocol, Sequence, TypeVar, runtime_checkable

EntityT = TypeVar("EntityT")


@runtime_checkable
class EntitySource(Protocol[EntityT]):
    """
    Abstract interface for reading and writing one category of records.

    Per-record problems are reported by raising
    application.exceptions.RecordValidationError (the record is invalid) or
    RecordConflictError (the record collides with existing data). Any other
    exception is treated as an infrastructure failure.
    """

    async def count_for_profile(self, profile_id: str) -> int:
        """
        Count the records owned by a profile.

        Args:
            profile_id: Owning profile id

        Returns:
            Number of records. The profile source returns 1 if the profile
            exists and 0 otherwise.
        """
        ...

    async def read_all_for_profile(self, profile_id: str) -> Sequence[EntityT]:
        """
        Read every record owned by a profile.

        Args:
            profile_id: Owning profile id

        Returns:
            All records for the profile, fully materialized
        """
        ...

    async def write(self, entity: EntityT) -> EntityT:
        """
        Durably persist a single record (insert or replace by id).

        Args:
            entity: Record to write

        Returns:
            The stored record

        Raises:
            RecordValidationError: If the record is rejected as invalid
            RecordConflictError: If the record collides with existing data
        """
        ...
