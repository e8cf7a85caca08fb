"""
Supabase implementations of the EntitySource port.

One table-backed source per snapshot category. Rows are stored with
snake_case columns matching the entity model fields. Every write is a single
upsert keyed by id, so each record is durable before the next write starts.

The supabase client is synchronous; calls run in a thread executor so the
async sync engine keeps the event loop free between chunks.
"""
import asyncio
import logging
from concurrent.futures import Executor
from functools import partial
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from postgrest.exceptions import APIError
from pydantic import BaseModel, ValidationError
from supabase import Client

from application.exceptions import RecordConflictError, RecordValidationError
from domain.models import (
    Exercise,
    ExerciseTemplate,
    HeightRecord,
    MaxLog,
    Profile,
    SyncCategory,
    TrainingPlan,
    WeightRecord,
    WorkoutLog,
    validate_for_write,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Rows fetched per request when reading a category.
PAGE_SIZE = 1000

# Postgres error codes that mean the record itself is at fault.
UNIQUE_VIOLATION = "23505"
RECORD_ERROR_CODES = frozenset({
    "23502",  # not_null_violation
    "23503",  # foreign_key_violation
    "23514",  # check_violation
    "22P02",  # invalid_text_representation
    "22007",  # invalid_datetime_format
})


def _translate_api_error(error: APIError, record_id: str) -> Exception:
    """Map a PostgREST error to the record-level exception the engine expects."""
    code = getattr(error, "code", None)
    message = getattr(error, "message", None) or str(error)
    if code == UNIQUE_VIOLATION:
        return RecordConflictError(message, record_id=record_id)
    if code in RECORD_ERROR_CODES:
        return RecordValidationError(message, errors=[f"{code}: {message}"])
    return error


class _ExecutorMixin:
    _executor: Optional[Executor]

    async def _run(self, fn: Callable[..., Any], *args: Any) -> Any:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(self._executor, partial(fn, *args))


class SupabaseEntitySource(_ExecutorMixin, Generic[ModelT]):
    """
    Table-backed entity source.

    Args:
        client: Supabase client instance (injected, not global)
        table: Table holding the records
        model: Entity model used to validate rows read back
        profile_column: Column holding the owning profile id
        executor: Executor for blocking client calls (default loop executor)
    """

    def __init__(
        self,
        client: Client,
        table: str,
        model: Type[ModelT],
        *,
        profile_column: str = "profile_id",
        executor: Optional[Executor] = None,
    ):
        self._client = client
        self._table = table
        self._model = model
        self._profile_column = profile_column
        self._executor = executor

    @property
    def table(self) -> str:
        return self._table

    # =========================================================================
    # Blocking client calls
    # =========================================================================

    def _count_sync(self, profile_id: str) -> int:
        result = (
            self._client.table(self._table)
            .select("id", count="exact")
            .eq(self._profile_column, profile_id)
            .execute()
        )
        return result.count or 0

    def _read_sync(self, profile_id: str) -> List[ModelT]:
        records: List[ModelT] = []
        start = 0
        while True:
            result = (
                self._client.table(self._table)
                .select("*")
                .eq(self._profile_column, profile_id)
                .order("created_at")
                .order("id")
                .range(start, start + PAGE_SIZE - 1)
                .execute()
            )
            rows = result.data or []
            records.extend(self._row_to_model(row) for row in rows)
            if len(rows) < PAGE_SIZE:
                return records
            start += PAGE_SIZE

    def _upsert_sync(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        result = self._client.table(table).upsert(row, on_conflict="id").execute()
        if not result.data:
            raise RuntimeError(f"Upsert into {table} returned no data for id {row.get('id')!r}")
        return result.data[0]

    # =========================================================================
    # Row conversion
    # =========================================================================

    def _row_to_model(self, row: Dict[str, Any]) -> ModelT:
        return self._model.model_validate(row)

    def _model_to_row(self, entity: BaseModel) -> Dict[str, Any]:
        # Only declared fields have columns; unknown snapshot fields are not stored.
        return entity.model_dump(mode="json", include=set(type(entity).model_fields))

    def _table_for(self, entity: BaseModel) -> str:
        return self._table

    # =========================================================================
    # EntitySource
    # =========================================================================

    async def count_for_profile(self, profile_id: str) -> int:
        try:
            return await self._run(self._count_sync, profile_id)
        except Exception:
            logger.exception(f"Error counting {self._table} for profile {profile_id}")
            raise

    async def read_all_for_profile(self, profile_id: str) -> List[ModelT]:
        try:
            return await self._run(self._read_sync, profile_id)
        except Exception:
            logger.exception(f"Error reading {self._table} for profile {profile_id}")
            raise

    async def write(self, entity: ModelT) -> ModelT:
        record_id = getattr(entity, "id", "") or ""
        errors = validate_for_write(entity)
        if errors:
            raise RecordValidationError("; ".join(errors), errors=errors)

        table = self._table_for(entity)
        try:
            row = await self._run(self._upsert_sync, table, self._model_to_row(entity))
        except APIError as e:
            translated = _translate_api_error(e, record_id)
            if translated is e:
                logger.exception(f"Error writing {table} record {record_id}")
                raise
            raise translated from e

        try:
            return self._row_to_model(row)
        except ValidationError:
            logger.warning(f"Stored {table} row {record_id} did not validate; returning input")
            return entity


class SupabaseBodyMetricSource(SupabaseEntitySource[BaseModel]):
    """
    Body metrics live in two tables; the snapshot carries them as one category.

    Reads concatenate weight records then height records. Writes are routed by
    the record's metric_type.
    """

    def __init__(
        self,
        client: Client,
        *,
        weight_table: str = "weight_records",
        height_table: str = "height_records",
        executor: Optional[Executor] = None,
    ):
        super().__init__(client, weight_table, WeightRecord, executor=executor)
        self._weight = SupabaseEntitySource(client, weight_table, WeightRecord, executor=executor)
        self._height = SupabaseEntitySource(client, height_table, HeightRecord, executor=executor)

    def _table_for(self, entity: BaseModel) -> str:
        if isinstance(entity, HeightRecord):
            return self._height.table
        return self._weight.table

    def _model_to_row(self, entity: BaseModel) -> Dict[str, Any]:
        return entity.model_dump(
            mode="json", include=set(type(entity).model_fields) - {"metric_type"}
        )

    def _row_to_model(self, row: Dict[str, Any]) -> BaseModel:
        if "height" in row:
            return HeightRecord.model_validate(row)
        return WeightRecord.model_validate(row)

    async def count_for_profile(self, profile_id: str) -> int:
        return (
            await self._weight.count_for_profile(profile_id)
            + await self._height.count_for_profile(profile_id)
        )

    async def read_all_for_profile(self, profile_id: str) -> List[BaseModel]:
        weights = await self._weight.read_all_for_profile(profile_id)
        heights = await self._height.read_all_for_profile(profile_id)
        return [*weights, *heights]


def build_supabase_sources(
    client: Client,
    executor: Optional[Executor] = None,
) -> Dict[SyncCategory, Any]:
    """
    Build one Supabase-backed source per category.

    Args:
        client: Supabase client instance
        executor: Optional executor shared by all sources

    Returns:
        Mapping of category to entity source
    """
    return {
        SyncCategory.PROFILES: SupabaseEntitySource(
            client, "profiles", Profile, profile_column="id", executor=executor
        ),
        SyncCategory.EXERCISES: SupabaseEntitySource(
            client, "exercises", Exercise, executor=executor
        ),
        SyncCategory.EXERCISE_TEMPLATES: SupabaseEntitySource(
            client, "exercise_templates", ExerciseTemplate, executor=executor
        ),
        SyncCategory.TRAINING_PLANS: SupabaseEntitySource(
            client, "training_plans", TrainingPlan, executor=executor
        ),
        SyncCategory.WORKOUT_LOGS: SupabaseEntitySource(
            client, "workout_logs", WorkoutLog, executor=executor
        ),
        SyncCategory.MAX_LOGS: SupabaseEntitySource(
            client, "max_logs", MaxLog, executor=executor
        ),
        SyncCategory.BODY_METRICS: SupabaseBodyMetricSource(client, executor=executor),
    }
