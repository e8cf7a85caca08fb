"""
Fake EntitySource Implementations for Testing.

This package provides in-memory fake implementations of the EntitySource
port for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interface as the Supabase sources
- Supports seeding with test data
- Supports reset() for test isolation
- Fault injection for reads, counts and individual writes
- Factory functions for common test scenarios

Usage:
    from tests.fakes import create_sources, create_populated_sources

    # Empty store
    sources = create_sources()

    # One profile with a full data graph
    sources = create_populated_sources(profile_id="profile-1", num_exercises=5)
"""
from typing import Dict, Optional

from domain.models import SyncCategory
from tests.fakes.entity_sources import FakeEntitySource
from tests.fakes.records import (
    BASE_TIME,
    make_exercise,
    make_height,
    make_max_log,
    make_plan,
    make_profile,
    make_template,
    make_weight,
    make_workout_log,
)


def create_sources(conflict_on_existing: bool = False) -> Dict[SyncCategory, FakeEntitySource]:
    """
    Create one empty fake source per category.

    Args:
        conflict_on_existing: Raise RecordConflictError on writes to stored ids

    Returns:
        Mapping of category to FakeEntitySource
    """
    return {
        category: FakeEntitySource(category, conflict_on_existing=conflict_on_existing)
        for category in SyncCategory
    }


def create_populated_sources(
    profile_id: str = "profile-1",
    num_exercises: int = 3,
    num_templates: int = 2,
    num_plans: int = 2,
    num_logs: int = 4,
    num_max_logs: int = 2,
    num_weights: int = 3,
    num_heights: int = 1,
    sources: Optional[Dict[SyncCategory, FakeEntitySource]] = None,
) -> Dict[SyncCategory, FakeEntitySource]:
    """
    Create (or extend) fake sources holding one profile's full data graph.

    Returns:
        Mapping of category to FakeEntitySource
    """
    sources = sources if sources is not None else create_sources()
    sources[SyncCategory.PROFILES].seed([make_profile(profile_id)])
    sources[SyncCategory.EXERCISES].seed(
        [make_exercise(i, profile_id) for i in range(1, num_exercises + 1)]
    )
    sources[SyncCategory.EXERCISE_TEMPLATES].seed(
        [make_template(i, profile_id) for i in range(1, num_templates + 1)]
    )
    sources[SyncCategory.TRAINING_PLANS].seed(
        [make_plan(i, profile_id) for i in range(1, num_plans + 1)]
    )
    sources[SyncCategory.WORKOUT_LOGS].seed(
        [make_workout_log(i, profile_id) for i in range(1, num_logs + 1)]
    )
    sources[SyncCategory.MAX_LOGS].seed(
        [make_max_log(i, profile_id) for i in range(1, num_max_logs + 1)]
    )
    sources[SyncCategory.BODY_METRICS].seed(
        [make_weight(i, profile_id) for i in range(1, num_weights + 1)]
        + [make_height(i, profile_id) for i in range(1, num_heights + 1)]
    )
    return sources


__all__ = [
    "FakeEntitySource",
    "create_sources",
    "create_populated_sources",
    "BASE_TIME",
    "make_profile",
    "make_exercise",
    "make_template",
    "make_plan",
    "make_workout_log",
    "make_max_log",
    "make_weight",
    "make_height",
]
