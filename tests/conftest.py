"""
Shared pytest fixtures for the data sync engine tests.
"""
from typing import Dict, List

import pytest

from application.sync import OperationStatus
from domain.models import SyncCategory
from tests.fakes import FakeEntitySource, create_populated_sources, create_sources


class ProgressRecorder:
    """Progress observer that keeps every status it receives."""

    def __init__(self) -> None:
        self.events: List[OperationStatus] = []

    def __call__(self, status: OperationStatus) -> None:
        self.events.append(status)

    @property
    def last(self) -> OperationStatus:
        return self.events[-1]


@pytest.fixture
def sources() -> Dict[SyncCategory, FakeEntitySource]:
    """Empty fake sources, one per category."""
    return create_sources()


@pytest.fixture
def populated_sources() -> Dict[SyncCategory, FakeEntitySource]:
    """Fake sources holding a full data graph for profile-1."""
    return create_populated_sources(profile_id="profile-1")


@pytest.fixture
def recorder() -> ProgressRecorder:
    return ProgressRecorder()
