"""
Ports for the data sync engine.

This package defines the interfaces the engine depends on. Implementations
are provided in the infrastructure layer (Supabase) and in tests (fakes).

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import EntitySource

    class ExportService:
        def __init__(self, sources: Mapping[SyncCategory, EntitySource]):
            self.sources = sources
"""

from application.ports.entity_source import EntitySource
from application.ports.progress_observer import ProgressObserver

__all__ = [
    "EntitySource",
    "ProgressObserver",
]
