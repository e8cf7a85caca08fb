"""
Infrastructure layer for the fitness data sync engine.

This package contains concrete implementations of the application ports:
- db/: Supabase-backed entity sources
"""

from infrastructure.db import (
    SupabaseBodyMetricSource,
    SupabaseEntitySource,
    build_supabase_sources,
)

__all__ = [
    "SupabaseEntitySource",
    "SupabaseBodyMetricSource",
    "build_supabase_sources",
]
