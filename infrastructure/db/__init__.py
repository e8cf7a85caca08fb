"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the EntitySource
port defined in application.ports. The sources are injected into the export
and import use cases.

Usage:
    from supabase import create_client
    from infrastructure.db import build_supabase_sources

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    sources = build_supabase_sources(client)
"""

from infrastructure.db.entity_sources import (
    PAGE_SIZE,
    SupabaseBodyMetricSource,
    SupabaseEntitySource,
    build_supabase_sources,
)

__all__ = [
    "PAGE_SIZE",
    "SupabaseEntitySource",
    "SupabaseBodyMetricSource",
    "build_supabase_sources",
]
