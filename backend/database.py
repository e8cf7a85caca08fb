"""
Database module for Supabase integration.
Builds the client the entity sources are injected with.
"""
import logging
from typing import Optional

from supabase import Client, create_client

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class DatabaseNotConfiguredError(RuntimeError):
    """Supabase URL or key is missing."""


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Create a Supabase client from settings.

    Raises:
        DatabaseNotConfiguredError: If the URL or key is missing
    """
    settings = settings or get_settings()
    if not settings.supabase_configured:
        logger.warning("Supabase credentials not configured")
        raise DatabaseNotConfiguredError(
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_ANON_KEY)"
        )

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        raise
