"""Supabase client singleton for database operations."""

import logging
from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from src.core.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_supabase_client() -> Client:
    """Get cached Supabase client singleton for database operations.

    Uses the secret key, which bypasses RLS at the PostgREST level. Callers
    must have verified that the authenticated user owns the rows they touch.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
    )


async def check_database_connection() -> dict[str, Any]:
    """Check if database connection is healthy.

    Runs a one-row query against the layout table.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = get_supabase_client()
        client.table("profile_layout").select("profile_id").limit(1).execute()
        return {"healthy": True}
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        return {"healthy": False, "error": str(e)}
