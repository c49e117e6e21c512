"""Profile layout model type definitions for database operations."""

from typing import Any, TypedDict


class ProfileLayoutRow(TypedDict):
    """profile_layout table row representation.

    One row per profile. ``blocks`` and ``theme`` are jsonb columns holding
    the layout document exactly as the editor saved it.
    """

    profile_id: str
    blocks: list[dict[str, Any]]
    theme: dict[str, Any]
    updated_at: str | None
