"""Favorite game model type definitions for database operations."""

from typing import TypedDict


class ProfileGameRow(TypedDict):
    """profile_games table row representation.

    One row per (profile, game); ``game_slug`` is unique per profile.
    """

    id: str
    profile_id: str
    game_slug: str
    created_at: str
