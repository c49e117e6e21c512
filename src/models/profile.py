"""Profile model type definitions for database operations."""

from typing import TypedDict


class Profile(TypedDict):
    """Profile table row representation.

    Represents a user profile stored in the profiles table, as PostgREST
    returns it (ids and timestamps are strings).
    """

    id: str
    user_id: str
    username: str | None
    display_name: str | None
    email: str | None
    bio: str | None
    avatar_url: str | None
    banner_url: str | None
    social_links: dict[str, str] | None
    created_at: str
    updated_at: str
