"""Shared test data and Supabase response builders."""

from typing import Any
from unittest.mock import MagicMock

TEST_USER_ID = "550e8400-e29b-41d4-a716-446655440000"
TEST_PROFILE_ID = "660e8400-e29b-41d4-a716-446655440000"
OTHER_PROFILE_ID = "770e8400-e29b-41d4-a716-446655440000"
REQUEST_ID = "880e8400-e29b-41d4-a716-446655440000"


def make_profile_row(**overrides: Any) -> dict[str, Any]:
    """Build a profiles table row for the test user."""
    row = {
        "id": TEST_PROFILE_ID,
        "user_id": TEST_USER_ID,
        "username": "neonninja",
        "display_name": "NeonNinja",
        "email": "test@example.com",
        "bio": "Top 500 FPS player.",
        "avatar_url": None,
        "banner_url": None,
        "social_links": {"steam": "neonninja"},
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }
    row.update(overrides)
    return row


def make_game_row(game_slug: str, index: int = 0) -> dict[str, Any]:
    """Build a profile_games row for the test profile."""
    return {
        "id": f"990e8400-e29b-41d4-a716-{index:012d}",
        "profile_id": TEST_PROFILE_ID,
        "game_slug": game_slug,
        "created_at": f"2024-02-01T00:00:{index:02d}Z",
    }


def make_request_row(**overrides: Any) -> dict[str, Any]:
    """Build a friend_requests row from the other profile to the test profile."""
    row = {
        "id": REQUEST_ID,
        "requester": OTHER_PROFILE_ID,
        "recipient": TEST_PROFILE_ID,
        "status": "pending",
        "created_at": "2024-03-01T00:00:00Z",
        "updated_at": "2024-03-01T00:00:00Z",
    }
    row.update(overrides)
    return row


def make_response(data: Any, count: int | None = None) -> MagicMock:
    """Build a Supabase execute() response."""
    response = MagicMock()
    response.data = data
    response.count = count
    return response
