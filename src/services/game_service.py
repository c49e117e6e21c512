"""Favorite games business logic service."""

import logging
from uuid import UUID

from src.api.middleware.error_handler import ConflictError, NotFoundError, ValidationError
from src.core.supabase import get_supabase_client
from src.models import ProfileGameRow

logger = logging.getLogger(__name__)

GAMES_TABLE = "profile_games"
MAX_GAMES = 10


class GameService:
    """Service for the games a profile lists as favorites."""

    def __init__(self) -> None:
        """Initialize game service with Supabase client."""
        self.client = get_supabase_client()

    async def list_games(self, profile_id: UUID | str) -> list[ProfileGameRow]:
        """Get a profile's games, oldest first.

        Args:
            profile_id: The profile's UUID.

        Returns:
            list: profile_games rows in the order they were added.
        """
        response = (
            self.client.table(GAMES_TABLE)
            .select("id, profile_id, game_slug, created_at")
            .eq("profile_id", str(profile_id))
            .order("created_at", desc=False)
            .execute()
        )

        return response.data or []

    async def add_game(self, profile_id: UUID | str, game_slug: str) -> ProfileGameRow:
        """Add a game to a profile.

        Args:
            profile_id: The profile's UUID.
            game_slug: Normalized game slug.

        Returns:
            ProfileGameRow: The inserted row.

        Raises:
            ConflictError: If the game is already listed.
            ValidationError: If the profile already lists MAX_GAMES games.
        """
        games = await self.list_games(profile_id)

        if any(game["game_slug"] == game_slug for game in games):
            raise ConflictError("Game already added to your list")

        if len(games) >= MAX_GAMES:
            raise ValidationError(f"Maximum {MAX_GAMES} games allowed per profile")

        response = (
            self.client.table(GAMES_TABLE)
            .insert({"profile_id": str(profile_id), "game_slug": game_slug})
            .execute()
        )

        logger.info("Profile %s added game %s", profile_id, game_slug)
        return response.data[0]

    async def remove_game(self, profile_id: UUID | str, game_slug: str) -> None:
        """Remove a game from a profile.

        Raises:
            NotFoundError: If the profile does not list the game.
        """
        response = (
            self.client.table(GAMES_TABLE)
            .delete()
            .eq("profile_id", str(profile_id))
            .eq("game_slug", game_slug)
            .execute()
        )

        if not response.data:
            raise NotFoundError(f"Game '{game_slug}' is not on your list")

        logger.info("Profile %s removed game %s", profile_id, game_slug)
