"""Favorite game Pydantic schemas for API request/response models."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

GAME_SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


class Game(BaseModel):
    """Catalog entry for a game a profile can list."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(description="Stable game identifier")
    name: str = Field(description="Display name")
    icon: str = Field(description="Icon path")
    category: str | None = Field(default=None, description="Genre")
    platforms: tuple[str, ...] = Field(default=(), description="Platforms the game runs on")


class GameCreate(BaseModel):
    """Request body for adding a game to the current profile."""

    game_slug: str = Field(description="Game slug, e.g. 'valorant'")

    @field_validator("game_slug")
    @classmethod
    def validate_slug(cls, value: str) -> str:
        """Lowercase the slug and check its characters."""
        value = value.strip().lower()
        if len(value) > 100 or not GAME_SLUG_PATTERN.fullmatch(value):
            raise ValueError("Game slug must be lowercase words separated by hyphens")
        return value


class ProfileGameResponse(BaseModel):
    """A game on a profile, with its catalog details."""

    id: str = Field(description="profile_games row id")
    game_slug: str
    game: Game
    created_at: datetime


class ProfileGamesResponse(BaseModel):
    """A profile's games in the order they were added."""

    games: list[ProfileGameResponse] = Field(default_factory=list)
    max_games: int = Field(description="Most games a profile can list")
    can_add_more: bool
