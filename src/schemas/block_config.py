"""Per-type configuration schemas for profile blocks.

Each schema types the keys a block type understands and lets any other key
through, so configs written by newer editors still validate.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.schemas.layout import BlockType


class BlockConfig(BaseModel):
    """Base for block configuration schemas (camelCase keys)."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)


class HeaderConfig(BlockConfig):
    show_banner: bool = True
    show_bio: bool = True


class FriendsConfig(BlockConfig):
    max_items: int = Field(default=12, ge=1, le=50)
    columns: int | None = Field(default=None, ge=1, le=8)
    show_stats: bool = False


class GamesConfig(BlockConfig):
    max_items: int = Field(default=12, ge=1, le=50)
    columns: int | None = Field(default=None, ge=1, le=8)
    show_titles: bool = True
    show_descriptions: bool = False


class AchievementsConfig(BlockConfig):
    max_items: int | None = Field(default=None, ge=1, le=50)


class AccountsConfig(BlockConfig):
    show_handles: bool = False


class CustomConfig(BlockConfig):
    title: str = Field(default="", max_length=100)
    content: str = Field(default="", max_length=5000)


class QAEntry(BaseModel):
    """One question/answer card in an about block."""

    question: str = Field(max_length=200)
    answer: str = Field(max_length=1000)


class AboutConfig(BlockConfig):
    text: str = Field(default="", max_length=5000)
    qa: list[QAEntry] = Field(default_factory=list, max_length=20)


class StreamConfig(BlockConfig):
    platform: Literal["twitch", "youtube"] | None = None
    channel: str | None = Field(default=None, max_length=100)
    autoplay: bool = False


class RosterConfig(BlockConfig):
    team_name: str | None = Field(default=None, max_length=100)
    max_members: int = Field(default=5, ge=1, le=50)
    show_join_dates: bool = False


class GalleryConfig(BlockConfig):
    max_items: int = Field(default=12, ge=1, le=50)
    columns: int | None = Field(default=None, ge=1, le=6)


BLOCK_CONFIG_SCHEMAS: dict[BlockType, type[BlockConfig]] = {
    BlockType.HEADER: HeaderConfig,
    BlockType.FRIENDS: FriendsConfig,
    BlockType.GAMES: GamesConfig,
    BlockType.ACHIEVEMENTS: AchievementsConfig,
    BlockType.ACCOUNTS: AccountsConfig,
    BlockType.CUSTOM: CustomConfig,
    BlockType.ABOUT: AboutConfig,
    BlockType.STREAM: StreamConfig,
    BlockType.ROSTER: RosterConfig,
    BlockType.GALLERY: GalleryConfig,
}
