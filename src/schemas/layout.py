"""Profile layout Pydantic schemas for layout documents and API models."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """Closed set of block kinds a profile page can contain."""

    HEADER = "header"
    FRIENDS = "friends"
    GAMES = "games"
    ACHIEVEMENTS = "achievements"
    ACCOUNTS = "accounts"
    CUSTOM = "custom"
    ABOUT = "about"
    STREAM = "stream"
    ROSTER = "roster"
    GALLERY = "gallery"


class ThemeColors(BaseModel):
    """Color tokens of a profile theme.

    Serialized with the camelCase names the editor writes to the database.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bg_gradient: tuple[str, str] = Field(alias="bgGradient", description="Background gradient (from, to)")
    accent: str = Field(description="Primary accent color")
    accent_secondary: str = Field(alias="accentSecondary", description="Secondary accent color")
    text: str = Field(description="Primary text color")
    text_secondary: str = Field(alias="textSecondary", description="Secondary text color")
    card_bg: str = Field(alias="cardBg", description="Card background color")
    card_border: str = Field(alias="cardBorder", description="Card border color")


class ProfileTheme(BaseModel):
    """Named bundle of color tokens applied to the whole page."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(description="Preset id, or 'custom'")
    colors: ThemeColors


class ProfileBlock(BaseModel):
    """One renderable section of a profile page."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Block identifier, unique within a layout")
    type: BlockType = Field(description="Block kind")
    variant: str | None = Field(default=None, description="Variant id from the block catalog")
    config: dict[str, Any] = Field(default_factory=dict, description="Variant-specific configuration")


class ProfileLayout(BaseModel):
    """A profile's ordered blocks and theme.

    Block order is render order.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    profile_id: str = Field(description="Owning profile identifier")
    blocks: list[ProfileBlock] = Field(default_factory=list, description="Blocks in render order")
    theme: ProfileTheme
    updated_at: datetime | None = Field(default=None, description="Last modification timestamp")

    @property
    def block_ids(self) -> list[str]:
        """Block ids in render order."""
        return [block.id for block in self.blocks]

    def to_row(self) -> dict[str, Any]:
        """Serialize blocks and theme for the profile_layout table."""
        return {
            "profile_id": self.profile_id,
            "blocks": [block.model_dump(mode="json", exclude_none=True) for block in self.blocks],
            "theme": self.theme.model_dump(mode="json", by_alias=True),
        }


class BlockVariant(BaseModel):
    """Catalog entry for one presentation of a block type."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    description: str
    thumbnail: str | None = None
    config: dict[str, Any] = Field(default_factory=dict, description="Default configuration")


class BlockDefinition(BaseModel):
    """Catalog entry describing a block type and its variants."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: BlockType
    name: str
    description: str
    icon: str
    variants: list[BlockVariant]
    default_variant: str = Field(alias="defaultVariant")

    def get_variant(self, variant_id: str) -> BlockVariant | None:
        """Look up a variant by id."""
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None


class ThemePreset(BaseModel):
    """Catalog entry for a ready-made theme."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    description: str
    colors: ThemeColors


# API request models. Blocks and themes arrive as plain data so that the
# layout validator, not FastAPI's body parsing, reports what is wrong.


class LayoutUpdate(BaseModel):
    """Request body replacing the current user's whole layout."""

    blocks: list[dict[str, Any]] = Field(description="Blocks in render order")
    theme: str | dict[str, Any] | None = Field(
        default=None,
        description="Preset id or concrete theme; keeps the current theme when omitted",
    )


class LayoutDraft(BaseModel):
    """Request body for a dry-run validation of an editor draft."""

    blocks: list[dict[str, Any]] = Field(default_factory=list)
    theme: str | dict[str, Any] = Field(description="Preset id or concrete theme")


class ThemeUpdate(BaseModel):
    """Request body for changing the theme.

    Give either a preset id or a partial set of colors; partial colors are
    merged over the current theme.
    """

    preset: str | None = Field(default=None, description="Theme preset id")
    colors: dict[str, Any] | None = Field(default=None, description="Custom color overrides")


class BlockReorderRequest(BaseModel):
    """Request body with the new block order."""

    block_ids: list[str] = Field(description="Every current block id, in the new order")


class BlockCreate(BaseModel):
    """Request body for appending a block."""

    type: str = Field(description="Block kind")
    variant: str | None = Field(default=None, description="Variant id; the type default when omitted")
    config: dict[str, Any] = Field(default_factory=dict)
