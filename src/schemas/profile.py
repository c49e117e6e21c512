"""Profile Pydantic schemas for API request/response models."""

import re
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

SOCIAL_PLATFORMS: tuple[str, ...] = (
    "discord",
    "steam",
    "xbox",
    "playstation",
    "riot",
    "epic",
    "github",
    "twitch",
    "youtube",
    "twitter",
    "instagram",
    "tiktok",
)

USERNAME_PATTERN = re.compile(r"^[a-z0-9_]{3,30}$")


def normalize_platform(platform: str) -> str:
    """Lowercase and trim a social platform name."""
    return platform.strip().lower()


class ProfileBase(BaseModel):
    """Base profile fields shared across schemas."""

    username: str | None = Field(default=None, description="Unique handle used in profile URLs")
    display_name: str | None = Field(default=None, max_length=255, description="User display name")
    bio: str | None = Field(default=None, description="Short biography")
    avatar_url: str | None = Field(default=None, description="URL to user's avatar image")
    banner_url: str | None = Field(default=None, description="URL to the profile banner image")
    social_links: dict[str, str] = Field(default_factory=dict, description="Platform to handle or URL")


class ProfileUpdate(BaseModel):
    """Schema for updating a profile.

    All fields are optional for partial updates.
    """

    model_config = ConfigDict(from_attributes=True)

    username: str | None = Field(default=None, description="New username (3-30 chars, a-z, 0-9, _)")
    display_name: str | None = Field(default=None, max_length=255, description="New display name")
    bio: str | None = Field(default=None, max_length=500, description="New biography")
    avatar_url: str | None = Field(default=None, description="New avatar URL")
    banner_url: str | None = Field(default=None, description="New banner URL")

    @field_validator("username")
    @classmethod
    def normalize_username(cls, value: str | None) -> str | None:
        """Lowercase the username and enforce its character set."""
        if value is None:
            return None
        value = value.strip().lower()
        if not USERNAME_PATTERN.match(value):
            raise ValueError("Username must be 3-30 characters of a-z, 0-9 or _")
        return value


class ProfileResponse(ProfileBase):
    """Schema for the owner's view of a profile."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Profile unique identifier")
    user_id: UUID = Field(description="Associated auth user ID")
    email: str | None = Field(default=None, description="User email address")
    created_at: datetime = Field(description="Profile creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    @field_validator("social_links", mode="before")
    @classmethod
    def default_social_links(cls, value: dict[str, str] | None) -> dict[str, str]:
        """Treat a NULL social_links column as no links."""
        return value or {}


class PublicProfileResponse(ProfileBase):
    """Schema for a profile as seen by other users (no email)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Profile unique identifier")

    @field_validator("social_links", mode="before")
    @classmethod
    def default_social_links(cls, value: dict[str, str] | None) -> dict[str, str]:
        """Treat a NULL social_links column as no links."""
        return value or {}


class SocialLinkCreate(BaseModel):
    """Request body for adding or replacing a social link."""

    platform: str = Field(description=f"One of: {', '.join(SOCIAL_PLATFORMS)}")
    value: str = Field(description="Handle or URL on that platform")

    @field_validator("platform")
    @classmethod
    def validate_platform(cls, value: str) -> str:
        """Normalize the platform and check it is supported."""
        platform = normalize_platform(value)
        if platform not in SOCIAL_PLATFORMS:
            raise ValueError(f"Invalid platform. Supported platforms: {', '.join(SOCIAL_PLATFORMS)}")
        return platform

    @field_validator("value")
    @classmethod
    def validate_value(cls, value: str) -> str:
        """Trim the value and bound its length."""
        value = value.strip()
        if not value:
            raise ValueError("Value cannot be empty")
        if len(value) > 255:
            raise ValueError("Value must be 255 characters or less")
        return value


class SocialLinksResponse(BaseModel):
    """Current social links of a profile."""

    social_links: dict[str, str] = Field(default_factory=dict)
    message: str | None = Field(default=None, description="Outcome of a change")
