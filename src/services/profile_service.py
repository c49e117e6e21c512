"""Profile business logic service."""

import logging
from uuid import UUID

from src.core.supabase import get_supabase_client
from src.models import Profile
from src.schemas.profile import ProfileUpdate, normalize_platform

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for managing user profiles."""

    def __init__(self) -> None:
        """Initialize profile service with Supabase client."""
        self.client = get_supabase_client()

    async def get_or_create_profile(
        self,
        user_id: UUID,
        email: str | None = None,
        display_name: str | None = None,
    ) -> Profile:
        """Get existing profile or create a new one.

        Args:
            user_id: The auth user ID.
            email: User's email address.
            display_name: User's display name.

        Returns:
            Profile: The profile row.
        """
        profile = await self.get_profile(user_id)
        if profile:
            return profile

        profile_data = {
            "user_id": str(user_id),
            "email": email,
            "display_name": display_name or email,
            "social_links": {},
        }

        response = (
            self.client.table("profiles")
            .insert(profile_data)
            .execute()
        )

        logger.info("Created profile for user %s", user_id)
        return response.data[0]

    async def get_profile(self, user_id: UUID) -> Profile | None:
        """Get a profile by auth user ID.

        Args:
            user_id: The auth user ID.

        Returns:
            Profile | None: The profile row or None if not found.
        """
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .execute()
        )

        return response.data[0] if response.data else None

    async def get_profile_by_id(self, profile_id: UUID) -> Profile | None:
        """Get a profile by profile ID.

        Args:
            profile_id: The profile's UUID.

        Returns:
            Profile | None: The profile row or None if not found.
        """
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", str(profile_id))
            .execute()
        )

        return response.data[0] if response.data else None

    async def get_profile_by_username(self, username: str) -> Profile | None:
        """Get a profile by its (case-insensitive) username."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("username", username.strip().lower())
            .execute()
        )

        return response.data[0] if response.data else None

    async def update_profile(
        self,
        user_id: UUID,
        data: ProfileUpdate,
    ) -> Profile | None:
        """Update a profile.

        Args:
            user_id: The auth user ID.
            data: The fields to update.

        Returns:
            Profile | None: The updated profile row or None if not found.
        """
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        if not update_data:
            # No changes, return current profile
            return await self.get_profile(user_id)

        response = (
            self.client.table("profiles")
            .update(update_data)
            .eq("user_id", str(user_id))
            .execute()
        )

        return response.data[0] if response.data else None

    async def is_username_taken(self, username: str, user_id: UUID) -> bool:
        """Check whether another user already owns a username."""
        profile = await self.get_profile_by_username(username)
        return profile is not None and str(profile["user_id"]) != str(user_id)

    async def get_social_links(self, user_id: UUID) -> dict[str, str]:
        """Get a user's social links.

        Returns:
            dict: Platform to handle mapping (empty when none are set).
        """
        profile = await self.get_profile(user_id)
        if not profile:
            return {}
        return dict(profile.get("social_links") or {})

    async def set_social_link(self, user_id: UUID, platform: str, value: str) -> dict[str, str]:
        """Add or replace one social link.

        Args:
            user_id: The auth user ID.
            platform: Normalized platform name.
            value: Handle or URL.

        Returns:
            dict: The updated social links.
        """
        links = await self.get_social_links(user_id)
        links[platform] = value
        await self._write_social_links(user_id, links)
        return links

    async def remove_social_link(self, user_id: UUID, platform: str) -> dict[str, str]:
        """Remove one social link; removing an absent platform is a no-op.

        Returns:
            dict: The updated social links.
        """
        links = await self.get_social_links(user_id)
        links.pop(normalize_platform(platform), None)
        await self._write_social_links(user_id, links)
        return links

    async def _write_social_links(self, user_id: UUID, links: dict[str, str]) -> None:
        (
            self.client.table("profiles")
            .update({"social_links": links})
            .eq("user_id", str(user_id))
            .execute()
        )
