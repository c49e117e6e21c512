"""Profile layout persistence service."""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from src.core.config import get_settings
from src.core.supabase import get_supabase_client
from src.models import ProfileLayoutRow
from src.schemas.layout import BlockCreate, ProfileBlock, ProfileLayout, ProfileTheme
from src.services import layout_validator
from src.services.layout_catalog import get_default_blocks, get_default_theme
from src.services.layout_validator import LayoutErrorKind, LayoutValidationError

logger = logging.getLogger(__name__)

LAYOUT_TABLE = "profile_layout"


class LayoutService:
    """Service for reading and writing profile layouts.

    Every write replaces the stored layout for the profile wholesale, after
    validation. Concurrent writers are last-write-wins.
    """

    def __init__(self) -> None:
        """Initialize layout service with Supabase client."""
        self.client = get_supabase_client()
        self.settings = get_settings()

    def build_default_layout(self, profile_id: UUID | str) -> ProfileLayout:
        """Build (without storing) the layout a new profile starts with."""
        return ProfileLayout(
            profile_id=str(profile_id),
            blocks=get_default_blocks(),
            theme=get_default_theme(self.settings.default_theme_preset),
        )

    async def get_layout(self, profile_id: UUID | str) -> ProfileLayout | None:
        """Get the stored layout for a profile.

        Args:
            profile_id: The profile's ID.

        Returns:
            ProfileLayout | None: The validated layout or None if none is stored.

        Raises:
            LayoutValidationError: If the stored document is invalid.
        """
        response = (
            self.client.table(LAYOUT_TABLE)
            .select("*")
            .eq("profile_id", str(profile_id))
            .execute()
        )

        if not response.data:
            return None

        try:
            return layout_validator.validate_layout(response.data[0])
        except LayoutValidationError as e:
            logger.warning(
                "Stored layout for profile %s is invalid: %s (%s)",
                profile_id,
                e.message,
                e.kind.value,
            )
            raise

    async def get_or_create_layout(self, profile_id: UUID | str) -> ProfileLayout:
        """Get the profile's layout, storing the default one on first access.

        Args:
            profile_id: The profile's ID.

        Returns:
            ProfileLayout: The stored or newly created layout.
        """
        layout = await self.get_layout(profile_id)
        if layout is not None:
            return layout

        logger.info("Creating default layout for profile %s", profile_id)
        return await self._write(self.build_default_layout(profile_id))

    async def get_resolved_layout(self, profile_id: UUID | str) -> ProfileLayout:
        """Get the render-ready layout for a profile.

        Profiles that never customized their page get the resolved default
        layout; nothing is stored in that case.
        """
        layout = await self.get_layout(profile_id)
        if layout is None:
            layout = self.build_default_layout(profile_id)
        return layout_validator.resolve_layout(layout)

    async def save_layout(
        self,
        profile_id: UUID | str,
        blocks: list[dict[str, Any]] | list[ProfileBlock],
        theme: str | dict[str, Any] | ProfileTheme | None = None,
    ) -> ProfileLayout:
        """Validate and store a whole layout.

        Args:
            profile_id: The profile's ID.
            blocks: Blocks in render order.
            theme: Preset id or concrete theme; the current theme is kept
                when omitted.

        Returns:
            ProfileLayout: The stored layout.

        Raises:
            LayoutValidationError: If the layout is invalid. Nothing is written.
        """
        if theme is None:
            current = await self.get_layout(profile_id)
            theme = current.theme if current else get_default_theme(self.settings.default_theme_preset)

        layout = layout_validator.validate_layout(
            {"profile_id": str(profile_id), "blocks": blocks, "theme": theme}
        )
        # Resolving checks variants and block configs before anything is stored
        layout_validator.resolve_layout(layout)

        return await self._write(layout)

    async def update_theme(
        self,
        profile_id: UUID | str,
        preset: str | None = None,
        colors: dict[str, Any] | None = None,
    ) -> ProfileLayout:
        """Change a layout's theme to a preset or custom colors.

        Custom colors are merged over the current theme.

        Raises:
            LayoutValidationError: MISSING_FIELD when neither is given,
                UNKNOWN_THEME_PRESET or INVALID_COLOR.
        """
        layout = await self.get_or_create_layout(profile_id)

        if preset:
            theme = layout_validator.resolve_theme(preset)
        elif colors:
            theme = layout_validator.create_custom_theme(colors, base=layout.theme)
        else:
            raise LayoutValidationError(
                LayoutErrorKind.MISSING_FIELD,
                "Theme update needs a preset or colors",
                field="theme",
            )

        return await self._write(layout.model_copy(update={"theme": theme}))

    async def reorder(self, profile_id: UUID | str, block_ids: list[str]) -> ProfileLayout:
        """Store the layout with its blocks in a new order."""
        layout = await self.get_or_create_layout(profile_id)
        return await self._write(layout_validator.reorder_blocks(layout, block_ids))

    async def add_block(self, profile_id: UUID | str, data: BlockCreate) -> ProfileLayout:
        """Append a block to the layout."""
        layout = await self.get_or_create_layout(profile_id)
        updated = layout_validator.add_block(
            layout,
            data.type,
            variant=data.variant,
            config=data.config,
        )
        return await self._write(updated)

    async def remove_block(self, profile_id: UUID | str, block_id: str) -> ProfileLayout:
        """Remove a block from the layout."""
        layout = await self.get_or_create_layout(profile_id)
        return await self._write(layout_validator.remove_block(layout, block_id))

    async def reset_to_default(self, profile_id: UUID | str) -> ProfileLayout:
        """Replace the layout with the default blocks and theme."""
        logger.info("Resetting layout for profile %s", profile_id)
        return await self._write(self.build_default_layout(profile_id))

    async def delete_layout(self, profile_id: UUID | str) -> bool:
        """Delete the stored layout.

        Returns:
            bool: True if a layout was deleted.
        """
        response = (
            self.client.table(LAYOUT_TABLE)
            .delete()
            .eq("profile_id", str(profile_id))
            .execute()
        )
        return bool(response.data)

    async def _write(self, layout: ProfileLayout) -> ProfileLayout:
        row: ProfileLayoutRow = {**layout.to_row(), "updated_at": datetime.now(timezone.utc).isoformat()}

        response = (
            self.client.table(LAYOUT_TABLE)
            .upsert(row, on_conflict="profile_id")
            .execute()
        )

        stored = response.data[0] if response.data else row
        logger.info(
            "Saved layout for profile %s (%d blocks, theme %s)",
            layout.profile_id,
            len(layout.blocks),
            layout.theme.name,
        )
        return layout_validator.validate_layout(stored)
