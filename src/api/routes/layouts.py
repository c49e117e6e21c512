"""Profile layout API routes."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.deps import CurrentProfile
from src.api.middleware.error_handler import NotFoundError
from src.schemas.layout import (
    BlockCreate,
    BlockDefinition,
    BlockReorderRequest,
    LayoutDraft,
    LayoutUpdate,
    ProfileLayout,
    ThemePreset,
    ThemeUpdate,
)
from src.services import layout_validator
from src.services.layout_catalog import BLOCK_DEFINITIONS, THEME_PRESETS
from src.services.layout_service import LayoutService
from src.services.profile_service import ProfileService

router = APIRouter(prefix="/layouts", tags=["layouts"])


@router.get(
    "/catalog/blocks",
    response_model=list[BlockDefinition],
    summary="List block types",
    description="Returns every block type with its variants and their default configuration.",
)
async def list_block_definitions() -> list[BlockDefinition]:
    """Return the block catalog."""
    return list(BLOCK_DEFINITIONS)


@router.get(
    "/catalog/themes",
    response_model=list[ThemePreset],
    summary="List theme presets",
)
async def list_theme_presets() -> list[ThemePreset]:
    """Return the theme preset catalog."""
    return list(THEME_PRESETS)


@router.post(
    "/validate",
    response_model=ProfileLayout,
    summary="Validate a layout draft",
    description="Validates an editor draft and returns it fully resolved. Nothing is stored.",
)
async def validate_draft(data: LayoutDraft, profile: CurrentProfile) -> ProfileLayout:
    """Dry-run a layout draft for the current user.

    Raises:
        LayoutValidationError: 422 naming the offending field.
    """
    return layout_validator.resolve_layout(
        {"profile_id": str(profile["id"]), "blocks": data.blocks, "theme": data.theme}
    )


@router.get(
    "/me",
    response_model=ProfileLayout,
    summary="Get current user's layout",
    description="Returns the stored layout, creating the default layout on first access.",
)
async def get_my_layout(profile: CurrentProfile) -> ProfileLayout:
    """Get the authenticated user's layout as stored."""
    service = LayoutService()
    return await service.get_or_create_layout(profile["id"])


@router.put(
    "/me",
    response_model=ProfileLayout,
    summary="Replace current user's layout",
    description="Validates and stores the whole layout. Omitting theme keeps the current one.",
)
async def save_my_layout(data: LayoutUpdate, profile: CurrentProfile) -> ProfileLayout:
    """Replace the authenticated user's layout.

    Raises:
        LayoutValidationError: 422 if the layout is invalid; nothing is stored.
    """
    service = LayoutService()
    return await service.save_layout(profile["id"], data.blocks, data.theme)


@router.delete(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete current user's layout",
    description="Removes the stored layout; the next read recreates the default one.",
)
async def delete_my_layout(profile: CurrentProfile) -> None:
    """Delete the authenticated user's layout.

    Raises:
        NotFoundError: 404 if no layout is stored.
    """
    service = LayoutService()
    if not await service.delete_layout(profile["id"]):
        raise NotFoundError("No layout stored for this profile")


@router.get(
    "/me/resolved",
    response_model=ProfileLayout,
    summary="Get current user's render-ready layout",
)
async def get_my_resolved_layout(profile: CurrentProfile) -> ProfileLayout:
    """Get the authenticated user's layout with defaults and theme resolved."""
    service = LayoutService()
    return await service.get_resolved_layout(profile["id"])


@router.patch(
    "/me/theme",
    response_model=ProfileLayout,
    summary="Change current user's theme",
    description="Applies a theme preset, or custom colors merged over the current theme.",
)
async def update_my_theme(data: ThemeUpdate, profile: CurrentProfile) -> ProfileLayout:
    """Change the authenticated user's theme."""
    service = LayoutService()
    return await service.update_theme(profile["id"], preset=data.preset, colors=data.colors)


@router.post(
    "/me/reorder",
    response_model=ProfileLayout,
    summary="Reorder current user's blocks",
    description="Takes every current block id exactly once, in the new order.",
)
async def reorder_my_blocks(data: BlockReorderRequest, profile: CurrentProfile) -> ProfileLayout:
    """Reorder the authenticated user's blocks.

    Raises:
        LayoutValidationError: 422 invalid_permutation if ids are missing,
            unknown or repeated.
    """
    service = LayoutService()
    return await service.reorder(profile["id"], data.block_ids)


@router.post(
    "/me/reset",
    response_model=ProfileLayout,
    summary="Reset current user's layout",
)
async def reset_my_layout(profile: CurrentProfile) -> ProfileLayout:
    """Replace the authenticated user's layout with the default one."""
    service = LayoutService()
    return await service.reset_to_default(profile["id"])


@router.post(
    "/me/blocks",
    response_model=ProfileLayout,
    status_code=status.HTTP_201_CREATED,
    summary="Add a block",
    description="Appends a block with a generated id to the end of the layout.",
)
async def add_my_block(data: BlockCreate, profile: CurrentProfile) -> ProfileLayout:
    """Append a block to the authenticated user's layout."""
    service = LayoutService()
    return await service.add_block(profile["id"], data)


@router.delete(
    "/me/blocks/{block_id}",
    response_model=ProfileLayout,
    summary="Remove a block",
)
async def remove_my_block(block_id: str, profile: CurrentProfile) -> ProfileLayout:
    """Remove a block from the authenticated user's layout.

    Raises:
        LayoutValidationError: 404 unknown_block_id if the block does not exist.
    """
    service = LayoutService()
    return await service.remove_block(profile["id"], block_id)


@router.get(
    "/{profile_id}/resolved",
    response_model=ProfileLayout,
    summary="Get a profile's render-ready layout",
    description="Public view of any profile's layout. No authentication required.",
)
async def get_resolved_layout(profile_id: UUID) -> ProfileLayout:
    """Get a profile's layout with defaults and theme resolved.

    Raises:
        NotFoundError: 404 if the profile does not exist.
    """
    profile = await ProfileService().get_profile_by_id(profile_id)
    if not profile:
        raise NotFoundError("Profile not found")

    service = LayoutService()
    return await service.get_resolved_layout(profile_id)
