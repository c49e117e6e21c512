"""Profile API routes."""

from fastapi import APIRouter, HTTPException, Query, status

from src.api.deps import CurrentProfile, CurrentUser
from src.api.middleware.error_handler import ConflictError, NotFoundError
from src.models import ProfileGameRow
from src.schemas.game import Game, GameCreate, ProfileGameResponse, ProfileGamesResponse
from src.schemas.profile import (
    ProfileResponse,
    ProfileUpdate,
    PublicProfileResponse,
    SocialLinkCreate,
    SocialLinksResponse,
)
from src.services.game_catalog import GAME_CATALOG, describe_game, search_games
from src.services.game_service import MAX_GAMES, GameService
from src.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _games_response(rows: list[ProfileGameRow]) -> ProfileGamesResponse:
    games = [
        ProfileGameResponse(
            id=str(row["id"]),
            game_slug=row["game_slug"],
            game=describe_game(row["game_slug"]),
            created_at=row["created_at"],
        )
        for row in rows
    ]
    return ProfileGamesResponse(games=games, max_games=MAX_GAMES, can_add_more=len(games) < MAX_GAMES)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get current user's profile",
    description="Returns the authenticated user's profile, creating it on first access.",
)
async def get_my_profile(profile: CurrentProfile) -> ProfileResponse:
    """Get the authenticated user's profile.

    Args:
        profile: The authenticated user's profile row.

    Returns:
        ProfileResponse: The user's profile data.
    """
    return ProfileResponse(**profile)


@router.put(
    "/me",
    response_model=ProfileResponse,
    summary="Update current user's profile",
    description="Updates the authenticated user's profile with provided fields.",
)
async def update_my_profile(
    data: ProfileUpdate,
    user: CurrentUser,
    profile: CurrentProfile,
) -> ProfileResponse:
    """Update the authenticated user's profile.

    Args:
        data: Fields to update.
        user: The authenticated user context.
        profile: The current profile row (ensures it exists).

    Returns:
        ProfileResponse: The updated profile data.

    Raises:
        ConflictError: 409 if the username belongs to someone else.
        HTTPException: 404 if profile not found.
    """
    service = ProfileService()

    if data.username and data.username != profile.get("username"):
        if await service.is_username_taken(data.username, user.user_id):
            raise ConflictError(f"Username '{data.username}' is already taken")

    updated = await service.update_profile(user.user_id, data)

    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )

    return ProfileResponse(**updated)


@router.get(
    "/u/{username}",
    response_model=PublicProfileResponse,
    summary="Get a public profile",
    description="Returns the public fields of a profile by username. No authentication required.",
)
async def get_public_profile(username: str) -> PublicProfileResponse:
    """Look up a profile by username.

    Raises:
        NotFoundError: 404 if no profile has that username.
    """
    service = ProfileService()
    profile = await service.get_profile_by_username(username)

    if not profile:
        raise NotFoundError(f"No profile named '{username}'")

    return PublicProfileResponse(**profile)


@router.get(
    "/me/social-links",
    response_model=SocialLinksResponse,
    summary="Get current user's social links",
)
async def get_my_social_links(user: CurrentUser) -> SocialLinksResponse:
    """Return the authenticated user's social links."""
    service = ProfileService()
    links = await service.get_social_links(user.user_id)
    return SocialLinksResponse(social_links=links)


@router.post(
    "/me/social-links",
    response_model=SocialLinksResponse,
    summary="Add or update a social link",
    description="Sets the handle for one supported platform, replacing any existing value.",
)
async def set_my_social_link(
    data: SocialLinkCreate,
    user: CurrentUser,
    profile: CurrentProfile,
) -> SocialLinksResponse:
    """Add or replace one social link.

    Args:
        data: Platform and handle (already normalized).
        user: The authenticated user context.
        profile: The current profile row (ensures it exists).
    """
    service = ProfileService()
    links = await service.set_social_link(user.user_id, data.platform, data.value)
    return SocialLinksResponse(social_links=links, message="Social link updated successfully")


@router.delete(
    "/me/social-links/{platform}",
    response_model=SocialLinksResponse,
    summary="Remove a social link",
)
async def remove_my_social_link(
    platform: str,
    user: CurrentUser,
    profile: CurrentProfile,
) -> SocialLinksResponse:
    """Remove one social link; removing a platform that is not set succeeds."""
    service = ProfileService()
    links = await service.remove_social_link(user.user_id, platform)
    return SocialLinksResponse(social_links=links, message="Social link removed successfully")


@router.get(
    "/games/catalog",
    response_model=list[Game],
    summary="List known games",
    description="Returns catalog games, optionally filtered by name, slug or genre. No authentication required.",
)
async def list_game_catalog(
    q: str | None = Query(default=None, description="Case-insensitive search term"),
) -> list[Game]:
    """Return the game catalog, filtered when a search term is given."""
    if q:
        return search_games(q)
    return list(GAME_CATALOG)


@router.get(
    "/me/games",
    response_model=ProfileGamesResponse,
    summary="Get current user's games",
)
async def get_my_games(profile: CurrentProfile) -> ProfileGamesResponse:
    """Return the games on the authenticated user's profile, oldest first."""
    service = GameService()
    return _games_response(await service.list_games(profile["id"]))


@router.post(
    "/me/games",
    response_model=ProfileGamesResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a game",
    description=f"Adds a game to the profile. A profile lists at most {MAX_GAMES} games.",
)
async def add_my_game(data: GameCreate, profile: CurrentProfile) -> ProfileGamesResponse:
    """Add a game and return the updated list.

    Raises:
        ConflictError: 409 if the game is already listed.
        ValidationError: 422 if the list is full.
    """
    service = GameService()
    await service.add_game(profile["id"], data.game_slug)
    return _games_response(await service.list_games(profile["id"]))


@router.delete(
    "/me/games/{game_slug}",
    response_model=ProfileGamesResponse,
    summary="Remove a game",
)
async def remove_my_game(game_slug: str, profile: CurrentProfile) -> ProfileGamesResponse:
    """Remove a game and return the updated list.

    Raises:
        NotFoundError: 404 if the game is not listed.
    """
    service = GameService()
    await service.remove_game(profile["id"], game_slug.strip().lower())
    return _games_response(await service.list_games(profile["id"]))


@router.get(
    "/u/{username}/games",
    response_model=ProfileGamesResponse,
    summary="Get a profile's games",
    description="Returns the games on a profile by username. No authentication required.",
)
async def get_public_games(username: str) -> ProfileGamesResponse:
    """Look up a profile's games by username.

    Raises:
        NotFoundError: 404 if no profile has that username.
    """
    profile = await ProfileService().get_profile_by_username(username)
    if not profile:
        raise NotFoundError(f"No profile named '{username}'")

    service = GameService()
    return _games_response(await service.list_games(profile["id"]))
