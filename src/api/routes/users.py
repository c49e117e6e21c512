"""User search API routes."""

from fastapi import APIRouter, Query

from src.api.deps import CurrentProfile
from src.schemas.friend import UserSearchResponse
from src.services.friend_service import FriendService

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/search",
    response_model=UserSearchResponse,
    summary="Search users",
    description=(
        "Finds other profiles whose username or display name contains the query, "
        "with the caller's friend status for each. Queries under two characters return nothing."
    ),
)
async def search_users(
    profile: CurrentProfile,
    q: str = Query(default="", max_length=100, description="Search term"),
) -> UserSearchResponse:
    """Search profiles by username or display name."""
    service = FriendService()
    users = await service.search_users(profile["id"], q)
    return UserSearchResponse(users=users)
