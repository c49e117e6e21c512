"""Friend API routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from src.api.deps import CurrentProfile
from src.api.middleware.error_handler import NotFoundError, ValidationError
from src.schemas.friend import (
    FriendCountResponse,
    FriendListResponse,
    FriendRequestCreate,
    FriendRequestResponse,
    PendingRequestsResponse,
)
from src.services.friend_service import FriendService
from src.services.profile_service import ProfileService

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get(
    "",
    response_model=FriendListResponse,
    summary="List current user's friends",
    description="Returns accepted friends, newest friendship first.",
)
async def list_my_friends(profile: CurrentProfile) -> FriendListResponse:
    """Return the authenticated user's friends."""
    service = FriendService()
    friends = await service.list_friends(profile["id"])
    return FriendListResponse(friends=friends)


@router.get(
    "/count",
    response_model=FriendCountResponse,
    summary="Count a profile's friends",
    description="Counts accepted friends of a profile given by id or username. No authentication required.",
)
async def count_friends(
    profile_id: UUID | None = Query(default=None, description="Profile id"),
    username: str | None = Query(default=None, description="Profile username"),
) -> FriendCountResponse:
    """Count a profile's friends.

    Raises:
        ValidationError: 422 if neither profile_id nor username is given.
        NotFoundError: 404 if no profile has that username.
    """
    if profile_id is None:
        if not username:
            raise ValidationError("Either profile_id or username is required")
        profile = await ProfileService().get_profile_by_username(username)
        if not profile:
            raise NotFoundError("User not found")
        profile_id = UUID(str(profile["id"]))

    service = FriendService()
    count = await service.count_friends(profile_id)
    return FriendCountResponse(profile_id=profile_id, username=username, friend_count=count)


@router.post(
    "/requests",
    response_model=FriendRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a friend request",
)
async def send_friend_request(data: FriendRequestCreate, profile: CurrentProfile) -> FriendRequestResponse:
    """Send a friend request by username.

    Raises:
        NotFoundError: 404 if the username does not exist.
        ValidationError: 422 for a request to yourself.
        ConflictError: 409 if already friends or a request is pending.
    """
    service = FriendService()
    request = await service.send_request(profile["id"], data.recipient_username)
    return FriendRequestResponse(**request)


@router.get(
    "/requests/pending",
    response_model=PendingRequestsResponse,
    summary="List pending friend requests",
    description="Returns requests received (incoming) and sent (outgoing) that await an answer.",
)
async def list_pending_requests(profile: CurrentProfile) -> PendingRequestsResponse:
    """Return the authenticated user's pending requests."""
    service = FriendService()
    pending = await service.get_pending_requests(profile["id"])
    return PendingRequestsResponse(**pending)


@router.post(
    "/requests/{request_id}/accept",
    response_model=FriendRequestResponse,
    summary="Accept a friend request",
)
async def accept_friend_request(request_id: UUID, profile: CurrentProfile) -> FriendRequestResponse:
    """Accept a pending request sent to the authenticated user.

    Raises:
        NotFoundError: 404 if the request does not exist or was answered.
        AuthorizationError: 403 if the request was sent to someone else.
    """
    service = FriendService()
    request = await service.accept_request(profile["id"], request_id)
    return FriendRequestResponse(**request)


@router.post(
    "/requests/{request_id}/decline",
    response_model=FriendRequestResponse,
    summary="Decline a friend request",
)
async def decline_friend_request(request_id: UUID, profile: CurrentProfile) -> FriendRequestResponse:
    """Decline a pending request sent to the authenticated user."""
    service = FriendService()
    request = await service.decline_request(profile["id"], request_id)
    return FriendRequestResponse(**request)
