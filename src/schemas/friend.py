"""Friend Pydantic schemas for API request/response models."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class FriendRequestStatus(str, Enum):
    """Lifecycle of a friend request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class FriendStatus(str, Enum):
    """Relationship between the viewer and another profile."""

    NONE = "none"
    FRIENDS = "friends"
    REQUEST_SENT = "request_sent"
    REQUEST_RECEIVED = "request_received"


class FriendRequestCreate(BaseModel):
    """Request body for sending a friend request."""

    recipient_username: str = Field(description="Username of the profile to befriend")

    @field_validator("recipient_username")
    @classmethod
    def normalize_username(cls, value: str) -> str:
        """Trim and lowercase the username."""
        value = value.strip().lower()
        if not value:
            raise ValueError("Recipient username is required")
        return value


class ProfileSummary(BaseModel):
    """The public fields shown next to a friend or request."""

    id: UUID
    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None


class FriendRequestResponse(BaseModel):
    """A friend request."""

    id: UUID
    requester: UUID = Field(description="Profile that sent the request")
    recipient: UUID = Field(description="Profile the request was sent to")
    status: FriendRequestStatus
    created_at: datetime


class PendingFriendRequest(FriendRequestResponse):
    """A pending request with the other side's profile."""

    requester_profile: ProfileSummary | None = None
    recipient_profile: ProfileSummary | None = None


class PendingRequestsResponse(BaseModel):
    """Pending requests received and sent by the current profile, newest first."""

    incoming: list[PendingFriendRequest] = Field(default_factory=list)
    outgoing: list[PendingFriendRequest] = Field(default_factory=list)


class Friend(BaseModel):
    """An accepted friend."""

    friend_id: UUID
    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    friendship_date: datetime


class FriendListResponse(BaseModel):
    """The current profile's friends, newest first."""

    friends: list[Friend] = Field(default_factory=list)


class FriendCountResponse(BaseModel):
    """Number of accepted friends of a profile."""

    profile_id: UUID
    username: str | None = None
    friend_count: int


class UserSearchResult(ProfileSummary):
    """A search hit with its relationship to the searcher."""

    friend_status: FriendStatus = FriendStatus.NONE


class UserSearchResponse(BaseModel):
    """Profiles matching a search."""

    users: list[UserSearchResult] = Field(default_factory=list)
