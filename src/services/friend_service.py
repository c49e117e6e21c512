"""Friend requests, friend lists and user search."""

import logging
import re
from typing import Any
from uuid import UUID

from src.api.middleware.error_handler import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.supabase import get_supabase_client
from src.models import FriendRequestRow
from src.schemas.friend import FriendRequestStatus, FriendStatus
from src.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

FRIEND_REQUESTS_TABLE = "friend_requests"
PROFILE_SUMMARY_COLUMNS = "id, username, display_name, avatar_url"
REQUESTER_PROFILE = f"requester_profile:profiles!friend_requests_requester_fkey({PROFILE_SUMMARY_COLUMNS})"
RECIPIENT_PROFILE = f"recipient_profile:profiles!friend_requests_recipient_fkey({PROFILE_SUMMARY_COLUMNS})"

MIN_SEARCH_LENGTH = 2
SEARCH_LIMIT = 20

# Characters with meaning inside a PostgREST or=(...) filter
_FILTER_SYNTAX = re.compile(r"[,()%*\\\"]")


def _between(profile_id: str, other_id: str) -> str:
    """PostgREST filter matching requests in either direction between two profiles."""
    return (
        f"and(requester.eq.{profile_id},recipient.eq.{other_id}),"
        f"and(requester.eq.{other_id},recipient.eq.{profile_id})"
    )


class FriendService:
    """Service for friend requests and friendships between profiles."""

    def __init__(self) -> None:
        """Initialize friend service with Supabase client."""
        self.client = get_supabase_client()
        self.profiles = ProfileService()

    async def send_request(self, requester_id: UUID | str, recipient_username: str) -> FriendRequestRow:
        """Send a friend request to the profile with the given username.

        Args:
            requester_id: The sending profile's UUID.
            recipient_username: Username of the profile to befriend.

        Returns:
            FriendRequestRow: The new pending request.

        Raises:
            NotFoundError: If no profile has that username.
            ValidationError: If the recipient is the requester.
            ConflictError: If the two are already friends or a request is pending.
        """
        recipient = await self.profiles.get_profile_by_username(recipient_username)
        if recipient is None:
            raise NotFoundError("User not found")

        requester_id = str(requester_id)
        recipient_id = str(recipient["id"])
        if recipient_id == requester_id:
            raise ValidationError("Cannot send friend request to yourself")

        existing = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .select("id, status, requester, recipient")
            .or_(_between(requester_id, recipient_id))
            .neq("status", FriendRequestStatus.DECLINED.value)
            .execute()
        )
        if existing.data:
            if existing.data[0]["status"] == FriendRequestStatus.ACCEPTED.value:
                raise ConflictError("You are already friends with this user")
            raise ConflictError("Friend request already exists")

        response = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .insert(
                {
                    "requester": requester_id,
                    "recipient": recipient_id,
                    "status": FriendRequestStatus.PENDING.value,
                }
            )
            .execute()
        )

        logger.info("Friend request sent from %s to %s", requester_id, recipient_id)
        return response.data[0]

    async def get_request(self, request_id: UUID | str) -> FriendRequestRow | None:
        """Get a friend request by id."""
        response = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .select("*")
            .eq("id", str(request_id))
            .execute()
        )

        return response.data[0] if response.data else None

    async def accept_request(self, profile_id: UUID | str, request_id: UUID | str) -> FriendRequestRow:
        """Accept a pending request sent to this profile."""
        return await self._respond(profile_id, request_id, FriendRequestStatus.ACCEPTED)

    async def decline_request(self, profile_id: UUID | str, request_id: UUID | str) -> FriendRequestRow:
        """Decline a pending request sent to this profile."""
        return await self._respond(profile_id, request_id, FriendRequestStatus.DECLINED)

    async def _respond(
        self,
        profile_id: UUID | str,
        request_id: UUID | str,
        new_status: FriendRequestStatus,
    ) -> FriendRequestRow:
        """Move a pending request to accepted or declined.

        Raises:
            NotFoundError: If the request does not exist or is not pending.
            AuthorizationError: If the profile is not the request's recipient.
        """
        request = await self.get_request(request_id)
        if request is None or request["status"] != FriendRequestStatus.PENDING.value:
            raise NotFoundError("Friend request not found or already processed")

        if str(request["recipient"]) != str(profile_id):
            raise AuthorizationError("Only the recipient can respond to a friend request")

        response = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .update({"status": new_status.value})
            .eq("id", str(request_id))
            .execute()
        )

        logger.info("Friend request %s %s by %s", request_id, new_status.value, profile_id)
        return response.data[0]

    async def get_pending_requests(self, profile_id: UUID | str) -> dict[str, list[dict[str, Any]]]:
        """Get pending requests received and sent by a profile.

        Returns:
            dict: ``incoming`` requests with the requester's profile and
                ``outgoing`` requests with the recipient's profile, newest first.
        """
        profile_id = str(profile_id)

        incoming = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .select(f"*, {REQUESTER_PROFILE}")
            .eq("recipient", profile_id)
            .eq("status", FriendRequestStatus.PENDING.value)
            .order("created_at", desc=True)
            .execute()
        )
        outgoing = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .select(f"*, {RECIPIENT_PROFILE}")
            .eq("requester", profile_id)
            .eq("status", FriendRequestStatus.PENDING.value)
            .order("created_at", desc=True)
            .execute()
        )

        return {"incoming": incoming.data or [], "outgoing": outgoing.data or []}

    async def list_friends(self, profile_id: UUID | str) -> list[dict[str, Any]]:
        """Get a profile's accepted friends, newest friendship first.

        Returns:
            list: friend_id, username, display_name, avatar_url and
                friendship_date of each friend.
        """
        profile_id = str(profile_id)

        response = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .select(f"*, {REQUESTER_PROFILE}, {RECIPIENT_PROFILE}")
            .eq("status", FriendRequestStatus.ACCEPTED.value)
            .or_(f"requester.eq.{profile_id},recipient.eq.{profile_id}")
            .order("created_at", desc=True)
            .execute()
        )

        friends = []
        for row in response.data or []:
            if str(row["requester"]) == profile_id:
                friend = row.get("recipient_profile")
            else:
                friend = row.get("requester_profile")
            if not friend:
                # The other profile was deleted
                continue
            friends.append(
                {
                    "friend_id": friend["id"],
                    "username": friend.get("username"),
                    "display_name": friend.get("display_name"),
                    "avatar_url": friend.get("avatar_url"),
                    "friendship_date": row["created_at"],
                }
            )
        return friends

    async def count_friends(self, profile_id: UUID | str) -> int:
        """Count a profile's accepted friends."""
        profile_id = str(profile_id)

        response = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .select("id", count="exact")
            .eq("status", FriendRequestStatus.ACCEPTED.value)
            .or_(f"requester.eq.{profile_id},recipient.eq.{profile_id}")
            .execute()
        )

        if response.count is not None:
            return response.count
        return len(response.data or [])

    async def get_friend_statuses(
        self,
        profile_id: UUID | str,
        other_ids: list[str],
    ) -> dict[str, FriendStatus]:
        """Relationship of a profile to each of the given profiles.

        Profiles with no accepted or pending request are left out.
        """
        if not other_ids:
            return {}

        profile_id = str(profile_id)
        response = (
            self.client.table(FRIEND_REQUESTS_TABLE)
            .select("requester, recipient, status")
            .or_(",".join(_between(profile_id, str(other_id)) for other_id in other_ids))
            .execute()
        )

        statuses: dict[str, FriendStatus] = {}
        for row in response.data or []:
            sent = str(row["requester"]) == profile_id
            other_id = str(row["recipient"] if sent else row["requester"])
            if row["status"] == FriendRequestStatus.ACCEPTED.value:
                statuses[other_id] = FriendStatus.FRIENDS
            elif row["status"] == FriendRequestStatus.PENDING.value:
                statuses[other_id] = FriendStatus.REQUEST_SENT if sent else FriendStatus.REQUEST_RECEIVED
        return statuses

    async def search_users(self, profile_id: UUID | str, query: str) -> list[dict[str, Any]]:
        """Find other profiles by username or display name.

        Args:
            profile_id: The searching profile, left out of the results.
            query: Case-insensitive substring; shorter than two characters
                returns nothing.

        Returns:
            list: Up to SEARCH_LIMIT profile summaries ordered by username,
                each with its friend_status.
        """
        term = _FILTER_SYNTAX.sub("", query).strip().lower()
        if len(term) < MIN_SEARCH_LENGTH:
            return []

        response = (
            self.client.table("profiles")
            .select(PROFILE_SUMMARY_COLUMNS)
            .or_(f"username.ilike.%{term}%,display_name.ilike.%{term}%")
            .neq("id", str(profile_id))
            .order("username")
            .limit(SEARCH_LIMIT)
            .execute()
        )
        users = response.data or []

        statuses = await self.get_friend_statuses(profile_id, [str(user["id"]) for user in users])
        return [
            {**user, "friend_status": statuses.get(str(user["id"]), FriendStatus.NONE)}
            for user in users
        ]
