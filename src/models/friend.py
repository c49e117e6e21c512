"""Friend request model type definitions for database operations."""

from typing import TypedDict


class FriendRequestRow(TypedDict):
    """friend_requests table row representation.

    ``requester`` and ``recipient`` are profile ids. A request is
    ``pending`` until the recipient accepts or declines it; accepted
    requests are the friendships.
    """

    id: str
    requester: str
    recipient: str
    status: str
    created_at: str
    updated_at: str | None
