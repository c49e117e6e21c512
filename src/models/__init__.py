"""Database model type definitions."""

from src.models.friend import FriendRequestRow
from src.models.game import ProfileGameRow
from src.models.layout import ProfileLayoutRow
from src.models.profile import Profile

__all__ = [
    "FriendRequestRow",
    "Profile",
    "ProfileGameRow",
    "ProfileLayoutRow",
]
