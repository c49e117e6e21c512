"""Unit tests for ProfileService."""

from unittest.mock import MagicMock, patch
from uuid import UUID

import pytest

from src.services.profile_service import ProfileService

USER_ID = UUID("660e8400-e29b-41d4-a716-446655440000")


@pytest.fixture
def mock_supabase() -> MagicMock:
    """Create a mock Supabase client."""
    return MagicMock()


@pytest.fixture
def profile_service(mock_supabase: MagicMock) -> ProfileService:
    """Create ProfileService with mocked client."""
    with patch("src.services.profile_service.get_supabase_client", return_value=mock_supabase):
        return ProfileService()


def set_select(mock_supabase: MagicMock, data: list[dict]) -> None:
    mock_response = MagicMock()
    mock_response.data = data
    mock_supabase.table.return_value.select.return_value.eq.return_value.execute.return_value = (
        mock_response
    )


class TestGetOrCreateProfile:
    """Tests for get_or_create_profile method."""

    @pytest.mark.asyncio
    async def test_returns_existing_profile(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that existing profile is returned."""
        existing_profile = {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "user_id": str(USER_ID),
            "display_name": "Test User",
            "email": "test@example.com",
        }
        set_select(mock_supabase, [existing_profile])

        result = await profile_service.get_or_create_profile(user_id=USER_ID, email="test@example.com")

        assert result == existing_profile
        mock_supabase.table.assert_called_with("profiles")
        mock_supabase.table.return_value.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_new_profile_when_not_exists(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that new profile is created when none exists."""
        new_profile = {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "user_id": str(USER_ID),
            "display_name": "new@example.com",
            "email": "new@example.com",
        }
        set_select(mock_supabase, [])

        create_response = MagicMock()
        create_response.data = [new_profile]
        mock_supabase.table.return_value.insert.return_value.execute.return_value = create_response

        result = await profile_service.get_or_create_profile(user_id=USER_ID, email="new@example.com")

        assert result == new_profile
        inserted = mock_supabase.table.return_value.insert.call_args.args[0]
        assert inserted == {
            "user_id": str(USER_ID),
            "email": "new@example.com",
            "display_name": "new@example.com",
            "social_links": {},
        }


class TestGetProfileByUsername:
    """Tests for username lookups."""

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that the username is lowercased before the query."""
        set_select(mock_supabase, [{"id": "p1", "username": "neonninja"}])

        result = await profile_service.get_profile_by_username("  NeonNinja ")

        assert result["username"] == "neonninja"
        mock_supabase.table.return_value.select.return_value.eq.assert_called_with("username", "neonninja")

    @pytest.mark.asyncio
    async def test_username_taken_by_other_user(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that a username owned by someone else is taken."""
        set_select(mock_supabase, [{"user_id": "770e8400-e29b-41d4-a716-446655440000"}])

        assert await profile_service.is_username_taken("neonninja", USER_ID) is True

    @pytest.mark.asyncio
    async def test_own_username_not_taken(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that the user's own username is not reported as taken."""
        set_select(mock_supabase, [{"user_id": str(USER_ID)}])

        assert await profile_service.is_username_taken("neonninja", USER_ID) is False


class TestUpdateProfile:
    """Tests for update_profile method."""

    @pytest.mark.asyncio
    async def test_updates_allowed_fields(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that profile is updated with allowed fields."""
        from src.schemas.profile import ProfileUpdate

        updated_profile = {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "user_id": str(USER_ID),
            "display_name": "Updated Name",
            "email": "test@example.com",
        }

        mock_response = MagicMock()
        mock_response.data = [updated_profile]
        mock_supabase.table.return_value.update.return_value.eq.return_value.execute.return_value = (
            mock_response
        )

        result = await profile_service.update_profile(
            user_id=USER_ID,
            data=ProfileUpdate(display_name="Updated Name"),
        )

        assert result["display_name"] == "Updated Name"
        mock_supabase.table.return_value.update.assert_called_with({"display_name": "Updated Name"})

    @pytest.mark.asyncio
    async def test_returns_current_profile_when_no_changes(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that current profile is returned when no changes provided."""
        from src.schemas.profile import ProfileUpdate

        existing_profile = {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "user_id": str(USER_ID),
            "display_name": "Test User",
        }
        set_select(mock_supabase, [existing_profile])

        result = await profile_service.update_profile(user_id=USER_ID, data=ProfileUpdate())

        assert result == existing_profile
        mock_supabase.table.return_value.update.assert_not_called()


class TestSocialLinks:
    """Tests for social link management."""

    @pytest.mark.asyncio
    async def test_returns_empty_when_no_profile(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that a missing profile has no links."""
        set_select(mock_supabase, [])

        assert await profile_service.get_social_links(USER_ID) == {}

    @pytest.mark.asyncio
    async def test_null_links_are_empty(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that a NULL social_links column reads as no links."""
        set_select(mock_supabase, [{"user_id": str(USER_ID), "social_links": None}])

        assert await profile_service.get_social_links(USER_ID) == {}

    @pytest.mark.asyncio
    async def test_set_social_link(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that a link is added next to the existing ones."""
        set_select(mock_supabase, [{"user_id": str(USER_ID), "social_links": {"steam": "ninja"}}])

        links = await profile_service.set_social_link(USER_ID, "twitch", "ninja_live")

        assert links == {"steam": "ninja", "twitch": "ninja_live"}
        mock_supabase.table.return_value.update.assert_called_with({"social_links": links})
        mock_supabase.table.return_value.update.return_value.eq.assert_called_with("user_id", str(USER_ID))

    @pytest.mark.asyncio
    async def test_remove_social_link(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that a link is removed by normalized platform name."""
        set_select(
            mock_supabase,
            [{"user_id": str(USER_ID), "social_links": {"steam": "ninja", "twitch": "ninja_live"}}],
        )

        links = await profile_service.remove_social_link(USER_ID, " Twitch ")

        assert links == {"steam": "ninja"}

    @pytest.mark.asyncio
    async def test_remove_absent_link_is_noop(
        self, profile_service: ProfileService, mock_supabase: MagicMock
    ) -> None:
        """Test that removing a platform that is not set keeps the links."""
        set_select(mock_supabase, [{"user_id": str(USER_ID), "social_links": {"steam": "ninja"}}])

        links = await profile_service.remove_social_link(USER_ID, "discord")

        assert links == {"steam": "ninja"}
