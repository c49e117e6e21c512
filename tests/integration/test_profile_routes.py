"""Integration tests for profile API endpoints."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from tests.helpers import TEST_USER_ID, make_profile_row, make_response

OTHER_USER_ID = "770e8400-e29b-41d4-a716-446655440000"


class TestGetMyProfile:
    """Tests for GET /api/v1/profiles/me endpoint."""

    def test_returns_profile(self, client: TestClient) -> None:
        """Test that profile is returned for authenticated user."""
        response = client.get("/api/v1/profiles/me")

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == TEST_USER_ID
        assert data["username"] == "neonninja"
        assert data["email"] == "test@example.com"
        assert data["social_links"] == {"steam": "neonninja"}

    def test_null_social_links(self, client: TestClient, supabase_tables: dict[str, MagicMock]) -> None:
        """Test that a NULL social_links column is returned as an empty object."""
        supabase_tables["profiles"].select.return_value.eq.return_value.execute.return_value = make_response(
            [make_profile_row(social_links=None)]
        )

        response = client.get("/api/v1/profiles/me")

        assert response.json()["social_links"] == {}

    def test_requires_authentication(self, anonymous_client: TestClient) -> None:
        """Test that endpoint returns 401 without authentication."""
        response = anonymous_client.get("/api/v1/profiles/me")

        assert response.status_code == 401


class TestUpdateMyProfile:
    """Tests for PUT /api/v1/profiles/me endpoint."""

    def test_updates_profile(self, client: TestClient, supabase_tables: dict[str, MagicMock]) -> None:
        """Test that allowed fields are updated."""
        supabase_tables["profiles"].update.return_value.eq.return_value.execute.return_value = make_response(
            [make_profile_row(display_name="Neon Ninja", bio="Support main")]
        )

        response = client.put("/api/v1/profiles/me", json={"display_name": "Neon Ninja", "bio": "Support main"})

        assert response.status_code == 200
        assert response.json()["display_name"] == "Neon Ninja"
        supabase_tables["profiles"].update.assert_called_with({"display_name": "Neon Ninja", "bio": "Support main"})

    def test_username_is_normalized(self, client: TestClient, supabase_tables: dict[str, MagicMock]) -> None:
        """Test that usernames are stored lowercase."""
        supabase_tables["profiles"].update.return_value.eq.return_value.execute.return_value = make_response(
            [make_profile_row()]
        )

        response = client.put("/api/v1/profiles/me", json={"username": "NeonNinja"})

        assert response.status_code == 200
        supabase_tables["profiles"].update.assert_called_with({"username": "neonninja"})

    def test_invalid_username(self, client: TestClient) -> None:
        """Test that usernames outside the allowed characters are rejected."""
        response = client.put("/api/v1/profiles/me", json={"username": "no spaces!"})

        assert response.status_code == 422

    def test_bio_too_long(self, client: TestClient) -> None:
        """Test that an oversized bio is rejected."""
        response = client.put("/api/v1/profiles/me", json={"bio": "x" * 501})

        assert response.status_code == 422

    def test_username_taken(self, client: TestClient, supabase_tables: dict[str, MagicMock]) -> None:
        """Test that another user's username is a 409."""
        supabase_tables["profiles"].select.return_value.eq.return_value.execute.return_value = make_response(
            [make_profile_row(user_id=OTHER_USER_ID, username="rival")]
        )

        response = client.put("/api/v1/profiles/me", json={"username": "neonninja"})

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"
        supabase_tables["profiles"].update.assert_not_called()


class TestPublicProfile:
    """Tests for GET /api/v1/profiles/u/{username}."""

    def test_returns_public_fields(self, anonymous_client: TestClient) -> None:
        """Test that the public view has no email."""
        response = anonymous_client.get("/api/v1/profiles/u/NeonNinja")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "neonninja"
        assert "email" not in data

    def test_unknown_username(
        self, anonymous_client: TestClient, supabase_tables: dict[str, MagicMock]
    ) -> None:
        """Test that an unknown username is a 404."""
        supabase_tables["profiles"].select.return_value.eq.return_value.execute.return_value = make_response([])

        response = anonymous_client.get("/api/v1/profiles/u/ghost")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestSocialLinks:
    """Tests for the social link endpoints."""

    def test_lists_links(self, client: TestClient) -> None:
        """Test that current links are returned."""
        response = client.get("/api/v1/profiles/me/social-links")

        assert response.status_code == 200
        assert response.json()["social_links"] == {"steam": "neonninja"}

    def test_adds_link(self, client: TestClient, supabase_tables: dict[str, MagicMock]) -> None:
        """Test that a link is added with a normalized platform."""
        response = client.post(
            "/api/v1/profiles/me/social-links",
            json={"platform": " Twitch ", "value": "  neonninja_tv "},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["social_links"] == {"steam": "neonninja", "twitch": "neonninja_tv"}
        assert data["message"] == "Social link updated successfully"
        supabase_tables["profiles"].update.assert_called_with({"social_links": data["social_links"]})

    def test_rejects_unknown_platform(self, client: TestClient) -> None:
        """Test that unsupported platforms are rejected."""
        response = client.post(
            "/api/v1/profiles/me/social-links",
            json={"platform": "myspace", "value": "tom"},
        )

        assert response.status_code == 422

    def test_rejects_empty_value(self, client: TestClient) -> None:
        """Test that a blank handle is rejected."""
        response = client.post(
            "/api/v1/profiles/me/social-links",
            json={"platform": "discord", "value": "   "},
        )

        assert response.status_code == 422

    def test_removes_link(self, client: TestClient) -> None:
        """Test that a link is removed."""
        response = client.delete("/api/v1/profiles/me/social-links/steam")

        assert response.status_code == 200
        data = response.json()
        assert data["social_links"] == {}
        assert data["message"] == "Social link removed successfully"

    def test_removing_absent_link_succeeds(self, client: TestClient) -> None:
        """Test that removing a platform that is not set is not an error."""
        response = client.delete("/api/v1/profiles/me/social-links/discord")

        assert response.status_code == 200
        assert response.json()["social_links"] == {"steam": "neonninja"}
