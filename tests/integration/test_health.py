"""Integration tests for health check endpoints."""

from collections.abc import Callable
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Test that /health endpoint returns 200 status."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        """Test that /health endpoint returns healthy status."""
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["timestamp"] is not None
        assert data["version"] == "0.1.0"


class TestReadinessEndpoint:
    """Tests for /health/ready endpoint."""

    def test_readiness_returns_200_when_healthy(self, client: TestClient) -> None:
        """Test that /health/ready returns 200 when the database is reachable."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert [check["name"] for check in data["checks"]] == ["database"]
        assert data["checks"][0]["healthy"] is True
        assert data["checks"][0]["latency_ms"] is not None

    def test_readiness_returns_503_when_database_unhealthy(
        self, client: TestClient, supabase_tables: dict[str, MagicMock]
    ) -> None:
        """Test that /health/ready returns 503 when the database query fails."""
        supabase_tables["profile_layout"].select.return_value.limit.return_value.execute.side_effect = (
            Exception("Connection refused")
        )

        response = client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["checks"][0]["healthy"] is False
        assert "Connection refused" in data["checks"][0]["error"]


class TestAuthHealthEndpoint:
    """Tests for /health/auth endpoint."""

    def test_requires_token(self, anonymous_client: TestClient) -> None:
        """Test that /health/auth rejects requests without a token."""
        response = anonymous_client.get("/health/auth")

        assert response.status_code == 401

    def test_returns_user_for_valid_token(
        self,
        anonymous_client: TestClient,
        auth_settings: MagicMock,
        make_token: Callable[..., str],
    ) -> None:
        """Test that /health/auth echoes the token's user."""
        response = anonymous_client.get(
            "/health/auth",
            headers={"Authorization": f"Bearer {make_token()}"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["user_id"] == "550e8400-e29b-41d4-a716-446655440000"
        assert data["role"] == "authenticated"

    def test_rejects_expired_token(
        self,
        anonymous_client: TestClient,
        auth_settings: MagicMock,
        make_token: Callable[..., str],
    ) -> None:
        """Test that /health/auth rejects an expired token."""
        response = anonymous_client.get(
            "/health/auth",
            headers={"Authorization": f"Bearer {make_token(exp_offset=-60)}"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"


class TestRequestSizeLimit:
    """Tests for the request body size limit."""

    def test_rejects_oversized_body(self, client: TestClient) -> None:
        """Test that bodies over the limit get 413 before reaching the route."""
        with patch("src.api.middleware.request_size.get_settings") as mock_settings:
            mock_settings.return_value.max_request_body_size = 10
            response = client.put("/api/v1/layouts/me", json={"blocks": [], "theme": "neonBlue"})

        assert response.status_code == 413
        assert response.json()["error"] == "request_too_large"
