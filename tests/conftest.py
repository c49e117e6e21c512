"""Pytest configuration and fixtures."""

import os
import time
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch
from uuid import UUID

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from fastapi.testclient import TestClient
from jose import jwt as jose_jwt
from jwt.algorithms import ECAlgorithm

from tests.helpers import TEST_USER_ID, make_profile_row, make_response

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SECRET_KEY", "test-secret-key")
os.environ.setdefault("SUPABASE_SIGNING_KEY_JWK", "test-signing-key-jwk")


def _echo_upsert(row: dict[str, Any], **kwargs: Any) -> MagicMock:
    query = MagicMock()
    query.execute.return_value = make_response([row])
    return query


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import get_settings

    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    get_settings.cache_clear()


@pytest.fixture
def supabase_tables() -> dict[str, MagicMock]:
    """Per-table query mocks.

    The test user's profile exists with no layout, games or friends. The
    profile_layout upsert echoes the written row back, like PostgREST does
    with return=representation.
    """
    profiles = MagicMock()
    profiles.select.return_value.eq.return_value.execute.return_value = make_response([make_profile_row()])
    profiles.update.return_value.eq.return_value.execute.return_value = make_response([])

    layouts = MagicMock()
    layouts.select.return_value.eq.return_value.execute.return_value = make_response([])
    layouts.select.return_value.limit.return_value.execute.return_value = make_response([])
    layouts.upsert.side_effect = _echo_upsert
    layouts.delete.return_value.eq.return_value.execute.return_value = make_response([])

    games = MagicMock()
    games.select.return_value.eq.return_value.order.return_value.execute.return_value = make_response([])
    games.delete.return_value.eq.return_value.eq.return_value.execute.return_value = make_response([])

    friend_requests = MagicMock()
    friend_requests.select.return_value.eq.return_value.execute.return_value = make_response([])
    friend_requests.select.return_value.or_.return_value.neq.return_value.execute.return_value = make_response([])

    return {
        "profiles": profiles,
        "profile_layout": layouts,
        "profile_games": games,
        "friend_requests": friend_requests,
    }


@pytest.fixture
def mock_supabase_client(supabase_tables: dict[str, MagicMock]) -> Generator[MagicMock, None, None]:
    """Provide a mocked Supabase client routed to the per-table mocks.

    Yields:
        MagicMock: Mocked Supabase client for testing.
    """
    mock_client = MagicMock()
    mock_client.table.side_effect = lambda name: supabase_tables[name]

    with (
        patch("src.core.supabase.get_supabase_client", return_value=mock_client),
        patch("src.services.profile_service.get_supabase_client", return_value=mock_client),
        patch("src.services.layout_service.get_supabase_client", return_value=mock_client),
        patch("src.services.game_service.get_supabase_client", return_value=mock_client),
        patch("src.services.friend_service.get_supabase_client", return_value=mock_client),
    ):
        yield mock_client


@pytest.fixture
def test_user() -> Any:
    """The authenticated user used by route tests."""
    from src.schemas.auth import UserContext

    return UserContext(user_id=UUID(TEST_USER_ID), email="test@example.com", role="authenticated")


@pytest.fixture
def client(mock_supabase_client: MagicMock, test_user: Any) -> Generator[TestClient, None, None]:
    """Provide a test client authenticated as the test user.

    Args:
        mock_supabase_client: Mocked Supabase client fixture.
        test_user: User returned by the auth dependency.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.api.deps import get_current_user
    from src.main import app

    app.dependency_overrides[get_current_user] = lambda: test_user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(mock_supabase_client: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a test client without an authenticated user.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="session")
def signing_keys() -> tuple[str, str]:
    """An ES256 key pair: (private key PEM, public key JWK JSON)."""
    private_key = ec.generate_private_key(ec.SECP256R1())
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_jwk = ECAlgorithm.to_jwk(private_key.public_key())
    return private_pem, public_jwk


@pytest.fixture
def auth_settings(signing_keys: tuple[str, str]) -> Generator[MagicMock, None, None]:
    """Point JWT verification at the test signing key.

    Yields:
        MagicMock: The patched get_settings.
    """
    from src.api.middleware.auth import get_signing_key

    _, public_jwk = signing_keys
    get_signing_key.cache_clear()
    with patch("src.api.middleware.auth.get_settings") as mock_settings:
        mock_settings.return_value.supabase_signing_key_jwk = public_jwk
        mock_settings.return_value.supabase_jwt_audience = "authenticated"
        yield mock_settings
    get_signing_key.cache_clear()


@pytest.fixture
def make_token(signing_keys: tuple[str, str]) -> Any:
    """Factory for ES256 access tokens signed with the test key."""
    private_pem, _ = signing_keys

    def _make_token(
        sub: str | None = TEST_USER_ID,
        email: str | None = "test@example.com",
        role: str | None = "authenticated",
        exp_offset: int = 3600,
        aud: str = "authenticated",
        key: str | None = None,
    ) -> str:
        now = int(time.time())
        payload: dict[str, Any] = {
            "email": email,
            "role": role,
            "exp": now + exp_offset,
            "iat": now,
            "aud": aud,
            "iss": "https://test-project.supabase.co/auth/v1",
        }
        if sub is not None:
            payload["sub"] = sub
        return jose_jwt.encode(payload, key or private_pem, algorithm="ES256")

    return _make_token
