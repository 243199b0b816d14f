"""
Tests for access token helpers.
"""
import pytest
from jose import jwt

from devconnect.core.config import get_settings
from devconnect.core.security import create_access_token, decode_access_token


class TestAccessTokens:
    def test_round_trip_returns_user_id(self):
        token = create_access_token("6651f0c2a1b2c3d4e5f60700")

        assert decode_access_token(token) == "6651f0c2a1b2c3d4e5f60700"

    def test_expired_token_is_rejected(self):
        token = create_access_token("6651f0c2a1b2c3d4e5f60700", expires_minutes=-1)

        with pytest.raises(ValueError):
            decode_access_token(token)

    def test_token_signed_with_other_secret_is_rejected(self):
        token = jwt.encode({"user": {"id": "abc"}}, "not-the-secret", algorithm="HS256")

        with pytest.raises(ValueError):
            decode_access_token(token)

    def test_token_without_user_is_rejected(self):
        settings = get_settings()
        token = jwt.encode({"sub": "abc"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)

        with pytest.raises(ValueError):
            decode_access_token(token)

    def test_garbage_is_rejected(self):
        with pytest.raises(ValueError):
            decode_access_token("not-a-jwt")
