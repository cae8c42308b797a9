"""Tests for JWTService identity extraction."""

import jwt
import pytest

from entitygate.core.result import Failure, Success
from entitygate.domain.identity import CallerIdentity
from entitygate.infrastructure.security import JWTService
from entitygate.infrastructure.security.jwt_service import INVALID_TOKEN

SECRET = "a" * 32


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET)


@pytest.mark.unit
class TestJWTService:
    def test_round_trip_yields_identity(self, service):
        token = service.generate_access_token(user_id=7)

        result = service.validate_access_token(token)

        assert result == Success(value=CallerIdentity(user_id=7))

    def test_tokens_are_unique(self, service):
        assert service.generate_access_token(7) != service.generate_access_token(7)

    def test_garbage_token_is_invalid(self, service):
        assert service.validate_access_token("not-a-jwt") == Failure(
            error=INVALID_TOKEN
        )

    def test_wrong_secret_is_invalid(self, service):
        token = JWTService(secret_key="b" * 32).generate_access_token(user_id=7)

        assert isinstance(service.validate_access_token(token), Failure)

    def test_expired_token_is_invalid(self):
        expired = JWTService(secret_key=SECRET, expiration_minutes=-1)
        token = expired.generate_access_token(user_id=7)

        assert isinstance(expired.validate_access_token(token), Failure)

    def test_non_integer_subject_is_invalid(self, service):
        token = jwt.encode(
            {"sub": "alice", "exp": 4102444800}, SECRET, algorithm="HS256"
        )

        assert service.validate_access_token(token) == Failure(error=INVALID_TOKEN)

    def test_missing_subject_is_invalid(self, service):
        token = jwt.encode({"exp": 4102444800}, SECRET, algorithm="HS256")

        assert isinstance(service.validate_access_token(token), Failure)

    def test_short_secret_is_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="short")
