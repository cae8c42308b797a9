"""JWT bearer token service.

Turns an access token into the caller identity the dispatch pipeline
authorizes against. The ``sub`` claim holds the integer user id.

Token Structure:
    {
        "sub": "7",              # User ID
        "iat": 1700000000,       # Issued at
        "exp": 1700000900,       # Expires at
        "jti": "0190..."         # Unique token id
    }

Security:
    - HS256 with a secret of at least 32 bytes
    - Signature and expiry checked by PyJWT
    - Invalid tokens are a Failure, never an exception
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from entitygate.core.result import Failure, Result, Success
from entitygate.domain.identity import CallerIdentity

INVALID_TOKEN = "invalid_token"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        service = JWTService(secret_key=settings.secret_key)
        token = service.generate_access_token(user_id=7)

        match service.validate_access_token(token):
            case Success(value=identity):
                ...  # CallerIdentity(user_id=7)
            case Failure():
                ...  # treat caller as anonymous
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiration_minutes: int = 15,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Signing secret. MUST be at least 32 bytes.
            algorithm: HMAC algorithm name.
            expiration_minutes: Token lifetime for generated tokens.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expiration_minutes = expiration_minutes

    def generate_access_token(self, user_id: int) -> str:
        """Generate an access token for ``user_id``."""
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[CallerIdentity, str]:
        """Validate a token and extract the caller identity.

        Args:
            token: JWT access token string.

        Returns:
            Success(CallerIdentity) or Failure(INVALID_TOKEN) when the
            token is malformed, expired, badly signed or has a ``sub``
            that is not an integer.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except InvalidTokenError:
            return Failure(error=INVALID_TOKEN)

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            return Failure(error=INVALID_TOKEN)

        return Success(value=CallerIdentity(user_id=user_id))
