"""Caller identity dependency.

Every entity route accepts anonymous callers; the dispatch pipeline
decides what an anonymous caller may do. A missing, malformed or expired
bearer token therefore yields ``None`` rather than a 401 here.

Usage:
    @router.get("/{entity_id}")
    async def read_entity(
        identity: Annotated[CallerIdentity | None, Depends(get_caller_identity)],
    ):
        ...
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from entitygate.core.container import get_jwt_service
from entitygate.core.result import Success
from entitygate.domain.identity import CallerIdentity
from entitygate.infrastructure.security import JWTService

bearer_scheme_optional = HTTPBearer(auto_error=False)


async def get_caller_identity(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme_optional)
    ],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> CallerIdentity | None:
    """Get the caller identity from the bearer token, if any.

    Args:
        credentials: Bearer token from Authorization header (optional).
        jwt_service: JWT service (injected).

    Returns:
        CallerIdentity for a valid token, None otherwise.
    """
    if credentials is None:
        return None

    result = jwt_service.validate_access_token(credentials.credentials)
    if isinstance(result, Success):
        return result.value
    return None
