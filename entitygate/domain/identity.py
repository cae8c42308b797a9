"""Caller identity value object.

The identity is supplied once per request by the authentication
collaborator (see ``presentation.middleware.auth_dependencies``) and is
immutable for the rest of the request. An anonymous caller is
represented by ``None`` rather than by a sentinel identity.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class CallerIdentity:
    """Authenticated caller.

    Attributes:
        user_id: Numeric user identifier (JWT ``sub`` claim). Compared
            against the owner recorded for an entity.
    """

    user_id: int

    def __str__(self) -> str:
        return str(self.user_id)
