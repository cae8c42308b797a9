"""Security adapters."""

from entitygate.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
