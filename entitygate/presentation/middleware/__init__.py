"""HTTP middleware and request dependencies."""

from entitygate.presentation.middleware.auth_dependencies import get_caller_identity
from entitygate.presentation.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["TraceMiddleware", "get_caller_identity", "get_trace_id"]
