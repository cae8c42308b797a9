"""RFC 9457 error responses."""

from entitygate.presentation.errors.error_response_builder import ErrorResponseBuilder
from entitygate.presentation.errors.exception_handlers import (
    register_exception_handlers,
)
from entitygate.presentation.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
