"""Error response builder for RFC 9457 Problem Details.

Converts dispatch pipeline errors into problem-details JSON responses.

Status mapping:
    NotFoundError          -> 404
    UnauthenticatedError   -> 401 (+ WWW-Authenticate: Bearer)
    UnauthorizedError      -> 403
    ConflictError          -> 409
    StorageFailureError    -> 500 (generic detail)
    InternalError          -> 500 (generic detail)
    GuardFailedError       -> 500 (generic detail)

Messages of server-side errors are never sent to the caller.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from entitygate.core.config import settings
from entitygate.core.enums import ErrorCode
from entitygate.core.errors import DispatchError
from entitygate.presentation.errors.problem_details import ProblemDetails

GENERIC_SERVER_ERROR_DETAIL = (
    "An unexpected error occurred. Please contact support with the trace ID."
)


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_dispatch_error(
        ...     error=UnauthorizedError(),
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        403
    """

    @staticmethod
    def from_dispatch_error(
        error: DispatchError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a pipeline error to an RFC 9457 JSON response.

        Args:
            error: Authorization or model error returned by the pipeline
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder._get_status_code(error.code)

        detail = (
            GENERIC_SERVER_ERROR_DETAIL
            if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
            else error.message
        )

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error.code),
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if error.code == ErrorCode.UNAUTHENTICATED
            else None
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def _get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(ErrorCode.CONFLICT)
            409
        """
        mapping = {
            ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
            ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
            ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
            ErrorCode.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.GUARD_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_title(code: ErrorCode) -> str:
        """Get human-readable title for error code."""
        mapping = {
            ErrorCode.NOT_FOUND: "Resource Not Found",
            ErrorCode.UNAUTHENTICATED: "Authentication Required",
            ErrorCode.UNAUTHORIZED: "Access Denied",
            ErrorCode.CONFLICT: "Resource Conflict",
        }
        return mapping.get(code, "Internal Server Error")
