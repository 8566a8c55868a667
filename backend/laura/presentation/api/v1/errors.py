"""Translation of domain exceptions into HTTP errors."""

from fastapi import HTTPException, status

from laura.domain.exceptions import ConfigError, UpstreamError, ValidationError


def to_http_exception(error: UpstreamError | ValidationError) -> HTTPException:
    """Map a domain error onto the status code the API reports for it."""
    if isinstance(error, ConfigError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Server configuration error: {error.message}",
        )
    if isinstance(error, UpstreamError):
        return HTTPException(
            status_code=error.status_code
            if 400 <= error.status_code < 600
            else status.HTTP_502_BAD_GATEWAY,
            detail=f"[{error.provider}] {error.message}",
        )
    return HTTPException(status_code=error.status_code, detail=error.message)
