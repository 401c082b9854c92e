"""
Upstream failure types raised by the vendor API services.

Each error carries a user-facing message and the HTTP status the routers
answer with when it escapes a request handler.
"""
from typing import Optional

from fastapi import HTTPException


class UpstreamAPIError(Exception):
    status_code = 502
    default_message = "Upstream service request failed."

    def __init__(self, message: Optional[str] = None, provider: str = "", upstream_status: Optional[int] = None):
        self.message = message or self.default_message
        self.provider = provider
        self.upstream_status = upstream_status
        super().__init__(self.message)


class RateLimitError(UpstreamAPIError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class NotFoundError(UpstreamAPIError):
    status_code = 404
    default_message = "No results found."


class AuthError(UpstreamAPIError):
    status_code = 502
    default_message = "Upstream service authentication failed."


class ServerError(UpstreamAPIError):
    status_code = 502

    def __init__(self, message: Optional[str] = None, provider: str = "", upstream_status: Optional[int] = None):
        if message is None and upstream_status is not None:
            message = f"Server error ({upstream_status}). Please try again later."
        super().__init__(message, provider, upstream_status)


class NetworkError(UpstreamAPIError):
    status_code = 503
    default_message = "Upstream service is unreachable."


class FeatureDisabledError(UpstreamAPIError):
    status_code = 503
    default_message = "Award search is currently disabled."


def http_exception_for(error: UpstreamAPIError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)
