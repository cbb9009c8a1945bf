"""Errors raised while fetching the adoption listing."""

from typing import Optional


class FetchError(Exception):
    """The listing could not be loaded. No partial data is available."""


class NetworkFailure(FetchError):
    """The request could not be completed."""


class BadResponse(FetchError):
    """The server answered with a non-success status code."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedPayload(FetchError):
    """The response body does not have the expected structure."""
