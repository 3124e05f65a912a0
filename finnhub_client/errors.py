"""
Exceptions raised by the Finnhub client.

Callers can tell a request that never completed (TransportError) apart from
a response whose body did not match the expected model (DecodeError).
"""
from typing import Optional


class FinnhubError(Exception):
    """Base class for every error raised by this package."""


class TransportError(FinnhubError):
    """The HTTP request failed, timed out, or returned a non-2xx status."""

    def __init__(self, message: str, endpoint: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class DecodeError(FinnhubError):
    """The response body is not valid JSON or does not fit the target model."""

    def __init__(self, message: str, endpoint: str):
        super().__init__(message)
        self.endpoint = endpoint


class InvalidArgumentError(FinnhubError, ValueError):
    """A caller-supplied argument was rejected before any request was made."""
