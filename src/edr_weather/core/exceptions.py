"""
Error taxonomy for EDR fetching and coverage decoding.
"""

from typing import Optional


class EdrError(RuntimeError):
    """Base class for EDR client failures."""


class FetchError(EdrError):
    """Raised when an EDR request fails: bad status, network error or timeout."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedResponseError(EdrError):
    """Raised when a response cannot be decoded into the requested shape."""


class PartialDataWarning(UserWarning):
    """Non-fatal: a parameter is absent or a grid is shorter than its axes."""
