"""Exceptions raised by the Foursquare integration."""
from __future__ import annotations

from typing import Optional


class FoursquareError(RuntimeError):
    """Base error for transport and protocol failures."""


class FoursquareApiError(FoursquareError):
    """The API answered with an error envelope or an unusable body."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        error_type: Optional[str] = None,
        error_detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.error_type = error_type
        self.error_detail = error_detail


class VenuesValidationError(ValueError):
    """A required venue argument was missing; no request was sent."""
