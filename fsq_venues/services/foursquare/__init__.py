"""Shared Foursquare v2 transport.

Public API:
    - ApiInvoker: Protocol implemented by anything able to execute a call
    - FoursquareCore: httpx-based invoker handling auth and envelope unwrapping
    - create_foursquare_core: Factory building the invoker from ApiSettings
    - FoursquareError, FoursquareApiError, VenuesValidationError: error types
"""
from fsq_venues.services.foursquare.client import ApiInvoker, FoursquareCore, create_foursquare_core
from fsq_venues.services.foursquare.errors import (
    FoursquareApiError,
    FoursquareError,
    VenuesValidationError,
)

__all__ = [
    "ApiInvoker",
    "FoursquareCore",
    "create_foursquare_core",
    "FoursquareError",
    "FoursquareApiError",
    "VenuesValidationError",
]
