"""External service integrations.

- Foursquare: shared transport, auth and envelope handling
- Venues: venue search, explore, trending, categories and venue aspects

Example Usage:
    >>> from fsq_venues.core.config import ApiSettings
    >>> from fsq_venues.services import create_venues_client
    >>>
    >>> settings = ApiSettings.from_env()
    >>> async with create_venues_client(settings) as venues:
    ...     groups = await venues.search(40.7, -74.0, {"query": "coffee"})
"""

from fsq_venues.services.foursquare import (
    ApiInvoker,
    FoursquareCore,
    create_foursquare_core,
    FoursquareError,
    FoursquareApiError,
    VenuesValidationError,
)

from fsq_venues.services.venues import (
    VenuesClient,
    create_venues_client,
    create_venues_tools,
    NearbyVenuesInput,
    VenueInput,
    VenueAspectInput,
    VenuePhotosInput,
)

__all__ = [
    # Foursquare
    "ApiInvoker",
    "FoursquareCore",
    "create_foursquare_core",
    "FoursquareError",
    "FoursquareApiError",
    "VenuesValidationError",
    # Venues
    "VenuesClient",
    "create_venues_client",
    "create_venues_tools",
    "NearbyVenuesInput",
    "VenueInput",
    "VenueAspectInput",
    "VenuePhotosInput",
]
