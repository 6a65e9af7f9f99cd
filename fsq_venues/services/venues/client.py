"""Async wrapper around the Foursquare v2 ``/venues`` endpoints."""
from __future__ import annotations

import logging
from typing import Any, NoReturn, Optional

from fsq_venues.core.config import ApiSettings
from fsq_venues.core.types import Coordinate, Params, QueryParams
from fsq_venues.services.foursquare.client import ApiInvoker, create_foursquare_core
from fsq_venues.services.foursquare.errors import VenuesValidationError


class VenuesClient:
    """Validate venue arguments and hand each call to the shared invoker.

    Every method is a coroutine. Missing required arguments raise
    :class:`VenuesValidationError` when awaited, before any request is built;
    errors coming back from the invoker propagate unchanged.
    """

    def __init__(self, invoker: ApiInvoker, *, logger: Optional[logging.Logger] = None) -> None:
        self.invoker = invoker
        self.logger = logger or logging.getLogger(__name__)

    async def aclose(self) -> None:
        """Close the invoker if it owns any resources."""

        aclose = getattr(self.invoker, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "VenuesClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _fail(self, message: str) -> NoReturn:
        self.logger.error(message)
        raise VenuesValidationError(message)

    def _with_ll(self, operation: str, lat: Coordinate, lng: Coordinate, params: Params) -> QueryParams:
        if not lat or not lng:
            self._fail(f"Venues.{operation}: lat and lng are both required.")
        query = dict(params or {})
        query["ll"] = f"{lat},{lng}"
        return query

    async def get_categories(self, params: Params = None, access_token: Optional[str] = None) -> Any:
        """Retrieve the hierarchical list of venue categories."""

        self.logger.debug("ENTERING: Venues.getCategories")
        return await self.invoker.call_api(
            "/venues/categories", access_token, "categories", dict(params or {})
        )

    async def explore(
        self,
        lat: Coordinate,
        lng: Coordinate,
        params: Params = None,
        access_token: Optional[str] = None,
    ) -> Any:
        """Return recommended venues around ``lat``/``lng``.

        The result is a mapping holding whichever of ``keywords``, ``groups``
        and ``warning`` the API returned.
        """

        self.logger.debug("ENTERING: Venues.explore")
        query = self._with_ll("explore", lat, lng, params)
        return await self.invoker.call_api(
            "/venues/explore", access_token, ("keywords", "groups", "warning"), query
        )

    async def search(
        self,
        lat: Coordinate,
        lng: Coordinate,
        params: Params = None,
        access_token: Optional[str] = None,
    ) -> Any:
        """Search venues near ``lat``/``lng``."""

        self.logger.debug("ENTERING: Venues.search")
        query = self._with_ll("search", lat, lng, params)
        return await self.invoker.call_api("/venues/search", access_token, "groups", query)

    async def get_trending(
        self,
        lat: Coordinate,
        lng: Coordinate,
        params: Params = None,
        access_token: Optional[str] = None,
    ) -> Any:
        """Return nearby venues with the most people currently checked in."""

        self.logger.debug("ENTERING: Venues.getTrending")
        query = self._with_ll("getTrending", lat, lng, params)
        return await self.invoker.call_api("/venues/trending", access_token, "venues", query)

    async def get_venue(self, venue_id: str, access_token: Optional[str] = None) -> Any:
        """Retrieve the full record of a single venue."""

        self.logger.debug("ENTERING: Venues.getVenue")
        if not venue_id:
            self._fail("Venues.getVenue: venueId is required.")
        return await self.invoker.call_api(f"/venues/{venue_id}", access_token, "venue", None)

    async def get_venue_aspect(
        self,
        venue_id: str,
        aspect: str,
        params: Params = None,
        access_token: Optional[str] = None,
    ) -> Any:
        """Retrieve one named sub-resource of a venue, e.g. ``tips`` or ``menu``."""

        self.logger.debug("ENTERING: Venues.getVenueAspect")
        if not venue_id:
            self._fail("Venues.getVenueAspect: venueId is required.")
        if not aspect:
            self._fail("Venues.getVenueAspect: aspect is required.")
        return await self.invoker.call_api(
            f"/venues/{venue_id}/{aspect}", access_token, aspect, dict(params or {})
        )

    async def get_here_now(
        self, venue_id: str, params: Params = None, access_token: Optional[str] = None
    ) -> Any:
        """Retrieve check-ins of users currently at the venue."""

        self.logger.debug("ENTERING: Venues.getHereNow")
        if not venue_id:
            self._fail("Venues.getHereNow: venueId is required.")
        return await self.invoker.call_api(
            f"/venues/{venue_id}/herenow", access_token, "hereNow", dict(params or {})
        )

    async def get_tips(
        self, venue_id: str, params: Params = None, access_token: Optional[str] = None
    ) -> Any:
        self.logger.debug("ENTERING: Venues.getTips")
        if not venue_id:
            self._fail("Venues.getTips: venueId is required.")
        return await self.get_venue_aspect(venue_id, "tips", params, access_token)

    async def get_photos(
        self,
        venue_id: str,
        group: Optional[str] = None,
        params: Params = None,
        access_token: Optional[str] = None,
    ) -> Any:
        """Retrieve venue photos; ``group`` defaults to ``"checkin"``."""

        self.logger.debug("ENTERING: Venues.getPhotos")
        if not venue_id:
            self._fail("Venues.getPhotos: venueId is required.")
        query = dict(params or {})
        query["group"] = group or "checkin"
        return await self.get_venue_aspect(venue_id, "photos", query, access_token)

    async def get_links(
        self, venue_id: str, params: Params = None, access_token: Optional[str] = None
    ) -> Any:
        self.logger.debug("ENTERING: Venues.getLinks")
        if not venue_id:
            self._fail("Venues.getLinks: venueId is required.")
        return await self.get_venue_aspect(venue_id, "links", params, access_token)


def create_venues_client(settings: ApiSettings) -> VenuesClient:
    """Instantiate the venues client on top of a fresh Foursquare transport."""

    return VenuesClient(create_foursquare_core(settings))
