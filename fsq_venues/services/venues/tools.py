from typing import Any, Dict, Optional

from langchain_core.tools import StructuredTool

from fsq_venues.services.venues.client import VenuesClient
from fsq_venues.services.venues.schemas import (
    CategoriesInput,
    NearbyVenuesInput,
    VenueAspectInput,
    VenueInput,
    VenuePhotosInput,
)


def create_venues_tools(
    client: VenuesClient, *, access_token: Optional[str] = None
) -> Dict[str, StructuredTool]:
    """Generate the LangChain tools backed by the venues client.

    Args:
        client: An initialized VenuesClient instance
        access_token: Optional user token forwarded on every call; userless
            auth is used when omitted

    Returns:
        Dict[str, StructuredTool]: tools keyed by tool name
    """

    async def categories(**kwargs) -> Any:
        payload = CategoriesInput(**kwargs)
        return await client.get_categories(payload.params, access_token)

    async def explore(**kwargs) -> Any:
        payload = NearbyVenuesInput(**kwargs)
        return await client.explore(payload.lat, payload.lng, payload.to_params(), access_token)

    async def search(**kwargs) -> Any:
        payload = NearbyVenuesInput(**kwargs)
        return await client.search(payload.lat, payload.lng, payload.to_params(), access_token)

    async def trending(**kwargs) -> Any:
        payload = NearbyVenuesInput(**kwargs)
        return await client.get_trending(payload.lat, payload.lng, payload.to_params(), access_token)

    async def details(**kwargs) -> Any:
        payload = VenueInput(**kwargs)
        return await client.get_venue(payload.venue_id, access_token)

    async def tips(**kwargs) -> Any:
        payload = VenueAspectInput(**kwargs)
        return await client.get_tips(payload.venue_id, payload.to_params(), access_token)

    async def photos(**kwargs) -> Any:
        payload = VenuePhotosInput(**kwargs)
        return await client.get_photos(
            payload.venue_id, payload.group, payload.to_params(), access_token
        )

    async def links(**kwargs) -> Any:
        payload = VenueAspectInput(**kwargs)
        return await client.get_links(payload.venue_id, payload.to_params(), access_token)

    async def here_now(**kwargs) -> Any:
        payload = VenueAspectInput(**kwargs)
        return await client.get_here_now(payload.venue_id, payload.to_params(), access_token)

    specs = [
        (categories, "venue_categories_tool", "List the Foursquare venue category tree.", CategoriesInput),
        (explore, "explore_venues_tool", "Recommend venues around a lat/lng. Optional: query, radius (m), limit, section (food, drinks, coffee, arts...).", NearbyVenuesInput),
        (search, "search_venues_tool", "Search venues near a lat/lng. Optional: query, radius (m), limit.", NearbyVenuesInput),
        (trending, "trending_venues_tool", "Venues near a lat/lng with the most people checked in right now.", NearbyVenuesInput),
        (details, "venue_details_tool", "Full details for one venue by venue_id.", VenueInput),
        (tips, "venue_tips_tool", "Tips left at a venue. Input: venue_id, optional limit/offset.", VenueAspectInput),
        (photos, "venue_photos_tool", "Photos of a venue. Input: venue_id, optional group (checkin/venue), limit, offset.", VenuePhotosInput),
        (links, "venue_links_tool", "External links for a venue. Input: venue_id, optional limit/offset.", VenueAspectInput),
        (here_now, "venue_here_now_tool", "Users currently checked in at a venue. Input: venue_id, optional limit/offset.", VenueAspectInput),
    ]
    return {
        name: StructuredTool.from_function(
            coroutine=coroutine,
            name=name,
            description=description,
            args_schema=schema,
        )
        for coroutine, name, description, schema in specs
    }
