"""Foursquare venues API integration.

This module provides the client and tool factories for the Foursquare v2
venues endpoints: search, explore, trending, categories and per-venue aspects
such as tips, photos, links and here-now.

Public API:
    - VenuesClient: Async client validating arguments before each call
    - create_venues_client: Factory function to create VenuesClient
    - create_venues_tools: Factory function to create LangChain tools
    - NearbyVenuesInput, VenueInput, VenueAspectInput, VenuePhotosInput: tool schemas
"""
from fsq_venues.services.venues.client import VenuesClient, create_venues_client
from fsq_venues.services.venues.tools import create_venues_tools
from fsq_venues.services.venues.schemas import (
    CategoriesInput,
    NearbyVenuesInput,
    VenueAspectInput,
    VenueInput,
    VenuePhotosInput,
)

__all__ = [
    "VenuesClient",
    "create_venues_client",
    "create_venues_tools",
    "CategoriesInput",
    "NearbyVenuesInput",
    "VenueInput",
    "VenueAspectInput",
    "VenuePhotosInput",
]
