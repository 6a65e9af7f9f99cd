from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from fsq_venues.core.types import Lat, Lon, VenueId

ParamValue = Union[str, int, float, bool]


class CategoriesInput(BaseModel):
    """Arguments accepted by the venue categories tool."""
    params: Optional[Dict[str, ParamValue]] = Field(
        default=None, description="Extra query parameters, e.g. {'locale': 'en'}"
    )

    model_config = ConfigDict(extra="forbid")


class NearbyVenuesInput(BaseModel):
    """Coordinate-centred request shared by explore, search and trending."""
    lat: Lat = Field(description="Latitude of the search centre")
    lng: Lon = Field(description="Longitude of the search centre")
    query: Optional[str] = Field(default=None, description="Free-text term, e.g. 'coffee'")
    radius: Optional[int] = Field(default=None, ge=0, description="Radius in meters")
    limit: Optional[int] = Field(default=None, ge=1, le=50, description="Maximum results")
    section: Optional[str] = Field(
        default=None, description="Explore section, e.g. food, drinks, coffee, arts"
    )

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> Dict[str, ParamValue]:
        return self.model_dump(exclude={"lat", "lng"}, exclude_none=True)


class VenueInput(BaseModel):
    """Identifies a single Foursquare venue."""
    venue_id: VenueId = Field(description="Foursquare venue ID")

    model_config = ConfigDict(extra="forbid")


class VenueAspectInput(BaseModel):
    """Request for a paginated venue sub-resource such as tips or links."""
    venue_id: VenueId = Field(description="Foursquare venue ID")
    limit: Optional[int] = Field(default=None, ge=1, description="Maximum items to return")
    offset: Optional[int] = Field(default=None, ge=0, description="Items to skip")

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> Dict[str, ParamValue]:
        return self.model_dump(exclude={"venue_id"}, exclude_none=True)


class VenuePhotosInput(VenueAspectInput):
    """Request for venue photos, optionally restricted to one photo group."""
    group: Optional[str] = Field(
        default=None, description="Photo group, 'checkin' or 'venue' (default: checkin)"
    )

    def to_params(self) -> Dict[str, ParamValue]:
        return self.model_dump(exclude={"venue_id", "group"}, exclude_none=True)
