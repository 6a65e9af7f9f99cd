"""Shared type aliases used across the service modules."""
from __future__ import annotations

from typing import Annotated, Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import Field, StringConstraints

Lat = Annotated[float, Field(ge=-90, le=90)]
Lon = Annotated[float, Field(ge=-180, le=180)]
Coordinate = Union[str, int, float]
Primitive = Union[str, int, float, bool, None]
Params = Optional[Mapping[str, Primitive]]
QueryParams = Dict[str, Any]
# A single envelope field, or an ordered tuple of fields.
ResponseKeys = Union[str, Tuple[str, ...]]
VenueId = Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]
