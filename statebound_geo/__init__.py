"""
Statebound Geometry
===================

Bounded Context: Pure geospatial types and spatial queries.

Responsibilities:
- Coordinate value type ([lng, lat] convention)
- Polygon ring validation, orientation and point containment
- Region (name + border) construction
- NO state, NO locking, NO logging

Design Philosophy:
- Immutable data structures (frozen dataclasses)
- Fail-fast validation with tagged errors (ErrorKind)
- Zero side effects

Usage:

    from statebound_geo import Region, lat_lng

    pa = Region.create("Pennsylvania", ring)
    pa.contains(lat_lng(40.16, -75.06))
"""

from statebound_geo.coordinate import Coordinate, CoordinateDecodeError, lat_lng
from statebound_geo.errors import (
    ErrorKind,
    InvalidGeometryError,
    InvalidRegionError,
    NameTooShortError,
    RegionError,
    RighthandRuleError,
    RingTooShortError,
    RingUnclosedError,
)
from statebound_geo.polygon import Polygon
from statebound_geo.region import Region

__all__ = [
    # Types
    "Coordinate",
    "Polygon",
    "Region",
    "lat_lng",
    # Errors
    "ErrorKind",
    "RegionError",
    "CoordinateDecodeError",
    "InvalidGeometryError",
    "RingTooShortError",
    "RingUnclosedError",
    "RighthandRuleError",
    "NameTooShortError",
    "InvalidRegionError",
]

__version__ = "1.0.0"
