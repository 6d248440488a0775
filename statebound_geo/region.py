"""
Region Module
=============

A named geographic region (e.g. a US state) bounded by a Polygon.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from statebound_geo.coordinate import Coordinate
from statebound_geo.errors import (
    MIN_NAME_LENGTH,
    InvalidRegionError,
    NameTooShortError,
    RegionError,
)
from statebound_geo.polygon import Polygon


@dataclass(frozen=True)
class Region:
    """
    Name plus clockwise border.

    Build through Region.create() so the name and ring are checked; a
    partially built Region is never returned.

    Attributes:
        name: Display name
        border: Exterior ring
    """

    name: str
    border: Polygon

    @classmethod
    def create(cls, name: str, coordinates: Iterable[Coordinate]) -> "Region":
        """
        Validate the name and build the border (orientation auto-repaired).

        Raises:
            InvalidRegionError: Wrapping NameTooShortError or a geometry error
        """
        try:
            if len(name) < MIN_NAME_LENGTH:
                raise NameTooShortError(name)
            border = Polygon.build(coordinates)
        except RegionError as e:
            raise InvalidRegionError(e) from e

        return cls(name=name, border=border)

    def contains(self, point: Coordinate) -> bool:
        return self.border.contains(point)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to {"state": name, "border": [[lng, lat], ...]}."""
        return {"state": self.name, "border": self.border.to_list()}
