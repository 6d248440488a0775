"""Point-to-region lookup over a collection of regions."""

from typing import Iterable, List

from statebound_geo import Coordinate, Region


def regions_containing(regions: Iterable[Region], point: Coordinate) -> List[str]:
    """
    Names of the regions whose border contains point, in input order.

    Regions may overlap, so more than one name can be returned.
    """
    return [region.name for region in regions if region.contains(point)]
