"""
Polygon Module
==============

Single linear ring (no holes) with validation, orientation and containment.

Design:
- Immutable (frozen dataclass over a tuple of Coordinates)
- Two entry points on purpose:
    Polygon.build()    -> shape errors are fatal, counter-clockwise rings
                          are silently reversed to clockwise
    Polygon.validate() -> shape errors, then RighthandRuleError for a
                          counter-clockwise ring (no repair)
- Orientation from the spherical turning angle (numpy, unit vectors)
- Containment by ray casting toward increasing longitude

Ring rules follow RFC 7946 section 3.1.6 (linear rings), with the exterior
ring required to be clockwise.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from statebound_geo.coordinate import Coordinate, CoordinateDecodeError
from statebound_geo.errors import RighthandRuleError, RingTooShortError, RingUnclosedError


MIN_RING_LENGTH = 4

# Largest magnitude a turning angle may report (2*pi less rounding slack).
MAX_CURVATURE = 2 * math.pi - 4 * np.finfo(np.float64).eps


@dataclass(frozen=True)
class Polygon:
    """
    Ordered ring of coordinates, first == last.

    Constructing ``Polygon(coords)`` directly performs no checks; it is how an
    externally supplied ring is held for ``validate()``. Use ``Polygon.build()``
    to get a checked, clockwise ring.

    Attributes:
        coordinates: Ring positions, closing position included

    Example:
        >>> ring = [Coordinate(0, 0), Coordinate(0, 10), Coordinate(10, 10),
        ...         Coordinate(10, 0), Coordinate(0, 0)]
        >>> square = Polygon.build(ring)
        >>> square.contains(Coordinate(5, 5))
        True
    """

    coordinates: Tuple[Coordinate, ...]

    def __post_init__(self):
        # Accept any iterable, store as tuple so the ring cannot be mutated
        object.__setattr__(self, "coordinates", tuple(self.coordinates))

    @classmethod
    def build(cls, coordinates: Iterable[Coordinate]) -> "Polygon":
        """
        Construct a clockwise polygon.

        Raises:
            RingTooShortError: Fewer than 4 positions
            RingUnclosedError: First and last positions differ
        """
        polygon = cls(tuple(coordinates))
        polygon._validate_shape()

        if polygon.turning_angle > 0:
            return cls(polygon.coordinates[::-1])
        return polygon

    def validate(self) -> None:
        """
        Check shape and orientation without repairing anything.

        Raises:
            RingTooShortError: Fewer than 4 positions
            RingUnclosedError: First and last positions differ
            RighthandRuleError: Ring winds counter-clockwise
        """
        self._validate_shape()

        angle = self.turning_angle
        if angle > 0:
            raise RighthandRuleError(angle)

    def _validate_shape(self) -> None:
        if len(self.coordinates) < MIN_RING_LENGTH:
            raise RingTooShortError()
        if self.coordinates[0] != self.coordinates[-1]:
            raise RingUnclosedError()

    @property
    def turning_angle(self) -> float:
        """Signed turning angle of the ring; positive means counter-clockwise."""
        return turning_angle(self.coordinates)

    def contains(self, point: Coordinate) -> bool:
        """
        Ray casting point-in-polygon test.

        A horizontal ray is cast from the point toward increasing longitude;
        an odd number of edge crossings means the point is inside.
        """
        inside = False
        for start, end in zip(self.coordinates, self.coordinates[1:]):
            if ray_intersects_edge(point, start, end):
                inside = not inside
        return inside

    def to_list(self) -> List[List[float]]:
        """Serialize to a list of [lng, lat] pairs."""
        return [coord.to_list() for coord in self.coordinates]

    @classmethod
    def from_list(cls, data: Sequence[Any]) -> "Polygon":
        """
        Deserialize a list of [lng, lat] pairs through Polygon.build().

        Raises:
            CoordinateDecodeError: If an element is not a [lng, lat] pair
            InvalidGeometryError: If the ring shape is invalid
        """
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise CoordinateDecodeError(
                f"invalid polygon: expecting a list of [longitude, latitude], got {data!r}"
            )
        return cls.build(Coordinate.from_list(item) for item in data)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __getitem__(self, index):
        return self.coordinates[index]

    def __str__(self) -> str:
        return "{" + ", ".join(str(coord) for coord in self.coordinates) + "}"


def ray_intersects_edge(point: Coordinate, p1: Coordinate, p2: Coordinate) -> bool:
    """
    Check whether the eastward ray from point crosses the edge p1-p2.

    Args:
        point: Ray origin
        p1, p2: Edge endpoints (any order)

    Returns:
        True if the ray crosses the edge
    """
    a, b = (p1, p2) if p1.lat < p2.lat else (p2, p1)

    # Vertex-aligned rays would be counted twice (or missed)
    lat = point.lat
    while lat == a.lat or lat == b.lat:
        lat = math.nextafter(lat, math.inf)
    lng = point.lng

    if lat < a.lat or lat > b.lat:
        return False

    if a.lng > b.lng:
        if lng > a.lng:
            return False
        if lng < b.lng:
            return True
    else:
        if lng > b.lng:
            return False
        if lng < a.lng:
            return True

    return _slope(lat - a.lat, lng - a.lng) >= _slope(b.lat - a.lat, b.lng - a.lng)


def _slope(d_lat: float, d_lng: float) -> float:
    """d_lat / d_lng with IEEE semantics for a zero denominator."""
    if d_lng == 0:
        if d_lat == 0 or math.isnan(d_lat):
            return math.nan
        return math.copysign(math.inf, d_lat) * math.copysign(1.0, d_lng)
    return d_lat / d_lng


def turning_angle(coordinates: Sequence[Coordinate]) -> float:
    """
    Sum of signed turning angles of a closed ring on the unit sphere.

    The closing position is dropped, each vertex is projected to a unit
    vector, and the turn at every vertex is measured between the normals of
    its incoming and outgoing great-circle edges. Positive = counter-clockwise.

    Args:
        coordinates: Closed ring (first == last)

    Returns:
        Turning angle in radians, clamped to +/- MAX_CURVATURE.
        0.0 for rings with fewer than 3 distinct vertices.
    """
    vertices = coordinates[:-1]
    if len(vertices) < 3:
        return 0.0

    points = _unit_vectors(vertices)
    previous = np.roll(points, 1, axis=0)
    following = np.roll(points, -1, axis=0)

    incoming = np.cross(previous, points)
    outgoing = np.cross(points, following)

    # Angle between edge normals: atan2(|n1 x n2|, n1 . n2)
    magnitude = np.arctan2(
        np.linalg.norm(np.cross(incoming, outgoing), axis=1),
        np.einsum("ij,ij->i", incoming, outgoing),
    )

    # Left turn when (following x previous) . point > 0
    left = np.einsum("ij,ij->i", np.cross(following, previous), points) > 0
    angles = np.where(left, magnitude, -magnitude)

    total = math.fsum(angles.tolist())
    return max(-MAX_CURVATURE, min(MAX_CURVATURE, total))


def _unit_vectors(coordinates: Sequence[Coordinate]) -> np.ndarray:
    """Nx3 array of unit vectors for the given coordinates."""
    lat = np.radians([coord.lat for coord in coordinates])
    lng = np.radians([coord.lng for coord in coordinates])
    cos_lat = np.cos(lat)
    return np.column_stack((cos_lat * np.cos(lng), cos_lat * np.sin(lng), np.sin(lat)))
