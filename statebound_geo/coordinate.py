"""
Coordinate Module
=================

Immutable longitude/latitude pair.

Design:
- Fields ordered (lng, lat) to match the external [longitude, latitude] array
- lat_lng() factory takes arguments in natural reading order
- No range validation: any float is accepted
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, List, Sequence


class CoordinateDecodeError(ValueError):
    """Raised when a serialized coordinate is not a [lng, lat] pair."""


def format_general(value: float) -> str:
    """
    Format a float with the shortest round-trip digits, general style.

    Plain decimal notation is used while the decimal exponent is in [-4, 6),
    otherwise exponent notation with an uppercase E and a two digit exponent.

    Example:
        >>> format_general(-75.1)
        '-75.1'
        >>> format_general(1500000.0)
        '1.5E+06'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    number = Decimal(repr(float(value))).normalize()
    exponent = number.adjusted()
    if -4 <= exponent < 6:
        return format(number, "f")

    sign, digits, _ = number.as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    return f"{'-' if sign else ''}{mantissa}E{exponent:+03d}"


@dataclass(frozen=True)
class Coordinate:
    """
    A single point on the sphere.

    Attributes:
        lng: Longitude in degrees
        lat: Latitude in degrees

    Example:
        >>> coord = lat_lng(40.2, -75.1)
        >>> str(coord)
        '[-75.1, 40.2]'
        >>> coord.to_list()
        [-75.1, 40.2]
    """

    lng: float
    lat: float

    @classmethod
    def from_lat_lng(cls, latitude: float, longitude: float) -> "Coordinate":
        """Create a coordinate from (latitude, longitude)."""
        return cls(lng=float(longitude), lat=float(latitude))

    def format(self) -> str:
        return f"[{format_general(self.lng)}, {format_general(self.lat)}]"

    def __str__(self) -> str:
        return self.format()

    def to_list(self) -> List[float]:
        """Serialize to a JSON-compatible [lng, lat] list."""
        return [self.lng, self.lat]

    @classmethod
    def from_list(cls, data: Sequence[Any]) -> "Coordinate":
        """
        Deserialize from a [lng, lat] sequence.

        Raises:
            CoordinateDecodeError: If data is not a 2-element numeric sequence
        """
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise CoordinateDecodeError(
                f"invalid coordinate: expecting [longitude, latitude], got {data!r}"
            )
        if len(data) != 2:
            raise CoordinateDecodeError(
                "invalid coordinate: expecting latitude and longitude"
            )
        for value in data:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise CoordinateDecodeError(
                    f"invalid coordinate: non-numeric value {value!r}"
                )

        lng, lat = data
        return cls.from_lat_lng(lat, lng)


def lat_lng(latitude: float, longitude: float) -> Coordinate:
    """Shorthand for Coordinate.from_lat_lng."""
    return Coordinate.from_lat_lng(latitude, longitude)
