"""
GeoJSON Schemas
===============

Bounded Context: Wire format for regions (RFC 7946)

Design:
- Frozen dataclasses with to_dict() / from_dict()
- Geometry holds validated Polygon rings (one exterior ring, no holes)
- Feature properties carry the region name under "state"
- CreateRegionRequest: the {"state": ..., "border": ...} request body

Message Flow:
    JSON -> CreateRegionRequest -> Region -> RegionStore
    RegionStore -> Region -> Feature / FeatureCollection -> JSON
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

from statebound_geo import Polygon, Region


class SchemaValidationError(ValueError):
    """Raised when a document does not match the expected GeoJSON shape."""


class GeoJSONType(str, Enum):
    POLYGON = "Polygon"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"


def _require_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise SchemaValidationError(f"invalid json: {what} must be an object")
    return data


def _require_type(data: Dict[str, Any], expected: GeoJSONType) -> None:
    if data.get("type") != expected.value:
        raise SchemaValidationError(
            f"invalid json: expected type {expected.value!r}, got {data.get('type')!r}"
        )


@dataclass(frozen=True)
class Geometry:
    """
    Polygon geometry.

    Attributes:
        coordinates: Rings of the polygon (only the exterior ring is used)
    """
    coordinates: Tuple[Polygon, ...]

    def __post_init__(self):
        object.__setattr__(self, "coordinates", tuple(self.coordinates))
        if not self.coordinates:
            raise SchemaValidationError("invalid json: polygon geometry has no rings")

    @property
    def exterior(self) -> Polygon:
        return self.coordinates[0]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "type": GeoJSONType.POLYGON.value,
            "coordinates": [ring.to_list() for ring in self.coordinates],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Geometry":
        """
        Deserialize from dict. Each ring goes through Polygon.from_list().

        Raises:
            SchemaValidationError: If the document is not a Polygon geometry
            CoordinateDecodeError, InvalidGeometryError: If a ring is invalid
        """
        data = _require_mapping(data, "geometry")
        _require_type(data, GeoJSONType.POLYGON)
        rings = data.get("coordinates")
        if not isinstance(rings, list):
            raise SchemaValidationError("invalid json: geometry coordinates must be a list")
        return cls(coordinates=tuple(Polygon.from_list(ring) for ring in rings))


@dataclass(frozen=True)
class Feature:
    """
    GeoJSON feature for one region.

    Example:
        >>> feature = feature_from_region(region)
        >>> feature.to_dict()["properties"]
        {'state': 'Pennsylvania'}
    """
    state: str
    geometry: Geometry

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": GeoJSONType.FEATURE.value,
            "properties": {"state": self.state},
            "geometry": self.geometry.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Feature":
        data = _require_mapping(data, "feature")
        _require_type(data, GeoJSONType.FEATURE)
        properties = _require_mapping(data.get("properties"), "properties")
        state = properties.get("state")
        if not isinstance(state, str):
            raise SchemaValidationError("invalid json: properties.state is required")
        return cls(state=state, geometry=Geometry.from_dict(data.get("geometry")))

    def to_region(self) -> Region:
        """Build the Region (raises InvalidRegionError)."""
        return Region.create(self.state, self.geometry.exterior)


@dataclass(frozen=True)
class FeatureCollection:
    """Collection of region features."""
    features: List[Feature] = field(default_factory=list)

    @property
    def feature_count(self) -> int:
        return len(self.features)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": GeoJSONType.FEATURE_COLLECTION.value,
            "features": [feature.to_dict() for feature in self.features],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeatureCollection":
        data = _require_mapping(data, "feature collection")
        _require_type(data, GeoJSONType.FEATURE_COLLECTION)
        features = data.get("features")
        if not isinstance(features, list):
            raise SchemaValidationError("invalid json: features must be a list")
        return cls(features=[Feature.from_dict(item) for item in features])

    def to_regions(self) -> List[Region]:
        return [feature.to_region() for feature in self.features]


@dataclass(frozen=True)
class CreateRegionRequest:
    """
    Request body for creating a region.

    Example:
        >>> request = CreateRegionRequest.from_dict({
        ...     "state": "ohio",
        ...     "border": [[-84.8, 39.1], [-84.8, 41.7], [-80.5, 41.9],
        ...                [-80.5, 40.6], [-84.8, 39.1]]
        ... })
        >>> store.create(request.to_region())
    """
    state: str
    border: Polygon

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateRegionRequest":
        """
        Deserialize request body.

        Raises:
            SchemaValidationError: If "state" or "border" is missing
            CoordinateDecodeError, InvalidGeometryError: If the border is invalid
        """
        data = _require_mapping(data, "request")

        missing = []
        if data.get("state") is None:
            missing.append("name is required")
        if data.get("border") is None:
            missing.append("border is required")
        if missing:
            raise SchemaValidationError(f"invalid json: {', '.join(missing)}")

        if not isinstance(data["state"], str):
            raise SchemaValidationError("invalid json: state must be a string")
        if not isinstance(data["border"], list):
            raise SchemaValidationError("invalid json: border must be a list")

        return cls(state=data["state"], border=Polygon.from_list(data["border"]))

    def to_region(self) -> Region:
        return Region.create(self.state, self.border)


def feature_from_region(region: Region) -> Feature:
    return Feature(state=region.name, geometry=Geometry(coordinates=(region.border,)))


def collection_from_regions(regions: Iterable[Region]) -> FeatureCollection:
    return FeatureCollection(features=[feature_from_region(region) for region in regions])
