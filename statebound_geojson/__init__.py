"""
Statebound GeoJSON Schemas
==========================

Bounded Context: Data Structures

Immutable, typed GeoJSON structures for regions.

Public API
----------
    Geometry: Polygon geometry (validated rings)
    Feature: One region ({"state": name} properties)
    FeatureCollection: Several regions
    CreateRegionRequest: {"state": ..., "border": ...} request body
    feature_from_region / collection_from_regions: Region -> GeoJSON
    SchemaValidationError: Malformed document
"""

from .schemas import (
    CreateRegionRequest,
    Feature,
    FeatureCollection,
    GeoJSONType,
    Geometry,
    SchemaValidationError,
    collection_from_regions,
    feature_from_region,
)

__all__ = [
    'Geometry',
    'Feature',
    'FeatureCollection',
    'GeoJSONType',
    'CreateRegionRequest',
    'SchemaValidationError',
    'feature_from_region',
    'collection_from_regions',
]
