"""
Configuration schema for the statebound CLI.

Defines the YAML configuration: logging level and the regions used to seed
the in-memory store (inline, or from a GeoJSON FeatureCollection file).
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from statebound_geo import Coordinate, Region
from statebound_geojson import FeatureCollection


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class RegionConfig:
    """Inline region definition (border as [lng, lat] pairs)."""

    name: str
    border: List[Tuple[float, float]]

    def __post_init__(self):
        """Validate region configuration."""
        if not isinstance(self.name, str):
            raise ValueError(f"region name must be a string, got {self.name!r}")
        if not self.name:
            raise ValueError("region name cannot be empty")
        if not self.border:
            raise ValueError(f"Region '{self.name}' must have a border")
        for pair in self.border:
            if len(pair) != 2:
                raise ValueError(
                    f"Region '{self.name}' border positions must be [lng, lat], got {list(pair)}"
                )

    def to_region(self) -> Region:
        """Build the Region (raises InvalidRegionError)."""
        coords = [Coordinate.from_list(list(pair)) for pair in self.border]
        return Region.create(self.name, coords)


@dataclass(frozen=True)
class AppConfig:
    """
    Main configuration for the CLI.

    Loaded from YAML and validated at startup. Immutable after construction.
    """

    log_level: str = "INFO"
    seed_geojson: Optional[Path] = None
    regions: List[RegionConfig] = field(default_factory=list)

    def __post_init__(self):
        """Validate configuration."""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

        if self.seed_geojson is not None and not self.seed_geojson.is_file():
            raise FileNotFoundError(f"Seed GeoJSON file not found: {self.seed_geojson}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    def load_regions(self) -> List[Region]:
        """
        Build every configured region: GeoJSON seed file first, then inline.

        Raises:
            ValueError: If the seed file is not valid JSON / GeoJSON
            InvalidRegionError: If a region is invalid
        """
        regions: List[Region] = []

        if self.seed_geojson is not None:
            try:
                with open(self.seed_geojson) as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {self.seed_geojson}: {e}") from e
            regions.extend(FeatureCollection.from_dict(data).to_regions())

        regions.extend(region.to_region() for region in self.regions)
        return regions

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: INFO
            seed_geojson: "states.geojson"   # relative to this file

            regions:
              - name: "pennsylvania"
                border:
                  - [-77.475793, 39.719623]
                  - [-80.524269, 39.721209]
                  - [-80.520592, 41.986872]
                  - [-74.705273, 41.375059]
                  - [-75.142901, 39.881602]
                  - [-77.475793, 39.719623]

        Raises:
            FileNotFoundError: If the YAML (or seed) file doesn't exist
            ValueError: If the YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config in {yaml_path}: expected a mapping")

        seed_geojson = data.get("seed_geojson")
        if seed_geojson is not None:
            if not isinstance(seed_geojson, str):
                raise ValueError(
                    f"Invalid seed_geojson in {yaml_path}: expected a path, got {seed_geojson!r}"
                )
            seed_geojson = Path(seed_geojson)
            if not seed_geojson.is_absolute():
                seed_geojson = yaml_path.parent / seed_geojson

        try:
            regions = [
                RegionConfig(
                    name=r["name"],
                    border=[tuple(pair) for pair in r["border"]],
                )
                for r in data.get("regions") or []
            ]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid region entry in {yaml_path}: {e}") from e

        return cls(
            log_level=str(data.get("log_level", "INFO")),
            seed_geojson=seed_geojson,
            regions=regions,
        )
