"""
Region Store - Thread-safe in-memory region collection.

This module provides the RegionStore class which owns the lifecycle of
Region objects (create, read, list, delete) for concurrent callers such as
request handler threads.

Thread Safety:
- One ReadWriteLock guards the name -> Region dict
- get_all(), get_by_name(), locate(): shared (read) lock
- create(), delete(): exclusive (write) lock
- Regions are immutable (frozen dataclass), so snapshots can be shared
- Logging happens after the lock is released

Persistence: none. The store is memory-only and starts empty.
"""

import re
from typing import Dict, List, Optional

from statebound_geo import Coordinate, Region

from statebound_store.errors import DuplicateRegionError, RegionNotFoundError
from statebound_store.locator import regions_containing
from statebound_store.logging import LogEvent, StructuredLogger, create_logger
from statebound_store.rwlock import ReadWriteLock


_WORD = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


def normalize_name(name: str) -> str:
    """
    Title-case a region name for use as the store key.

    Each word (run of letters and digits, apostrophes allowed inside) gets an
    upper-case first letter and lower-case remainder. Everything between
    words (whitespace, hyphens, punctuation) is kept as is.

    Example:
        >>> normalize_name("vALiD")
        'Valid'
        >>> normalize_name("winston-salem")
        'Winston-Salem'
        >>> normalize_name("foo/bar")
        'Foo/Bar'
    """
    return _WORD.sub(lambda match: match.group(0).capitalize(), name)


class RegionStore:
    """
    Thread-safe keyed collection of Regions.

    Names are case-insensitive: every name passes through normalize_name()
    before it is used as a key, and stored Regions carry the normalized name.

    Usage:
        store = RegionStore()
        store.create(Region.create("pennsylvania", ring))

        store.get_by_name("PENNSYLVANIA").name   # "Pennsylvania"
        store.locate(lat_lng(40.16, -75.06))     # ["Pennsylvania"]
        store.delete("Pennsylvania")
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        """
        Initialize empty store.

        Args:
            logger: Structured logger (default: "store" component logger)
        """
        self._regions: Dict[str, Region] = {}
        self._lock = ReadWriteLock()
        self.logger = logger or create_logger("store")

    def get_all(self) -> List[Region]:
        """
        Snapshot of every region. Order is unspecified.

        Thread-safe: Shared lock; returns a new list.
        """
        with self._lock.read_locked():
            return list(self._regions.values())

    def get_by_name(self, name: str) -> Region:
        """
        Look up a region by name (case-insensitive).

        Raises:
            RegionNotFoundError: If no region matches (carries ``name`` as given)

        Thread-safe: Shared lock.
        """
        key = normalize_name(name)
        with self._lock.read_locked():
            region = self._regions.get(key)

        if region is None:
            raise RegionNotFoundError(name)
        return region

    def create(self, region: Region) -> Region:
        """
        Validate and insert a region under its normalized name.

        The region is rebuilt from the normalized name and its border
        coordinates, so shape checks and orientation repair always run.

        Args:
            region: Region to add (name in any case)

        Returns:
            The stored Region (normalized name, clockwise border)

        Raises:
            InvalidRegionError: If the rebuilt region is invalid
            DuplicateRegionError: If the normalized name already exists

        Thread-safe: Exclusive lock around the duplicate check and insert.
        """
        name = normalize_name(region.name)
        created = Region.create(name, region.border.coordinates)

        with self._lock.write_locked():
            if created.name in self._regions:
                raise DuplicateRegionError(name)
            self._regions[created.name] = created
            count = len(self._regions)

        self.logger.info(
            event=LogEvent.REGION_CREATED,
            message=f"Region created: {created.name}",
            metadata={'name': created.name, 'vertices': len(created.border), 'count': count}
        )
        return created

    def delete(self, name: str) -> None:
        """
        Remove a region by name (case-insensitive). Absent names are ignored.

        Thread-safe: Exclusive lock.
        """
        key = normalize_name(name)

        with self._lock.write_locked():
            removed = self._regions.pop(key, None) is not None
            count = len(self._regions)

        if not removed:
            self.logger.debug(
                event=LogEvent.REGION_ABSENT,
                message=f"Region not present: {key}",
                metadata={'name': key, 'count': count}
            )
            return

        self.logger.info(
            event=LogEvent.REGION_DELETED,
            message=f"Region deleted: {key}",
            metadata={'name': key, 'count': count}
        )

    def locate(self, point: Coordinate) -> List[str]:
        """
        Names of all regions whose border contains the point.

        Thread-safe: Works on a snapshot taken under the shared lock.
        """
        return regions_containing(self.get_all(), point)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._regions)

    def __contains__(self, name: str) -> bool:
        key = normalize_name(name)
        with self._lock.read_locked():
            return key in self._regions
