"""
statebound_store - In-memory region store

Bounded Context: Region lifecycle (create / read / list / delete)
Responsibilities:
  - Uniqueness of regions by case-insensitive name
  - Safe concurrent access (reader/writer lock)
  - Point-to-region lookup over store snapshots
  - Structured logging of mutations

Architecture:
  - RegionStore: name -> Region dict behind a ReadWriteLock
  - normalize_name: title-casing used as the key at every boundary
  - regions_containing: stateless locator

Design Philosophy:
  - Errors propagate as tagged RegionError subclasses (never swallowed)
  - No lock held across I/O (log after release)
  - Memory-only, no persistence
"""

from .errors import RegionNotFoundError, DuplicateRegionError
from .locator import regions_containing
from .memory_store import RegionStore, normalize_name
from .rwlock import ReadWriteLock

__all__ = [
    "RegionStore",
    "normalize_name",
    "regions_containing",
    "ReadWriteLock",
    "RegionNotFoundError",
    "DuplicateRegionError",
]
