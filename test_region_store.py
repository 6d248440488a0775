"""
Region Store Tests
==================

Case-insensitive lifecycle, error kinds, concurrency and the locator.

Usage:
    pytest test_region_store.py
"""

import json
import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from statebound_geo import Coordinate, ErrorKind, InvalidRegionError, Polygon, Region, lat_lng
from statebound_store import (
    DuplicateRegionError,
    ReadWriteLock,
    RegionNotFoundError,
    RegionStore,
    normalize_name,
    regions_containing,
)
from statebound_store.logging import StructuredLogger


WASHINGTON = [
    Coordinate(-122.402015, 48.225216),
    Coordinate(-117.032049, 48.999931),
    Coordinate(-116.919132, 45.995175),
    Coordinate(-124.079107, 46.267259),
    Coordinate(-124.717175, 48.377557),
    Coordinate(-122.92315, 47.047963),
    Coordinate(-122.402015, 48.225216),
]


def square(lng, lat, size):
    """Clockwise square with south-west corner (lng, lat)."""
    return [
        Coordinate(lng, lat),
        Coordinate(lng, lat + size),
        Coordinate(lng + size, lat + size),
        Coordinate(lng + size, lat),
        Coordinate(lng, lat),
    ]


@pytest.fixture
def store():
    return RegionStore(logger=StructuredLogger("test_store", logger_name="statebound.test_store"))


@pytest.fixture
def valid_region():
    return Region.create("Valid", WASHINGTON)


# ========== Names ==========

@pytest.mark.parametrize("name, expected", [
    ("valid", "Valid"),
    ("VALID", "Valid"),
    ("vALiD", "Valid"),
    ("new york", "New York"),
    ("NORTH   carolina", "North   Carolina"),
    ("winston-salem", "Winston-Salem"),
    ("Valid ", "Valid "),
    (".valid", ".Valid"),
    ("foo/bar", "Foo/Bar"),
    ("mc(donald)", "Mc(Donald)"),
    ("st. LOUIS", "St. Louis"),
    ("o'NEIL", "O'neil"),
    ("under_score", "Under_Score"),
    ("", ""),
])
def test_normalize_name(name, expected):
    assert normalize_name(name) == expected


# ========== Lifecycle ==========

def test_create_get_delete(store, valid_region):
    """Created region is reachable by any casing and removed by delete."""
    assert len(store) == 0

    created = store.create(valid_region)
    assert created.name == "Valid"
    assert created.border == valid_region.border
    assert len(store) == 1
    assert len(store.get_all()) == 1

    for name in ["valid", "VALID", "Valid", "vALiD"]:
        assert store.get_by_name(name).name == created.name
        assert name in store

    store.delete(created.name.lower())
    assert len(store) == 0
    assert store.get_all() == []


@pytest.mark.parametrize("name", ["", ".valid", "Valid ", "not here"])
def test_get_by_name_not_found(store, valid_region, name):
    store.create(valid_region)

    with pytest.raises(RegionNotFoundError) as excinfo:
        store.get_by_name(name)

    assert excinfo.value.kind == ErrorKind.NOT_FOUND
    assert excinfo.value.name == name
    assert "no region found" in str(excinfo.value)


def test_create_normalizes_name(store):
    created = store.create(Region.create("new jersey", square(0, 0, 1)))
    assert created.name == "New Jersey"
    assert store.get_all()[0].name == "New Jersey"


def test_create_repairs_orientation(store):
    """A raw counter-clockwise border is reversed on the way into the store."""
    raw = [Coordinate(0, 0), Coordinate(1, 1), Coordinate(2, 2), Coordinate(0, 0)]
    created = store.create(Region(name="Slanted", border=Polygon(raw)))
    assert list(created.border) == raw[::-1]


def test_create_invalid_region(store):
    unclosed = Region(name="Unclosed Ring", border=Polygon(WASHINGTON[:-1]))

    with pytest.raises(InvalidRegionError) as excinfo:
        store.create(unclosed)

    assert excinfo.value.cause_kind == ErrorKind.RING_UNCLOSED
    assert len(store) == 0


def test_create_short_name(store):
    with pytest.raises(InvalidRegionError) as excinfo:
        store.create(Region(name="x", border=Polygon(WASHINGTON)))

    assert excinfo.value.cause_kind == ErrorKind.NAME_TOO_SHORT
    assert len(store) == 0


@pytest.mark.parametrize("second_name", ["Valid", "valid", "VALID"])
def test_create_duplicate(store, valid_region, second_name):
    created = store.create(valid_region)

    with pytest.raises(DuplicateRegionError) as excinfo:
        store.create(Region(name=second_name, border=created.border))

    assert excinfo.value.kind == ErrorKind.DUPLICATE
    assert "duplicate" in str(excinfo.value)
    assert len(store) == 1
    assert store.get_by_name("valid") == created


def test_delete_absent_name_is_not_an_error(store):
    store.delete("nowhere")
    store.delete("nowhere")
    assert len(store) == 0


def test_get_all_returns_snapshot(store, valid_region):
    store.create(valid_region)
    snapshot = store.get_all()
    store.delete("valid")

    assert len(snapshot) == 1
    assert store.get_all() == []


def test_mutations_are_logged(store, valid_region, caplog):
    caplog.set_level(logging.INFO, logger="statebound.test_store")

    store.create(valid_region)
    store.delete("valid")

    events = [json.loads(record.getMessage()) for record in caplog.records
              if record.name == "statebound.test_store"]
    assert [e['event'] for e in events] == ["store.region.created", "store.region.deleted"]
    assert events[0]['metadata']['name'] == "Valid"
    assert events[1]['metadata'] == {'name': "Valid", 'count': 0}


def test_delete_absent_name_is_not_logged_as_delete(store, caplog):
    caplog.set_level(logging.INFO, logger="statebound.test_store")
    store.delete("nowhere")
    assert [r for r in caplog.records if r.name == "statebound.test_store"] == []

    caplog.set_level(logging.DEBUG, logger="statebound.test_store")
    store.delete("nowhere")

    events = [json.loads(record.getMessage()) for record in caplog.records
              if record.name == "statebound.test_store"]
    assert [e['event'] for e in events] == ["store.region.absent"]
    assert events[0]['level'] == "DEBUG"
    assert events[0]['metadata']['name'] == "Nowhere"


# ========== Concurrency ==========

def test_concurrent_duplicate_create(store):
    """Exactly one of many racing creates wins."""
    workers = 16
    barrier = threading.Barrier(workers)
    names = ["race", "RACE", "Race", "rAcE"]

    def attempt(index):
        barrier.wait()
        try:
            store.create(Region.create(names[index % len(names)], square(0, 0, 1)))
            return "created"
        except DuplicateRegionError:
            return "duplicate"

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(attempt, range(workers)))

    assert results.count("created") == 1
    assert results.count("duplicate") == workers - 1
    assert len(store) == 1
    assert store.get_by_name("race").name == "Race"


def test_concurrent_readers_and_writers(store):
    workers = 8
    per_worker = 10

    def write(worker):
        for i in range(per_worker):
            store.create(Region.create(f"region {worker} {i}", square(i, worker, 1)))
            store.get_all()
            store.locate(lat_lng(worker + 0.5, i + 0.5))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(write, range(workers)))

    assert len(store) == workers * per_worker
    assert len({region.name for region in store.get_all()}) == workers * per_worker


def test_read_write_lock_allows_shared_readers():
    lock = ReadWriteLock()
    lock.acquire_read()
    lock.acquire_read()
    lock.release_read()
    lock.release_read()

    with lock.write_locked():
        pass


def test_read_write_lock_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    with lock.write_locked():
        thread = threading.Thread(target=reader)
        thread.start()
        assert not entered.wait(timeout=0.1)

    thread.join(timeout=1)
    assert entered.is_set()


def test_read_write_lock_release_without_acquire():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


# ========== Locator ==========

def test_locate_overlapping_regions(store):
    store.create(Region.create("west", square(0, 0, 10)))
    store.create(Region.create("east", square(5, 0, 10)))

    assert sorted(store.locate(lat_lng(5, 7))) == ["East", "West"]
    assert store.locate(lat_lng(5, 2)) == ["West"]
    assert store.locate(lat_lng(5, 14)) == ["East"]
    assert store.locate(lat_lng(50, 50)) == []


def test_regions_containing_keeps_input_order():
    regions = [
        Region.create("Outer", square(0, 0, 10)),
        Region.create("Inner", square(2, 2, 2)),
    ]
    assert regions_containing(regions, lat_lng(3, 3)) == ["Outer", "Inner"]
    assert regions_containing(regions, lat_lng(8, 8)) == ["Outer"]
