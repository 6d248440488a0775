"""Store errors. Both carry the name exactly as the caller supplied it."""

from statebound_geo.errors import ErrorKind, RegionError


class RegionNotFoundError(RegionError, LookupError):
    """No region matches the requested name."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no region found with name: {name}")


class DuplicateRegionError(RegionError, ValueError):
    """A region with the same normalized name already exists."""

    kind = ErrorKind.DUPLICATE

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"duplicate region: {name}")
