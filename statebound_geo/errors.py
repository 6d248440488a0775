"""
Region Error Taxonomy
=====================

Bounded Context: Failure reporting for geometry, regions and the store.

Design:
- Closed set of kinds (ErrorKind enum), collaborators switch on ``err.kind``
- Every error is raised to the immediate caller, never logged or swallowed here
- Validation failures are also ValueError so generic handlers still work

Kinds:
    RING_TOO_SHORT, RING_UNCLOSED  -> InvalidGeometryError (shape)
    ORIENTATION                    -> RighthandRuleError (carries the angle)
    NAME_TOO_SHORT                 -> NameTooShortError
    INVALID                        -> InvalidRegionError (wraps any of the above)
    NOT_FOUND, DUPLICATE           -> raised by statebound_store
"""

from enum import Enum


RING_TOO_SHORT = "polygon ring too short, must contain at least 4 positions"
RING_UNCLOSED = "polygon ring must be closed, first and last positions must be equal"
RING_COUNTER_CLOCKWISE = "polygon exterior ring must be clockwise"

MIN_NAME_LENGTH = 2


class ErrorKind(str, Enum):
    """Tag carried by every RegionError."""

    RING_TOO_SHORT = "ring_too_short"
    RING_UNCLOSED = "ring_unclosed"
    ORIENTATION = "orientation"
    NAME_TOO_SHORT = "name_too_short"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    INVALID = "invalid"


class RegionError(Exception):
    """Base class for all statebound errors."""

    kind: ErrorKind


class InvalidGeometryError(RegionError, ValueError):
    """Structural defect in a ring (shape error)."""


class RingTooShortError(InvalidGeometryError):
    kind = ErrorKind.RING_TOO_SHORT

    def __init__(self):
        super().__init__(RING_TOO_SHORT)


class RingUnclosedError(InvalidGeometryError):
    kind = ErrorKind.RING_UNCLOSED

    def __init__(self):
        super().__init__(RING_UNCLOSED)


class RighthandRuleError(RegionError, ValueError):
    """
    Ring winds counter-clockwise.

    Only raised by Polygon.validate(); Polygon.build() reverses the ring instead.

    Attributes:
        angle: Turning angle of the offending ring (radians, positive)
    """

    kind = ErrorKind.ORIENTATION

    def __init__(self, angle: float):
        self.angle = angle
        super().__init__(f"{RING_COUNTER_CLOCKWISE} (angle is {angle:f})")


class NameTooShortError(RegionError, ValueError):
    kind = ErrorKind.NAME_TOO_SHORT

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"invalid name for region, minimum length is {MIN_NAME_LENGTH}: {name}"
        )


class InvalidRegionError(RegionError, ValueError):
    """
    A region could not be built.

    Wraps the underlying NameTooShortError or geometry error so callers can
    tell "invalid region" apart from other failures. The message is the cause's.

    Attributes:
        cause: The original RegionError
    """

    kind = ErrorKind.INVALID

    def __init__(self, cause: RegionError):
        self.cause = cause
        super().__init__(str(cause))

    @property
    def cause_kind(self) -> ErrorKind:
        """Kind of the wrapped error."""
        return self.cause.kind
