"""Error taxonomy shared by every container."""


class DataStructureError(Exception):
    """Base exception for container operations."""
    pass


class OutOfBoundsError(DataStructureError, IndexError):
    """Address does not point into the occupied part of a list."""
    pass


class InvalidPositionError(DataStructureError, IndexError):
    """Position does not resolve to a node in a linked list."""
    pass


class CapacityExceededError(DataStructureError, OverflowError):
    """Write would run past the fixed backing capacity."""
    pass


class InvalidLineError(DataStructureError, LookupError):
    """Graph line endpoint is not among the graph's nodes."""
    pass
