"""
Error taxonomy for the packing engine.

Input problems are raised before any placement happens, so a caller either
gets a complete PackingResult or one of these exceptions.
"""

from __future__ import annotations

from typing import Optional, Sequence


class PackingError(Exception):
    """Base class for all packing errors."""


class ValidationError(PackingError, ValueError):
    """An input item has an invalid quantity, dimension or id."""

    def __init__(self, message: str, item_id: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.item_id = item_id
        self.field = field


class UnplaceableItemError(PackingError):
    """An item is larger than an empty container along at least one axis."""

    def __init__(self, item_id: str, dimensions: tuple[float, float, float], axes: Sequence[str]):
        width, depth, height = dimensions
        super().__init__(
            f"Item '{item_id}' ({width:g}x{depth:g}x{height:g} in) is too large "
            f"for a single storage unit: exceeds container {', '.join(axes)}"
        )
        self.item_id = item_id
        self.dimensions = dimensions
        self.axes = tuple(axes)


class CapacityGuardError(PackingError):
    """Too many individual units were requested in one packing run."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Requested {count} item units, above the limit of {limit} per packing run"
        )
        self.count = count
        self.limit = limit


# ─────────────────────────────────────────────────────────────────────────────
# Post-condition errors (raised by the validator)
# ─────────────────────────────────────────────────────────────────────────────

class PlacementError(PackingError):
    """A produced placement violates a geometric invariant."""


class OutOfBoundsError(PlacementError):
    """Item extends outside its container."""


class OverlapError(PlacementError):
    """Two items in one container are closer than the item gap."""


class ContainerSequenceError(PlacementError):
    """Container indices are not contiguous from zero."""
