"""
Shelf-based Next-Fit Decreasing packing into storage containers.

Units are sorted tallest first and laid out left to right (X) in rows; rows
advance front to back (Z) within a shelf; shelves stack upward (Y) within a
container; a new container is opened only when the next shelf would not fit
under the ceiling. There is no backtracking and no rotation: a unit is
always placed with the width/depth/height it was given.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Iterable, Optional

from storage_packing.algorithms.ordering import expand_and_sort_items
from storage_packing.config import ITEM_GAP, Container, PackingConfig
from storage_packing.core.errors import (
    CapacityGuardError,
    UnplaceableItemError,
    ValidationError,
)
from storage_packing.core.models import (
    ExpandedItem,
    PackedItem,
    PackingResult,
    Position,
    SelectedItem,
    Shelf,
)
from storage_packing.core.validator import validate_packing
from storage_packing.monitoring.metrics import compute_metrics

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Input checks
# ─────────────────────────────────────────────────────────────────────────────

def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_items(items: list[SelectedItem]) -> None:
    """Raise ValidationError for the first item with a bad id, quantity or dimension."""
    for item in items:
        if not isinstance(item.item_id, str) or not item.item_id:
            raise ValidationError("Item id must be a non-empty string", item_id=None, field="item_id")

        q = item.quantity
        if not isinstance(q, int) or isinstance(q, bool) or q <= 0:
            raise ValidationError(
                f"Item '{item.item_id}' has invalid quantity {q!r}; expected a positive integer",
                item_id=item.item_id,
                field="quantity",
            )

        for name in ("width", "depth", "height"):
            value = getattr(item, name)
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                raise ValidationError(
                    f"Item '{item.item_id}' has invalid {name} {value!r}; expected a positive number",
                    item_id=item.item_id,
                    field=name,
                )


def check_capacity(items: list[SelectedItem], config: PackingConfig) -> int:
    """Return the expanded unit count, raising CapacityGuardError above the limit."""
    count = sum(item.quantity for item in items)
    if config.guard_enabled and count > config.max_expanded_items:
        raise CapacityGuardError(count=count, limit=config.max_expanded_items)
    return count


def oversized_axes(item: SelectedItem) -> list[str]:
    """Names of the container axes an item cannot fit along."""
    axes = []
    if item.width > Container.LENGTH:
        axes.append(f"length ({Container.LENGTH:g} in)")
    if item.depth > Container.WIDTH:
        axes.append(f"width ({Container.WIDTH:g} in)")
    if item.height > Container.HEIGHT:
        axes.append(f"height ({Container.HEIGHT:g} in)")
    return axes


def check_fits_container(items: list[SelectedItem]) -> None:
    """Raise UnplaceableItemError for an item no empty container can hold."""
    for item in items:
        axes = oversized_axes(item)
        if axes:
            raise UnplaceableItemError(
                item_id=item.item_id,
                dimensions=(item.width, item.depth, item.height),
                axes=axes,
            )


# ─────────────────────────────────────────────────────────────────────────────
# Placement
# ─────────────────────────────────────────────────────────────────────────────

def _packed(unit: ExpandedItem, container_index: int, x: float, y: float, z: float) -> PackedItem:
    return PackedItem(
        item_id=unit.item_id,
        instance_index=unit.instance_index,
        container_index=container_index,
        position=Position(x=x, y=y, z=z),
        dimensions=unit.item.dimensions,
        color=unit.color,
    )


def try_place(
    unit: ExpandedItem,
    shelf: Shelf,
    container_index: int,
) -> tuple[Shelf, Optional[PackedItem]]:
    """
    Try to place a unit on the given shelf.

    First the current row is extended; failing that a new row is opened
    behind it on the same shelf.

    Args:
        unit: Unit to place.
        shelf: Current shelf cursor (not modified).
        container_index: Container the shelf belongs to.

    Returns:
        (next_shelf, packed_item). On failure the original shelf is returned
        with ``None``.
    """
    # Extend the current row
    if (shelf.current_x + unit.width <= Container.LENGTH
            and shelf.current_z + unit.depth <= Container.WIDTH):
        placed = _packed(unit, container_index, shelf.current_x, shelf.y, shelf.current_z)
        return replace(
            shelf,
            current_x=shelf.current_x + unit.width + ITEM_GAP,
            height=max(shelf.height, unit.height),
            row_max_z=max(shelf.row_max_z, unit.depth),
        ), placed

    # Open a new row behind the current one
    new_row_z = shelf.current_z + shelf.row_max_z + ITEM_GAP
    if new_row_z + unit.depth <= Container.WIDTH and unit.width <= Container.LENGTH:
        placed = _packed(unit, container_index, 0.0, shelf.y, new_row_z)
        return replace(
            shelf,
            current_x=unit.width + ITEM_GAP,
            current_z=new_row_z,
            height=max(shelf.height, unit.height),
            row_max_z=unit.depth,
        ), placed

    return shelf, None


class ShelfPacker:
    """
    Next-Fit Decreasing shelf packer.

    Keeps only the open container and its open shelf; earlier shelves and
    containers are never revisited.
    """

    def __init__(self):
        self.packed: list[PackedItem] = []
        self.container_index = 0
        self.shelf = Shelf.new()

    def pack(self, units: Iterable[ExpandedItem]) -> list[PackedItem]:
        """
        Place units in the given order.

        Args:
            units: Units already sorted tallest first.

        Returns:
            Packed items in placement order.

        Raises:
            UnplaceableItemError: If a unit does not fit an empty container.
        """
        self.packed = []
        self.container_index = 0
        self.shelf = Shelf.new()

        for unit in units:
            self.packed.append(self._place(unit))
        return self.packed

    def _place(self, unit: ExpandedItem) -> PackedItem:
        shelf, placed = try_place(unit, self.shelf, self.container_index)
        if placed is not None:
            self.shelf = shelf
            return placed

        # New shelf above the current one
        new_shelf_y = self.shelf.y + self.shelf.height + ITEM_GAP
        if new_shelf_y + unit.height <= Container.HEIGHT:
            logger.debug(
                "Container %d: new shelf at y=%.1f for %s#%d",
                self.container_index, new_shelf_y, unit.item_id, unit.instance_index,
            )
            shelf, placed = try_place(unit, Shelf.new(new_shelf_y), self.container_index)
            if placed is not None:
                self.shelf = shelf
                return placed

        # New container
        self.container_index += 1
        logger.debug(
            "Opening container %d for %s#%d",
            self.container_index, unit.item_id, unit.instance_index,
        )
        shelf, placed = try_place(unit, Shelf.new(), self.container_index)
        if placed is None:
            raise UnplaceableItemError(
                item_id=unit.item_id,
                dimensions=(unit.width, unit.depth, unit.height),
                axes=oversized_axes(unit.item) or ["footprint"],
            )
        self.shelf = shelf
        return placed


# ─────────────────────────────────────────────────────────────────────────────
# Entry point
# ─────────────────────────────────────────────────────────────────────────────

def pack_items(items: Iterable[SelectedItem], config: PackingConfig | None = None) -> PackingResult:
    """
    Pack selected items into as few storage containers as the heuristic finds.

    Args:
        items: Selected items with quantities and per-unit dimensions.
        config: Packing configuration (defaults to ``PackingConfig()``).

    Returns:
        PackingResult with every unit placed.

    Raises:
        ValidationError:      non-positive quantity or dimension.
        CapacityGuardError:   too many units in one run.
        UnplaceableItemError: an item larger than an empty container.
        PlacementError:       only when ``config.verify_result`` is set and
                              the result breaks an invariant.
    """
    config = config or PackingConfig()
    items = list(items)

    try:
        validate_items(items)
        unit_count = check_capacity(items, config)
        check_fits_container(items)
    except (ValidationError, CapacityGuardError, UnplaceableItemError) as exc:
        logger.warning("Packing request rejected: %s", exc)
        raise

    if unit_count == 0:
        return PackingResult()

    units = expand_and_sort_items(items)
    packed = ShelfPacker().pack(units)
    metrics = compute_metrics(packed)

    result = PackingResult(
        packed_items=tuple(packed),
        container_count=metrics.container_count,
        total_volume_cubic_feet=metrics.total_volume_cubic_feet,
        last_container_fill_percent=metrics.last_container_fill_percent,
        container_fill_percents=tuple(c.fill_percent for c in metrics.containers),
    )

    if config.verify_result:
        validate_packing(result)

    logger.info(
        "Packed %d units into %d container(s): %.1f cu ft, last container %.1f%% full",
        unit_count, result.container_count, result.total_volume_cubic_feet,
        result.last_container_fill_percent,
    )
    return result
