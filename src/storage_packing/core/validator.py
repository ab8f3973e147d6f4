"""
Packing validator - pure-function checks of a finished PackingResult.

Checks:
  1. Bounds    - every item lies inside its container on all three axes
  2. Overlap   - items sharing a container are at least ITEM_GAP apart
                 along some axis (gap-inflated AABBs never intersect)
  3. Sequence  - container indices are 0..count-1, never decrease in
                 placement order, and match the reported container count
"""

from __future__ import annotations

import numpy as np

from storage_packing.config import ITEM_GAP, Container
from storage_packing.core.errors import (
    ContainerSequenceError,
    OutOfBoundsError,
    OverlapError,
)
from storage_packing.core.models import PackedItem, PackingResult

EPS = 1e-6


def _boxes(items: list[PackedItem]) -> tuple[np.ndarray, np.ndarray]:
    """Return (mins, maxs) arrays of shape (n, 3) in x, y, z order."""
    mins = np.array(
        [[p.position.x, p.position.y, p.position.z] for p in items], dtype=float
    ).reshape(-1, 3)
    maxs = np.array(
        [[p.x_max, p.y_max, p.z_max] for p in items], dtype=float
    ).reshape(-1, 3)
    return mins, maxs


def check_bounds(items: list[PackedItem]) -> None:
    """Raise OutOfBoundsError if any item leaves the container interior."""
    if not items:
        return
    mins, maxs = _boxes(items)
    limits = np.array([Container.LENGTH, Container.HEIGHT, Container.WIDTH])

    below = np.any(mins < -EPS, axis=1)
    above = np.any(maxs > limits + EPS, axis=1)
    bad = np.flatnonzero(below | above)
    if bad.size:
        p = items[int(bad[0])]
        raise OutOfBoundsError(
            f"{p.item_id}#{p.instance_index} in container {p.container_index} "
            f"spans ({p.position.x:.1f}, {p.position.y:.1f}, {p.position.z:.1f})-"
            f"({p.x_max:.1f}, {p.y_max:.1f}, {p.z_max:.1f}), outside "
            f"{Container.LENGTH:g}x{Container.HEIGHT:g}x{Container.WIDTH:g}"
        )


def check_overlap(items: list[PackedItem], gap: float = ITEM_GAP) -> None:
    """Raise OverlapError if two items of one container are closer than ``gap``."""
    by_container: dict[int, list[PackedItem]] = {}
    for p in items:
        by_container.setdefault(p.container_index, []).append(p)

    for container_index, group in by_container.items():
        if len(group) < 2:
            continue
        mins, maxs = _boxes(group)
        # separated[i, j, axis]: i ends at least `gap` before j starts, or vice versa
        separated = (
            (maxs[:, None, :] + gap <= mins[None, :, :] + EPS)
            | (maxs[None, :, :] + gap <= mins[:, None, :] + EPS)
        )
        clash = ~separated.any(axis=2)
        pairs = np.argwhere(np.triu(clash, k=1))
        if pairs.size:
            a, b = (group[int(i)] for i in pairs[0])
            raise OverlapError(
                f"{a.item_id}#{a.instance_index} and {b.item_id}#{b.instance_index} "
                f"overlap in container {container_index} (gap < {gap:g} in)"
            )


def check_container_sequence(result: PackingResult) -> None:
    """Raise ContainerSequenceError if container indices skip or go backwards."""
    indices = [p.container_index for p in result.packed_items]
    if not indices:
        if result.container_count != 0:
            raise ContainerSequenceError(
                f"No items placed but container_count={result.container_count}"
            )
        return

    if any(b < a for a, b in zip(indices, indices[1:])):
        raise ContainerSequenceError("Container index decreases in placement order")

    used = sorted(set(indices))
    if used != list(range(result.container_count)):
        raise ContainerSequenceError(
            f"Used containers {used} do not match 0..{result.container_count - 1}"
        )


def validate_packing(result: PackingResult) -> bool:
    """
    Validate a packing result against all geometric invariants.

    Returns:
        True if all checks pass.

    Raises:
        OutOfBoundsError:       an item extends outside its container.
        OverlapError:           two items in one container are too close.
        ContainerSequenceError: container indices are not contiguous.
    """
    items = list(result.packed_items)
    check_bounds(items)
    check_overlap(items)
    check_container_sequence(result)
    return True
