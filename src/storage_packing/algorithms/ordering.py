"""Item expansion and ordering for Next-Fit Decreasing packing."""

from __future__ import annotations

from typing import Iterable

from storage_packing.core.models import ExpandedItem, SelectedItem


def expand_items(items: Iterable[SelectedItem]) -> list[ExpandedItem]:
    """
    Expand quantity-bearing items into one entry per physical unit.

    ``instance_index`` counts copies per ``item_id`` across the whole list,
    so an id that appears twice keeps numbering where it left off.

    Args:
        items: Selected items in caller order.

    Returns:
        Expanded units in input order, each tagged with its sequence number.
    """
    expanded: list[ExpandedItem] = []
    seen: dict[str, int] = {}
    for item in items:
        for _ in range(item.quantity):
            instance_index = seen.get(item.item_id, 0)
            seen[item.item_id] = instance_index + 1
            expanded.append(
                ExpandedItem(item=item, instance_index=instance_index, sequence=len(expanded))
            )
    return expanded


def height_sorted_order(units: list[ExpandedItem]) -> list[ExpandedItem]:
    """
    Sort units by height, tallest first.

    Ties keep expansion order; the sequence number is part of the key so the
    result does not depend on sort stability.
    """
    return sorted(units, key=lambda u: (-u.height, u.sequence))


def expand_and_sort_items(items: Iterable[SelectedItem]) -> list[ExpandedItem]:
    """Expand items by quantity and order them for shelf packing."""
    return height_sorted_order(expand_items(items))
