"""Household inventory catalog for the storage calculator.

The catalog ships as ``data/inventory.yaml`` next to this module. Customers
pick catalog entries with quantities; ``select_items`` turns that choice into
SelectedItem values for the packer.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

import yaml

from storage_packing.config import CUBIC_INCHES_PER_CUBIC_FOOT
from storage_packing.core.errors import ValidationError
from storage_packing.core.models import SelectedItem

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "inventory.yaml"


@dataclass(frozen=True)
class InventoryItem:
    """A catalog product with its per-unit dimensions in inches."""

    id: str
    name: str
    category: str
    width: float
    depth: float
    height: float
    color: str

    @property
    def volume(self) -> float:
        return self.width * self.depth * self.height

    def to_selected(self, quantity: int) -> SelectedItem:
        return SelectedItem(
            item_id=self.id,
            quantity=quantity,
            width=self.width,
            depth=self.depth,
            height=self.height,
            color=self.color,
        )

    @classmethod
    def from_dict(cls, d: dict) -> "InventoryItem":
        return cls(id=str(d["id"]), name=str(d["name"]), category=str(d["category"]),
                   width=float(d["width"]), depth=float(d["depth"]),
                   height=float(d["height"]), color=str(d["color"]))


@dataclass(frozen=True)
class Catalog:
    categories: dict[str, str]
    items: tuple[InventoryItem, ...]

    def get(self, item_id: str) -> Optional[InventoryItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None


def load_catalog(path: Path | str | None = None) -> Catalog:
    """
    Read a catalog YAML file.

    Args:
        path: Catalog file; the bundled inventory is used when omitted.

    Returns:
        Catalog

    Raises:
        ValueError: If an item names an unknown category or an id repeats.
    """
    if path is None:
        return _default_catalog()
    return _read_catalog(Path(path))


@lru_cache(maxsize=1)
def _default_catalog() -> Catalog:
    return _read_catalog(DEFAULT_CATALOG_PATH)


def _read_catalog(path: Path) -> Catalog:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    categories = {str(k): str(v) for k, v in (data.get("categories", {}) or {}).items()}
    items = tuple(InventoryItem.from_dict(d) for d in (data.get("items", []) or []))

    seen: set = set()
    for item in items:
        if item.category not in categories:
            raise ValueError(f"Catalog item '{item.id}' has unknown category '{item.category}'")
        if item.id in seen:
            raise ValueError(f"Duplicate catalog item id '{item.id}'")
        seen.add(item.id)
    return Catalog(categories=categories, items=items)


def categories(catalog: Catalog | None = None) -> dict[str, str]:
    """Category id → display name."""
    return dict((catalog or load_catalog()).categories)


def get_items_by_category(category: str, catalog: Catalog | None = None) -> list[InventoryItem]:
    return [item for item in (catalog or load_catalog()).items if item.category == category]


def get_item_by_id(item_id: str, catalog: Catalog | None = None) -> Optional[InventoryItem]:
    return (catalog or load_catalog()).get(item_id)


def calculate_cubic_feet(item: InventoryItem) -> float:
    """Volume of one unit in cubic feet."""
    return item.volume / CUBIC_INCHES_PER_CUBIC_FOOT


def select_items(quantities: Mapping[str, int], catalog: Catalog | None = None) -> list[SelectedItem]:
    """
    Build packer input from catalog ids and quantities.

    Zero quantities are skipped. Order follows ``quantities``.

    Raises:
        ValidationError: Unknown id or negative quantity.
    """
    catalog = catalog or load_catalog()
    selected = []
    for item_id, quantity in quantities.items():
        item = catalog.get(item_id)
        if item is None:
            raise ValidationError(f"Unknown catalog item '{item_id}'", item_id=item_id, field="item_id")
        if quantity < 0:
            raise ValidationError(
                f"Item '{item_id}' has negative quantity {quantity}", item_id=item_id, field="quantity"
            )
        if quantity == 0:
            continue
        selected.append(item.to_selected(quantity))
    return selected


def estimate_cubic_feet(quantities: Mapping[str, int], catalog: Catalog | None = None) -> float:
    """Total volume of a catalog selection, for the volume-only estimate."""
    return sum(item.volume * item.quantity for item in select_items(quantities, catalog)) / CUBIC_INCHES_PER_CUBIC_FOOT
