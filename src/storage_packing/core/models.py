"""Core data models for storage container packing."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """Minimum corner of an item relative to its container origin (inches)."""

    x: float
    y: float
    z: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, d: dict) -> "Position":
        return cls(x=d["x"], y=d["y"], z=d["z"])


@dataclass(frozen=True)
class Dimensions:
    """Item extents in inches: width on X, depth on Z, height on Y."""

    width: float
    depth: float
    height: float

    @property
    def volume(self) -> float:
        """Volume in cubic inches."""
        return self.width * self.depth * self.height

    def to_dict(self) -> dict:
        return {"width": self.width, "depth": self.depth, "height": self.height}

    @classmethod
    def from_dict(cls, d: dict) -> "Dimensions":
        return cls(width=d["width"], depth=d["depth"], height=d["height"])


@dataclass(frozen=True)
class SelectedItem:
    """
    One product type chosen by the customer.

    Attributes:
        item_id:  Stable key of the product (e.g. ``"dresser"``).
        quantity: Number of identical units.
        width:    X extent per unit (inches).
        depth:    Z extent per unit (inches).
        height:   Y extent per unit (inches).
        color:    Display color, passed through untouched.
    """

    item_id: str
    quantity: int
    width: float
    depth: float
    height: float
    color: str = "#9CA3AF"

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(width=self.width, depth=self.depth, height=self.height)

    @property
    def volume(self) -> float:
        """Volume of a single unit in cubic inches."""
        return self.width * self.depth * self.height

    def to_dict(self) -> dict:
        return {"item_id": self.item_id, "quantity": self.quantity,
                "width": self.width, "depth": self.depth,
                "height": self.height, "color": self.color}

    @classmethod
    def from_dict(cls, d: dict) -> "SelectedItem":
        return cls(item_id=d["item_id"], quantity=d["quantity"],
                   width=d["width"], depth=d["depth"], height=d["height"],
                   color=d.get("color", "#9CA3AF"))


@dataclass(frozen=True)
class ExpandedItem:
    """
    A single physical unit of a SelectedItem.

    ``sequence`` is the unit's position in the expanded (pre-sort) list and
    only serves as the tie-break key when sorting; it never reaches output.
    """

    item: SelectedItem
    instance_index: int
    sequence: int

    @property
    def item_id(self) -> str:
        return self.item.item_id

    @property
    def width(self) -> float:
        return self.item.width

    @property
    def depth(self) -> float:
        return self.item.depth

    @property
    def height(self) -> float:
        return self.item.height

    @property
    def color(self) -> str:
        return self.item.color


@dataclass(frozen=True)
class Shelf:
    """
    Placement cursor for one horizontal layer of a container.

    Attributes:
        y:         Floor height of the shelf inside its container.
        height:    Tallest item placed on the shelf so far.
        current_x: Next free X offset in the current row.
        current_z: Z offset of the current row.
        row_max_z: Deepest item in the current row.
    """

    y: float = 0.0
    height: float = 0.0
    current_x: float = 0.0
    current_z: float = 0.0
    row_max_z: float = 0.0

    @classmethod
    def new(cls, y: float = 0.0) -> "Shelf":
        return cls(y=y)


@dataclass(frozen=True)
class PackedItem:
    """An item unit with its final container and position."""

    item_id: str
    instance_index: int
    container_index: int
    position: Position
    dimensions: Dimensions
    color: str

    @property
    def volume(self) -> float:
        return self.dimensions.volume

    @property
    def x_max(self) -> float:
        return self.position.x + self.dimensions.width

    @property
    def y_max(self) -> float:
        return self.position.y + self.dimensions.height

    @property
    def z_max(self) -> float:
        return self.position.z + self.dimensions.depth

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "instance_index": self.instance_index,
            "container_index": self.container_index,
            "position": self.position.to_dict(),
            "dimensions": self.dimensions.to_dict(),
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "PackedItem":
        return cls(
            item_id=d["item_id"], instance_index=d["instance_index"],
            container_index=d["container_index"],
            position=Position.from_dict(d["position"]),
            dimensions=Dimensions.from_dict(d["dimensions"]),
            color=d["color"],
        )


@dataclass(frozen=True)
class PackingResult:
    """
    Outcome of a packing run.

    ``packed_items`` is in placement order, not spatial order.
    """

    packed_items: tuple[PackedItem, ...] = ()
    container_count: int = 0
    total_volume_cubic_feet: float = 0.0
    last_container_fill_percent: float = 0.0
    container_fill_percents: tuple[float, ...] = field(default=())

    @property
    def container_indices(self) -> list[int]:
        return sorted({p.container_index for p in self.packed_items})

    def items_in_container(self, container_index: int) -> list[PackedItem]:
        return [p for p in self.packed_items if p.container_index == container_index]

    def to_dict(self, include_items: bool = True) -> dict:
        d = {
            "container_count": self.container_count,
            "total_volume_cubic_feet": self.total_volume_cubic_feet,
            "last_container_fill_percent": self.last_container_fill_percent,
            "container_fill_percents": list(self.container_fill_percents),
        }
        if include_items:
            d["packed_items"] = [p.to_dict() for p in self.packed_items]
        return d
