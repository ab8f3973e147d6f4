"""
Inch → renderer coordinate conversion.

The 3D view lays containers out side by side along X, CONTAINER_GAP inches
apart, with each container centred on its own origin in X and Z and resting
on Y=0. Renderer boxes are positioned by their centre, so item positions are
shifted by half their dimensions.

Usage:
    pos = to_visualization_position(item.position, item.dimensions, item.container_index)
    size = to_visualization_dimensions(item.dimensions)
"""

from typing import Dict

from storage_packing.config import CONTAINER_GAP, DEFAULT_SCALE, Container
from storage_packing.core.models import Dimensions, PackedItem, Position


def container_offset(container_index: int) -> float:
    """X offset of a container's centre, in inches."""
    return container_index * (Container.LENGTH + CONTAINER_GAP)


def to_visualization_position(
    position: Position,
    dimensions: Dimensions,
    container_index: int,
    scale: float = DEFAULT_SCALE,
) -> Dict[str, float]:
    """Centre point of an item in renderer units."""
    offset = container_offset(container_index)
    return {
        "x": (position.x + dimensions.width / 2 - Container.LENGTH / 2 + offset) * scale,
        "y": (position.y + dimensions.height / 2) * scale,
        "z": (position.z + dimensions.depth / 2 - Container.WIDTH / 2) * scale,
    }


def to_visualization_dimensions(dimensions: Dimensions, scale: float = DEFAULT_SCALE) -> Dict[str, float]:
    """Item size in renderer units (renderer depth is the item's Z extent)."""
    return {
        "width": dimensions.width * scale,
        "height": dimensions.height * scale,
        "depth": dimensions.depth * scale,
    }


def get_container_visualization_dimensions(scale: float = DEFAULT_SCALE) -> Dict[str, float]:
    return {
        "width": Container.LENGTH * scale,
        "height": Container.HEIGHT * scale,
        "depth": Container.WIDTH * scale,
    }


def get_container_center_position(container_index: int, scale: float = DEFAULT_SCALE) -> Dict[str, float]:
    return {
        "x": container_offset(container_index) * scale,
        "y": Container.HEIGHT / 2 * scale,
        "z": 0.0,
    }


def packed_item_to_mesh(item: PackedItem, scale: float = DEFAULT_SCALE) -> dict:
    """Everything the renderer needs to draw one placed item."""
    return {
        "key": f"{item.item_id}-{item.instance_index}",
        "position": to_visualization_position(item.position, item.dimensions, item.container_index, scale),
        "size": to_visualization_dimensions(item.dimensions, scale),
        "color": item.color,
    }
