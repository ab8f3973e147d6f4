"""Renderer-facing coordinate adapters for packing results."""

from .coordinates import (
    get_container_center_position,
    get_container_visualization_dimensions,
    packed_item_to_mesh,
    to_visualization_dimensions,
    to_visualization_position,
)

__all__ = [
    "to_visualization_position",
    "to_visualization_dimensions",
    "get_container_visualization_dimensions",
    "get_container_center_position",
    "packed_item_to_mesh",
]
