"""
storage_packing - fit a customer's inventory into standard storage containers.

Public API:
    from storage_packing import pack_items, calculate_recommended_units
    from storage_packing import SelectedItem, PackingResult, Container
    from storage_packing.visualization import to_visualization_position
    from storage_packing.catalog import select_items
"""

from storage_packing.algorithms.estimator import calculate_recommended_units
from storage_packing.algorithms.ordering import expand_and_sort_items
from storage_packing.algorithms.shelf_packer import ShelfPacker, pack_items, try_place
from storage_packing.config import (
    CONTAINER_GAP,
    DEFAULT_SCALE,
    ITEM_GAP,
    Container,
    PackingConfig,
    load_config,
)
from storage_packing.core.errors import (
    CapacityGuardError,
    PackingError,
    PlacementError,
    UnplaceableItemError,
    ValidationError,
)
from storage_packing.core.models import (
    Dimensions,
    ExpandedItem,
    PackedItem,
    PackingResult,
    Position,
    SelectedItem,
    Shelf,
)
from storage_packing.core.schemas import parse_selected_items
from storage_packing.core.validator import validate_packing
from storage_packing.visualization.coordinates import (
    get_container_center_position,
    get_container_visualization_dimensions,
    to_visualization_dimensions,
    to_visualization_position,
)

__all__ = [
    # Engine
    "pack_items",
    "try_place",
    "ShelfPacker",
    "expand_and_sort_items",
    "calculate_recommended_units",
    "validate_packing",
    "parse_selected_items",
    # Config
    "Container",
    "ITEM_GAP",
    "CONTAINER_GAP",
    "DEFAULT_SCALE",
    "PackingConfig",
    "load_config",
    # Models
    "SelectedItem",
    "ExpandedItem",
    "Shelf",
    "Position",
    "Dimensions",
    "PackedItem",
    "PackingResult",
    # Errors
    "PackingError",
    "ValidationError",
    "UnplaceableItemError",
    "CapacityGuardError",
    "PlacementError",
    # Visualization
    "to_visualization_position",
    "to_visualization_dimensions",
    "get_container_visualization_dimensions",
    "get_container_center_position",
]
