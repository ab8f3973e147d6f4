"""Volume-only container estimate.

Used where only an aggregate volume is known, e.g. before the customer has
entered individual item dimensions. It ignores geometry, so it can be lower
than the container count the shelf packer produces for the same items.
"""

from __future__ import annotations

import math

from storage_packing.config import Container


def calculate_recommended_units(total_cubic_feet: float) -> int:
    """
    Number of containers needed if volume could be poured in.

    Args:
        total_cubic_feet: Aggregate item volume in cubic feet.

    Returns:
        ``ceil(total_cubic_feet / Container.CUBIC_FEET)``; 0 for zero or
        negative volume.

    Example:
        >>> calculate_recommended_units(0)
        0
        >>> calculate_recommended_units(257)
        1
        >>> calculate_recommended_units(258)
        2
    """
    if total_cubic_feet <= 0:
        return 0
    return math.ceil(total_cubic_feet / Container.CUBIC_FEET)
