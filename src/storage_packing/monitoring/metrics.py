"""Metrics and export for packing results.

Provides dataclasses summarizing how full the containers are and utilities
for exporting results to JSON and CSV formats.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Sequence

from storage_packing.algorithms.estimator import calculate_recommended_units
from storage_packing.config import CUBIC_INCHES_PER_CUBIC_FOOT, Container
from storage_packing.core.models import PackedItem, PackingResult
from storage_packing.visualization.coordinates import packed_item_to_mesh

CSV_FIELDS = [
    "item_id", "instance_index", "container_index",
    "x", "y", "z", "width", "depth", "height", "color",
]


def _clamp_percent(value: float) -> float:
    return min(max(value, 0.0), 100.0)


@dataclass
class ContainerMetrics:
    """Metrics for a single container.

    Attributes:
        container_index: 0-based container number.
        item_count: Units placed in the container.
        volume_cubic_feet: Summed item volume in cubic feet.
        fill_percent: Share of the advertised capacity used (0-100).
    """

    container_index: int
    item_count: int
    volume_cubic_feet: float
    fill_percent: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class PackingMetrics:
    """Aggregate metrics for a packing run.

    Attributes:
        container_count: Number of containers used.
        total_volume_cubic_feet: Summed volume of all placed items.
        last_container_fill_percent: Volume left over after filling all but
            the last container to capacity, as a percentage of one
            container (0-100).
        containers: Per-container breakdown, ordered by index.
    """

    container_count: int = 0
    total_volume_cubic_feet: float = 0.0
    last_container_fill_percent: float = 0.0
    containers: list[ContainerMetrics] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["containers"] = [c.to_dict() for c in self.containers]
        return d


def last_container_fill_percent(total_volume_cubic_feet: float, container_count: int) -> float:
    """Fill of the last container assuming all earlier ones are full.

    Example:
        >>> last_container_fill_percent(128.5, 1)
        50.0
        >>> last_container_fill_percent(0.0, 0)
        0.0
    """
    if container_count <= 0:
        return 0.0
    capacity = Container.CUBIC_FEET
    remainder = total_volume_cubic_feet - (container_count - 1) * capacity
    return _clamp_percent(remainder / capacity * 100)


def compute_metrics(packed_items: Sequence[PackedItem]) -> PackingMetrics:
    """Summarize a list of placements.

    Args:
        packed_items: Placements in any order.

    Returns:
        PackingMetrics; all zeros for an empty list.
    """
    if not packed_items:
        return PackingMetrics()

    container_count = max(p.container_index for p in packed_items) + 1
    volumes = [0.0] * container_count
    counts = [0] * container_count
    for p in packed_items:
        volumes[p.container_index] += p.volume
        counts[p.container_index] += 1

    total_cubic_feet = sum(p.volume for p in packed_items) / CUBIC_INCHES_PER_CUBIC_FOOT

    containers = []
    for index in range(container_count):
        cubic_feet = volumes[index] / CUBIC_INCHES_PER_CUBIC_FOOT
        containers.append(ContainerMetrics(
            container_index=index,
            item_count=counts[index],
            volume_cubic_feet=cubic_feet,
            fill_percent=_clamp_percent(cubic_feet / Container.CUBIC_FEET * 100),
        ))

    return PackingMetrics(
        container_count=container_count,
        total_volume_cubic_feet=total_cubic_feet,
        last_container_fill_percent=last_container_fill_percent(total_cubic_feet, container_count),
        containers=containers,
    )


def export_to_json(
    result: PackingResult,
    output_path: Path | str,
    include_items: bool = True,
    scale: float | None = None,
) -> None:
    """Export a packing result to a JSON file.

    Args:
        result: PackingResult to export.
        output_path: Path to output JSON file.
        include_items: If False, write the summary only.
        scale: If given, also write renderer-ready meshes at this scale.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = result.to_dict(include_items=include_items)
    data["recommended_units"] = calculate_recommended_units(result.total_volume_cubic_feet)
    if scale is not None:
        data["meshes"] = [packed_item_to_mesh(p, scale) for p in result.packed_items]

    with output_path.open("w") as f:
        json.dump(data, f, indent=2)


def export_to_csv(result: PackingResult, output_path: Path | str) -> None:
    """Export one CSV row per placed item.

    An empty result still gets a header row.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for p in result.packed_items:
            writer.writerow({
                "item_id": p.item_id,
                "instance_index": p.instance_index,
                "container_index": p.container_index,
                "x": p.position.x,
                "y": p.position.y,
                "z": p.position.z,
                "width": p.dimensions.width,
                "depth": p.dimensions.depth,
                "height": p.dimensions.height,
                "color": p.color,
            })


def format_summary(result: PackingResult) -> str:
    """Generate a human-readable summary of a packing result.

    Example:
        >>> summary = format_summary(PackingResult())
        >>> "Containers (packed):  0" in summary
        True
    """
    estimate = calculate_recommended_units(result.total_volume_cubic_feet)
    lines = [
        "=" * 60,
        "Storage Packing Summary",
        "=" * 60,
        f"Items placed:         {len(result.packed_items)}",
        f"Total volume:         {result.total_volume_cubic_feet:.1f} cu ft",
        f"Containers (packed):  {result.container_count}",
        f"Containers (volume):  {estimate}",
        f"Last container fill:  {result.last_container_fill_percent:.1f}%",
    ]
    if result.container_fill_percents:
        lines.append("")
        lines.append("Per-container fill:")
        for index, fill in enumerate(result.container_fill_percents):
            count = len(result.items_in_container(index))
            lines.append(f"  #{index}: {count:3d} items, {fill:5.1f}%")
    lines.append("=" * 60)
    return "\n".join(lines)
