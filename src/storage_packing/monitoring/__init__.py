"""Monitoring module for storage_packing.

Provides container fill metrics and result export for packing runs.
"""

from .metrics import (
    ContainerMetrics,
    PackingMetrics,
    compute_metrics,
    export_to_csv,
    export_to_json,
    format_summary,
    last_container_fill_percent,
)

__all__ = [
    "ContainerMetrics",
    "PackingMetrics",
    "compute_metrics",
    "last_container_fill_percent",
    # Export
    "export_to_csv",
    "export_to_json",
    "format_summary",
]
