"""
Central configuration for the storage packing engine.

All modules import their container geometry and tuneable knobs from here so
the packer, metrics, validator and visualization layers agree on one set of
numbers.

Classes:
    Container      - fixed interior geometry of one storage unit (inches)
    PackingConfig  - runtime knobs (input guard, render scale, self-check)

Functions:
    load_config    - read a PackingConfig from YAML and environment variables
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml


# ─────────────────────────────────────────────────────────────────────────────
# Container geometry
# ─────────────────────────────────────────────────────────────────────────────

class Container:
    """
    Interior dimensions of a single storage container.

    Axes follow the renderer convention:
        LENGTH → X (left to right)
        HEIGHT → Y (floor to ceiling)
        WIDTH  → Z (front to back)
    """

    LENGTH = 95.0     # inches, X
    WIDTH = 56.0      # inches, Z
    HEIGHT = 83.5     # inches, Y
    CUBIC_FEET = 257  # advertised capacity

    @classmethod
    def cubic_inches(cls) -> float:
        """Geometric interior volume in cubic inches."""
        return cls.LENGTH * cls.WIDTH * cls.HEIGHT


# Spacing between neighbouring items and between stacked shelves (inches).
ITEM_GAP = 1.0

# Spacing between containers when rendered side by side (inches, visual only).
CONTAINER_GAP = 20.0

CUBIC_INCHES_PER_CUBIC_FOOT = 1728

# Renderer units per inch.
DEFAULT_SCALE = 0.01

DEFAULT_MAX_EXPANDED_ITEMS = 2000

ENV_MAX_ITEMS = "STORAGE_PACKING_MAX_ITEMS"
ENV_SCALE = "STORAGE_PACKING_SCALE"
ENV_VERIFY = "STORAGE_PACKING_VERIFY"

_TRUTHY = {"1", "true", "yes", "on"}


# ─────────────────────────────────────────────────────────────────────────────
# Packing configuration
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PackingConfig:
    """
    Tuneable parameters for a packing run.

    Attributes:
        max_expanded_items: Ceiling on the number of individual units after
                            quantity expansion. Zero or negative disables it.
        scale:              Renderer units per inch for the visualization
                            adapter.
        verify_result:      Run the geometric validator over every result
                            before returning it.
    """
    max_expanded_items: int = DEFAULT_MAX_EXPANDED_ITEMS
    scale: float = DEFAULT_SCALE
    verify_result: bool = False

    @property
    def guard_enabled(self) -> bool:
        return self.max_expanded_items > 0

    def to_dict(self) -> dict:
        return {"max_expanded_items": self.max_expanded_items,
                "scale": self.scale,
                "verify_result": self.verify_result}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "PackingConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(
                f"Unknown packing config keys: {sorted(unknown)}. "
                f"Available: {sorted(known)}"
            )
        return cls(
            max_expanded_items=int(d.get("max_expanded_items", DEFAULT_MAX_EXPANDED_ITEMS)),
            scale=float(d.get("scale", DEFAULT_SCALE)),
            verify_result=_as_bool(d.get("verify_result", False)),
        )

    def with_env_overrides(self, environ: dict[str, str] | None = None) -> "PackingConfig":
        """Return a copy with any STORAGE_PACKING_* environment variables applied."""
        env = os.environ if environ is None else environ
        d = self.to_dict()
        if env.get(ENV_MAX_ITEMS):
            d["max_expanded_items"] = int(env[ENV_MAX_ITEMS])
        if env.get(ENV_SCALE):
            d["scale"] = float(env[ENV_SCALE])
        if env.get(ENV_VERIFY):
            d["verify_result"] = env[ENV_VERIFY].strip().lower() in _TRUTHY
        return PackingConfig.from_dict(d)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def load_config(
    path: Path | str | None = None,
    environ: dict[str, str] | None = None,
) -> PackingConfig:
    """
    Load packing configuration.

    The YAML file is expected to hold a top-level ``packing:`` mapping::

        packing:
          max_expanded_items: 500
          verify_result: true

    Environment variables override file values.

    Args:
        path:    Optional YAML file. Defaults are used when omitted.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        PackingConfig

    Raises:
        ValueError: If the file has an unexpected shape or unknown keys.
    """
    config = PackingConfig()
    if path is not None:
        text = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        section = data.get("packing", {}) or {}
        if not isinstance(section, dict):
            raise ValueError(f"'packing' section in {path} must be a mapping")
        config = PackingConfig.from_dict(section)
    return config.with_env_overrides(environ)
