import logging
import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_add_src_to_path()

from storage_packing.core.models import SelectedItem  # noqa: E402


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers/levels attached by configure_logging during a test."""
    logger = logging.getLogger("storage_packing")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


@pytest.fixture
def make_item():
    """Factory for SelectedItem with sensible defaults."""
    def _make(item_id="item", quantity=1, width=10.0, depth=10.0, height=10.0, color="#123456"):
        return SelectedItem(
            item_id=item_id, quantity=quantity, width=width,
            depth=depth, height=height, color=color,
        )
    return _make


@pytest.fixture
def household_mix():
    """A realistic one-bedroom move drawn from the bundled catalog."""
    return {
        "king-bed": 1,
        "king-mattress": 1,
        "dresser": 2,
        "nightstand": 2,
        "sofa-3-seat": 1,
        "armchair": 1,
        "tv-55": 1,
        "refrigerator": 1,
        "dining-table-4": 1,
        "dining-chair": 4,
        "lawn-mower": 1,
        "box-wardrobe": 3,
        "box-large": 10,
        "box-medium": 20,
        "box-small": 30,
    }
