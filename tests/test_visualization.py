"""Tests for the renderer coordinate adapter."""

import pytest

from storage_packing import pack_items
from storage_packing.core.models import Dimensions, Position
from storage_packing.visualization import (
    get_container_center_position,
    get_container_visualization_dimensions,
    packed_item_to_mesh,
    to_visualization_dimensions,
    to_visualization_position,
)


@pytest.fixture
def dims():
    return Dimensions(width=40.0, depth=30.0, height=30.0)


class TestItemPosition:
    def test_first_container_centres_item(self, dims):
        pos = to_visualization_position(Position(0, 0, 0), dims, 0)
        assert pos == pytest.approx({"x": -0.275, "y": 0.15, "z": -0.13})

    def test_container_offset(self, dims):
        pos = to_visualization_position(Position(0, 0, 0), dims, 1)
        assert pos["x"] == pytest.approx((20 - 47.5 + 115) * 0.01)
        assert pos["z"] == pytest.approx(-0.13)

    def test_scale(self, dims):
        pos = to_visualization_position(Position(10, 20, 5), dims, 0, scale=1.0)
        assert pos == pytest.approx({"x": 10 + 20 - 47.5, "y": 20 + 15, "z": 5 + 15 - 28})


class TestDimensions:
    def test_item_dimensions(self, dims):
        assert to_visualization_dimensions(dims) == pytest.approx(
            {"width": 0.4, "height": 0.3, "depth": 0.3}
        )

    def test_container_dimensions(self):
        assert get_container_visualization_dimensions() == pytest.approx(
            {"width": 0.95, "height": 0.835, "depth": 0.56}
        )

    def test_container_center(self):
        assert get_container_center_position(0) == pytest.approx({"x": 0.0, "y": 0.4175, "z": 0.0})
        assert get_container_center_position(2, scale=1.0) == pytest.approx({"x": 230.0, "y": 41.75, "z": 0.0})


class TestMesh:
    def test_packed_item_to_mesh(self, make_item):
        result = pack_items([make_item("lamp", quantity=2, width=18, depth=18, height=65, color="#FCD34D")])
        mesh = packed_item_to_mesh(result.packed_items[1])
        assert mesh["key"] == "lamp-1"
        assert mesh["color"] == "#FCD34D"
        assert mesh["position"]["x"] == pytest.approx((19 + 9 - 47.5) * 0.01)
        assert mesh["size"]["height"] == pytest.approx(0.65)
