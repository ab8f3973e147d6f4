"""Tests for parsing raw item payloads."""

import pytest

from storage_packing import ValidationError, parse_selected_items
from storage_packing.core.models import SelectedItem
from storage_packing.core.schemas import DEFAULT_COLOR


class TestParseSelectedItems:
    def test_camel_case_form_payload(self):
        items = parse_selected_items([
            {"itemId": "dresser", "quantity": 2, "width": 60, "depth": 18, "height": 32, "color": "#D97706"},
        ])
        assert items == [SelectedItem("dresser", 2, 60.0, 18.0, 32.0, "#D97706")]

    def test_snake_case_and_default_color(self):
        items = parse_selected_items([
            {"item_id": "box", "quantity": 1, "width": 16, "depth": 12, "height": 12},
        ])
        assert items[0].item_id == "box"
        assert items[0].color == DEFAULT_COLOR

    def test_unknown_fields_ignored(self):
        items = parse_selected_items([
            {"itemId": "x", "quantity": 1, "width": 1, "depth": 1, "height": 1, "name": "X", "icon": "Box"},
        ])
        assert len(items) == 1

    def test_empty_list(self):
        assert parse_selected_items([]) == []

    @pytest.mark.parametrize(
        "field, value",
        [
            ("quantity", 0), ("quantity", -2), ("quantity", True), ("quantity", "3"),
            ("width", 0), ("depth", -1), ("height", "tall"),
        ],
    )
    def test_invalid_values(self, field, value):
        entry = {"itemId": "sofa", "quantity": 1, "width": 85, "depth": 36, "height": 35}
        entry[field] = value
        with pytest.raises(ValidationError) as exc_info:
            parse_selected_items([entry])
        err = exc_info.value
        assert err.field == field
        assert err.item_id == "sofa"
        assert f"0.{field}" in str(err)

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_selected_items([{"itemId": "lamp", "quantity": 1, "width": 18, "depth": 18}])
        assert exc_info.value.field == "height"

    def test_not_a_list(self):
        with pytest.raises(ValidationError):
            parse_selected_items({"itemId": "lamp"})
