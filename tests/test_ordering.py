"""Tests for item expansion and height ordering."""

from storage_packing.algorithms.ordering import (
    expand_and_sort_items,
    expand_items,
    height_sorted_order,
)


class TestExpandItems:
    def test_empty(self):
        assert expand_items([]) == []
        assert expand_and_sort_items([]) == []

    def test_one_unit_per_quantity(self, make_item):
        units = expand_items([make_item("a", quantity=3), make_item("b", quantity=2)])
        assert [(u.item_id, u.instance_index) for u in units] == [
            ("a", 0), ("a", 1), ("a", 2), ("b", 0), ("b", 1),
        ]
        assert [u.sequence for u in units] == [0, 1, 2, 3, 4]

    def test_repeated_id_continues_numbering(self, make_item):
        units = expand_items([
            make_item("chair", quantity=2),
            make_item("table"),
            make_item("chair", quantity=1),
        ])
        assert [(u.item_id, u.instance_index) for u in units] == [
            ("chair", 0), ("chair", 1), ("table", 0), ("chair", 2),
        ]

    def test_units_share_source_item(self, make_item):
        item = make_item("a", quantity=2, width=12, depth=7, height=3, color="#abcdef")
        units = expand_items([item])
        assert all(u.item is item for u in units)
        assert (units[1].width, units[1].depth, units[1].height, units[1].color) == (12, 7, 3, "#abcdef")


class TestHeightOrder:
    def test_tallest_first(self, make_item):
        units = expand_and_sort_items([
            make_item("low", height=5),
            make_item("high", height=50),
            make_item("mid", height=20),
        ])
        assert [u.item_id for u in units] == ["high", "mid", "low"]

    def test_ties_keep_expansion_order(self, make_item):
        units = expand_and_sort_items([
            make_item("a", quantity=2, height=30),
            make_item("b", quantity=1, height=30),
            make_item("c", quantity=1, height=40),
            make_item("d", quantity=2, height=30),
        ])
        assert [(u.item_id, u.instance_index) for u in units] == [
            ("c", 0), ("a", 0), ("a", 1), ("b", 0), ("d", 0), ("d", 1),
        ]

    def test_sequence_decides_ties_regardless_of_input_order(self, make_item):
        units = expand_items([make_item("x", quantity=3, height=10)])
        shuffled = [units[2], units[0], units[1]]
        assert [u.sequence for u in height_sorted_order(shuffled)] == [0, 1, 2]
