"""Tests for the storage-pack command-line runner."""

import json

import pytest

from storage_packing.core.errors import ValidationError
from storage_packing.runner.cli import (
    EXIT_OK,
    EXIT_PACKING_ERROR,
    main,
    parse_catalog_args,
    read_items_file,
)


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.yaml"
    path.write_text(
        "items:\n"
        "  - {itemId: dresser, quantity: 2, width: 60, depth: 18, height: 32}\n"
        "  - {itemId: box-small, quantity: 4, width: 16, depth: 12, height: 12}\n"
    )
    return path


class TestReadItems:
    def test_yaml_with_items_key(self, items_file):
        items = read_items_file(items_file)
        assert [i.item_id for i in items] == ["dresser", "box-small"]

    def test_json_list(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps([{"itemId": "a", "quantity": 1, "width": 5, "depth": 5, "height": 5}]))
        assert read_items_file(path)[0].item_id == "a"

    def test_catalog_args(self):
        assert parse_catalog_args(["dresser=2", "box-small=3", "dresser=1"]) == {"dresser": 3, "box-small": 3}

    @pytest.mark.parametrize("arg", ["dresser", "=2", "dresser=two"])
    def test_bad_catalog_args(self, arg):
        with pytest.raises(ValidationError):
            parse_catalog_args([arg])


class TestMain:
    def test_items_file(self, items_file, tmp_path, capsys):
        json_out = tmp_path / "result.json"
        csv_out = tmp_path / "result.csv"
        code = main([str(items_file), "--json", str(json_out), "--csv", str(csv_out), "--verify"])

        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "Items placed:         6" in out
        data = json.loads(json_out.read_text())
        assert data["container_count"] == 1
        assert len(data["meshes"]) == 6
        assert len(csv_out.read_text().strip().splitlines()) == 7

    def test_catalog(self, capsys):
        assert main(["--catalog", "king-bed=1", "box-medium=5"]) == EXIT_OK
        assert "Containers (packed):  1" in capsys.readouterr().out

    def test_oversized_item_exit_code(self, tmp_path, capsys):
        path = tmp_path / "piano.yaml"
        path.write_text("- {itemId: piano, quantity: 1, width: 100, depth: 60, height: 50}\n")
        assert main([str(path)]) == EXIT_PACKING_ERROR
        assert "too large" in capsys.readouterr().err

    def test_unknown_catalog_item(self, capsys):
        assert main(["--catalog", "grand-piano=1"]) == EXIT_PACKING_ERROR
        assert "grand-piano" in capsys.readouterr().err

    def test_log_level_is_case_insensitive(self, items_file):
        assert main([str(items_file), "--log-level", "debug"]) == EXIT_OK

    def test_unknown_log_level_is_a_usage_error(self, items_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(items_file), "--log-level", "LOUD"])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_requires_exactly_one_source(self, items_file):
        with pytest.raises(SystemExit):
            main([])
        with pytest.raises(SystemExit):
            main([str(items_file), "--catalog", "dresser=1"])
