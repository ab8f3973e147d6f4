"""Command-line runner: pack an item list and report the result."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

import yaml

from storage_packing.algorithms.shelf_packer import pack_items
from storage_packing.catalog import select_items
from storage_packing.config import load_config
from storage_packing.core.errors import PackingError, ValidationError
from storage_packing.core.models import SelectedItem
from storage_packing.core.schemas import parse_selected_items
from storage_packing.logger import configure_logging
from storage_packing.monitoring.metrics import export_to_csv, export_to_json, format_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PACKING_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def read_items_file(path: Path | str) -> list[SelectedItem]:
    """Load a YAML or JSON list of item mappings."""
    text = Path(path).read_text(encoding="utf-8")
    payload = yaml.safe_load(text)
    if isinstance(payload, dict) and "items" in payload:
        payload = payload["items"]
    return parse_selected_items(payload)


def parse_catalog_args(pairs: Sequence[str]) -> dict[str, int]:
    """Turn ``["dresser=2", "box-small=10"]`` into a quantity mapping."""
    quantities: dict[str, int] = {}
    for pair in pairs:
        item_id, sep, qty = pair.partition("=")
        if not sep or not item_id:
            raise ValidationError(f"Expected ID=QTY, got '{pair}'", field="catalog")
        try:
            quantities[item_id] = quantities.get(item_id, 0) + int(qty)
        except ValueError as exc:
            raise ValidationError(
                f"Quantity for '{item_id}' is not an integer: '{qty}'", item_id=item_id, field="quantity"
            ) from exc
    return quantities


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storage-pack",
        description="Pack household items into storage containers",
    )
    parser.add_argument("items", nargs="?", help="YAML/JSON file with the item list")
    parser.add_argument(
        "--catalog",
        nargs="+",
        metavar="ID=QTY",
        help="Pick items from the bundled inventory catalog instead of a file",
    )
    parser.add_argument("--config", help="YAML config file with a 'packing:' section")
    parser.add_argument("--json", dest="json_out", help="Write the full result as JSON")
    parser.add_argument("--csv", dest="csv_out", help="Write one CSV row per placed item")
    parser.add_argument("--verify", action="store_true", help="Check the result for overlaps and bounds")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also log to this file (rotated daily)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if bool(args.items) == bool(args.catalog):
        parser.error("give exactly one of: an items file, --catalog")

    configure_logging(args.log_level, args.log_file)

    try:
        config = load_config(args.config)
        if args.verify:
            config = replace(config, verify_result=True)

        if args.catalog:
            items = select_items(parse_catalog_args(args.catalog))
        else:
            items = read_items_file(args.items)

        result = pack_items(items, config)
    except (PackingError, ValueError) as exc:
        logger.error("Packing failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PACKING_ERROR

    print(format_summary(result))

    if args.json_out:
        export_to_json(result, args.json_out, scale=config.scale)
        print(f"Saved result to {args.json_out}")
    if args.csv_out:
        export_to_csv(result, args.csv_out)
        print(f"Saved placements to {args.csv_out}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
