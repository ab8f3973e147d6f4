"""Request schemas for item payloads coming from the web form or files.

The form posts camelCase keys (``itemId``); files written by hand usually use
``item_id``. Both are accepted.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from storage_packing.core.errors import ValidationError
from storage_packing.core.models import SelectedItem

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#9CA3AF"

PositiveInches = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class SelectedItemIn(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    item_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("itemId", "item_id", "id"),
    )
    # strict: lax mode would coerce true -> 1
    quantity: int = Field(gt=0, strict=True)
    width: PositiveInches
    depth: PositiveInches
    height: PositiveInches
    color: str = DEFAULT_COLOR

    def to_selected_item(self) -> SelectedItem:
        return SelectedItem(
            item_id=self.item_id,
            quantity=self.quantity,
            width=self.width,
            depth=self.depth,
            height=self.height,
            color=self.color,
        )


_ITEM_LIST = TypeAdapter(List[SelectedItemIn])


def parse_selected_items(payload: Any) -> list[SelectedItem]:
    """
    Validate a raw list of item mappings and convert them to SelectedItem.

    Args:
        payload: List of dicts (decoded JSON / YAML).

    Returns:
        List of SelectedItem in payload order.

    Raises:
        ValidationError: On the first schema violation, with its location.
    """
    try:
        parsed = _ITEM_LIST.validate_python(payload)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        item_id = _item_id_at(payload, first["loc"])
        field = str(first["loc"][-1]) if len(first["loc"]) > 1 else None
        logger.warning("Rejected item payload at %s: %s", loc or "<root>", first["msg"])
        raise ValidationError(
            f"Invalid item payload at {loc or '<root>'}: {first['msg']}",
            item_id=item_id,
            field=field,
        ) from exc
    return [item.to_selected_item() for item in parsed]


def _item_id_at(payload: Any, loc: tuple) -> str | None:
    if not loc or not isinstance(loc[0], int) or not isinstance(payload, list):
        return None
    try:
        entry = payload[loc[0]]
    except IndexError:
        return None
    if not isinstance(entry, dict):
        return None
    for key in ("itemId", "item_id", "id"):
        if key in entry:
            return str(entry[key])
    return None
