from __future__ import annotations

import csv
import io
import json
import logging
from typing import Any, List, Optional
from .models import (
    ExtractionGroup,
    LineItem,
    Station,
    EXTRACTION_STATUSES,
    STATION_STATUSES,
)

logger = logging.getLogger(__name__)


class LoaderError(ValueError):
    """Raised when an uploaded payload does not match the expected shape."""


def _parse_json_list(data: bytes, what: str) -> list:
    try:
        payload = json.loads(data.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise LoaderError(f"{what}: not valid JSON ({exc})") from exc
    if not isinstance(payload, list):
        raise LoaderError(f"{what}: expected a JSON list, got {type(payload).__name__}")
    return payload


def _require(item: dict, key: str, what: str) -> Any:
    if not isinstance(item, dict):
        raise LoaderError(f"{what}: expected an object, got {type(item).__name__}")
    if key not in item:
        raise LoaderError(f"{what}: missing '{key}'")
    return item[key]


def _optional_int(value: Any, what: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise LoaderError(f"{what}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise LoaderError(f"{what}: expected an integer, got {value!r}") from exc
    raise LoaderError(f"{what}: expected an integer, got {value!r}")


def _optional_float(value: Any, what: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise LoaderError(f"{what}: expected a number, got {value!r}") from exc


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _check_status(status: str, allowed: tuple, what: str) -> str:
    if status not in allowed:
        raise LoaderError(f"{what}: unknown status {status!r} (expected one of {', '.join(allowed)})")
    return status


def _load_line_item(item: dict, what: str) -> LineItem:
    quantity = _require(item, "quantity", what)
    # floats pass through untouched, the aggregator drops them
    if isinstance(quantity, str):
        quantity = _optional_int(quantity, f"{what}.quantity")
    return LineItem(
        product_code=str(item.get("product_code") or ""),
        quantity=quantity,
        activity_code=str(item.get("activity_code") or ""),
        description=_optional_str(item.get("description")),
    )


def load_groups(data: bytes | None) -> List[ExtractionGroup]:
    if not data:
        return []
    out = []
    for idx, item in enumerate(_parse_json_list(data, "groups")):
        what = f"groups[{idx}]"
        group_id = str(_require(item, "id", what))
        status = _check_status(item.get("extraction_status") or "absent", EXTRACTION_STATUSES, what)
        line_items = [
            _load_line_item(li, f"{what}.line_items[{n}]")
            for n, li in enumerate(item.get("line_items") or [])
        ]
        cost = item.get("total_cost")
        item_count = _optional_int(item.get("item_count"), f"{what}.item_count")
        if item_count is None:
            item_count = len(line_items)
        out.append(
            ExtractionGroup(
                id=group_id,
                employee_label=_optional_str(item.get("employee_label")),
                extraction_status=status,
                line_items=line_items,
                activity_count=_optional_int(item.get("activity_count"), f"{what}.activity_count") or 0,
                item_count=item_count,
                total_cost=_optional_float(cost, f"{what}.total_cost"),
            )
        )
    logger.info("loaded %d capture groups", len(out))
    return out


def _station_from_row(row: dict, what: str) -> Station:
    station_id = _optional_str(_require(row, "id", what))
    if station_id is None:
        raise LoaderError(f"{what}: empty 'id'")
    status = _check_status(row.get("status") or "pending", STATION_STATUSES, what)
    return Station(
        id=station_id,
        product_code=_optional_str(row.get("product_code")),
        status=status,
        sign_blob_url=_optional_str(row.get("sign_blob_url")),
        stock_blob_url=_optional_str(row.get("stock_blob_url")),
        on_hand_qty=_optional_int(row.get("on_hand_qty"), f"{what}.on_hand_qty"),
        min_qty=_optional_int(row.get("min_qty"), f"{what}.min_qty"),
        max_qty=_optional_int(row.get("max_qty"), f"{what}.max_qty"),
    )


def load_stations(data: bytes | None) -> List[Station]:
    if not data:
        return []
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise LoaderError(f"stations: not valid UTF-8 ({exc})") from exc
    if text.strip().startswith("["):
        rows = _parse_json_list(data, "stations")
    else:
        rows = list(csv.DictReader(io.StringIO(text)))
    out = [_station_from_row(row, f"stations[{idx}]") for idx, row in enumerate(rows)]
    unbound = sum(1 for s in out if s.product_code is None)
    if unbound:
        logger.warning("%d stations have no product code and can never match demand", unbound)
    logger.info("loaded %d stations", len(out))
    return out
