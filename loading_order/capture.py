"""Station capture rules shared by coverage and order computation.

A station backs a product when it is ``valid`` and carries both an on-hand
count and a maximum. It only counts as *captured* when, in addition, both
the sign and the stock photos were uploaded. Products without a captured
station fall back to the pessimistic default: nothing on hand, no minimum,
and a maximum equal to the full demand.
"""
from __future__ import annotations

from typing import List, Optional
from .models import Station, StockLevels


def find_matching_station(product_code: str, stations: List[Station]) -> Optional[Station]:
    # first match in caller order wins
    for station in stations:
        if (
            station.product_code == product_code
            and station.status == "valid"
            and station.on_hand_qty is not None
            and station.max_qty is not None
        ):
            return station
    return None


def is_captured(station: Optional[Station]) -> bool:
    if station is None:
        return False
    return bool(station.sign_blob_url) and bool(station.stock_blob_url)


def resolve_levels(product_code: str, demand_qty: int, stations: List[Station]) -> StockLevels:
    station = find_matching_station(product_code, stations)
    if is_captured(station):
        return StockLevels(
            on_hand_qty=station.on_hand_qty or 0,
            min_qty=station.min_qty or 0,
            max_qty=station.max_qty,
            is_captured=True,
            station_id=station.id,
        )
    return StockLevels(
        on_hand_qty=0,
        min_qty=0,
        max_qty=demand_qty,
        is_captured=False,
        station_id=station.id if station else None,
    )
