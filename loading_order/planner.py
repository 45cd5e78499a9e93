from __future__ import annotations

import logging
from typing import List
from .capture import resolve_levels
from .models import DemandItem, OrderItem, OrderResult, SkippedOrderItem, Station

logger = logging.getLogger(__name__)


def _order_line(demand: DemandItem, stations: List[Station]) -> OrderItem:
    levels = resolve_levels(demand.product_code, demand.demand_qty, stations)
    recommended = max(0, demand.demand_qty - levels.on_hand_qty)
    return OrderItem(
        product_code=demand.product_code,
        product_description=demand.description,
        demand_qty=demand.demand_qty,
        on_hand_qty=levels.on_hand_qty,
        min_qty=levels.min_qty,
        max_qty=levels.max_qty,
        recommended_order_qty=recommended,
        exceeds_max=levels.on_hand_qty + recommended > levels.max_qty,
        is_captured=levels.is_captured,
    )


def compute_order(demand: List[DemandItem], stations: List[Station]) -> OrderResult:
    """Recommend how much of each demanded product to order.

    Captured products order ``demand - on_hand`` (never below zero) and are
    flagged when that would overflow the station maximum. Everything else
    takes the pessimistic default and orders the full demand.

    ``skipped`` stays empty under the default-everything policy; it is kept
    so callers can rely on the key being present.
    """
    items: List[OrderItem] = [_order_line(d, stations) for d in demand]
    skipped: List[SkippedOrderItem] = []

    items.sort(key=lambda o: o.product_code)
    skipped.sort(key=lambda s: s.product_code)

    result = order_totals(items, skipped)
    logger.debug(
        "order: %d lines, %d units, %d over max",
        result.total_lines,
        result.total_units,
        result.exceeds_max_count,
    )
    return result


def order_totals(items: List[OrderItem], skipped: List[SkippedOrderItem]) -> OrderResult:
    ordering = [o for o in items if o.recommended_order_qty > 0]
    return OrderResult(
        items=items,
        skipped=skipped,
        total_lines=len(ordering),
        total_units=sum(o.recommended_order_qty for o in ordering),
        exceeds_max_count=sum(1 for o in items if o.exceeds_max),
    )
