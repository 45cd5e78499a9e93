from __future__ import annotations

import logging
from typing import Dict, List
from .models import (
    DemandItem,
    DemandResult,
    DemandSource,
    ExtractionGroup,
    LineItem,
    EXCLUDED_EXTRACTION_STATUSES,
)

logger = logging.getLogger(__name__)


def _counts(item: LineItem) -> bool:
    qty = item.quantity
    # bool is an int subclass but never a real quantity
    if isinstance(qty, bool) or not isinstance(qty, int):
        return False
    return qty > 0 and bool(item.product_code)


def aggregate(groups: List[ExtractionGroup]) -> List[DemandItem]:
    """Sum counted line items per product code across all usable groups.

    Groups whose extraction errored or never ran are skipped, as are line
    items without a product code or with a quantity that is not a positive
    integer. Every counted line item adds one entry to ``sources``. The
    description is the first non-empty one seen in group order.

    The result is sorted by product code.
    """
    demand: Dict[str, DemandItem] = {}
    dropped = 0

    for group in groups:
        if group.extraction_status in EXCLUDED_EXTRACTION_STATUSES:
            continue
        for item in group.line_items:
            if not _counts(item):
                dropped += 1
                continue
            source = DemandSource(
                group_id=group.id,
                employee_label=group.employee_label,
                activity_code=item.activity_code,
            )
            existing = demand.get(item.product_code)
            if existing is None:
                demand[item.product_code] = DemandItem(
                    product_code=item.product_code,
                    demand_qty=item.quantity,
                    description=item.description or None,
                    sources=[source],
                )
                continue
            existing.demand_qty += item.quantity
            existing.sources.append(source)
            if existing.description is None and item.description:
                existing.description = item.description

    if dropped:
        logger.debug("excluded %d line items with no code or unusable quantity", dropped)

    return sorted(demand.values(), key=lambda d: d.product_code)


def demand_totals(items: List[DemandItem]) -> DemandResult:
    return DemandResult(
        items=items,
        total_products=len(items),
        total_quantity=sum(d.demand_qty for d in items),
    )
