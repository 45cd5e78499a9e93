from __future__ import annotations

import logging
from typing import List
from .capture import resolve_levels
from .models import CoverageItem, CoverageResult, CoverageSummary, DemandItem, Station

logger = logging.getLogger(__name__)


def _percentage(covered: int, total: int) -> int:
    if total == 0:
        return 100
    # round half up on integers
    return (200 * covered + total) // (2 * total)


def evaluate(demand: List[DemandItem], stations: List[Station]) -> CoverageResult:
    items: List[CoverageItem] = []
    for d in demand:
        levels = resolve_levels(d.product_code, d.demand_qty, stations)
        items.append(
            CoverageItem(
                product_code=d.product_code,
                product_description=d.description,
                demand_qty=d.demand_qty,
                is_captured=levels.is_captured,
                station_id=levels.station_id,
                on_hand_qty=levels.on_hand_qty,
                min_qty=levels.min_qty,
                max_qty=levels.max_qty,
            )
        )

    covered = sum(1 for c in items if c.is_captured)
    total = len(items)
    logger.debug("coverage: %d of %d demanded products captured", covered, total)
    summary = CoverageSummary(
        # coverage is informational, never a gate
        can_proceed=True,
        covered_count=covered,
        total_count=total,
        percentage=_percentage(covered, total),
    )
    return CoverageResult(items=items, summary=summary)
