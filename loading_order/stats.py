from __future__ import annotations

from typing import List
from .models import ExtractionGroup, ExtractionStats


def summarize(groups: List[ExtractionGroup]) -> ExtractionStats:
    stats = ExtractionStats(total_groups=len(groups))
    for group in groups:
        status = group.extraction_status
        if status == "error":
            stats.error_groups += 1
            continue
        if status not in ("success", "warning"):
            continue
        # warning is a success variant for counting
        if status == "warning":
            stats.warning_groups += 1
        stats.extracted_groups += 1
        stats.total_activities += group.activity_count
        stats.total_items += group.item_count
        stats.total_cost += group.total_cost or 0.0
    return stats
