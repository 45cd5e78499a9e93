from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


EXTRACTION_STATUSES = ("success", "warning", "error", "absent")
STATION_STATUSES = ("pending", "valid", "needs_attention", "failed")

# groups in these states contribute no demand
EXCLUDED_EXTRACTION_STATUSES = ("error", "absent")


@dataclass
class LineItem:
    product_code: str
    quantity: int
    activity_code: str
    description: Optional[str] = None


@dataclass
class ExtractionGroup:
    id: str
    employee_label: Optional[str]
    extraction_status: str  # success, warning, error, absent
    line_items: List[LineItem] = field(default_factory=list)
    activity_count: int = 0
    item_count: int = 0
    total_cost: Optional[float] = None


@dataclass
class Station:
    id: str
    product_code: Optional[str]
    status: str  # pending, valid, needs_attention, failed
    sign_blob_url: Optional[str] = None
    stock_blob_url: Optional[str] = None
    on_hand_qty: Optional[int] = None
    min_qty: Optional[int] = None
    max_qty: Optional[int] = None


@dataclass
class DemandSource:
    group_id: str
    employee_label: Optional[str]
    activity_code: str


@dataclass
class DemandItem:
    product_code: str
    demand_qty: int
    description: Optional[str] = None
    sources: List[DemandSource] = field(default_factory=list)


@dataclass
class DemandResult:
    items: List[DemandItem]
    total_products: int
    total_quantity: int


@dataclass
class ExtractionStats:
    total_groups: int = 0
    extracted_groups: int = 0
    error_groups: int = 0
    warning_groups: int = 0
    total_activities: int = 0
    total_items: int = 0
    total_cost: float = 0.0


@dataclass
class StockLevels:
    on_hand_qty: int
    min_qty: int
    max_qty: int
    is_captured: bool
    station_id: Optional[str] = None


@dataclass
class CoverageItem:
    product_code: str
    product_description: Optional[str]
    demand_qty: int
    is_captured: bool
    on_hand_qty: int
    min_qty: int
    max_qty: int
    station_id: Optional[str] = None


@dataclass
class CoverageSummary:
    can_proceed: bool
    covered_count: int
    total_count: int
    percentage: int


@dataclass
class CoverageResult:
    items: List[CoverageItem]
    summary: CoverageSummary


@dataclass
class OrderItem:
    product_code: str
    product_description: Optional[str]
    demand_qty: int
    on_hand_qty: int
    min_qty: int
    max_qty: int
    recommended_order_qty: int
    exceeds_max: bool
    is_captured: bool


@dataclass
class SkippedOrderItem:
    product_code: str
    demand_qty: int
    reason: str  # no_station, station_invalid, missing_data


@dataclass
class OrderResult:
    items: List[OrderItem]
    skipped: List[SkippedOrderItem]
    total_lines: int = 0
    total_units: int = 0
    exceeds_max_count: int = 0
