from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List
from fpdf import FPDF
from fpdf.enums import XPos, YPos
from .models import CoverageResult, DemandResult, ExtractionStats, OrderResult


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {_camel(k): _camelize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_camelize(v) for v in value]
    return value


def to_dict(record: Any) -> Any:
    if is_dataclass(record):
        return _camelize(asdict(record))
    if isinstance(record, list):
        return [to_dict(r) for r in record]
    return record


def demand_to_dict(demand: DemandResult, stats: ExtractionStats) -> Dict[str, Any]:
    return {
        "items": to_dict(demand.items),
        "totalProducts": demand.total_products,
        "totalQuantity": demand.total_quantity,
        "stats": to_dict(stats),
    }


def coverage_to_dict(coverage: CoverageResult) -> Dict[str, Any]:
    return {
        "coverage": to_dict(coverage.items),
        "summary": to_dict(coverage.summary),
    }


def order_to_dict(order: OrderResult, coverage: CoverageResult) -> Dict[str, Any]:
    return {
        "orderItems": to_dict(order.items),
        "skippedItems": to_dict(order.skipped),
        "totals": {
            "totalLines": order.total_lines,
            "totalUnits": order.total_units,
            "exceedsMaxCount": order.exceeds_max_count,
        },
        "coverage": to_dict(coverage.summary),
    }


def _latin1(text: str) -> str:
    # core fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def _row(pdf: FPDF, cells: List[tuple], bold: bool = False):
    pdf.set_font("Helvetica", "B" if bold else "", 9)
    for idx, (width, text) in enumerate(cells):
        last = idx == len(cells) - 1
        pdf.cell(
            width,
            7,
            _latin1(str(text)),
            border=1,
            new_x=XPos.LMARGIN if last else XPos.RIGHT,
            new_y=YPos.NEXT if last else YPos.TOP,
        )


def order_pdf_bytes(order: OrderResult, coverage: CoverageResult, title: str = "Recommended order") -> bytes:
    pdf = FPDF(orientation="L", unit="mm", format="A4")
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, _latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font("Helvetica", "", 11)
    summary = coverage.summary
    pdf.cell(
        0,
        7,
        f"Stations captured: {summary.covered_count}/{summary.total_count} ({summary.percentage}%)",
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )
    pdf.cell(
        0,
        7,
        f"Lines to order: {order.total_lines}   Units: {order.total_units}   Over max: {order.exceeds_max_count}",
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )
    pdf.ln(3)

    widths = (32, 105, 20, 20, 16, 16, 22, 20, 25)
    _row(
        pdf,
        list(zip(widths, ("Product", "Description", "Demand", "On hand", "Min", "Max", "Order", "Captured", "Over max"))),
        bold=True,
    )
    for item in order.items:
        description = item.product_description or ""
        if len(description) > 60:
            description = description[:57] + "..."
        _row(
            pdf,
            list(
                zip(
                    widths,
                    (
                        item.product_code,
                        description,
                        item.demand_qty,
                        item.on_hand_qty,
                        item.min_qty,
                        item.max_qty,
                        item.recommended_order_qty,
                        "yes" if item.is_captured else "no",
                        "!" if item.exceeds_max else "",
                    ),
                )
            ),
        )
    if order.skipped:
        pdf.ln(4)
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(0, 8, "Skipped products", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        for skipped in order.skipped:
            _row(pdf, [(40, skipped.product_code), (30, skipped.demand_qty), (50, skipped.reason)])
    return bytes(pdf.output())
