from __future__ import annotations

from .models import ExtractionGroup, LineItem, Station


def sample_groups() -> list[ExtractionGroup]:
    return [
        ExtractionGroup(
            id="grp-anna",
            employee_label="Anna",
            extraction_status="success",
            line_items=[
                LineItem("ART.100010", 2, "ACT-4411", "AD mattress ProMatt. L200 x W85 x H18 cm"),
                LineItem("ART.100071", 1, "ACT-4411", "Shower stool height adjustable 43 - 58 cm"),
                LineItem("ART.100174", 3, "ACT-4412", "Bedpan incl. lid"),
            ],
            activity_count=2,
            item_count=3,
            total_cost=0.042,
        ),
        ExtractionGroup(
            id="grp-bram",
            employee_label="Bram",
            extraction_status="warning",
            line_items=[
                LineItem("ART.100010", 1, "ACT-4420", None),
                LineItem("ART.100082", 4, "ACT-4420", "Sliding sheet Large. L150 x W82 cm"),
                # partial read, quantity not legible
                LineItem("ART.100055", 0, "ACT-4421", "Bed table classic"),
            ],
            activity_count=2,
            item_count=3,
            total_cost=None,
        ),
        ExtractionGroup(
            id="grp-chris",
            employee_label=None,
            extraction_status="error",
            line_items=[LineItem("ART.100205", 2, "ACT-4430", None)],
        ),
        ExtractionGroup(id="grp-dana", employee_label="Dana", extraction_status="absent"),
    ]


def sample_stations() -> list[Station]:
    return [
        Station(
            id="st-01",
            product_code="ART.100010",
            status="valid",
            sign_blob_url="blob://stations/st-01/sign.jpg",
            stock_blob_url="blob://stations/st-01/stock.jpg",
            on_hand_qty=1,
            min_qty=10,
            max_qty=20,
        ),
        Station(
            id="st-02",
            product_code="ART.100082",
            status="valid",
            sign_blob_url="blob://stations/st-02/sign.jpg",
            stock_blob_url="blob://stations/st-02/stock.jpg",
            on_hand_qty=18,
            min_qty=10,
            max_qty=20,
        ),
        # sign photographed, stock shot still missing
        Station(
            id="st-03",
            product_code="ART.100174",
            status="valid",
            sign_blob_url="blob://stations/st-03/sign.jpg",
            on_hand_qty=2,
            min_qty=5,
            max_qty=10,
        ),
        Station(id="st-04", product_code="ART.100071", status="needs_attention", on_hand_qty=None),
    ]
