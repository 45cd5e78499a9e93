import pytest

from loading_order.models import DemandItem, ExtractionGroup, LineItem, Station


def make_group(group_id="g1", status="success", items=(), label=None, **kwargs):
    """Build a group; items are LineItem or (code, qty[, activity[, description]]) tuples."""
    line_items = []
    for item in items:
        if isinstance(item, LineItem):
            line_items.append(item)
            continue
        code, qty, *rest = item
        activity = rest[0] if rest else "ACT-1"
        description = rest[1] if len(rest) > 1 else None
        line_items.append(LineItem(product_code=code, quantity=qty, activity_code=activity, description=description))
    return ExtractionGroup(
        id=group_id,
        employee_label=label,
        extraction_status=status,
        line_items=line_items,
        **kwargs,
    )


def make_station(code="Z", station_id="s1", status="valid", on_hand=1, max_qty=3, min_qty=None, images=True):
    return Station(
        id=station_id,
        product_code=code,
        status=status,
        sign_blob_url="s" if images else None,
        stock_blob_url="s" if images else None,
        on_hand_qty=on_hand,
        min_qty=min_qty,
        max_qty=max_qty,
    )


def make_demand(code="Z", qty=4, description=None):
    return DemandItem(product_code=code, demand_qty=qty, description=description, sources=[])


@pytest.fixture
def group():
    return make_group


@pytest.fixture
def station():
    return make_station


@pytest.fixture
def demand_item():
    return make_demand
