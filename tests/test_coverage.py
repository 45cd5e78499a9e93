"""Tests for loading_order/coverage.py"""

from loading_order.coverage import evaluate


class TestEvaluate:
    def test_captured_station_supplies_levels(self, demand_item, station):
        result = evaluate([demand_item("Z", 4, "Stool")], [station("Z", on_hand=1, max_qty=3, min_qty=2)])

        item = result.items[0]
        assert item.is_captured is True
        assert item.station_id == "s1"
        assert (item.on_hand_qty, item.min_qty, item.max_qty) == (1, 2, 3)
        assert item.product_description == "Stool"

    def test_missing_min_defaults_to_zero(self, demand_item, station):
        item = evaluate([demand_item("Z", 4)], [station("Z", min_qty=None)]).items[0]
        assert item.is_captured is True
        assert item.min_qty == 0

    def test_no_station_uses_pessimistic_default(self, demand_item):
        item = evaluate([demand_item("Z", 4)], []).items[0]

        assert item.is_captured is False
        assert item.station_id is None
        assert (item.on_hand_qty, item.min_qty, item.max_qty) == (0, 0, 4)

    def test_station_without_images_is_not_captured(self, demand_item, station):
        item = evaluate([demand_item("Z", 4)], [station("Z", on_hand=10, max_qty=20, min_qty=5, images=False)]).items[0]

        assert item.is_captured is False
        assert item.station_id == "s1"
        assert (item.on_hand_qty, item.min_qty, item.max_qty) == (0, 0, 4)

    def test_station_with_only_sign_image_is_not_captured(self, demand_item, station):
        s = station("Z")
        s.stock_blob_url = None
        assert evaluate([demand_item("Z", 4)], [s]).items[0].is_captured is False

    def test_non_valid_or_incomplete_stations_never_match(self, demand_item, station):
        stations = [
            station("Z", station_id="pending", status="pending"),
            station("Z", station_id="attention", status="needs_attention"),
            station("Z", station_id="failed", status="failed"),
            station("Z", station_id="no-on-hand", on_hand=None),
            station("Z", station_id="no-max", max_qty=None),
        ]

        item = evaluate([demand_item("Z", 4)], stations).items[0]

        assert item.is_captured is False
        assert item.station_id is None

    def test_first_matching_station_wins(self, demand_item, station):
        stations = [
            station("Z", station_id="first", on_hand=1, max_qty=3),
            station("Z", station_id="second", on_hand=9, max_qty=9),
        ]

        item = evaluate([demand_item("Z", 4)], stations).items[0]

        assert item.station_id == "first"
        assert item.on_hand_qty == 1

    def test_first_match_without_images_shadows_later_capture(self, demand_item, station):
        stations = [
            station("Z", station_id="metadata-only", images=False),
            station("Z", station_id="imaged"),
        ]

        item = evaluate([demand_item("Z", 4)], stations).items[0]

        assert item.station_id == "metadata-only"
        assert item.is_captured is False

    def test_summary(self, demand_item, station):
        demand = [demand_item("A", 1), demand_item("B", 1), demand_item("C", 1)]

        summary = evaluate(demand, [station("A")]).summary

        assert summary.can_proceed is True
        assert summary.covered_count == 1
        assert summary.total_count == 3
        assert summary.percentage == 33

    def test_percentage_rounds_half_up(self, demand_item, station):
        demand = [demand_item(code, 1) for code in "ABCDEFGH"]
        # 1 of 8 = 12.5%
        assert evaluate(demand, [station("A")]).summary.percentage == 13

    def test_empty_demand_is_fully_covered(self):
        summary = evaluate([], []).summary

        assert summary.percentage == 100
        assert summary.covered_count == 0
        assert summary.total_count == 0
        assert summary.can_proceed is True

    def test_nothing_captured_can_still_proceed(self, demand_item):
        summary = evaluate([demand_item("A", 1)], []).summary
        assert summary.can_proceed is True
        assert summary.percentage == 0
