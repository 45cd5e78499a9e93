"""Tests for loading_order/run.py"""

import json

from loading_order import data
from loading_order.run import build_report, main


def test_build_report_sections():
    report = build_report(data.sample_groups(), data.sample_stations())

    assert set(report) == {"demand", "coverage", "order"}
    assert report["demand"]["totalQuantity"] == 11
    assert report["coverage"]["summary"]["percentage"] == 50
    assert report["order"]["totals"]["totalUnits"] == 6


def test_main_writes_outputs(tmp_path):
    assert main(["--out", str(tmp_path), "--pdf"]) == 0

    report = json.loads((tmp_path / "order.json").read_text())
    assert report["order"]["skippedItems"] == []
    assert (tmp_path / "order.pdf").read_bytes().startswith(b"%PDF")


def test_main_reads_input_files(tmp_path):
    groups = tmp_path / "groups.json"
    groups.write_text(json.dumps([{"id": "g1", "extraction_status": "success", "line_items": [{"product_code": "Z", "quantity": 4}]}]))
    stations = tmp_path / "stations.csv"
    stations.write_text("id,product_code,status,sign_blob_url,stock_blob_url,on_hand_qty,min_qty,max_qty\ns1,Z,valid,s,s,1,,3\n")
    out = tmp_path / "out"

    assert main(["--groups", str(groups), "--stations", str(stations), "--out", str(out)]) == 0

    item = json.loads((out / "order.json").read_text())["order"]["orderItems"][0]
    assert item["recommendedOrderQty"] == 3
    assert item["exceedsMax"] is True


def test_main_rejects_bad_input(tmp_path):
    groups = tmp_path / "groups.json"
    groups.write_text("{}")

    assert main(["--groups", str(groups), "--out", str(tmp_path)]) == 2
    assert not (tmp_path / "order.json").exists()


def test_main_reports_missing_input_file(tmp_path):
    assert main(["--groups", str(tmp_path / "missing.json"), "--out", str(tmp_path)]) == 2
    assert not (tmp_path / "order.json").exists()
