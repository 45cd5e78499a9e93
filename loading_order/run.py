from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from . import config, data, loader
from .coverage import evaluate
from .demand import aggregate, demand_totals
from .export import coverage_to_dict, demand_to_dict, order_pdf_bytes, order_to_dict
from .planner import compute_order
from .stats import summarize

logger = logging.getLogger(__name__)


def build_report(groups, stations) -> dict:
    demand = aggregate(groups)
    coverage = evaluate(demand, stations)
    order = compute_order(demand, stations)
    return {
        "demand": demand_to_dict(demand_totals(demand), summarize(groups)),
        "coverage": coverage_to_dict(coverage),
        "order": order_to_dict(order, coverage),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute demand, coverage and the recommended order for a session.")
    parser.add_argument("--groups", type=Path, help="JSON file with capture groups (default: bundled sample)")
    parser.add_argument("--stations", type=Path, help="JSON or CSV file with stations (default: bundled sample)")
    parser.add_argument("--out", type=Path, default=config.OUTPUT_DIR, help="output directory")
    parser.add_argument("--pdf", action="store_true", help="also write order.pdf")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        groups = loader.load_groups(args.groups.read_bytes()) if args.groups else data.sample_groups()
        stations = loader.load_stations(args.stations.read_bytes()) if args.stations else data.sample_stations()
    except (loader.LoaderError, OSError) as exc:
        logger.error("%s", exc)
        return 2

    report = build_report(groups, stations)
    args.out.mkdir(parents=True, exist_ok=True)
    out_file = args.out / "order.json"
    out_file.write_text(json.dumps(report, indent=2))
    logger.info("order written to %s", out_file)

    if args.pdf:
        demand = aggregate(groups)
        pdf_file = args.out / "order.pdf"
        pdf_file.write_bytes(order_pdf_bytes(compute_order(demand, stations), evaluate(demand, stations)))
        logger.info("pdf written to %s", pdf_file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
