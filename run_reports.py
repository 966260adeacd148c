#!/usr/bin/env python3
"""Print WebStore reports to the console."""

import argparse
import logging
import sys

from webstore.core.database import LOG_LEVEL, SessionLocal
from webstore.core.exceptions import ReportError
from webstore.reporting.formatting import render_report
from webstore.reporting.queries import DEFAULT_CATEGORY, DEFAULT_TOP_N, DEFAULT_WINDOW_DAYS, REPORTS
from webstore.reporting.service import ReportService
from webstore.store.dao import SnapshotDAO


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Print WebStore analytical reports")
    parser.add_argument(
        "--report",
        action="append",
        choices=list(REPORTS),
        help="Report to print (repeatable). Defaults to all reports.",
    )
    parser.add_argument("--top", type=int, default=DEFAULT_TOP_N, help="Customers in the top-customers report")
    parser.add_argument("--window-days", type=int, default=DEFAULT_WINDOW_DAYS, help="Window for recent-orders")
    parser.add_argument("--category", default=DEFAULT_CATEGORY, help="Category for category-orders")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    with SessionLocal() as session:
        service = ReportService(SnapshotDAO(session))
        try:
            results = service.run_many(
                args.report, n=args.top, window_days=args.window_days, category_name=args.category
            )
        except ReportError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    for definition, rows in results:
        print(render_report(definition.key, rows))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
