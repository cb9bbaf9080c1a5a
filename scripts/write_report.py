#!/usr/bin/env python3
"""
CLI wrapper: generate the HTML journal report from a cleaned trades.csv.
"""
import os, sys
# ensure repo root is on PYTHONPATH so trade_journal can be imported
_SCRIPT_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_SCRIPT_DIR, os.pardir))
sys.path.insert(0, _REPO_ROOT)
import argparse
import datetime
import logging
from pathlib import Path

from trade_journal.analysis.filters import filter_last_days
from trade_journal.analysis.metrics import load_trades
from trade_journal.config import DEFAULT_OUTPUT_DIR, REPORT_FILENAME, TRADES_FILENAME
from trade_journal.report.renderer import DEFAULT_TEMPLATE, build_report_context, render_report


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trades", type=Path, default=Path(DEFAULT_OUTPUT_DIR) / TRADES_FILENAME)
    parser.add_argument("--template", type=Path, default=DEFAULT_TEMPLATE)
    parser.add_argument("--output", type=Path, default=Path(REPORT_FILENAME))
    parser.add_argument("--days", type=int, default=None,
                        help="only include trades closed in the last N days")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args.trades.is_file():
        print(f"Error: trades file not found at {args.trades}")
        return 1

    trades = load_trades(args.trades)
    if args.days is not None:
        trades = filter_last_days(trades, args.days, datetime.date.today())

    context = build_report_context(trades)
    context["title"] = "Trade Journal"
    render_report(args.template, context, args.output)
    print(f"Report written to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
