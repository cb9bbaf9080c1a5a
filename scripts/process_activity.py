#!/usr/bin/env python3
"""
CLI wrapper: import broker / journal CSV exports into a cleaned trades.csv.
"""
import os, sys
# ensure repo root is on PYTHONPATH so trade_journal can be imported
_SCRIPT_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_SCRIPT_DIR, os.pardir))
sys.path.insert(0, _REPO_ROOT)
import argparse
import logging
from pathlib import Path

from trade_journal.config import DEFAULT_OUTPUT_DIR, TRADES_FILENAME
from trade_journal.processing.process_activity import process_files


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("csv_files", nargs="+", type=Path, help="CSV exports to import")
    parser.add_argument("--out-dir", type=Path, default=Path(DEFAULT_OUTPUT_DIR))
    parser.add_argument("-v", "--verbose", action="store_true", help="log dropped rows")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Importing trades...")
    trades = process_files(args.csv_files, args.out_dir)
    print(f"✔ imported {len(trades)} trades")
    print(f"✔ {TRADES_FILENAME} written to {args.out_dir / TRADES_FILENAME}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
