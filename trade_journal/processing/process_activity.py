"""
process_activity.py
-------------------
Orchestrates importing CSV exports into trades and writing the cleaned
trades.csv.
"""
import logging
from pathlib import Path
from typing import Iterable, List

from trade_journal.analysis.metrics import build_trade, save_trades, validate_trade
from trade_journal.config import TRADES_FILENAME
from trade_journal.models import Trade
from trade_journal.processing.csv_text import parse_csv

logger = logging.getLogger(__name__)


def import_trades(csv_text: str) -> List[Trade]:
    """Parse CSV text and derive a Trade for every candidate."""
    trades = [build_trade(c) for c in parse_csv(csv_text)]
    for trade in trades:
        for warning in validate_trade(trade):
            logger.warning(warning)
    return trades


def process_files(csv_files: Iterable, out_dir) -> List[Trade]:
    """
    Import each CSV file, then write every trade, newest close first,
    to out_dir/trades.csv. Missing files are logged and skipped.
    """
    trades = []
    for csv_file in csv_files:
        path = Path(csv_file)
        if not path.is_file():
            logger.error("CSV file not found at %s", path)
            continue
        imported = import_trades(path.read_text(encoding="utf-8-sig"))
        logger.info("%s: imported %d trade(s)", path.name, len(imported))
        trades.extend(imported)

    trades.sort(key=lambda t: t.date_close, reverse=True)

    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    save_trades(trades, out_path / TRADES_FILENAME)
    return trades
