"""
journal.py
----------
TradeJournal ties a trade store to the import pipeline and the stats
functions. Stats are recomputed from the store on every call.
"""
import logging
from datetime import date
from typing import List, Optional

from trade_journal.analysis.metrics import build_trade, validate_trade
from trade_journal.analysis.summary import (
    calculate_overall_stats,
    get_daily_stats,
    get_ticker_stats,
)
from trade_journal.models import DailyStats, OverallStats, TickerStats, Trade, TradeCandidate
from trade_journal.processing.csv_text import parse_csv
from trade_journal.store import InMemoryTradeStore, TradeStore

logger = logging.getLogger(__name__)


class TradeJournal:
    def __init__(self, store: Optional[TradeStore] = None):
        self.store = store if store is not None else InMemoryTradeStore()

    def add_trade(self, candidate: TradeCandidate) -> Trade:
        trade = build_trade(candidate, trade_id=self.store.create(candidate))
        for warning in validate_trade(trade):
            logger.warning(warning)
        return trade

    def import_csv(self, csv_text: str) -> int:
        """Parse CSV text, store the trades, and return how many were imported."""
        candidates = parse_csv(csv_text)
        if not candidates:
            return 0
        result = self.store.bulk_import(candidates)
        for error in result.errors:
            logger.warning("Import error: %s", error)
        logger.info("Imported %d of %d trade(s)", result.imported_count, len(candidates))
        return result.imported_count

    def delete_trade(self, trade_id: str) -> None:
        self.store.delete(trade_id)

    def trades(self, start: Optional[date] = None, end: Optional[date] = None) -> List[Trade]:
        """Trades closed within [start, end], newest first."""
        return self.store.list(start_date=start, end_date=end)

    def overall_stats(self, start: Optional[date] = None, end: Optional[date] = None) -> OverallStats:
        return calculate_overall_stats(self.trades(start, end))

    def daily_stats(self, start: Optional[date] = None, end: Optional[date] = None) -> List[DailyStats]:
        return get_daily_stats(self.trades(start, end))

    def ticker_stats(self, start: Optional[date] = None, end: Optional[date] = None) -> List[TickerStats]:
        return get_ticker_stats(self.trades(start, end))
