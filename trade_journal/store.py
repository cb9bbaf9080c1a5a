"""
Trade store interface and an in-memory implementation.

The real store is remote; the journal only needs these four operations
and exchanges TradeCandidate / Trade values with it.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, Iterable, List, Optional

from trade_journal.analysis.metrics import build_trade
from trade_journal.exceptions import TradeNotFoundError
from trade_journal.models import ImportResult, Trade, TradeCandidate


class TradeStore(ABC):

    @abstractmethod
    def list(self, symbol: Optional[str] = None, start_date: Optional[date] = None,
             end_date: Optional[date] = None, limit: Optional[int] = None) -> List[Trade]:
        """Stored trades matching the filters, newest close date first."""

    @abstractmethod
    def create(self, candidate: TradeCandidate) -> str:
        """Store a candidate and return the new trade's id."""

    @abstractmethod
    def delete(self, trade_id: str) -> None:
        """Remove a trade; raises TradeNotFoundError for unknown ids."""

    @abstractmethod
    def bulk_import(self, candidates: Iterable[TradeCandidate]) -> ImportResult:
        """Store many candidates; failures are reported, not raised."""


class InMemoryTradeStore(TradeStore):
    """Dict-backed store, for local use and tests."""

    def __init__(self, trades: Iterable[Trade] = ()):
        self._trades: Dict[str, Trade] = {t.id: t for t in trades}

    def __len__(self):
        return len(self._trades)

    def get(self, trade_id: str) -> Trade:
        try:
            return self._trades[trade_id]
        except KeyError:
            raise TradeNotFoundError(trade_id) from None

    def list(self, symbol=None, start_date=None, end_date=None, limit=None):
        out = [
            t for t in self._trades.values()
            if (symbol is None or t.symbol == symbol.upper())
            and (start_date is None or t.date_close >= start_date)
            and (end_date is None or t.date_close <= end_date)
        ]
        out.sort(key=lambda t: t.date_close, reverse=True)
        return out[:limit] if limit is not None else out

    def create(self, candidate):
        trade = build_trade(candidate)
        self._trades[trade.id] = trade
        return trade.id

    def delete(self, trade_id):
        if trade_id not in self._trades:
            raise TradeNotFoundError(trade_id)
        del self._trades[trade_id]

    def bulk_import(self, candidates):
        ids = [self.create(candidate) for candidate in candidates]
        return ImportResult(imported_count=len(ids), errors=[])
