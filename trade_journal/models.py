"""
models.py
---------
Value types passed through the import and analytics pipeline.

A ``TradeCandidate`` is what the parsers produce: the raw fields of one
round-trip trade. A ``Trade`` is a candidate plus an id and the derived
P&L fields. The stats types are the aggregates built from a list of trades.
"""
from dataclasses import asdict, dataclass, field, fields
from datetime import date
from enum import Enum
from typing import List, Optional

__all__ = [
    'Side',
    'Outcome',
    'TradeCandidate',
    'Trade',
    'DailyStats',
    'TickerStats',
    'OverallStats',
    'ImportResult',
]


class Side(Enum):
    LONG = "LONG"
    SHORT = "SHORT"

    @property
    def multiplier(self) -> int:
        return 1 if self is Side.LONG else -1


class Outcome(Enum):
    WIN = "WIN"
    LOSS = "LOSS"
    BREAKEVEN = "BREAKEVEN"


def _jsonable(record) -> dict:
    out = asdict(record)
    for key, value in out.items():
        if isinstance(value, Enum):
            out[key] = value.value
        elif isinstance(value, date):
            out[key] = value.isoformat()
    return out


@dataclass(frozen=True)
class TradeCandidate:
    """Parsed trade fields before any metrics are computed."""
    symbol: str
    side: Side
    qty: float
    entry_price: float
    exit_price: float
    date_open: date
    date_close: date
    fees: float = 0.0
    time_open: Optional[str] = None   # local time of day, e.g. "09:30" or "09:30:00"
    time_close: Optional[str] = None
    strategy_tag: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return _jsonable(self)


@dataclass(frozen=True)
class Trade:
    """A candidate with its id and derived P&L fields attached."""
    id: str
    symbol: str
    side: Side
    qty: float
    entry_price: float
    exit_price: float
    date_open: date
    date_close: date
    gross_pnl: float
    net_pnl: float
    pnl_percent: float
    hold_time: int  # minutes, negative when the close precedes the open
    outcome: Outcome
    fees: float = 0.0
    time_open: Optional[str] = None
    time_close: Optional[str] = None
    strategy_tag: Optional[str] = None
    notes: Optional[str] = None

    @property
    def candidate(self) -> TradeCandidate:
        names = [f.name for f in fields(TradeCandidate)]
        return TradeCandidate(**{name: getattr(self, name) for name in names})

    def to_dict(self) -> dict:
        return _jsonable(self)


@dataclass(frozen=True)
class DailyStats:
    date: date
    net_pnl: float
    trades: int
    wins: int
    losses: int


@dataclass(frozen=True)
class TickerStats:
    symbol: str
    trades: int
    net_pnl: float
    win_rate: float
    profit_factor: float
    avg_win: float
    avg_loss: float
    expectancy: float
    largest_win: float
    largest_loss: float
    avg_hold_time: float


@dataclass(frozen=True)
class OverallStats:
    total_trades: int
    net_pnl: float
    win_rate: float
    profit_factor: float
    avg_win: float
    avg_loss: float
    expectancy: float
    largest_win: float
    largest_loss: float
    avg_hold_time: float
    max_drawdown: float
    best_day: float
    worst_day: float


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a bulk import into a trade store."""
    imported_count: int
    errors: List[str] = field(default_factory=list)
