"""
trade_journal: import executed trades from CSV exports and compute
journal statistics (P&L, win rate, profit factor, drawdown).
"""
from .models import (
    Side,
    Outcome,
    TradeCandidate,
    Trade,
    DailyStats,
    TickerStats,
    OverallStats,
    ImportResult,
)
from .processing.csv_text import parse_csv, split_csv_line
from .analysis import (
    derive_metrics,
    build_trade,
    calculate_overall_stats,
    get_daily_stats,
    get_ticker_stats,
)
from .journal import TradeJournal

__version__ = "0.1.0"
