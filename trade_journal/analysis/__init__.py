"""
trade_journal.analysis: per-trade metrics, aggregate stats, filters and display formatting.
"""
from .metrics import (
    derive_metrics,
    build_trade,
    validate_trade,
    trades_to_frame,
    save_trades,
    load_trades,
)
from .summary import (
    profit_factor,
    drawdown_curve,
    max_drawdown,
    calculate_overall_stats,
    get_daily_stats,
    get_ticker_stats,
)
from .filters import filter_by_close_date, filter_last_days
from .formatting import (
    format_currency,
    format_percent,
    format_hold_time,
    format_profit_factor,
)
