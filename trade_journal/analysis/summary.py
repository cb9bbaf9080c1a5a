"""
summary.py
----------
Aggregate trades into per-day, per-symbol and overall statistics.

Every function here is total: an empty trade list yields zeros / empty
lists, never an exception or NaN.
"""
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

from trade_journal.models import DailyStats, OverallStats, TickerStats, Trade
from .metrics import trades_to_frame


def profit_factor(gross_wins: float, gross_losses: float) -> float:
    """
    Sum of winning P&L over the magnitude of losing P&L.
    +inf when there are wins but no losses, 0 when there is neither.
    """
    gross_losses = abs(gross_losses)
    if gross_losses > 0:
        return float(gross_wins / gross_losses)
    return np.inf if gross_wins > 0 else 0.0


def _trade_metrics(df: pd.DataFrame) -> dict:
    """Metrics shared by the per-symbol and overall stats."""
    total = len(df)
    if total == 0:
        return {
            "net_pnl": 0.0,
            "win_rate": 0.0,
            "profit_factor": 0.0,
            "avg_win": 0.0,
            "avg_loss": 0.0,
            "expectancy": 0.0,
            "largest_win": 0.0,
            "largest_loss": 0.0,
            "avg_hold_time": 0.0,
        }

    net = df["net_pnl"].astype(float)
    wins = net[df["outcome"] == "WIN"]
    losses = net[df["outcome"] == "LOSS"]
    gross_wins = float(wins.sum())
    gross_losses = abs(float(losses.sum()))
    net_pnl = float(net.sum())

    return {
        "net_pnl": net_pnl,
        "win_rate": len(wins) / total * 100,
        "profit_factor": profit_factor(gross_wins, gross_losses),
        "avg_win": gross_wins / len(wins) if len(wins) else 0.0,
        # loss magnitude, reported positive
        "avg_loss": gross_losses / len(losses) if len(losses) else 0.0,
        "expectancy": net_pnl / total,
        "largest_win": float(wins.max()) if len(wins) else 0.0,
        "largest_loss": float(losses.min()) if len(losses) else 0.0,
        "avg_hold_time": float(df["hold_time"].astype(float).mean()),
    }


def _daily_frame(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(columns=["date", "net_pnl", "trades", "wins", "losses"])
    daily = df.groupby("date_close", sort=True).agg(
        net_pnl=("net_pnl", "sum"),
        trades=("net_pnl", "count"),
        wins=("outcome", lambda x: (x == "WIN").sum()),
        losses=("outcome", lambda x: (x == "LOSS").sum()),
    )
    return daily.reset_index().rename(columns={"date_close": "date"})


def get_daily_stats(trades: Iterable[Trade]) -> List[DailyStats]:
    """One entry per distinct close date, oldest first. No gap filling."""
    daily = _daily_frame(trades_to_frame(trades))
    return [
        DailyStats(
            date=row.date,
            net_pnl=float(row.net_pnl),
            trades=int(row.trades),
            wins=int(row.wins),
            losses=int(row.losses),
        )
        for row in daily.itertuples(index=False)
    ]


def drawdown_curve(daily_pnl: Sequence[float]) -> pd.DataFrame:
    """
    Equity curve over a chronological series of daily net P&L.
    Columns: net_pnl, cumulative, peak, drawdown. The peak starts at 0 and
    never decreases; drawdown = peak - cumulative.
    """
    curve = pd.DataFrame({"net_pnl": pd.Series(list(daily_pnl), dtype=float)})
    curve["cumulative"] = curve["net_pnl"].cumsum()
    curve["peak"] = curve["cumulative"].cummax().clip(lower=0)
    curve["drawdown"] = curve["peak"] - curve["cumulative"]
    return curve


def max_drawdown(daily_pnl: Sequence[float]) -> float:
    curve = drawdown_curve(daily_pnl)
    if curve.empty:
        return 0.0
    return float(curve["drawdown"].max())


def calculate_overall_stats(trades: Iterable[Trade]) -> OverallStats:
    """Stats across the whole trade set, including drawdown and best/worst day."""
    df = trades_to_frame(trades)
    daily_pnl = _daily_frame(df)["net_pnl"].astype(float).tolist()

    return OverallStats(
        total_trades=len(df),
        max_drawdown=max_drawdown(daily_pnl),
        best_day=max(daily_pnl) if daily_pnl else 0.0,
        worst_day=min(daily_pnl) if daily_pnl else 0.0,
        **_trade_metrics(df),
    )


def get_ticker_stats(trades: Iterable[Trade]) -> List[TickerStats]:
    """Stats per symbol, most profitable first (ties broken by symbol)."""
    df = trades_to_frame(trades)
    if df.empty:
        return []

    stats = [
        TickerStats(symbol=symbol, trades=len(group), **_trade_metrics(group))
        for symbol, group in df.groupby("symbol", sort=False)
    ]
    stats.sort(key=lambda s: (-s.net_pnl, s.symbol))
    return stats
