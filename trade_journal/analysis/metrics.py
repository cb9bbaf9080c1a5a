"""
metrics.py
--------
Per-trade P&L derivation and conversion between Trade lists, DataFrames
and the cleaned trades.csv file.
"""
import logging
from dataclasses import fields
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from trade_journal.config import BREAKEVEN_THRESHOLD
from trade_journal.ids import generate_id
from trade_journal.models import Outcome, Trade, TradeCandidate
from trade_journal.parsers.generic import parse_side
from trade_journal.parsers.helpers import optional_text, parse_currency, parse_iso_date

logger = logging.getLogger(__name__)

TRADE_COLUMNS = [f.name for f in fields(Trade)]


def _timestamp(day: date, time_of_day: Optional[str]) -> pd.Timestamp:
    """`day` at `time_of_day`, or at midnight when no usable time is given."""
    midnight = pd.Timestamp(day)
    if not time_of_day:
        return midnight
    ts = pd.to_datetime(f"{day.isoformat()} {time_of_day}", errors="coerce")
    if pd.isnull(ts):
        logger.debug("Unparsable time %r on %s, using midnight", time_of_day, day)
        return midnight
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts


def hold_minutes(candidate: TradeCandidate) -> int:
    """Whole minutes from open to close, truncated toward zero. May be negative."""
    opened = _timestamp(candidate.date_open, candidate.time_open)
    closed = _timestamp(candidate.date_close, candidate.time_close)
    return int((closed - opened).total_seconds() / 60)


def classify_outcome(net_pnl: float) -> Outcome:
    if net_pnl > BREAKEVEN_THRESHOLD:
        return Outcome.WIN
    if net_pnl < -BREAKEVEN_THRESHOLD:
        return Outcome.LOSS
    return Outcome.BREAKEVEN


def derive_metrics(candidate: TradeCandidate) -> dict:
    """
    Compute gross_pnl, net_pnl, pnl_percent, hold_time and outcome.
    Depends only on the candidate's fields.
    """
    multiplier = candidate.side.multiplier
    price_diff = candidate.exit_price - candidate.entry_price
    gross_pnl = multiplier * price_diff * candidate.qty
    net_pnl = gross_pnl - candidate.fees
    if candidate.entry_price:
        pnl_percent = multiplier * price_diff / candidate.entry_price * 100
    else:
        pnl_percent = 0.0

    return {
        "gross_pnl": gross_pnl,
        "net_pnl": net_pnl,
        "pnl_percent": pnl_percent,
        "hold_time": hold_minutes(candidate),
        "outcome": classify_outcome(net_pnl),
    }


def build_trade(candidate: TradeCandidate, trade_id: Optional[str] = None) -> Trade:
    """Attach an id (new unless given) and the derived fields to a candidate."""
    base = {f.name: getattr(candidate, f.name) for f in fields(TradeCandidate)}
    return Trade(id=trade_id or generate_id(), **base, **derive_metrics(candidate))


def validate_trade(trade: Trade) -> List[str]:
    """Data-quality warnings for a trade. Never used to reject it."""
    warnings = []
    if trade.hold_time < 0:
        warnings.append(f"{trade.symbol}: closed before it was opened ({trade.hold_time} min)")
    if trade.entry_price == 0:
        warnings.append(f"{trade.symbol}: entry price is zero")
    if trade.qty == 0:
        warnings.append(f"{trade.symbol}: quantity is zero")
    return warnings


def trades_to_frame(trades: Iterable[Trade]) -> pd.DataFrame:
    """One row per trade, enums as their string values, dates as datetime.date."""
    rows = []
    for t in trades:
        row = {name: getattr(t, name) for name in TRADE_COLUMNS}
        row["side"] = t.side.value
        row["outcome"] = t.outcome.value
        rows.append(row)
    return pd.DataFrame(rows, columns=TRADE_COLUMNS)


def save_trades(trades: Iterable[Trade], filename) -> pd.DataFrame:
    """Write trades to CSV. Returns the frame that was written."""
    df = trades_to_frame(trades)
    df.to_csv(filename, index=False)
    return df


def load_trades(filename) -> List[Trade]:
    """
    Load a trades.csv written by `save_trades`. Derived columns are
    recomputed from the trade fields rather than trusted from the file.
    Rows with missing dates are skipped.
    """
    df = pd.read_csv(filename, dtype=str, keep_default_na=False)
    trades = []
    for record in df.to_dict(orient="records"):
        date_open = parse_iso_date(record.get("date_open"))
        date_close = parse_iso_date(record.get("date_close"))
        if date_open is None or date_close is None:
            logger.debug("Skipping saved trade without dates: %r", record.get("id"))
            continue
        candidate = TradeCandidate(
            symbol=record.get("symbol", "").upper(),
            side=parse_side(record.get("side", "")),
            qty=parse_currency(record.get("qty")),
            entry_price=parse_currency(record.get("entry_price")),
            exit_price=parse_currency(record.get("exit_price")),
            fees=parse_currency(record.get("fees")),
            date_open=date_open,
            time_open=optional_text(record.get("time_open")),
            date_close=date_close,
            time_close=optional_text(record.get("time_close")),
            strategy_tag=optional_text(record.get("strategy_tag")),
            notes=optional_text(record.get("notes")),
        )
        trades.append(build_trade(candidate, trade_id=optional_text(record.get("id"))))
    return trades
