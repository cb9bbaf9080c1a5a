"""
transactions.py
---------------
Reconstruct round-trip option trades from a ledger of individual
open/close legs.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List

from trade_journal.config import LONG_CLOSE, LONG_OPEN, SHORT_CLOSE, SHORT_OPEN
from trade_journal.models import Side, TradeCandidate

logger = logging.getLogger(__name__)

# Quantities at or below this are treated as fully consumed
_QTY_EPSILON = 1e-9


@dataclass(frozen=True)
class OptionTransaction:
    """One brokerage ledger line: a single option buy or sell."""
    date: date
    code: str          # BTO / STC / STO / BTC
    instrument: str    # underlying, e.g. "SPY"
    description: str   # contract, e.g. "SPY 1/19/2024 Call $480.00"
    qty: float         # contracts, always positive
    amount: float      # signed cash amount, already net of fees


def infer_option_type(description: str):
    """'put' or 'call' by case-insensitive substring, else None."""
    lowered = description.lower()
    if "put" in lowered:
        return "put"
    if "call" in lowered:
        return "call"
    return None


def group_by_contract(transactions: Iterable[OptionTransaction]) -> Dict[str, List[OptionTransaction]]:
    """Group ledger lines by contract description."""
    groups = defaultdict(list)
    for tx in transactions:
        groups[tx.description].append(tx)
    return groups


def _queue(group: List[OptionTransaction], code: str) -> List[OptionTransaction]:
    """Transactions with `code`, oldest first. Zero-quantity legs are dropped."""
    legs = []
    for tx in group:
        if tx.code != code:
            continue
        if tx.qty <= 0:
            logger.debug("Skipping zero-quantity %s leg for %s", code, tx.description)
            continue
        legs.append(tx)
    return sorted(legs, key=lambda tx: tx.date)


def _make_trade(open_tx: OptionTransaction, close_tx: OptionTransaction,
                qty: float, short: bool) -> TradeCandidate:
    """
    One matched slice as a trade candidate. Shorts are written with the
    cost to close as entry and the credit received as exit, so the LONG
    multiplier yields credit - cost.
    """
    open_unit = open_tx.amount / open_tx.qty
    close_unit = close_tx.amount / close_tx.qty
    if short:
        entry_price, exit_price = abs(close_unit), open_unit
    else:
        # debit paid at open, proceeds at close
        entry_price, exit_price = abs(open_unit), close_unit
    return TradeCandidate(
        symbol=open_tx.instrument.upper(),
        side=Side.LONG,
        qty=qty,
        entry_price=entry_price,
        exit_price=exit_price,
        fees=0.0,
        date_open=open_tx.date,
        date_close=close_tx.date,
        strategy_tag=infer_option_type(open_tx.description),
        notes=open_tx.description,
    )


def fifo_match(opens: List[OptionTransaction], closes: List[OptionTransaction],
               short: bool = False) -> List[TradeCandidate]:
    """
    Walk `closes` in order, consuming quantity from `opens` oldest first.
    An open may be split across several closes. Once the open queue is
    exhausted, remaining close quantity is ignored, as is any open quantity
    that never gets closed.
    """
    trades = []
    idx = 0
    open_left = opens[0].qty if opens else 0.0
    for close_tx in closes:
        close_left = close_tx.qty
        while close_left > _QTY_EPSILON and idx < len(opens):
            matched_qty = min(close_left, open_left)
            trades.append(_make_trade(opens[idx], close_tx, matched_qty, short))
            close_left -= matched_qty
            open_left -= matched_qty
            if open_left <= _QTY_EPSILON:
                idx += 1
                open_left = opens[idx].qty if idx < len(opens) else 0.0
        if close_left > _QTY_EPSILON:
            logger.debug("Close of %s on %s has %g contracts with no open",
                         close_tx.description, close_tx.date, close_left)
    return trades


def match_option_trades(transactions: Iterable[OptionTransaction]) -> List[TradeCandidate]:
    """
    FIFO match within each contract, longs (BTO→STC) and shorts (STO→BTC)
    separately. Returns trade candidates sorted by close date, newest first.
    """
    trades = []
    for description, group in group_by_contract(transactions).items():
        trades.extend(fifo_match(_queue(group, LONG_OPEN), _queue(group, LONG_CLOSE)))
        trades.extend(fifo_match(_queue(group, SHORT_OPEN), _queue(group, SHORT_CLOSE), short=True))
    trades.sort(key=lambda t: t.date_close, reverse=True)
    return trades
