"""
Shared fixtures for the trade journal tests.
"""

from datetime import date

import pytest

from trade_journal.analysis.metrics import build_trade
from trade_journal.models import Side, TradeCandidate


GENERIC_CSV = """\
date_open,date_close,symbol,side,qty,entry_price,exit_price,fees
2024-01-05,2024-01-05,AAPL,LONG,100,150.00,152.50,1.00
"""

ROBINHOOD_CSV = """\
"Activity Date","Process Date","Settle Date","Instrument","Description","Trans Code","Quantity","Price","Amount"
"1/4/2024","1/4/2024","1/5/2024","SPY","SPY 1/19/2024 Call $480.00","STC","1","$1.30","$130.00"
"1/2/2024","1/2/2024","1/3/2024","SPY","SPY 1/19/2024 Call $480.00","BTO","2","$1.00","($200.00)"
"1/3/2024","1/3/2024","1/4/2024","SPY","SPY 1/19/2024 Call $480.00","STC","1","$1.20","$120.00"
"1/3/2024","1/3/2024","1/4/2024","AAPL","Apple
CUSIP: 037833100","Buy","10","$185.00","($1,850.00)"

"","","","","","","","","The data provided is for informational purposes only."
"""


@pytest.fixture
def generic_csv():
    return GENERIC_CSV


@pytest.fixture
def robinhood_csv():
    return ROBINHOOD_CSV


@pytest.fixture
def make_candidate():
    """Factory for TradeCandidate with sensible defaults."""
    def _make(**overrides):
        fields = dict(
            symbol="AAPL",
            side=Side.LONG,
            qty=1.0,
            entry_price=100.0,
            exit_price=100.0,
            fees=0.0,
            date_open=date(2024, 1, 5),
            date_close=date(2024, 1, 5),
        )
        fields.update(overrides)
        return TradeCandidate(**fields)
    return _make


@pytest.fixture
def make_trade(make_candidate):
    """Factory for Trade; `pnl` sets a LONG 1-lot P&L off a $100 entry."""
    def _make(pnl=None, **overrides):
        if pnl is not None:
            overrides.setdefault("exit_price", 100.0 + pnl)
        return build_trade(make_candidate(**overrides))
    return _make
