"""
Tests for display formatting and close-date filters.
"""

import math
from datetime import date

import pytest

from trade_journal.analysis.filters import filter_by_close_date, filter_last_days
from trade_journal.analysis.formatting import (
    format_currency,
    format_hold_time,
    format_percent,
    format_profit_factor,
)


@pytest.mark.parametrize("value,expected", [
    (12.5, "+$12.50"),
    (-3, "-$3.00"),
    (0, "$0.00"),
    (999.994, "+$999.99"),
    (1500, "+$1.50k"),
    (-1500, "-$1.50k"),
    (1000, "+$1.00k"),
])
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize("value,expected", [
    (1.666, "+1.67%"),
    (0, "+0.00%"),
    (-2, "-2.00%"),
])
def test_format_percent(value, expected):
    assert format_percent(value) == expected


@pytest.mark.parametrize("minutes,expected", [
    (45, "45m"),
    (30.5, "31m"),
    (90, "1.5h"),
    (2880, "2.0d"),
])
def test_format_hold_time(minutes, expected):
    assert format_hold_time(minutes) == expected


def test_format_profit_factor():
    assert format_profit_factor(math.inf) == "∞"
    assert format_profit_factor(2) == "2.00"
    assert format_profit_factor(0) == "0.00"


class TestFilters:

    @pytest.fixture
    def trades(self, make_trade):
        return [
            make_trade(symbol=s, date_open=d, date_close=d)
            for s, d in [("A", date(2024, 1, 1)), ("B", date(2024, 1, 15)), ("C", date(2024, 1, 31))]
        ]

    def test_inclusive_range(self, trades):
        picked = filter_by_close_date(trades, date(2024, 1, 1), date(2024, 1, 15))
        assert [t.symbol for t in picked] == ["A", "B"]

    def test_open_ended(self, trades):
        assert [t.symbol for t in filter_by_close_date(trades, start=date(2024, 1, 2))] == ["B", "C"]
        assert len(filter_by_close_date(trades)) == 3

    def test_last_days(self, trades):
        picked = filter_last_days(trades, 16, today=date(2024, 1, 31))
        assert [t.symbol for t in picked] == ["B", "C"]
