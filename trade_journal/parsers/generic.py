"""
Generic trade CSV parser: one data row per round-trip trade, with column
names taken from a table of accepted spellings.
"""
from typing import Dict, Optional

from trade_journal.config import HEADER_ALIASES
from trade_journal.models import Side, TradeCandidate
from .base import BaseTradeParser
from .helpers import optional_text, parse_currency, parse_iso_date, parse_quantity


def resolve_field(record: Dict[str, str], field_name: str) -> str:
    """Return the first non-empty cell among the field's header aliases."""
    for alias in HEADER_ALIASES[field_name]:
        value = record.get(alias, '')
        if value:
            return value
    return ''


def parse_side(value: str) -> Side:
    """LONG unless the cell says SHORT."""
    try:
        return Side(value.strip().upper())
    except ValueError:
        return Side.LONG


class GenericParser(BaseTradeParser):
    """
    Parses rows such as:
      date_open,date_close,symbol,side,qty,entry_price,exit_price,fees
      2024-01-05,2024-01-05,AAPL,LONG,100,150.00,152.50,1.00

    Rows without a valid ISO open and close date are dropped.
    """
    name = "generic"

    def parse_row(self, record: Dict[str, str]) -> Optional[TradeCandidate]:
        date_open = parse_iso_date(resolve_field(record, "date_open"))
        date_close = parse_iso_date(resolve_field(record, "date_close"))
        if date_open is None or date_close is None:
            return None

        return TradeCandidate(
            symbol=resolve_field(record, "symbol").upper(),
            side=parse_side(resolve_field(record, "side")),
            qty=parse_quantity(resolve_field(record, "qty")),
            entry_price=parse_currency(resolve_field(record, "entry_price")),
            exit_price=parse_currency(resolve_field(record, "exit_price")),
            fees=parse_currency(resolve_field(record, "fees")),
            date_open=date_open,
            time_open=optional_text(resolve_field(record, "time_open")),
            date_close=date_close,
            time_close=optional_text(resolve_field(record, "time_close")),
            strategy_tag=optional_text(resolve_field(record, "strategy_tag")),
            notes=optional_text(resolve_field(record, "notes")),
        )
